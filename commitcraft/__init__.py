"""AI-assisted commit planner: split pending changes into safely-applied commits."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitcraft")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
