"""Allow running commitcraft as `python -m commitcraft`."""

from commitcraft.cli import app

if __name__ == "__main__":
    app()
