"""Global configuration management for commitcraft.

Handles user-level configuration stored in ~/.commitcraft/:
- config.yaml: Provider, model, style and guard settings
- credentials: API keys for completion providers, one KEY=value per line
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from commitcraft.config import LLMProvider
from commitcraft.exceptions import CommitcraftError


class GlobalConfigError(CommitcraftError):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitcraft"

_CREDENTIALS_HEADER = (
    "# commitcraft API credentials\n"
    "# Format: PROVIDER_API_KEY=your_key_here\n\n"
)


def get_config_file_path() -> Path:
    """Path to ~/.commitcraft/config.yaml."""
    return _CONFIG_DIR / "config.yaml"


def get_credentials_file_path() -> Path:
    """Path to ~/.commitcraft/credentials."""
    return _CONFIG_DIR / "credentials"


def _read(path: Path, what: str) -> Optional[str]:
    if not path.exists():
        return None
    try:
        return path.read_text()
    except OSError as e:
        raise GlobalConfigError(f"Failed to load {what} from {path}: {e}")


def _write(path: Path, text: str, what: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save {what} to {path}: {e}")


def load_global_config() -> Dict[str, Any]:
    """Load ~/.commitcraft/config.yaml.

    Returns:
        The configuration mapping; empty if the file is missing or empty.

    Raises:
        GlobalConfigError: If the file can't be read or isn't valid YAML.
    """
    path = get_config_file_path()
    text = _read(path, "config")
    if text is None:
        return {}
    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise GlobalConfigError(f"Failed to load config from {path}: {e}")


def save_global_config(config: Dict[str, Any]) -> None:
    """Write config to ~/.commitcraft/config.yaml, keeping key order."""
    text = yaml.dump(config, default_flow_style=False, sort_keys=False)
    _write(get_config_file_path(), text, "config")


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.commitcraft/credentials.

    Blank lines and "#" comments are ignored; keys and values are trimmed.

    Returns:
        Mapping of environment variable name to API key.
    """
    text = _read(get_credentials_file_path(), "credentials")
    credentials = {}
    for line in (text or "").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        credentials[key.strip()] = value.strip()
    return credentials


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or replace one API key, keeping the others.

    The file is restricted to owner read/write.

    Args:
        provider_key: Environment variable name (e.g. "GEMINI_API_KEY").
        api_key: The key value.
    """
    credentials = load_credentials()
    credentials[provider_key] = api_key

    path = get_credentials_file_path()
    body = "".join(f"{key}={value}\n" for key, value in credentials.items())
    _write(path, _CREDENTIALS_HEADER + body, "credentials")
    try:
        os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to restrict permissions on {path}: {e}")


def get_credential(provider_key: str) -> Optional[str]:
    """Return the stored key for provider_key, or None if absent or blank."""
    value = load_credentials().get(provider_key)
    return value or None


def get_active_provider(config: Optional[Dict[str, Any]] = None) -> Optional[LLMProvider]:
    """Get the active provider from global config.

    Args:
        config: An already-loaded config dict (loaded from disk if None).

    Returns:
        LLMProvider enum value, or None if not configured or unknown.
    """
    if config is None:
        config = load_global_config()
    provider_str = config.get("provider")

    if not provider_str:
        return None

    try:
        return LLMProvider(provider_str)
    except ValueError:
        return None


def set_provider_and_model(provider: LLMProvider, model: str, base_url: Optional[str] = None) -> None:
    """Set the active provider and model.

    A base URL belongs to one provider, so it is dropped when none is given.
    """
    config = load_global_config()
    config["provider"] = provider.value
    config["model"] = model
    if base_url:
        config["base_url"] = base_url
    else:
        config.pop("base_url", None)
    save_global_config(config)


def set_style_and_language(style: Optional[str], language: Optional[str]) -> None:
    """Persist the default style preset and description language (None clears)."""
    config = load_global_config()
    for key, value in (("style", style), ("language", language)):
        if value:
            config[key] = value
        else:
            config.pop(key, None)
    save_global_config(config)
