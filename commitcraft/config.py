"""Configuration for commitcraft.

Static provider tables live here. User preferences are stored in
~/.commitcraft/config.yaml (see commitcraft.global_config) and merged over
the defaults by load_settings(). The resulting Settings object is passed
explicitly to whatever needs it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LLMProvider(Enum):
    """Supported completion backends."""

    GEMINI = "gemini"
    OPENAI = "openai"
    REST = "rest"
    DEEPSEEK = "deepseek"
    ZAI = "zai"
    OPENROUTER = "openrouter"
    GROQ = "groq"
    RELAY = "relay"


class StylePreset(Enum):
    """Commit message style presets."""

    CONVENTIONAL = "conventional"
    CONVENTIONAL_EMOJIS = "conventional-emojis"
    DETAILED = "detailed"
    CONCISE = "concise"


# Presets whose subjects must start with a conventional commit prefix
CONVENTIONAL_PRESETS = (StylePreset.CONVENTIONAL, StylePreset.CONVENTIONAL_EMOJIS)


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.commitcraft/config.yaml doesn't set them

DEFAULT_PROVIDER = LLMProvider.GEMINI
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_REQUEST_TIMEOUT = 120.0

# Plan cache lifetime in seconds
DEFAULT_CACHE_TTL = 3600

# Duplicate-patch guard: how many recent commits to compare against, and the
# largest staged patch (in bytes) for which a patch-id is computed at all
DEFAULT_DUPLICATE_WINDOW = 50
DEFAULT_DUPLICATE_MAX_BYTES = 200_000

# Diffs larger than this are truncated before being sent to the model
DEFAULT_MAX_DIFF_CHARS = 20_000_000

# How many log entries are shown to the model as style reference
DEFAULT_LOG_ENTRIES = 20


# ============================================================
# PER-PROVIDER TABLES
# ============================================================

DEFAULT_MODELS = {
    LLMProvider.GEMINI: "gemini-2.5-flash",
    LLMProvider.OPENAI: "gpt-4.1-mini",
    LLMProvider.REST: "gpt-4.1-mini",
    LLMProvider.DEEPSEEK: "deepseek-chat",
    LLMProvider.ZAI: "glm-4.6",
    LLMProvider.OPENROUTER: "anthropic/claude-sonnet-4",
    LLMProvider.GROQ: "llama-3.3-70b-versatile",
    LLMProvider.RELAY: "gemini-2.5-flash",
}

# Base URLs for OpenAI-compatible chat backends. None means the SDK default
# (api.openai.com) for OPENAI/REST; RELAY has no public default and must be
# configured with the base_url setting.
DEFAULT_BASE_URLS = {
    LLMProvider.OPENAI: None,
    LLMProvider.REST: None,
    LLMProvider.DEEPSEEK: "https://api.deepseek.com",
    LLMProvider.ZAI: "https://api.z.ai/api/paas/v4",
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    LLMProvider.GROQ: "https://api.groq.com/openai/v1",
    LLMProvider.RELAY: None,
}

# Path under the relay base URL that accepts chat requests
RELAY_API_PREFIX = "api/v1"

API_KEY_ENV_VARS = {
    LLMProvider.GEMINI: "GEMINI_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.REST: "OPENAI_API_KEY",
    LLMProvider.DEEPSEEK: "DEEPSEEK_API_KEY",
    LLMProvider.ZAI: "ZAI_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.GROQ: "GROQ_API_KEY",
    LLMProvider.RELAY: "COMMITCRAFT_RELAY_TOKEN",
}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


@dataclass
class Settings:
    """Effective runtime settings (defaults merged with the global config)."""

    provider: LLMProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    style: Optional[StylePreset] = None
    language: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    cache_ttl: int = DEFAULT_CACHE_TTL
    duplicate_window: int = DEFAULT_DUPLICATE_WINDOW
    duplicate_max_bytes: int = DEFAULT_DUPLICATE_MAX_BYTES
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS


def parse_provider(value: str) -> LLMProvider:
    """Parse a provider name, raising ValueError with the valid choices."""
    try:
        return LLMProvider(value.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ValueError(f"Unknown provider: {value} (valid: {valid})")


def parse_style(value: Optional[str]) -> Optional[StylePreset]:
    """Parse a style preset name; None or empty means no preset."""
    if not value:
        return None
    try:
        return StylePreset(value.strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in StylePreset)
        raise ValueError(f"Unknown style preset: {value} (valid: {valid})")


def load_settings() -> Settings:
    """Build Settings from the global config file.

    Unknown provider or style values in the config file fall back to the
    defaults rather than failing, so a stale config never blocks the tool.

    Returns:
        The effective Settings.
    """
    from commitcraft import global_config

    config = global_config.load_global_config()
    settings = Settings()

    provider = global_config.get_active_provider(config)
    if provider:
        settings.provider = provider
        settings.model = DEFAULT_MODELS[provider]

    model = config.get("model")
    if model:
        settings.model = model

    settings.base_url = config.get("base_url") or None

    try:
        settings.style = parse_style(config.get("style"))
    except ValueError:
        settings.style = None

    settings.language = config.get("language") or None

    if config.get("request_timeout") is not None:
        settings.request_timeout = float(config["request_timeout"])

    cache_section = config.get("cache", {}) or {}
    if cache_section.get("ttl") is not None:
        settings.cache_ttl = int(cache_section["ttl"])

    duplicates = config.get("duplicates", {}) or {}
    if duplicates.get("window") is not None:
        settings.duplicate_window = int(duplicates["window"])
    if duplicates.get("max_bytes") is not None:
        settings.duplicate_max_bytes = int(duplicates["max_bytes"])

    if config.get("max_diff_chars") is not None:
        settings.max_diff_chars = int(config["max_diff_chars"])

    return settings
