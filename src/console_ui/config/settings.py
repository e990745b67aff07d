"""Environment-based settings for console communicators."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv, load_dotenv

from console_ui.strings import DEFAULT_PROMPT

# Cache parsed env files to avoid repeated parsing
_dotenv_cache: dict[Path, dict[str, str | None]] = {}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _cached_dotenv_values(path: Path) -> dict[str, str | None]:
    """Parse a .env file, caching the result per path."""
    if path not in _dotenv_cache:
        _dotenv_cache[path] = dotenv_values(path)
    return _dotenv_cache[path]


@dataclass(frozen=True)
class Settings:
    """Communicator settings loaded from environment."""

    prompt: str = DEFAULT_PROMPT
    debug: bool = False


def _get_value(
    key: str,
    env_values: dict[str, str | None] | None,
    default: str | None = None,
) -> str | None:
    """Get a config value from env_values dict or os.getenv fallback.

    Args:
        key: Environment variable name.
        env_values: Pre-loaded env values (from dotenv_values), or None.
        default: Default value if not found.

    Returns:
        The value, or default.
    """
    if env_values is not None:
        val = env_values.get(key)
        if val is not None:
            return val
    return os.getenv(key, default)


def _load_env(env_path: Path | None = None) -> dict[str, str | None] | None:
    """Load env values from a specific path, or load the nearest .env.

    Args:
        env_path: Specific .env file to load. If None, searches upwards
            from the working directory and loads into os.environ.

    Returns:
        Dict of env values if env_path given, None otherwise (uses os.getenv).
    """
    if env_path is not None:
        return _cached_dotenv_values(env_path)

    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)
    return None


def _parse_bool(key: str, value: str | None) -> bool:
    normalized = (value or "").strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean (1/0, true/false, yes/no, on/off)")


def get_settings(env_path: Path | None = None) -> Settings:
    """Load settings from environment variables.

    Args:
        env_path: Optional specific .env file to load from.

    Returns:
        Settings object with prompt marker and debug flag.

    Raises:
        ValueError: If CUI_DEBUG is not a recognizable boolean.
    """
    env_values = _load_env(env_path)

    prompt = _get_value("CUI_PROMPT", env_values)
    debug = _parse_bool("CUI_DEBUG", _get_value("CUI_DEBUG", env_values))

    if prompt is None:
        prompt = DEFAULT_PROMPT

    return Settings(prompt=prompt, debug=debug)
