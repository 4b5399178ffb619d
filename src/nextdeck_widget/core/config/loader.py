"""
Settings loading with multi-layer merging.

Implements the settings precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import WidgetSettings

logger = logging.getLogger(__name__)

# Environment variables and the settings key each one overrides
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "NEXTDECK_SHARED_DIR": ("store", "shared_dir"),
    "NEXTDECK_APP_GROUP": ("store", "app_group_id"),
    "NEXTDECK_PAYLOAD_KEY": ("store", "payload_key"),
    "NEXTDECK_WIDGETS_CONFIG": ("widgets", "config_path"),
}

# Global cache to avoid reloading settings multiple times per process
_settings_cache: WidgetSettings | None = None


class SettingsError(Exception):
    """Raised when merged settings fail validation."""


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_xdg_data_home() -> Path:
    """
    Get XDG data home directory.

    Returns:
        Path to data directory (defaults to ~/.local/share)
    """
    if xdg_home := os.environ.get("XDG_DATA_HOME"):
        return Path(xdg_home)
    return Path.home() / ".local" / "share"


def get_default_shared_dir() -> Path:
    """Shared storage root used when none is configured."""
    return get_xdg_data_home() / "nextdeck" / "shared"


def get_user_config_path() -> Path:
    """
    Get path to user settings file.

    Returns:
        Path to ~/.config/nextdeck/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "nextdeck" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project settings file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .nextdeck.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".nextdeck.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence; nested dicts are merged, not
    replaced.

    Example:
        >>> deep_merge({"store": {"app_group_id": "a"}}, {"store": {"payload_key": "k"}})
        {'store': {'app_group_id': 'a', 'payload_key': 'k'}}
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON settings file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON object, or None
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to parse settings at {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings at {path}: expected a JSON object")
        return None
    return data


def apply_env_overrides(settings_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply NEXTDECK_* environment variable overrides.

    Env vars have the highest precedence and override all settings files.
    Empty values are ignored.

    Args:
        settings_dict: Settings dictionary to override

    Returns:
        Settings dictionary with env var overrides applied
    """
    result = settings_dict.copy()
    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        result[section] = {**result.get(section, {}), key: value}
    return result


def get_default_settings() -> dict[str, Any]:
    """Hardcoded default settings."""
    return {
        "store": {"shared_dir": str(get_default_shared_dir())},
    }


def load_settings(project_dir: Path | None = None, use_cache: bool = True) -> WidgetSettings:
    """
    Load settings with multi-layer merging.

    Settings precedence (highest to lowest):
        1. Environment variables (NEXTDECK_*)
        2. Project settings (.nextdeck.json)
        3. User settings (~/.config/nextdeck/config.json)
        4. Hardcoded defaults

    Relative paths resolve against project_dir.

    Args:
        project_dir: Project directory to load .nextdeck.json from (defaults to cwd)
        use_cache: If True, return cached settings from a previous load

    Returns:
        Validated WidgetSettings instance

    Raises:
        SettingsError: If the merged settings fail validation
    """
    global _settings_cache

    if use_cache and _settings_cache is not None:
        return _settings_cache

    if project_dir is None:
        project_dir = Path.cwd()

    merged = get_default_settings()

    if user_settings := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_settings)

    if project_settings := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_settings)

    merged = apply_env_overrides(merged)

    try:
        settings = WidgetSettings(**merged)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e

    if settings.store.shared_dir is not None and not settings.store.shared_dir.is_absolute():
        settings.store.shared_dir = project_dir / settings.store.shared_dir
    if not settings.widgets.config_path.is_absolute():
        settings.widgets.config_path = project_dir / settings.widgets.config_path

    _settings_cache = settings
    return settings


def clear_cache() -> None:
    """
    Clear the cached settings.

    Useful for testing or when settings files change during execution.
    """
    global _settings_cache
    _settings_cache = None
