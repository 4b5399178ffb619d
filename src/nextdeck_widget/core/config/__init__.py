"""
Settings models and loading.

This module provides Pydantic models for nextdeck-widget settings
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import load_layered_env
from .loader import (
    SettingsError,
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_settings,
)
from .models import StoreConfig, WidgetSettings, WidgetsConfig

__all__ = [
    # Models
    "StoreConfig",
    "WidgetSettings",
    "WidgetsConfig",
    # Loader functions
    "SettingsError",
    "clear_cache",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_layered_env",
    "load_settings",
]
