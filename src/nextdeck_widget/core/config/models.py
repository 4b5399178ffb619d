"""
Configuration data models for nextdeck-widget.

These models define the structure of .nextdeck.json and
~/.config/nextdeck/config.json files, with validation and type safety via
Pydantic.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nextdeck_widget.core.snapshot.store import APP_GROUP_ID, PAYLOAD_KEY


class StoreConfig(BaseModel):
    """
    Location of the snapshot shared with the host application.

    The app group directory is ``<shared_dir>/<app_group_id>`` and the
    snapshot lives in the file named by ``payload_key`` inside it.
    """
    shared_dir: Optional[Path] = Field(
        default=None,
        description="Root of the shared storage area (defaults to XDG data home)"
    )
    app_group_id: str = Field(
        default=APP_GROUP_ID,
        min_length=1,
        description="App group shared between the app and its widgets"
    )
    payload_key: str = Field(
        default=PAYLOAD_KEY,
        min_length=1,
        description="Key the app writes the widget snapshot under"
    )

    @field_validator("app_group_id", "payload_key")
    @classmethod
    def no_path_separators(cls, v: str) -> str:
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"must be a plain name, got '{v}'")
        return v


class WidgetsConfig(BaseModel):
    """Where per-surface widget configurations are kept."""
    config_path: Path = Field(
        default=Path(".nextdeck") / "widgets.yaml",
        description="YAML file with per-surface configurations (relative to project)"
    )


class WidgetSettings(BaseModel):
    """
    Top-level nextdeck-widget settings.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> settings = WidgetSettings(store=StoreConfig(payload_key="payload"))
        >>> settings.store.payload_key
        'payload'
    """
    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Shared snapshot location"
    )
    widgets: WidgetsConfig = Field(
        default_factory=WidgetsConfig,
        description="Per-surface widget configuration"
    )

    model_config = ConfigDict(
        extra="ignore",
    )
