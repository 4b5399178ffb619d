"""
Widget configuration loader.

Per-surface configurations can be kept in a YAML file (by default
`.nextdeck/widgets.yaml`), keyed by surface id:

```yaml
board:
  view_mode: board
  selected_board:
    id: 3
    title: Groceries
  content_filter: dueSoon

upcoming-large:
  assignment_filter: all
```

The loader:
1. Starts from each surface's default configuration
2. Overlays the entries found in the YAML file
3. Falls back to defaults for missing files, invalid YAML or bad entries
4. Caches results until the file's modification time changes
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from nextdeck_widget.core.widgets.models import Surface, WidgetConfiguration
from nextdeck_widget.core.widgets.surfaces import default_configuration

logger = logging.getLogger(__name__)

# Cache for loaded configurations to avoid repeated file I/O
_config_cache: dict[Surface, WidgetConfiguration] | None = None
_config_cache_key: tuple[Path, float | None] | None = None


def get_default_configurations() -> dict[Surface, WidgetConfiguration]:
    """Default configuration of every surface."""
    return {surface: default_configuration(surface) for surface in Surface}


def get_file_mtime(path: Path) -> float | None:
    """
    Get the modification time of the configuration file.

    Returns:
        Modification timestamp or None if the file doesn't exist
    """
    if not path.exists():
        return None
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def parse_surface_entry(surface: Surface, data: Any) -> WidgetConfiguration:
    """
    Build one surface's configuration from its YAML entry.

    Fields missing from the entry keep the surface defaults.

    Args:
        surface: Surface the entry belongs to
        data: Parsed YAML value for the surface

    Returns:
        WidgetConfiguration (defaults if the entry is unusable)
    """
    base = default_configuration(surface)
    if data is None:
        return base
    if not isinstance(data, dict):
        logger.warning(
            f"Invalid configuration for surface '{surface.value}': "
            f"expected mapping, got {type(data).__name__}"
        )
        return base

    merged = base.model_dump()
    merged.update({k: v for k, v in data.items() if k in WidgetConfiguration.model_fields})
    try:
        return WidgetConfiguration(**merged)
    except ValidationError as e:
        logger.warning(f"Invalid configuration for surface '{surface.value}': {e}")
        return base


def load_configurations_from_yaml(path: Path) -> dict[Surface, WidgetConfiguration]:
    """
    Load every surface's configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of every surface to its configuration
    """
    configurations = get_default_configurations()

    if not path.exists():
        logger.debug(f"Widget configuration file does not exist: {path}")
        return configurations

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse YAML in {path}: {e}")
        return configurations
    except OSError as e:
        logger.warning(f"Failed to read widget configuration {path}: {e}")
        return configurations

    if data is None:
        return configurations

    if not isinstance(data, dict):
        logger.warning(f"Invalid YAML structure in {path}: expected dict, got {type(data)}")
        return configurations

    for key, entry in data.items():
        try:
            surface = Surface(key)
        except ValueError:
            logger.warning(f"Unknown surface '{key}' in {path}, ignoring")
            continue
        configurations[surface] = parse_surface_entry(surface, entry)

    logger.debug(f"Loaded widget configuration from {path}")
    return configurations


def invalidate_cache() -> None:
    """
    Invalidate the configuration cache.

    Forces the next load to re-read the file.
    """
    global _config_cache, _config_cache_key
    _config_cache = None
    _config_cache_key = None


def load_configurations(path: Path, use_cache: bool = True) -> dict[Surface, WidgetConfiguration]:
    """
    Load surface configurations, reusing the cached copy while the file is unchanged.

    Args:
        path: Path to the YAML file
        use_cache: Whether to use cached configurations (default: True)

    Returns:
        Mapping of every surface to its configuration
    """
    global _config_cache, _config_cache_key

    cache_key = (path, get_file_mtime(path))
    if use_cache and _config_cache is not None and _config_cache_key == cache_key:
        logger.debug("Using cached widget configuration")
        return _config_cache.copy()

    configurations = load_configurations_from_yaml(path)

    _config_cache = configurations.copy()
    _config_cache_key = cache_key

    return configurations


def get_surface_configuration(
    surface: Surface, path: Path, use_cache: bool = True
) -> WidgetConfiguration:
    """
    Get the configuration of a single surface.

    Example:
        >>> from pathlib import Path
        >>> config = get_surface_configuration(Surface.UPCOMING_LOCK, Path("missing.yaml"))
        >>> config.assignment_filter.value
        'assigned'
    """
    return load_configurations(path, use_cache=use_cache)[surface]
