"""
Per-surface constants: supported families, item limits and defaults.

Limits are tied to the physical size of each surface and are not user
configurable.
"""

import logging
from datetime import timedelta

from nextdeck_widget.core.widgets.models import (
    AssignmentFilter,
    Surface,
    ViewMode,
    WidgetConfiguration,
    WidgetFamily,
)

logger = logging.getLogger(__name__)

# Suggested refresh cadence handed to the host scheduler
REFRESH_INTERVAL = timedelta(minutes=15)

SUPPORTED_FAMILIES: dict[Surface, tuple[WidgetFamily, ...]] = {
    Surface.BOARD: (WidgetFamily.SYSTEM_SMALL, WidgetFamily.SYSTEM_MEDIUM),
    Surface.QUICK_ADD: (WidgetFamily.SYSTEM_SMALL,),
    Surface.UPCOMING_LARGE: (WidgetFamily.SYSTEM_LARGE,),
    Surface.UPCOMING_LOCK: (WidgetFamily.ACCESSORY_RECTANGULAR,),
}

BOARD_SMALL_LIMIT = 2
BOARD_LIMIT = 5
UPCOMING_COMPACT_LIMIT = 3
UPCOMING_LARGE_LIMIT = 16
UPCOMING_LOCK_LIMIT = 3


def fixed_view_mode(surface: Surface) -> ViewMode | None:
    """View mode a surface is locked to, or None if the user picks it."""
    if surface == Surface.BOARD:
        return None
    if surface == Surface.QUICK_ADD:
        return ViewMode.BOARD
    return ViewMode.UPCOMING


def effective_family(surface: Surface, family: WidgetFamily | None) -> WidgetFamily:
    """
    Pick the family to limit content for.

    Unsupported or missing families fall back to the surface's first
    supported family.
    """
    supported = SUPPORTED_FAMILIES[surface]
    if family in supported:
        return family
    if family is not None:
        logger.debug(
            f"Family '{family.value}' is not supported by '{surface.value}', "
            f"using '{supported[0].value}'"
        )
    return supported[0]


def max_items(surface: Surface, view_mode: ViewMode, family: WidgetFamily) -> int:
    """
    Maximum number of cards a surface can show.

    Args:
        surface: Surface being rendered
        view_mode: Effective view mode
        family: Effective widget family

    Returns:
        Item limit (0 for surfaces that list no cards)

    Example:
        >>> max_items(Surface.BOARD, ViewMode.BOARD, WidgetFamily.SYSTEM_SMALL)
        2
        >>> max_items(Surface.UPCOMING_LARGE, ViewMode.UPCOMING, WidgetFamily.SYSTEM_LARGE)
        16
    """
    if surface == Surface.QUICK_ADD:
        return 0
    if surface == Surface.UPCOMING_LARGE:
        return UPCOMING_LARGE_LIMIT
    if surface == Surface.UPCOMING_LOCK:
        return UPCOMING_LOCK_LIMIT
    if view_mode == ViewMode.UPCOMING:
        return UPCOMING_COMPACT_LIMIT
    if family == WidgetFamily.SYSTEM_SMALL:
        return BOARD_SMALL_LIMIT
    return BOARD_LIMIT


def default_configuration(surface: Surface) -> WidgetConfiguration:
    """
    Configuration a freshly added widget starts with.

    Upcoming surfaces start out showing only cards assigned to the user.
    """
    if surface in (Surface.UPCOMING_LARGE, Surface.UPCOMING_LOCK):
        return WidgetConfiguration(assignment_filter=AssignmentFilter.ASSIGNED)
    return WidgetConfiguration()
