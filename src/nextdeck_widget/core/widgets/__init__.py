"""
Widget surface resolution.

This package turns a snapshot plus a per-surface configuration into the
ordered, bounded list of cards a widget displays, along with the deep
links attached to them. All surfaces share one pipeline:

- Resolver: which board a board-scoped surface shows
- Selection: board scope and filters, stable ordering, limits
- Links: navigation targets back into the host application

Example usage:
    >>> from nextdeck_widget.core.widgets import Surface, render_surface
    >>> content = render_surface(Surface.BOARD, None)
    >>> content.is_empty
    True
"""

from nextdeck_widget.core.widgets.boards import boards_for_ids, suggested_boards
from nextdeck_widget.core.widgets.links import (
    ACTION_CARD,
    ACTION_QUICK_ADD,
    LINK_SCHEME,
    build_link,
)
from nextdeck_widget.core.widgets.loader import (
    get_surface_configuration,
    invalidate_cache,
    load_configurations,
)
from nextdeck_widget.core.widgets.models import (
    AssignmentFilter,
    ContentFilter,
    DeepLink,
    Surface,
    ViewMode,
    WidgetConfiguration,
    WidgetContent,
    WidgetFamily,
    WidgetItem,
)
from nextdeck_widget.core.widgets.pipeline import render_surface
from nextdeck_widget.core.widgets.resolver import resolve_board
from nextdeck_widget.core.widgets.selection import (
    DUE_SOON_WINDOW_MS,
    limit_cards,
    select_cards,
    sort_cards,
    split_columns,
)
from nextdeck_widget.core.widgets.surfaces import (
    REFRESH_INTERVAL,
    SUPPORTED_FAMILIES,
    default_configuration,
    max_items,
)

__all__ = [
    # Models
    "AssignmentFilter",
    "ContentFilter",
    "DeepLink",
    "Surface",
    "ViewMode",
    "WidgetConfiguration",
    "WidgetContent",
    "WidgetFamily",
    "WidgetItem",
    # Pipeline
    "render_surface",
    "resolve_board",
    "select_cards",
    "sort_cards",
    "limit_cards",
    "split_columns",
    "DUE_SOON_WINDOW_MS",
    # Links
    "build_link",
    "ACTION_CARD",
    "ACTION_QUICK_ADD",
    "LINK_SCHEME",
    # Surfaces
    "REFRESH_INTERVAL",
    "SUPPORTED_FAMILIES",
    "default_configuration",
    "max_items",
    # Board picker
    "suggested_boards",
    "boards_for_ids",
    # Configuration files
    "get_surface_configuration",
    "invalidate_cache",
    "load_configurations",
]
