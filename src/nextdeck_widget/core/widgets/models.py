"""
Pydantic models for widget surfaces, their configuration and their content.

These models provide:
- Surface/WidgetFamily: which widget is being rendered and at what size
- ViewMode/ContentFilter/AssignmentFilter: the user-editable options
- WidgetConfiguration: one configuration value per surface
- DeepLink: a navigation target back into the host application
- WidgetItem/WidgetContent: the resolved, ordered, bounded result

Configuration values arrive from the host UI as plain strings and ints.
Unknown or malformed values fall back to the documented defaults instead
of failing validation.
"""

import logging
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from nextdeck_widget.core.snapshot.models import Board, BoardRef, Card

logger = logging.getLogger(__name__)


class Surface(str, Enum):
    """Distinct widget surfaces, each with its own host widget kind."""

    BOARD = "board"  # Combined board / upcoming widget
    QUICK_ADD = "quick-add"  # New card shortcut for one board
    UPCOMING_LARGE = "upcoming-large"  # Two-column upcoming list
    UPCOMING_LOCK = "upcoming-lock"  # Lock screen glance

    @property
    def kind(self) -> str:
        """Widget kind identifier registered with the host."""
        return SURFACE_KINDS[self]


SURFACE_KINDS: dict[Surface, str] = {
    Surface.BOARD: "NextDeckWidget",
    Surface.QUICK_ADD: "NewCardWidget",
    Surface.UPCOMING_LARGE: "UpcomingLargeWidget",
    Surface.UPCOMING_LOCK: "UpcomingLockWidget",
}


class WidgetFamily(str, Enum):
    """Physical widget sizes offered by the host."""

    SYSTEM_SMALL = "system-small"
    SYSTEM_MEDIUM = "system-medium"
    SYSTEM_LARGE = "system-large"
    ACCESSORY_RECTANGULAR = "accessory-rectangular"


class ViewMode(str, Enum):
    """What the combined surface shows."""

    BOARD = "board"
    UPCOMING = "upcoming"


class ContentFilter(str, Enum):
    """Card filter applied in board mode."""

    ALL = "all"
    ASSIGNED = "assigned"
    DUE_SOON = "dueSoon"


class AssignmentFilter(str, Enum):
    """Card filter applied on upcoming-style surfaces."""

    ASSIGNED = "assigned"
    ALL = "all"


def _lenient_enum(enum_cls: type[Enum], value: Any, default: Enum, field: str) -> Any:
    if value is None or isinstance(value, enum_cls):
        return default if value is None else value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        logger.warning(f"Unknown {field} value {value!r}, using '{default.value}'")
        return default


class WidgetConfiguration(BaseModel):
    """User configuration for one widget surface.

    Surfaces other than the combined one are fixed to a single view mode;
    the pipeline ignores the fields that do not apply to them.

    Example:
        >>> config = WidgetConfiguration(view_mode="upcoming", content_filter="bogus")
        >>> config.view_mode
        <ViewMode.UPCOMING: 'upcoming'>
        >>> config.content_filter
        <ContentFilter.ALL: 'all'>
    """

    view_mode: ViewMode = Field(default=ViewMode.BOARD, description="Combined surface mode")
    selected_board: BoardRef | None = Field(default=None, description="Board chosen by the user")
    content_filter: ContentFilter = Field(
        default=ContentFilter.ALL, description="Filter applied in board mode"
    )
    assignment_filter: AssignmentFilter = Field(
        default=AssignmentFilter.ALL, description="Filter applied on upcoming surfaces"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("view_mode", mode="before")
    @classmethod
    def _coerce_view_mode(cls, value: Any) -> Any:
        return _lenient_enum(ViewMode, value, ViewMode.BOARD, "view mode")

    @field_validator("content_filter", mode="before")
    @classmethod
    def _coerce_content_filter(cls, value: Any) -> Any:
        return _lenient_enum(ContentFilter, value, ContentFilter.ALL, "content filter")

    @field_validator("assignment_filter", mode="before")
    @classmethod
    def _coerce_assignment_filter(cls, value: Any) -> Any:
        return _lenient_enum(AssignmentFilter, value, AssignmentFilter.ALL, "assignment filter")

    @field_validator("selected_board", mode="before")
    @classmethod
    def _coerce_selected_board(cls, value: Any) -> Any:
        if value is None or isinstance(value, BoardRef):
            return value
        # Hosts may hand over a bare board id
        if isinstance(value, int) and not isinstance(value, bool):
            return {"id": value}
        if isinstance(value, dict):
            board_id = value.get("id")
            title = value.get("title")
            if isinstance(board_id, int) and not isinstance(board_id, bool):
                return {"id": board_id, "title": title if isinstance(title, str) else None}
        logger.warning(f"Ignoring malformed board selection {value!r}")
        return None


class DeepLink(BaseModel):
    """Navigation target back into the host application.

    Renders as ``<scheme>://<action>[?board=..][&card=..][&stack=..][&edit=1]``.

    Example:
        >>> link = DeepLink(scheme="nextdeck", action="quick-add", query=(("board", "5"),))
        >>> link.url
        'nextdeck://quick-add?board=5'
    """

    scheme: str = Field(..., description="Custom URL scheme")
    action: str = Field(..., description="Action name, used as the URL host")
    query: tuple[tuple[str, str], ...] = Field(
        default=(), description="Query parameters in insertion order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def params(self) -> dict[str, str]:
        """Query parameters as a dict."""
        return dict(self.query)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """The link as a URL string. No query component when there are no params."""
        base = f"{self.scheme}://{quote(self.action, safe='-._~')}"
        if not self.query:
            return base
        return f"{base}?{urlencode(self.query)}"

    def __str__(self) -> str:
        return self.url


class WidgetItem(BaseModel):
    """One card as presented on a surface."""

    card: Card = Field(..., description="The card")
    board_title: str | None = Field(
        default=None, description="Title of the card's board, None if unresolvable"
    )
    link: DeepLink | None = Field(default=None, description="Opens the card for editing")

    model_config = ConfigDict(frozen=True)


class WidgetContent(BaseModel):
    """Everything a surface needs to present itself.

    ``items`` is always a tuple, empty when there is no snapshot, no board
    or no matching card. ``columns`` is only populated on the large upcoming
    surface.
    """

    surface: Surface = Field(..., description="Rendered surface")
    family: WidgetFamily = Field(..., description="Widget size the content was limited for")
    view_mode: ViewMode = Field(..., description="Effective view mode")
    board: Board | None = Field(default=None, description="Resolved board, if board-scoped")
    quick_add_link: DeepLink | None = Field(default=None, description="New card shortcut")
    items: tuple[WidgetItem, ...] = Field(default=(), description="Ordered, limited items")
    columns: tuple[tuple[WidgetItem, ...], ...] = Field(
        default=(), description="Parity split of items (large upcoming surface only)"
    )
    updated_at: int | None = Field(default=None, description="Snapshot production time")
    has_data: bool = Field(default=False, description="A snapshot was available")

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """Check if there is nothing to list."""
        return not self.items
