"""
Shared resolution pipeline for all widget surfaces.

Every surface runs the same stages, parameterized by its configuration and
fixed limits:

    resolve board -> select cards -> sort -> limit -> build links

Each call recomputes everything from the snapshot it is given and holds no
state between calls. Missing data, unknown board references and malformed
payloads all degrade to an empty WidgetContent rather than an error.
"""

import logging

from nextdeck_widget.core.snapshot.models import Board, Card, Snapshot
from nextdeck_widget.core.widgets.links import ACTION_CARD, ACTION_QUICK_ADD, build_link
from nextdeck_widget.core.widgets.models import (
    Surface,
    ViewMode,
    WidgetConfiguration,
    WidgetContent,
    WidgetFamily,
    WidgetItem,
)
from nextdeck_widget.core.widgets.resolver import resolve_board
from nextdeck_widget.core.widgets.selection import (
    limit_cards,
    select_cards,
    sort_cards,
    split_columns,
)
from nextdeck_widget.core.widgets.surfaces import effective_family, fixed_view_mode, max_items

logger = logging.getLogger(__name__)


def effective_view_mode(surface: Surface, configuration: WidgetConfiguration) -> ViewMode:
    """View mode a surface renders in, honoring surfaces with a fixed mode."""
    fixed = fixed_view_mode(surface)
    if fixed is not None:
        return fixed
    return configuration.view_mode


def build_item(card: Card, snapshot: Snapshot) -> WidgetItem:
    """Wrap a card with its board title and its edit link."""
    board = snapshot.board_by_id(card.board_id)
    return WidgetItem(
        card=card,
        board_title=board.title if board is not None else None,
        link=build_link(
            ACTION_CARD,
            board_id=card.board_id,
            card_id=card.id,
            column_id=card.column_id,
            edit=True,
        ),
    )


def render_surface(
    surface: Surface,
    snapshot: Snapshot | None,
    configuration: WidgetConfiguration | None = None,
    family: WidgetFamily | None = None,
    *,
    now: int | None = None,
) -> WidgetContent:
    """
    Compute the content of one widget surface.

    Args:
        surface: Surface being rendered
        snapshot: Current snapshot, or None if there is no data
        configuration: Surface configuration (defaults when None)
        family: Widget size; unsupported or missing sizes use the
            surface's first supported size
        now: Reference time in epoch milliseconds for the due soon filter

    Returns:
        WidgetContent with the resolved board, ordered and limited items,
        and their deep links

    Example:
        >>> content = render_surface(Surface.UPCOMING_LOCK, None)
        >>> content.items
        ()
        >>> content.has_data
        False
    """
    if configuration is None:
        configuration = WidgetConfiguration()

    family = effective_family(surface, family)
    view_mode = effective_view_mode(surface, configuration)

    board: Board | None = None
    if view_mode == ViewMode.BOARD:
        board = resolve_board(snapshot, configuration)

    quick_add_link = None
    if view_mode == ViewMode.BOARD:
        quick_add_link = build_link(
            ACTION_QUICK_ADD, board_id=board.id if board is not None else None
        )

    items: tuple[WidgetItem, ...] = ()
    limit = max_items(surface, view_mode, family)
    if snapshot is not None and limit > 0:
        selected = select_cards(
            snapshot,
            configuration,
            view_mode,
            board_id=board.id if board is not None else None,
            now=now,
        )
        ordered = limit_cards(sort_cards(selected), limit)
        items = tuple(build_item(card, snapshot) for card in ordered)

    columns: tuple[tuple[WidgetItem, ...], ...] = ()
    if surface == Surface.UPCOMING_LARGE:
        columns = split_columns(items)

    logger.debug(
        f"Rendered '{surface.value}' ({family.value}, {view_mode.value}): "
        f"{len(items)} item(s), board={board.id if board is not None else None}"
    )

    return WidgetContent(
        surface=surface,
        family=family,
        view_mode=view_mode,
        board=board,
        quick_add_link=quick_add_link,
        items=items,
        columns=columns,
        updated_at=snapshot.updated_at if snapshot is not None else None,
        has_data=snapshot is not None,
    )
