"""
Card selection, ordering and truncation.

The selection stages run in a fixed order and each returns a new tuple;
the snapshot's own card sequence is never modified:

- select_cards: board scope and the filters relevant to the view mode
- sort_cards: due cards first (ascending), then undated cards by title
- limit_cards: keep the first N
- split_columns: interleave into two columns by index parity
"""

import time
from collections.abc import Iterable, Sequence
from typing import TypeVar

from nextdeck_widget.core.snapshot.models import Card, Snapshot
from nextdeck_widget.core.widgets.models import (
    AssignmentFilter,
    ContentFilter,
    ViewMode,
    WidgetConfiguration,
)

T = TypeVar("T")

# Width of the "due soon" window, in the same unit as Card.due
DUE_SOON_WINDOW_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def select_cards(
    snapshot: Snapshot | None,
    configuration: WidgetConfiguration,
    view_mode: ViewMode,
    *,
    board_id: int | None = None,
    now: int | None = None,
) -> tuple[Card, ...]:
    """
    Narrow the snapshot's cards to those relevant to a surface.

    Board mode keeps the cards of the resolved board and applies the
    content filter. Upcoming mode keeps dated cards from every board and
    applies the assignment filter. A card must pass every applicable
    predicate to survive.

    Args:
        snapshot: Current snapshot, or None if there is no data
        configuration: Surface configuration
        view_mode: Effective view mode of the surface
        board_id: Resolved board id (board mode only)
        now: Reference time in epoch milliseconds for the due soon window,
            defaults to the current time

    Returns:
        Surviving cards in snapshot order
    """
    if snapshot is None:
        return ()

    cards: Iterable[Card] = snapshot.cards

    if view_mode == ViewMode.BOARD:
        if board_id is None:
            return ()
        cards = [c for c in cards if c.board_id == board_id]

        if configuration.content_filter == ContentFilter.ASSIGNED:
            cards = [c for c in cards if c.assigned_to_me]
        elif configuration.content_filter == ContentFilter.DUE_SOON:
            reference = now if now is not None else now_ms()
            deadline = reference + DUE_SOON_WINDOW_MS
            cards = [c for c in cards if c.due is not None and c.due <= deadline]
    else:
        cards = [c for c in cards if c.due is not None]

        if configuration.assignment_filter == AssignmentFilter.ASSIGNED:
            cards = [c for c in cards if c.assigned_to_me]

    return tuple(cards)


def _sort_key(card: Card) -> tuple[int, int, str]:
    if card.due is not None:
        return (0, card.due, "")
    return (1, 0, card.title.casefold())


def sort_cards(cards: Iterable[Card]) -> tuple[Card, ...]:
    """
    Order cards for display.

    Cards with a due date come first, ascending by due timestamp. Cards
    without one follow, ordered by case-insensitive title. Equal keys keep
    their input order (``sorted`` is stable).

    Example:
        >>> cards = [
        ...     Card(id=1, title="B", board_id=1, column_id=1, assigned_to_me=False),
        ...     Card(id=2, title="a", board_id=1, column_id=1, assigned_to_me=False),
        ...     Card(id=3, title="C", board_id=1, column_id=1, due=100, assigned_to_me=False),
        ... ]
        >>> [c.title for c in sort_cards(cards)]
        ['C', 'a', 'B']
    """
    return tuple(sorted(cards, key=_sort_key))


def limit_cards(items: Sequence[T], max_count: int) -> tuple[T, ...]:
    """Keep at most max_count leading items."""
    if max_count <= 0:
        return ()
    return tuple(items[:max_count])


def split_columns(items: Sequence[T]) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """
    Split items into two columns by index parity.

    Even indices go to the first column, odd indices to the second; each
    column keeps the input order.

    Example:
        >>> split_columns(["c0", "c1", "c2", "c3"])
        (('c0', 'c2'), ('c1', 'c3'))
    """
    return tuple(items[0::2]), tuple(items[1::2])
