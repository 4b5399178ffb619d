"""
Board resolution for board-scoped surfaces.

The board a surface shows is chosen by a fallback chain, first match wins:

1. No snapshot: no board
2. The user's selected board, if it still exists in the snapshot
3. The snapshot's default board, if it exists
4. The first board in snapshot order
5. No board

References are matched by id against the current snapshot on every call;
the selected board's title is informational and never used for matching.
"""

import logging

from nextdeck_widget.core.snapshot.models import Board, Snapshot
from nextdeck_widget.core.widgets.models import WidgetConfiguration

logger = logging.getLogger(__name__)


def resolve_board(
    snapshot: Snapshot | None,
    configuration: WidgetConfiguration,
) -> Board | None:
    """
    Resolve the board a surface should show.

    Args:
        snapshot: Current snapshot, or None if there is no data
        configuration: Surface configuration carrying the selected board

    Returns:
        The resolved Board, or None when the snapshot has no boards

    Example:
        >>> snapshot = Snapshot(
        ...     updated_at=0,
        ...     default_board_id=2,
        ...     boards=[Board(id=1, title="A"), Board(id=2, title="B")],
        ...     cards=[],
        ... )
        >>> resolve_board(snapshot, WidgetConfiguration()).id
        2
        >>> resolve_board(snapshot, WidgetConfiguration(selected_board=1)).id
        1
    """
    if snapshot is None:
        return None

    selected = configuration.selected_board
    if selected is not None:
        board = snapshot.board_by_id(selected.id)
        if board is not None:
            return board
        logger.debug(f"Selected board {selected.id} is not in the snapshot, falling back")

    board = snapshot.board_by_id(snapshot.default_board_id)
    if board is not None:
        return board

    if snapshot.boards:
        return snapshot.boards[0]

    return None
