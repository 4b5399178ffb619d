"""
Board picker queries.

The widget configuration UI lets the user pick a board. These queries
list the candidates from the current snapshot and re-resolve stored
choices by id.
"""

from collections.abc import Iterable

from nextdeck_widget.core.snapshot.models import BoardRef, Snapshot


def suggested_boards(snapshot: Snapshot | None) -> list[BoardRef]:
    """List every board in snapshot order."""
    if snapshot is None:
        return []
    return [BoardRef.from_board(board) for board in snapshot.boards]


def boards_for_ids(snapshot: Snapshot | None, ids: Iterable[int]) -> list[BoardRef]:
    """
    Resolve stored board ids against the snapshot.

    Ids that no longer exist are dropped. Results follow snapshot order
    and carry the current titles.

    Example:
        >>> snapshot = Snapshot(
        ...     updated_at=0, boards=[Board(id=1, title="A"), Board(id=2, title="B")], cards=[]
        ... )
        >>> [ref.id for ref in boards_for_ids(snapshot, [2, 7, 1])]
        [1, 2]
    """
    if snapshot is None:
        return []
    wanted = set(ids)
    return [BoardRef.from_board(board) for board in snapshot.boards if board.id in wanted]
