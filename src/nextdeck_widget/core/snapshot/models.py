"""
Pydantic models for the widget snapshot.

The host application periodically exports a snapshot of the user's boards
and cards. These models mirror its wire format exactly:

```json
{
  "updatedAt": 1718000000000,
  "defaultBoardId": 2,
  "boards": [{"id": 1, "title": "Personal", "color": "#0082c9"}],
  "cards": [
    {"id": 9, "title": "Pay rent", "boardId": 1, "columnId": 4,
     "due": 1718100000000, "assignedToMe": true}
  ]
}
```

All models are frozen. The decoder validates payloads in strict mode, so a
wrong type anywhere rejects the payload as a whole. Timestamps are epoch
milliseconds. Relationships (``Card.board_id``) are plain ids resolved by
lookup against ``Snapshot.boards``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Base for models that travel over the snapshot wire format."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Board(_WireModel):
    """A board as exported by the host application.

    Example:
        >>> board = Board(id=1, title="Personal", color="#0082c9")
        >>> board.title
        'Personal'
    """

    id: int = Field(..., description="Board identifier, unique within a snapshot")
    title: str = Field(..., description="Display title")
    color: str | None = Field(default=None, description="Opaque display color token")


class Card(_WireModel):
    """A card as exported by the host application.

    ``board_id`` may reference a board that is missing from the snapshot;
    such a card is still valid, its board title simply cannot be resolved.

    Example:
        >>> card = Card(
        ...     id=9, title="Pay rent", board_id=1, column_id=4, assigned_to_me=False
        ... )
        >>> card.has_due
        False
    """

    id: int = Field(..., description="Card identifier, unique within a snapshot")
    title: str = Field(..., description="Display title")
    board_id: int = Field(..., description="Owning board id (weak reference)")
    column_id: int = Field(..., description="Column (stack) id within the board")
    due: int | None = Field(default=None, description="Due timestamp in epoch milliseconds")
    assigned_to_me: bool = Field(..., description="Card is assigned to the user")

    @property
    def has_due(self) -> bool:
        """Check if the card carries a due date."""
        return self.due is not None


class Snapshot(_WireModel):
    """Immutable point-in-time export of boards and cards.

    Example:
        >>> snapshot = Snapshot(updated_at=0, boards=[Board(id=1, title="A")], cards=[])
        >>> snapshot.board_by_id(1).title
        'A'
        >>> snapshot.board_by_id(2) is None
        True
    """

    updated_at: int = Field(..., description="Production time in epoch milliseconds")
    default_board_id: int | None = Field(default=None, description="Fallback board id")
    boards: tuple[Board, ...] = Field(..., description="Boards in the author's preference order")
    cards: tuple[Card, ...] = Field(..., description="Cards in export order")

    def board_by_id(self, board_id: int | None) -> Board | None:
        """Look up a board by id, returning None when it is not present."""
        if board_id is None:
            return None
        for board in self.boards:
            if board.id == board_id:
                return board
        return None


class BoardRef(BaseModel):
    """A user's board choice, as persisted in a widget configuration.

    Only ``id`` is authoritative. ``title`` is whatever the picker showed when
    the user chose the board and may be stale.
    """

    id: int = Field(..., description="Referenced board id")
    title: str | None = Field(default=None, description="Informational title")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_board(cls, board: Board) -> "BoardRef":
        """Build a reference from a snapshot board."""
        return cls(id=board.id, title=board.title)
