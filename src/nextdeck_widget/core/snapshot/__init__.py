"""
Snapshot models, decoding and shared storage access.

Example usage:
    >>> from nextdeck_widget.core.snapshot import InMemorySnapshotStore, load_snapshot
    >>> load_snapshot(InMemorySnapshotStore()) is None
    True
"""

from nextdeck_widget.core.snapshot.decoder import decode, encode
from nextdeck_widget.core.snapshot.models import Board, BoardRef, Card, Snapshot
from nextdeck_widget.core.snapshot.store import (
    APP_GROUP_ID,
    PAYLOAD_KEY,
    InMemorySnapshotStore,
    SharedDirectorySnapshotStore,
    SnapshotStore,
    load_snapshot,
)

__all__ = [
    # Models
    "Board",
    "BoardRef",
    "Card",
    "Snapshot",
    # Decoding
    "decode",
    "encode",
    # Storage
    "APP_GROUP_ID",
    "PAYLOAD_KEY",
    "InMemorySnapshotStore",
    "SharedDirectorySnapshotStore",
    "SnapshotStore",
    "load_snapshot",
]
