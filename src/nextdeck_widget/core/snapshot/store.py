"""
Read-only access to the shared snapshot slot.

The host application writes the latest snapshot into a key/value area it
shares with the widgets (an "app group"). Widgets only ever read from it,
through the narrow SnapshotStore port:

- SharedDirectorySnapshotStore: the app group is a directory, each key is a
  file holding the raw value
- InMemorySnapshotStore: fixtures for tests and embedding hosts

A missing app group and a missing key are both ordinary "no data" states.
"""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from nextdeck_widget.core.snapshot.decoder import decode
from nextdeck_widget.core.snapshot.models import Snapshot

logger = logging.getLogger(__name__)

APP_GROUP_ID = "group.com.example.nextdeck"
PAYLOAD_KEY = "nextdeck_widget_payload"


@runtime_checkable
class SnapshotStore(Protocol):
    """Port for reading a raw value out of shared storage."""

    def read(self, key: str) -> bytes | str | None:
        """Return the raw value stored under key, or None if absent."""
        ...


class InMemorySnapshotStore:
    """
    Snapshot store backed by a plain dict.

    Example:
        >>> store = InMemorySnapshotStore({PAYLOAD_KEY: "{}"})
        >>> store.read(PAYLOAD_KEY)
        '{}'
        >>> store.read("missing") is None
        True
    """

    def __init__(self, values: dict[str, bytes | str] | None = None) -> None:
        self._values: dict[str, bytes | str] = dict(values or {})

    def read(self, key: str) -> bytes | str | None:
        return self._values.get(key)

    def put(self, key: str, value: bytes | str) -> None:
        """Store a value. Only used to set up fixtures."""
        self._values[key] = value


class SharedDirectorySnapshotStore:
    """
    Snapshot store backed by a shared app group directory.

    Layout::

        <shared_dir>/<app_group_id>/<key>

    Args:
        shared_dir: Root directory shared between the app and the widgets
        app_group_id: App group identifier (subdirectory name)
    """

    def __init__(self, shared_dir: Path, app_group_id: str = APP_GROUP_ID) -> None:
        self.shared_dir = shared_dir
        self.app_group_id = app_group_id

    @property
    def group_dir(self) -> Path:
        """Directory holding this app group's keys."""
        return self.shared_dir / self.app_group_id

    def read(self, key: str) -> bytes | None:
        path = self.group_dir / key
        if not path.is_file():
            logger.debug(f"No shared value at {path}")
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read shared value at {path}: {e}")
            return None


def load_snapshot(store: SnapshotStore, key: str = PAYLOAD_KEY) -> Snapshot | None:
    """
    Read and decode the current snapshot.

    This is the only I/O the widget pipeline performs: one read, no retry,
    no lock.

    Args:
        store: Store to read from
        key: Key the host application writes the snapshot under

    Returns:
        Decoded Snapshot, or None if absent or malformed
    """
    raw = store.read(key)
    if raw is None:
        logger.debug(f"No snapshot stored under '{key}'")
        return None
    return decode(raw)
