"""
Pytest configuration and shared fixtures.

Provides sample snapshots in wire and model form, in-memory and on-disk
snapshot stores, and isolation of settings caches and XDG directories.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from nextdeck_widget.core.config import clear_cache as clear_settings_cache
from nextdeck_widget.core.snapshot import (
    APP_GROUP_ID,
    PAYLOAD_KEY,
    InMemorySnapshotStore,
    Snapshot,
    decode,
)
from nextdeck_widget.core.widgets import invalidate_cache as invalidate_widget_cache

HOUR_MS = 60 * 60 * 1000

# Fixed reference time for due-date filters (2023-11-14T22:13:20Z)
NOW_MS = 1_700_000_000_000


# ==============================================================================
# Isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point XDG directories at tmp_path and reset module-level caches."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    for var in (
        "NEXTDECK_SHARED_DIR",
        "NEXTDECK_APP_GROUP",
        "NEXTDECK_PAYLOAD_KEY",
        "NEXTDECK_WIDGETS_CONFIG",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    invalidate_widget_cache()
    yield
    clear_settings_cache()
    invalidate_widget_cache()


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


def make_card(
    card_id: int,
    title: str,
    board_id: int = 1,
    column_id: int = 1,
    due: int | None = None,
    assigned_to_me: bool = False,
) -> dict[str, Any]:
    """Build a card in wire format."""
    return {
        "id": card_id,
        "title": title,
        "boardId": board_id,
        "columnId": column_id,
        "due": due,
        "assignedToMe": assigned_to_me,
    }


@pytest.fixture
def sample_snapshot_dict() -> dict[str, Any]:
    """Provide a snapshot in wire format covering every filter case."""
    return {
        "updatedAt": NOW_MS - 5 * 60 * 1000,
        "defaultBoardId": 2,
        "boards": [
            {"id": 1, "title": "Personal", "color": "#0082c9"},
            {"id": 2, "title": "Work", "color": None},
            {"id": 3, "title": "Groceries", "color": "#49b35e"},
        ],
        "cards": [
            make_card(10, "Write report", 2, 20, due=NOW_MS + 2 * HOUR_MS, assigned_to_me=True),
            make_card(11, "review PR", 2, 21, assigned_to_me=True),
            make_card(12, "Plan sprint", 2, 20, due=NOW_MS + 30 * HOUR_MS),
            make_card(13, "Archive logs", 2, 22),
            make_card(14, "Pay rent", 1, 10, due=NOW_MS + 1 * HOUR_MS, assigned_to_me=True),
            make_card(15, "Buy milk", 3, 30, due=NOW_MS + 3 * HOUR_MS),
            make_card(16, "Orphan task", 99, 1, due=NOW_MS + 5 * HOUR_MS, assigned_to_me=True),
        ],
    }


@pytest.fixture
def sample_snapshot_bytes(sample_snapshot_dict) -> bytes:
    """Provide the sample snapshot as raw JSON bytes."""
    return json.dumps(sample_snapshot_dict).encode("utf-8")


@pytest.fixture
def sample_snapshot(sample_snapshot_bytes) -> Snapshot:
    """Provide the sample snapshot as a decoded model."""
    snapshot = decode(sample_snapshot_bytes)
    assert snapshot is not None
    return snapshot


@pytest.fixture
def memory_store(sample_snapshot_bytes) -> InMemorySnapshotStore:
    """Provide an in-memory store holding the sample snapshot."""
    return InMemorySnapshotStore({PAYLOAD_KEY: sample_snapshot_bytes})


@pytest.fixture
def shared_dir(tmp_path, sample_snapshot_bytes) -> Path:
    """Provide a shared storage root with the sample snapshot written to it."""
    root = tmp_path / "shared"
    group_dir = root / APP_GROUP_ID
    group_dir.mkdir(parents=True)
    (group_dir / PAYLOAD_KEY).write_bytes(sample_snapshot_bytes)
    return root
