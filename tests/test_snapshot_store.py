"""
Tests for the shared snapshot store.

Tests validate:
- In-memory and shared-directory stores satisfy the SnapshotStore port
- Missing app group, missing key and unreadable values are "no data"
- load_snapshot reads and decodes in one step
"""

from nextdeck_widget.core.snapshot import (
    APP_GROUP_ID,
    PAYLOAD_KEY,
    InMemorySnapshotStore,
    SharedDirectorySnapshotStore,
    SnapshotStore,
    load_snapshot,
)


class TestInMemorySnapshotStore:
    """Tests for the in-memory store."""

    def test_satisfies_port(self):
        """Test that the store implements SnapshotStore."""
        assert isinstance(InMemorySnapshotStore(), SnapshotStore)

    def test_read_missing_key(self):
        """Test that missing keys read as None."""
        assert InMemorySnapshotStore().read(PAYLOAD_KEY) is None

    def test_put_and_read(self):
        """Test that stored strings and bytes are returned unchanged."""
        store = InMemorySnapshotStore()
        store.put("a", "text")
        store.put("b", b"bytes")

        assert store.read("a") == "text"
        assert store.read("b") == b"bytes"

    def test_initial_values_are_copied(self):
        """Test that the store does not alias the caller's dict."""
        values = {"a": "1"}
        store = InMemorySnapshotStore(values)
        values["a"] = "2"

        assert store.read("a") == "1"


class TestSharedDirectorySnapshotStore:
    """Tests for the directory-backed store."""

    def test_satisfies_port(self, tmp_path):
        """Test that the store implements SnapshotStore."""
        assert isinstance(SharedDirectorySnapshotStore(tmp_path), SnapshotStore)

    def test_group_dir(self, tmp_path):
        """Test that the app group maps to a subdirectory."""
        store = SharedDirectorySnapshotStore(tmp_path, "group.test")
        assert store.group_dir == tmp_path / "group.test"

    def test_default_app_group(self, tmp_path):
        """Test that the default app group is used when none is given."""
        assert SharedDirectorySnapshotStore(tmp_path).app_group_id == APP_GROUP_ID

    def test_read_existing_value(self, shared_dir, sample_snapshot_bytes):
        """Test reading the raw bytes of a stored value."""
        store = SharedDirectorySnapshotStore(shared_dir)
        assert store.read(PAYLOAD_KEY) == sample_snapshot_bytes

    def test_missing_group_dir(self, tmp_path):
        """Test that a missing app group directory is 'no data'."""
        store = SharedDirectorySnapshotStore(tmp_path / "nowhere")
        assert store.read(PAYLOAD_KEY) is None

    def test_missing_key(self, shared_dir):
        """Test that a missing key is 'no data'."""
        store = SharedDirectorySnapshotStore(shared_dir)
        assert store.read("other_key") is None

    def test_key_that_is_a_directory(self, shared_dir):
        """Test that a directory in place of a value is 'no data'."""
        (shared_dir / APP_GROUP_ID / "folder").mkdir()
        store = SharedDirectorySnapshotStore(shared_dir)
        assert store.read("folder") is None


class TestLoadSnapshot:
    """Tests for reading and decoding in one step."""

    def test_load_from_memory(self, memory_store, sample_snapshot):
        """Test loading the sample snapshot from memory."""
        assert load_snapshot(memory_store) == sample_snapshot

    def test_load_from_directory(self, shared_dir, sample_snapshot):
        """Test loading the sample snapshot from disk."""
        assert load_snapshot(SharedDirectorySnapshotStore(shared_dir)) == sample_snapshot

    def test_load_string_value(self, sample_snapshot_bytes, sample_snapshot):
        """Test that a string-valued slot decodes like a bytes-valued one."""
        store = InMemorySnapshotStore({PAYLOAD_KEY: sample_snapshot_bytes.decode("utf-8")})
        assert load_snapshot(store) == sample_snapshot

    def test_load_absent(self):
        """Test that an empty store yields None."""
        assert load_snapshot(InMemorySnapshotStore()) is None

    def test_load_corrupt(self):
        """Test that a corrupt slot yields None."""
        store = InMemorySnapshotStore({PAYLOAD_KEY: b"{not json"})
        assert load_snapshot(store) is None

    def test_custom_key(self, sample_snapshot_bytes, sample_snapshot):
        """Test reading from a non-default key."""
        store = InMemorySnapshotStore({"custom": sample_snapshot_bytes})
        assert load_snapshot(store, "custom") == sample_snapshot
        assert load_snapshot(store) is None
