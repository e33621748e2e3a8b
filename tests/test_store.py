"""Tests for TableStore.

Tests cover:
- Monotonic identifiers, never reused after delete
- Insert/erase semantics and idempotence
- Contract violations for unknown tables and malformed numbers
- Deletion isolation and cross-table independence
"""

import pytest

from maptel.core.exceptions import InvalidIdentifier, InvalidPhoneNumber
from maptel.store import TableStore


class TestCreateDelete:
    """Tests for table lifecycle."""

    def test_ids_start_at_zero(self, store):
        """First table gets identifier 0."""
        assert store.create() == 0

    def test_ids_are_monotonic(self, store):
        """Each create returns the next identifier."""
        assert [store.create() for _ in range(3)] == [0, 1, 2]

    def test_new_table_is_empty(self, store, table_id):
        """Created table has no entries."""
        assert store.entries(table_id) == {}
        assert store.contains(table_id)
        assert table_id in store

    def test_delete_removes_table(self, store, table_id):
        """Deleted table no longer exists."""
        assert store.delete(table_id) is True
        assert not store.contains(table_id)
        assert len(store) == 0

    def test_delete_unknown_is_noop(self, store, table_id):
        """Deleting an unknown table returns False and changes nothing."""
        store.insert(table_id, "1", "2")
        assert store.delete(999) is False
        assert store.entries(table_id) == {"1": "2"}

    def test_delete_unknown_logs_warning(self, store, caplog):
        """Deleting an unknown table is reported for diagnostics."""
        with caplog.at_level("WARNING", logger="maptel.store"):
            store.delete(42)
        assert "nothing to delete" in caplog.text

    def test_delete_twice(self, store, table_id):
        """Second delete of the same table is a no-op."""
        assert store.delete(table_id) is True
        assert store.delete(table_id) is False

    def test_deleted_id_never_reused(self, store):
        """A table created after a delete gets a fresh identifier."""
        first = store.create()
        store.delete(first)
        second = store.create()
        assert second != first
        assert second == first + 1

    def test_deleted_entries_not_observable(self, store, table_id):
        """Entries of a deleted table are gone with it."""
        store.insert(table_id, "111", "222")
        store.delete(table_id)
        with pytest.raises(InvalidIdentifier):
            store.entries(table_id)
        new_id = store.create()
        assert store.entries(new_id) == {}

    def test_list_ids(self, store):
        """list_ids reports live tables in creation order."""
        ids = [store.create() for _ in range(4)]
        store.delete(ids[1])
        assert store.list_ids() == [ids[0], ids[2], ids[3]]

    def test_contains_unhashable_id(self, store):
        """Unhashable identifier is simply not contained."""
        assert not store.contains([0])


class TestInsert:
    """Tests for TableStore.insert."""

    def test_insert_sets_mapping(self, store, table_id):
        """Insert adds a single mapping."""
        store.insert(table_id, "123", "456")
        assert store.get(table_id, "123") == "456"

    def test_insert_overwrites(self, store, table_id):
        """Insert on an existing key replaces its value."""
        store.insert(table_id, "123", "456")
        store.insert(table_id, "123", "789")
        assert store.entries(table_id) == {"123": "789"}

    def test_insert_is_idempotent(self, store, table_id):
        """Inserting the same pair twice equals inserting it once."""
        store.insert(table_id, "123", "456")
        once = store.entries(table_id)
        store.insert(table_id, "123", "456")
        assert store.entries(table_id) == once

    def test_insert_self_mapping_allowed(self, store, table_id):
        """Self-mapping is stored like any other entry."""
        store.insert(table_id, "5", "5")
        assert store.get(table_id, "5") == "5"

    def test_insert_unknown_table_raises(self, store):
        """Insert into an unknown table is a contract violation."""
        with pytest.raises(InvalidIdentifier) as exc_info:
            store.insert(7, "1", "2")
        assert exc_info.value.code == "INVALID_IDENTIFIER"

    @pytest.mark.parametrize("src,dst", [
        ("", "1"),
        ("1", ""),
        ("12a", "1"),
        ("1", "+48"),
        ("1" * 23, "1"),
    ])
    def test_insert_invalid_number_raises(self, store, table_id, src, dst):
        """Malformed numbers are rejected and never stored."""
        with pytest.raises(InvalidPhoneNumber):
            store.insert(table_id, src, dst)
        assert store.entries(table_id) == {}


class TestErase:
    """Tests for TableStore.erase."""

    def test_erase_removes_mapping(self, store, table_id):
        """Erase removes an existing mapping."""
        store.insert(table_id, "123", "456")
        assert store.erase(table_id, "123") is True
        assert store.get(table_id, "123") is None

    def test_erase_missing_key_is_noop(self, store, table_id):
        """Erasing an absent key returns False and keeps other entries."""
        store.insert(table_id, "123", "456")
        assert store.erase(table_id, "999") is False
        assert store.entries(table_id) == {"123": "456"}

    def test_erase_does_not_match_values(self, store, table_id):
        """Erase looks at keys only."""
        store.insert(table_id, "123", "456")
        assert store.erase(table_id, "456") is False

    def test_erase_unknown_table_raises(self, store):
        """Erase in an unknown table is a contract violation."""
        with pytest.raises(InvalidIdentifier):
            store.erase(3, "123")

    def test_erase_invalid_number_raises(self, store, table_id):
        """Erase with a malformed number is a contract violation."""
        with pytest.raises(InvalidPhoneNumber):
            store.erase(table_id, "12-3")


class TestIsolation:
    """Tests for independence of tables."""

    def test_same_key_in_two_tables(self, store):
        """Identical keys in two tables hold their own values."""
        a = store.create()
        b = store.create()
        store.insert(a, "100", "200")
        store.insert(b, "100", "300")
        assert store.get(a, "100") == "200"
        assert store.get(b, "100") == "300"

    def test_mutating_one_table_leaves_other(self, store):
        """Erase and delete in one table do not touch another."""
        a = store.create()
        b = store.create()
        store.insert(a, "100", "200")
        store.insert(b, "100", "200")
        store.erase(a, "100")
        assert store.entries(b) == {"100": "200"}
        store.delete(b)
        assert store.entries(a) == {}

    def test_entries_returns_copy(self, store, table_id):
        """Mutating the returned dict does not change the table."""
        store.insert(table_id, "1", "2")
        snapshot = store.entries(table_id)
        snapshot["3"] = "4"
        assert store.entries(table_id) == {"1": "2"}

    def test_view_is_read_only(self, store, table_id):
        """Chain traversal view cannot mutate the table."""
        store.insert(table_id, "1", "2")
        view = store.view(table_id)
        with pytest.raises(TypeError):
            view["3"] = "4"

    def test_separate_stores_are_independent(self):
        """Two stores allocate identifiers independently."""
        first, second = TableStore(), TableStore()
        first.create()
        assert second.create() == 0
