"""Tests for key-value storage and typed user data access."""

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from sr2map.errors import StorageError
from sr2map.storage import MemoryStore, QSettingsStore
from sr2map.userdata import FOUND_KEYS, PINS_KEY, PLOTS_KEY, UserDataStore


class TestMemoryStore:
    """Test reads, writes and fallbacks of the in-memory store."""

    def test_missing_key_returns_default(self) -> None:
        """Test a missing key yields the default."""
        store = MemoryStore()
        assert store.read("nothing", []) == []
        assert store.read_bytes("nothing") is None

    def test_default_is_copied(self) -> None:
        """Test mutating a returned default does not leak into later reads."""
        store = MemoryStore()
        default: list = []
        value = store.read("nothing", default)
        value.append("x")
        assert default == []
        assert store.read("nothing", default) == []

    def test_corrupt_value_returns_default(self) -> None:
        """Test bytes that are not JSON are treated as missing."""
        store = MemoryStore()
        store.set_raw(PINS_KEY, b"{not json")
        assert store.read(PINS_KEY, []) == []

    def test_wrong_type_returns_default(self) -> None:
        """Test a stored object where a list is expected yields the default."""
        store = MemoryStore()
        store.write(PLOTS_KEY, {"site": "a"})
        assert store.read(PLOTS_KEY, []) == []

    def test_write_then_read(self) -> None:
        """Test values survive encoding."""
        store = MemoryStore()
        store.write("k", [{"a": 1, "b": [1.5, None, "s"]}])
        assert store.read("k", []) == [{"a": 1, "b": [1.5, None, "s"]}]
        assert list(store.keys()) == ["k"]

    def test_unserializable_value(self) -> None:
        """Test values orjson cannot encode raise StorageError."""
        store = MemoryStore()
        with pytest.raises(StorageError):
            store.write("k", [object()])
        assert store.read_bytes("k") is None

    def test_quota_exceeded(self) -> None:
        """Test a write over quota is rejected and keeps the old value."""
        store = MemoryStore(quota=16)
        store.write("k", [1, 2])
        with pytest.raises(StorageError, match="quota"):
            store.write("k", list(range(100)))
        assert store.read("k", []) == [1, 2]

    def test_quota_counts_replaced_key_once(self) -> None:
        """Test overwriting a key does not count its old value."""
        store = MemoryStore(quota=10)
        store.write("k", [1, 2, 3])
        store.write("k", [4, 5, 6])
        assert store.read("k", []) == [4, 5, 6]


class TestQSettingsStore:
    """Test the QSettings-backed store against a temporary INI file."""

    def _store(self, path: Path) -> QSettingsStore:
        return QSettingsStore(QSettings(str(path), QSettings.Format.IniFormat))

    def test_write_persists_to_file(self, tmp_path: Path) -> None:
        """Test values can be read back by a fresh QSettings instance."""
        path = tmp_path / "userdata.ini"
        pins = [{"icon": "a", "pos": {"x": 1, "y": 2}, "dimension": "sr2"}]

        self._store(path).write(PINS_KEY, pins)

        reopened = self._store(path)
        assert reopened.read(PINS_KEY, []) == pins
        assert PINS_KEY in list(reopened.keys())
        assert Path(reopened.location()).name == "userdata.ini"

    def test_foreign_string_value(self, tmp_path: Path) -> None:
        """Test a non-JSON string written by something else reads as default."""
        path = tmp_path / "userdata.ini"
        settings = QSettings(str(path), QSettings.Format.IniFormat)
        settings.setValue(f"userdata/{PLOTS_KEY}", "not json")
        settings.sync()

        assert self._store(path).read(PLOTS_KEY, []) == []

    def test_missing_key(self, tmp_path: Path) -> None:
        """Test an empty file yields defaults."""
        store = self._store(tmp_path / "userdata.ini")
        assert store.read(PLOTS_KEY, []) == []
        assert list(store.keys()) == []


class TestUserDataStore:
    """Test the typed user data layout."""

    def test_empty_defaults(self, user_store: UserDataStore) -> None:
        """Test every dataset defaults to empty."""
        assert user_store.plots() == []
        assert user_store.pins() == []
        assert user_store.found() == {key: [] for key in FOUND_KEYS}

    def test_write_found_known_keys_only(
        self, user_store: UserDataStore, memory_store: MemoryStore
    ) -> None:
        """Test unknown found keys and None values are not written."""
        written = user_store.write_found(
            {
                "found_shadow_doors": ["s1"],
                "found_gordos": ["g1"],
                "found_map_nodes": None,
                "show_found": True,
            }
        )

        assert written == ("found_gordos", "found_shadow_doors")
        assert memory_store.read_bytes("show_found") is None
        assert memory_store.read_bytes("found_map_nodes") is None
        assert user_store.found()["found_gordos"] == ["g1"]

    def test_corrupt_found_key_isolated(
        self, user_store: UserDataStore, memory_store: MemoryStore
    ) -> None:
        """Test one corrupt found key does not affect the others."""
        user_store.write_found({"found_gordos": ["g1"]})
        memory_store.set_raw("found_treasure_pods", b"\xff\xfe")

        found = user_store.found()
        assert found["found_gordos"] == ["g1"]
        assert found["found_treasure_pods"] == []
