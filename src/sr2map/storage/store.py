"""
Key-value storage backends for persisted user data.

Every value is stored as one JSON document per key. Reads never fail: a
missing or corrupt entry yields the caller-supplied default. Writes are
independent per key; nothing spans several keys.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional, TypeVar

import orjson
from PySide6.QtCore import QByteArray, QSettings

from ..errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueStore(ABC):
    """Durable JSON key-value store.

    Subclasses only move raw bytes; (de)serialization and the
    missing/corrupt fallback live here.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def _get_raw(self, key: str) -> Optional[bytes]:
        """Return the stored bytes for ``key`` or None if absent."""

    @abstractmethod
    def _set_raw(self, key: str, data: bytes) -> None:
        """Persist ``data`` under ``key``. Raise StorageError on rejection."""

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate over stored keys."""

    def read(self, key: str, default: T) -> T:
        """Read and decode ``key``, falling back to a copy of ``default``."""
        raw = self._get_raw(key)
        if raw is None:
            return copy.deepcopy(default)

        try:
            value = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            self.logger.warning(f"Corrupt value under '{key}', using default: {e}")
            return copy.deepcopy(default)

        if not isinstance(value, type(default)):
            self.logger.warning(
                f"Unexpected {type(value).__name__} under '{key}', using default"
            )
            return copy.deepcopy(default)

        return value

    def read_bytes(self, key: str) -> Optional[bytes]:
        """Return the raw stored bytes for ``key`` (None if absent)."""
        return self._get_raw(key)

    def write(self, key: str, value: Any) -> None:
        """Encode ``value`` as JSON and store it under ``key``.

        Raises:
            StorageError: If the value cannot be encoded or the backend refuses it
        """
        try:
            data = orjson.dumps(value)
        except TypeError as e:
            raise StorageError(f"Cannot serialize value for '{key}': {e}") from e

        self._set_raw(key, data)
        self.logger.debug(f"Wrote {len(data)} bytes to '{key}'")


class MemoryStore(KeyValueStore):
    """In-process store, optionally limited to ``quota`` bytes in total."""

    def __init__(self, quota: Optional[int] = None) -> None:
        super().__init__()
        self.quota = quota
        self._data: Dict[str, bytes] = {}

    def _get_raw(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def _set_raw(self, key: str, data: bytes) -> None:
        if self.quota is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(data) > self.quota:
                raise StorageError(
                    f"Storage quota exceeded writing '{key}' "
                    f"({used + len(data)} > {self.quota} bytes)"
                )
        self._data[key] = data

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    def set_raw(self, key: str, data: bytes) -> None:
        """Store raw bytes, bypassing encoding (simulates a foreign writer)."""
        self._data[key] = data


class QSettingsStore(KeyValueStore):
    """Store backed by QSettings, one QByteArray of UTF-8 JSON per key."""

    def __init__(self, settings: QSettings, group: str = "userdata") -> None:
        super().__init__()
        self.settings = settings
        self.group = group

    def _full_key(self, key: str) -> str:
        return f"{self.group}/{key}" if self.group else key

    def _get_raw(self, key: str) -> Optional[bytes]:
        value: Any = self.settings.value(self._full_key(key))
        if value is None:
            return None
        if isinstance(value, QByteArray):
            return value.data()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode("utf-8")
        self.logger.warning(
            f"Unexpected QSettings type {type(value).__name__} under '{key}'"
        )
        return None

    def _set_raw(self, key: str, data: bytes) -> None:
        self.settings.setValue(self._full_key(key), QByteArray(data))
        self.settings.sync()

        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise StorageError(
                f"Settings backend rejected write to '{key}': {status.name}"
            )

    def keys(self) -> Iterator[str]:
        self.settings.beginGroup(self.group)
        try:
            names = list(self.settings.childKeys())
        finally:
            self.settings.endGroup()
        return iter(names)

    def location(self) -> str:
        """File path backing this store."""
        return self.settings.fileName()
