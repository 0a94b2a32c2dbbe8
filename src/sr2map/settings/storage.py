"""
User data storage settings for SR2 Interactive Map.
"""

import logging

from PySide6.QtCore import QSettings

from ..storage import KeyValueStore, MemoryStore, QSettingsStore
from .types import ConfigError, StorageBackend

logger = logging.getLogger(__name__)

USERDATA_ORGANIZATION = "sr2map"
USERDATA_APPLICATION = "sr2_interactivemap_userdata"


class StorageSettings:
    """Selects and opens the user data store."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def backend_value(self) -> str:
        value = self.settings.value("storage/backend", StorageBackend.QSETTINGS.value)
        return str(value) if value is not None else StorageBackend.QSETTINGS.value

    @property
    def backend(self) -> StorageBackend:
        """Configured backend.

        Raises:
            ConfigError: If the stored value names no known backend
        """
        try:
            return StorageBackend(self.backend_value)
        except ValueError as e:
            raise ConfigError(f"Unknown storage backend: {self.backend_value}") from e

    @backend.setter
    def backend(self, value: StorageBackend) -> None:
        self.settings.setValue("storage/backend", StorageBackend(value).value)
        self.settings.sync()

    @property
    def userdata_file(self) -> str:
        """Explicit INI file for user data ("" means the platform default)."""
        value = self.settings.value("storage/userdata_file", "")
        return str(value) if value is not None else ""

    @userdata_file.setter
    def userdata_file(self, value: str) -> None:
        self.settings.setValue("storage/userdata_file", value)
        self.settings.sync()

    def open_store(self) -> KeyValueStore:
        """Create the configured user data store."""
        backend = self.backend
        if backend is StorageBackend.MEMORY:
            logger.warning("Using in-memory user data store; nothing will persist")
            return MemoryStore()

        if self.userdata_file:
            qsettings = QSettings(self.userdata_file, QSettings.Format.IniFormat)
        else:
            qsettings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                USERDATA_ORGANIZATION,
                USERDATA_APPLICATION,
            )
        store = QSettingsStore(qsettings)
        logger.info(f"User data stored at: {store.location()}")
        return store
