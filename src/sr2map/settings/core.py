"""
Core settings management for SR2 Interactive Map.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QMainWindow, QWidget

from ..storage import KeyValueStore
from ..userdata.models import MapType
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .logging import LoggingSettings
from .ui import UISettings
from .maps import MapSettings
from .storage import StorageSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation. User data (plots, pins, found
    records) lives in a separate store, see ``open_user_data_store``.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Explicit INI file instead of the platform location
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("sr2map", "sr2_interactivemap")
        self.profile = profile

        # Use profile as a group to create hierarchy: sr2map/sr2_interactivemap/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._ui = UISettings(self.settings)
        self._maps = MapSettings(self.settings)
        self._storage = StorageSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def ui(self) -> UISettings:
        """Access UI settings subsystem."""
        return self._ui

    @property
    def maps(self) -> MapSettings:
        """Access map settings subsystem."""
        return self._maps

    @property
    def storage(self) -> StorageSettings:
        """Access user data storage settings subsystem."""
        return self._storage

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value)

    # === UI SETTINGS (DELEGATED) ===

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        self._ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        return self._ui.restore_window_geometry(widget)

    # === MAP SETTINGS (DELEGATED) ===

    @property
    def current_map(self) -> MapType:
        return self._maps.current_map

    @current_map.setter
    def current_map(self, value: MapType) -> None:
        self._maps.current_map = value

    # === STORAGE ===

    def open_user_data_store(self) -> KeyValueStore:
        """Open the configured user data store."""
        return self._storage.open_store()

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
