"""
Logging-related settings for SR2 Interactive Map.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/sr2map.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings:
    """Console and file logging options.

    The file log doubles as an audit trail of user data changes (imports,
    clears, placed pins). ``userdata_log_level`` decides how much of that
    trail is kept, independently of the console level.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _flag(self, key: str, default: bool) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            # INI files hand booleans back as text
            return value.lower() in ("true", "1", "yes")
        return default if value is None else bool(value)

    def _store(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    def _level(self, key: str) -> str:
        value = self.settings.value(key, "INFO")
        return str(value).upper() if value is not None else "INFO"

    def _store_level(self, key: str, value: str) -> bool:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Ignoring invalid log level '{value}' for {key}")
            return False
        self._store(key, level)
        return True

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        return self._flag("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store("logging/console_enabled", bool(value))

    @property
    def console_log_level(self) -> str:
        return self._level("logging/console_level")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._store_level("logging/console_level", value)

    @property
    def console_use_colors(self) -> bool:
        return self._flag("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store("logging/console_use_colors", bool(value))

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        """CSV log file, off by default."""
        return self._flag("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store("logging/file_enabled", bool(value))

    @property
    def log_file_path(self) -> str:
        """Log file location; relative paths resolve against the working directory."""
        value = self.settings.value("logging/file_path", LOG_FILE_PATH)
        return str(value) if value else LOG_FILE_PATH

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._store("logging/file_path", value)

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(self.log_file_path).resolve()

    # === USER DATA AUDIT ===

    @property
    def userdata_log_level(self) -> str:
        """Level of the ``sr2map.userdata`` loggers (imports, exports, clears)."""
        return self._level("logging/userdata_level")

    @userdata_log_level.setter
    def userdata_log_level(self, value: str) -> None:
        self._store_level("logging/userdata_level", value)
