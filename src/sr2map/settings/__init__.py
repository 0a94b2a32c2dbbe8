"""
Settings package for SR2 Interactive Map.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from sr2map.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, StorageBackend, ValidationResult
from .logging import LoggingSettings
from .maps import MapSettings
from .storage import StorageSettings
from .ui import UISettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "StorageBackend",
    "ValidationResult",
    "LoggingSettings",
    "MapSettings",
    "StorageSettings",
    "UISettings",
]
