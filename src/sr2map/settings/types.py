"""
Configuration type definitions and exceptions for SR2 Interactive Map.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Configuration version stamped into the settings file."""
    V1_0 = "1.0"
    CURRENT = V1_0


class StorageBackend(Enum):
    """Where user data (plots, pins, found records) is persisted."""
    QSETTINGS = "qsettings"
    MEMORY = "memory"


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
