"""
Settings validation system for SR2 Interactive Map.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from ..userdata.models import MapType
from .logging import VALID_LEVELS
from .types import ConfigError, ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Storage backend must be known, otherwise user data cannot be opened
        try:
            self.settings.storage.backend
        except ConfigError as e:
            errors.append(str(e))

        userdata_file = self.settings.storage.userdata_file
        if userdata_file and not Path(userdata_file).parent.exists():
            errors.append(
                f"User data directory does not exist: {Path(userdata_file).parent}"
            )

        map_value = self.settings.maps.current_map_value
        if map_value not in {m.value for m in MapType}:
            warnings.append(f"Unknown current map '{map_value}', sr2 will be used")

        levels = {
            "console": self.settings.logging.console_log_level,
            "user data": self.settings.logging.userdata_log_level,
        }
        for name, level in levels.items():
            if level not in VALID_LEVELS:
                warnings.append(f"Unknown {name} log level: {level}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
