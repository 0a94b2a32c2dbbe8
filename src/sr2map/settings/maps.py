"""
Map-related settings for SR2 Interactive Map.
"""

import logging
from typing import TYPE_CHECKING

from ..userdata.models import MapType

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class MapSettings:
    """Manages the active map and pin palette selection."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def current_map_value(self) -> str:
        """Raw stored map identifier (may be unknown)."""
        value = self.settings.value("map/current", MapType.SR2.value)
        return str(value) if value is not None else MapType.SR2.value

    @property
    def current_map(self) -> MapType:
        """Map shown on startup (falls back to SR2 on unknown values)."""
        try:
            return MapType(self.current_map_value)
        except ValueError:
            logger.warning(f"Unknown map '{self.current_map_value}', using sr2")
            return MapType.SR2

    @current_map.setter
    def current_map(self, value: MapType) -> None:
        self.settings.setValue("map/current", MapType(value).value)
        self.settings.sync()

    @property
    def last_pin_icon(self) -> str:
        """Pin icon selected in the palette when the app was closed."""
        value = self.settings.value("map/last_pin_icon", "")
        return str(value) if value is not None else ""

    @last_pin_icon.setter
    def last_pin_icon(self, value: str) -> None:
        self.settings.setValue("map/last_pin_icon", value)
        self.settings.sync()
