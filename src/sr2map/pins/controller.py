"""Pin placement on map click.

The controller is either idle or armed with a pin icon. Each map click while
armed creates one pin, appended to the in-memory state first and then to
persisted storage. If storage rejects the write, the state is reloaded from
storage so that the unsaved pin disappears again.
"""

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..errors import StorageError
from ..userdata.models import Pin, PinRecord
from ..userdata.state import UserDataState
from ..userdata.store import UserDataStore
from .events import MapClickEvent, MapEvents


class PlacementMode(Enum):
    IDLE = "idle"
    ARMED = "armed"


class PinPlacementController(QObject):
    """Creates user pins from map clicks.

    Signals:
        armed_changed: Armed icon name, or "" when idle
        pin_placed: The PinRecord that was just created
        placement_failed: Error message when storage rejected the new pin
    """

    armed_changed = Signal(str)
    pin_placed = Signal(object)
    placement_failed = Signal(str)

    def __init__(
        self,
        state: UserDataState,
        store: UserDataStore,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.state = state
        self.store = store
        self._icon: Optional[str] = None

    @property
    def mode(self) -> PlacementMode:
        return PlacementMode.ARMED if self._icon else PlacementMode.IDLE

    @property
    def icon(self) -> Optional[str]:
        """Currently armed icon (None when idle)."""
        return self._icon

    def arm(self, icon: str) -> None:
        """Select ``icon`` for placement on the next map click."""
        if not icon:
            raise ValueError("Pin icon must be a non-empty string")
        if icon == self._icon:
            return
        self._icon = icon
        self.logger.debug(f"Armed pin placement with icon '{icon}'")
        self.armed_changed.emit(icon)

    def disarm(self) -> None:
        """Return to idle; clicks no longer place pins."""
        if self._icon is None:
            return
        self._icon = None
        self.logger.debug("Pin placement disarmed")
        self.armed_changed.emit("")

    def subscribe(self, events: MapEvents) -> None:
        events.clicked.connect(self.on_map_clicked)

    def unsubscribe(self, events: MapEvents) -> None:
        events.clicked.disconnect(self.on_map_clicked)

    def on_map_clicked(self, event: MapClickEvent) -> Optional[PinRecord]:
        """Place a pin at the clicked position if armed.

        Returns:
            The new pin record, or None when idle or the write failed
        """
        if self._icon is None:
            return None

        record = Pin(
            icon=self._icon, x=event.x, y=event.y, dimension=event.map_id
        ).to_record()

        pins = self.state.append_pin(record)
        try:
            self.store.write_pins(pins)
        except StorageError as e:
            self.logger.error(f"Could not save placed pin: {e}", exc_info=True)
            self.state.reload_from(self.store)
            self.placement_failed.emit(str(e))
            return None

        self.logger.info(
            f"Placed '{record['icon']}' pin at ({event.x:.2f}, {event.y:.2f}) "
            f"on {record['dimension']}"
        )
        self.pin_placed.emit(record)
        return record
