"""
In-memory mirror of the persisted user data.

A single ``UserDataState`` object is shared by every widget that shows user
data. It is a cache of the store: valid until the next external write, and
rebuilt from the store on a full reload.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from .models import FoundMap, PinRecord, PlotPlan, empty_found
from .store import UserDataStore


class UserDataState(QObject):
    """Shared UI state for plot plans, user pins and found collectables.

    The found state is a dict holding the seven found keys plus any fields
    other widgets keep next to them (view toggles and such). Found updates are
    merged into it, never replacing it wholesale.
    """

    plots_changed = Signal(object)
    pins_changed = Signal(object)
    found_changed = Signal(object)
    reloaded = Signal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._plots: List[PlotPlan] = []
        self._pins: List[PinRecord] = []
        self._found: Dict[str, Any] = empty_found()

    @property
    def plots(self) -> List[PlotPlan]:
        return list(self._plots)

    @property
    def pins(self) -> List[PinRecord]:
        return list(self._pins)

    @property
    def found(self) -> Dict[str, Any]:
        return dict(self._found)

    def set_plots(self, plots: List[PlotPlan]) -> None:
        """Replace all plot plans."""
        self._plots = list(plots)
        self.plots_changed.emit(self.plots)

    def set_pins(self, pins: List[PinRecord]) -> None:
        """Replace all user pins."""
        self._pins = list(pins)
        self.pins_changed.emit(self.pins)

    def append_pin(self, pin: PinRecord) -> List[PinRecord]:
        """Append one pin and return the new pin sequence."""
        self._pins = [*self._pins, pin]
        self.pins_changed.emit(self.pins)
        return self.pins

    def merge_found(self, patch: Mapping[str, Any]) -> None:
        """Merge ``patch`` into the found state, keeping unrelated fields."""
        self._found = {**self._found, **patch}
        self.found_changed.emit(self.found)

    def set_found_field(self, name: str, value: Any) -> None:
        """Set a single found-state field (e.g. a display toggle)."""
        self.merge_found({name: value})

    def reload_from(self, store: UserDataStore) -> None:
        """Re-derive all persisted state from ``store``."""
        self.logger.info("Reloading user data from storage")
        found: FoundMap = store.found()

        self._plots = store.plots()
        self._pins = store.pins()
        self._found = {**self._found, **found}

        self.plots_changed.emit(self.plots)
        self.pins_changed.emit(self.pins)
        self.found_changed.emit(self.found)
        self.reloaded.emit()
