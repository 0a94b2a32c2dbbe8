"""Map interaction events.

Map widgets translate their own mouse events into ``MapClickEvent`` and emit
them on a shared ``MapEvents`` object. Subscribers never see widget types.
"""

from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..userdata.models import MapType


@dataclass(frozen=True)
class MapClickEvent:
    """A click on the map.

    Attributes:
        x: Horizontal map coordinate
        y: Vertical map coordinate
        map_id: Map that was active when the click happened
    """

    x: float
    y: float
    map_id: MapType


class MapEvents(QObject):
    """Event hub for map interaction."""

    clicked = Signal(object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

    def emit_click(self, x: float, y: float, map_id: MapType) -> MapClickEvent:
        """Build and emit a click event. Returns the emitted event."""
        event = MapClickEvent(float(x), float(y), MapType(map_id))
        self.clicked.emit(event)
        return event
