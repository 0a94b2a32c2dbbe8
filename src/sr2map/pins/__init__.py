"""
Pin placement package for SR2 Interactive Map.
"""

from .events import MapClickEvent, MapEvents
from .controller import PinPlacementController, PlacementMode

__all__ = [
    "MapClickEvent",
    "MapEvents",
    "PinPlacementController",
    "PlacementMode",
]
