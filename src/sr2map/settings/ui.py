"""
UI-related settings for SR2 Interactive Map.
"""

from typing import Any, List, Optional, TYPE_CHECKING, Union, cast

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QMainWindow, QWidget

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


def _as_byte_array(value: Any) -> Optional[QByteArray]:
    """Coerce a stored geometry/state value to QByteArray."""
    if isinstance(value, QByteArray):
        return value
    if isinstance(value, bytes):
        return QByteArray(value)
    try:
        return QByteArray(bytes(value))
    except (TypeError, ValueError):
        return None


class UISettings:
    """Manages UI-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        # Only QMainWindow has saveState
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        geometry: Any = self.settings.value("ui/window_geometry")
        state: Any = self.settings.value("ui/window_state")

        restored = False
        if geometry:
            geometry = _as_byte_array(geometry)
            if geometry:
                restored = widget.restoreGeometry(geometry) or restored

        if state and isinstance(widget, QMainWindow):
            state = _as_byte_array(state)
            if state:
                restored = widget.restoreState(state) or restored

        return restored

    @property
    def selected_datasets(self) -> List[str]:
        """Dataset checkboxes ticked in the data manager panel."""
        value = self.settings.value("ui/selected_datasets", [])
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value)]
        if isinstance(value, str) and value:
            # QSettings returns a single-item list as a plain string
            return [value]
        return []

    @selected_datasets.setter
    def selected_datasets(self, value: List[str]) -> None:
        self.settings.setValue("ui/selected_datasets", list(value))
        self.settings.sync()
