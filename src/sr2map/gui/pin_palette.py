"""
Pin palette and map selector widgets.

Both follow the icon + combobox layout: a fixed icon on the left and a
combobox on the right.
"""

import logging
from typing import Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QWidget

from ..userdata.models import MapType
from .icons import PIN_ICONS, action_icon, pin_icon


class _IconCombo(QWidget):
    """Minimal icon + combobox row."""

    ICON_NAME: str = ""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(20, 20)
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon_color = self.palette().color(QPalette.ColorRole.WindowText)
        pixmap = action_icon(self.ICON_NAME, icon_color).pixmap(QSize(20, 20))
        if not pixmap.isNull():
            self.icon_label.setPixmap(pixmap)
        layout.addWidget(self.icon_label)

        self.combo = QComboBox()
        self.combo.setMinimumWidth(120)
        layout.addWidget(self.combo, 1)


class PinPalette(_IconCombo):
    """Selects the pin icon that the next map click will place.

    Signals:
        icon_selected: Pin icon name, or "" to stop placing pins
    """

    ICON_NAME = "fa5s.map-pin"

    icon_selected = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.combo.setToolTip("Select a pin, then click on the map to place it")
        self.combo.addItem("No pin (browse)", "")
        for name, (label, _glyph, _color) in PIN_ICONS.items():
            self.combo.addItem(pin_icon(name), label, name)
        self.combo.currentIndexChanged.connect(self._on_index_changed)

    def _on_index_changed(self, _index: int) -> None:
        icon = self.combo.currentData() or ""
        self.logger.debug(f"Pin palette selection: '{icon}'")
        self.icon_selected.emit(icon)

    def set_current_icon(self, icon: str) -> None:
        """Select ``icon`` without placing anything ("" selects no pin)."""
        index = self.combo.findData(icon)
        self.combo.setCurrentIndex(index if index >= 0 else 0)


class MapSelector(_IconCombo):
    """Selects the active map.

    Signals:
        map_selected: The chosen MapType
    """

    ICON_NAME = "fa5s.globe"

    map_selected = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        for map_id in MapType:
            self.combo.addItem(map_id.display_name, map_id.value)
        self.combo.currentIndexChanged.connect(self._on_index_changed)

    def _on_index_changed(self, _index: int) -> None:
        map_id = MapType(self.combo.currentData())
        self.logger.debug(f"Map selected: {map_id.value}")
        self.map_selected.emit(map_id)

    def set_current_map(self, map_id: MapType) -> None:
        index = self.combo.findData(MapType(map_id).value)
        if index >= 0:
            self.combo.setCurrentIndex(index)
