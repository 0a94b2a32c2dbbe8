"""Map view widget.

Shows a placeholder map surface with the user's pins for the active map and
turns left clicks into ``MapClickEvent``s. Panning follows the usual editor
convention: middle button, or Space + left button.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QKeyEvent, QMouseEvent, QPainter, QPen
from PySide6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsScene,
    QGraphicsView,
    QScrollBar,
    QWidget,
)

from ..pins import MapEvents
from ..userdata.models import MapType, PinRecord
from .icons import PIN_ICONS, pin_color

MAP_WIDTH = 2048
MAP_HEIGHT = 2048
PIN_RADIUS = 8


class MapView(QGraphicsView):
    """Graphics view that displays user pins and reports map clicks."""

    def __init__(self, map_events: MapEvents, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.map_events = map_events
        self.current_map: MapType = MapType.SR2

        self._scene = QGraphicsScene(self)
        self._scene.setSceneRect(QRectF(0, 0, MAP_WIDTH, MAP_HEIGHT))
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)

        self._pins: List[PinRecord] = []
        self._pin_items: List[QGraphicsEllipseItem] = []

        self._is_panning = False
        self._pan_start_x = 0.0
        self._pan_start_y = 0.0
        self._space_pressed = False

        self._update_background()

    # === STATE ===

    def set_current_map(self, map_id: MapType) -> None:
        """Switch the active map and redraw its pins."""
        self.current_map = MapType(map_id)
        self._update_background()
        self._render_pins()

    def set_pins(self, pins: List[PinRecord]) -> None:
        """Replace displayed pins (connected to UserDataState.pins_changed)."""
        self._pins = list(pins)
        self._render_pins()

    def _update_background(self) -> None:
        color = QColor("#2b3a42") if self.current_map is MapType.SR1 else QColor("#1d3b2f")
        self._scene.setBackgroundBrush(QBrush(color))

    def _render_pins(self) -> None:
        for item in self._pin_items:
            self._scene.removeItem(item)
        self._pin_items.clear()

        for pin in self._pins:
            if pin.get("dimension", MapType.SR2.value) != self.current_map.value:
                continue
            pos = pin["pos"]
            item = QGraphicsEllipseItem(
                pos["x"] - PIN_RADIUS, pos["y"] - PIN_RADIUS, PIN_RADIUS * 2, PIN_RADIUS * 2
            )
            item.setBrush(QBrush(pin_color(pin["icon"])))
            item.setPen(QPen(Qt.GlobalColor.white, 1.5))
            label = PIN_ICONS.get(pin["icon"], (pin["icon"],))[0]
            item.setToolTip(f"{label} ({pos['x']:.0f}, {pos['y']:.0f})")
            self._scene.addItem(item)
            self._pin_items.append(item)

        self.logger.debug(f"Rendered {len(self._pin_items)} pins on {self.current_map.value}")

    # === EVENTS ===

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Start panning, or report a map click."""
        if event.button() == Qt.MouseButton.MiddleButton or (
            event.button() == Qt.MouseButton.LeftButton and self._space_pressed
        ):
            self._is_panning = True
            self._pan_start_x = event.position().x()
            self._pan_start_y = event.position().y()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            event.accept()
        elif event.button() == Qt.MouseButton.LeftButton:
            scene_pos = self.mapToScene(event.position().toPoint())
            if self._scene.sceneRect().contains(scene_pos):
                self.map_events.emit_click(scene_pos.x(), scene_pos.y(), self.current_map)
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._is_panning:
            delta_x = event.position().x() - self._pan_start_x
            delta_y = event.position().y() - self._pan_start_y
            self._pan_start_x = event.position().x()
            self._pan_start_y = event.position().y()

            h_bar: QScrollBar = self.horizontalScrollBar()
            v_bar: QScrollBar = self.verticalScrollBar()
            h_bar.setValue(h_bar.value() - int(delta_x))
            v_bar.setValue(v_bar.value() - int(delta_y))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self._is_panning and event.button() in (
            Qt.MouseButton.MiddleButton,
            Qt.MouseButton.LeftButton,
        ):
            self._is_panning = False
            self.setCursor(Qt.CursorShape.ArrowCursor)
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Space and not event.isAutoRepeat():
            self._space_pressed = True
            if not self._is_panning:
                self.setCursor(Qt.CursorShape.OpenHandCursor)
            event.accept()
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Space and not event.isAutoRepeat():
            self._space_pressed = False
            if not self._is_panning:
                self.setCursor(Qt.CursorShape.ArrowCursor)
            event.accept()
        else:
            super().keyReleaseEvent(event)
