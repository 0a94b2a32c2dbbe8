"""
Main application window for SR2 Interactive Map.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QDockWidget, QMainWindow, QVBoxLayout, QWidget

from ..pins import MapEvents, PinPlacementController
from ..settings import AppSettings
from ..userdata import (
    DataSet,
    StateSyncBridge,
    UserDataCodec,
    UserDataState,
    UserDataStore,
)
from .actions import MainWindowActions
from .data_manager_panel import DataManagerPanel
from .icons import get_app_icon
from .map_view import MapView
from .menu import MenuBuilder
from .pin_palette import MapSelector, PinPalette


class MainWindow(QMainWindow):
    """Main application window: map view plus a sidebar dock."""

    # Menu actions (created by MenuBuilder)
    action_export: QAction
    action_import: QAction
    action_clear: QAction
    action_reload: QAction
    action_exit: QAction
    action_about: QAction

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.setObjectName("main_window")
        self.settings = settings

        # User data wiring: one shared state object reconciled with the store
        self.user_store = UserDataStore(settings.open_user_data_store())
        self.state = UserDataState(self)
        self.bridge = StateSyncBridge.for_state(self.state, self.user_store)
        self.codec = UserDataCodec(self.user_store, self.bridge)

        self.map_events = MapEvents(self)
        self.pin_controller = PinPlacementController(self.state, self.user_store, self)
        self.pin_controller.subscribe(self.map_events)

        self.main_window_actions = MainWindowActions(self)
        self.menu_builder = MenuBuilder(self)

        self._setup_central_widget()
        self._setup_sidebar()
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.status_bar = self.statusBar()

        self._connect_state()
        self.state.reload_from(self.user_store)
        self._restore_selection()

        if not self.settings.restore_window_geometry(self):
            self.resize(1200, 800)

        self.setWindowIcon(get_app_icon())
        self.main_window_actions.select_map(self.settings.current_map)
        self.pin_palette.set_current_icon(self.settings.maps.last_pin_icon)
        self.status_bar.showMessage("Ready", 3000)

        self.logger.info("Main window initialized")

    def _setup_central_widget(self) -> None:
        self.map_view = MapView(self.map_events, self)
        self.setCentralWidget(self.map_view)

    def _setup_sidebar(self) -> None:
        actions = self.main_window_actions

        self.sidebar_dock = QDockWidget("Sidebar", self)
        self.sidebar_dock.setObjectName("sidebar_dock")
        self.sidebar_dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable)

        container = QWidget()
        layout = QVBoxLayout(container)

        self.map_selector = MapSelector()
        self.map_selector.set_current_map(self.settings.current_map)
        self.map_selector.map_selected.connect(actions.select_map)
        layout.addWidget(self.map_selector)

        self.pin_palette = PinPalette()
        self.pin_palette.icon_selected.connect(actions.select_pin_icon)
        layout.addWidget(self.pin_palette)

        self.data_panel = DataManagerPanel()
        self.data_panel.export_button.clicked.connect(actions.export_selected)
        self.data_panel.import_button.clicked.connect(actions.import_selected)
        self.data_panel.clear_button.clicked.connect(actions.clear_selected)
        self.data_panel.selection_changed.connect(self._save_selection)
        layout.addWidget(self.data_panel)

        layout.addStretch(1)
        self.sidebar_dock.setWidget(container)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.sidebar_dock)

    def _connect_state(self) -> None:
        self.state.pins_changed.connect(self.map_view.set_pins)
        self.state.reloaded.connect(self.main_window_actions.refresh_sizes)
        self.pin_controller.pin_placed.connect(
            lambda _record: self.main_window_actions.refresh_sizes()
        )
        self.pin_controller.placement_failed.connect(
            self.main_window_actions.pin_placement_failed
        )

    def _restore_selection(self) -> None:
        selection = []
        for value in self.settings.ui.selected_datasets:
            try:
                selection.append(DataSet(value))
            except ValueError:
                self.logger.debug(f"Ignoring unknown saved dataset '{value}'")
        self.data_panel.set_selected_datasets(selection)

    def _save_selection(self, selection: frozenset) -> None:
        self.settings.ui.selected_datasets = [d.value for d in DataSet if d in selection]

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event to save settings."""
        self.settings.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)
