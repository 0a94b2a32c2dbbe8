"""
Menu builder for main application window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMenuBar

from .icons import action_icon

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_actions(self) -> None:
        """Create all actions for menus."""
        self._setup_data_actions()
        self._setup_help_actions()

        self.logger.debug("Actions created")

    def _setup_data_actions(self) -> None:
        """Create Data menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_export = QAction(action_icon("fa5s.file-export"), "&Export Selected...", mw)
        mw.action_export.setShortcut(QKeySequence.StandardKey.SaveAs)
        mw.action_export.setStatusTip("Export the selected datasets to a JSON file")
        mw.action_export.triggered.connect(actions.export_selected)

        mw.action_import = QAction(action_icon("fa5s.file-import"), "&Import Selected...", mw)
        mw.action_import.setShortcut(QKeySequence.StandardKey.Open)
        mw.action_import.setStatusTip("Import the selected datasets from a JSON file")
        mw.action_import.triggered.connect(actions.import_selected)

        mw.action_clear = QAction(action_icon("fa5s.trash-alt"), "&Clear Selected...", mw)
        mw.action_clear.setStatusTip("Permanently clear the selected datasets")
        mw.action_clear.triggered.connect(actions.clear_selected)

        mw.action_reload = QAction("&Reload User Data", mw)
        mw.action_reload.setShortcut(QKeySequence.StandardKey.Refresh)
        mw.action_reload.setStatusTip("Re-read plots, pins and found records from storage")
        mw.action_reload.triggered.connect(actions.reload_user_data)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.setStatusTip("Exit the application")
        mw.action_exit.triggered.connect(mw.close)

    def _setup_help_actions(self) -> None:
        """Create Help menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_about = QAction("&About", mw)
        mw.action_about.setStatusTip("About SR2 Interactive Map")
        mw.action_about.triggered.connect(actions.about)

    def setup_menus(self) -> None:
        """Setup the menu bar."""
        menubar = self.main_window.menuBar()

        self._setup_data_menu(menubar)
        self._setup_help_menu(menubar)

        self.logger.debug("Menus created")

    def _setup_data_menu(self, menubar: QMenuBar) -> None:
        mw = self.main_window
        data_menu = menubar.addMenu("&Data")
        data_menu.addAction(mw.action_export)  # type: ignore[arg-type]
        data_menu.addAction(mw.action_import)  # type: ignore[arg-type]
        data_menu.addAction(mw.action_clear)  # type: ignore[arg-type]
        data_menu.addSeparator()
        data_menu.addAction(mw.action_reload)  # type: ignore[arg-type]
        data_menu.addSeparator()
        data_menu.addAction(mw.action_exit)  # type: ignore[arg-type]

    def _setup_help_menu(self, menubar: QMenuBar) -> None:
        mw = self.main_window
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)  # type: ignore[arg-type]
