"""Action handlers for MainWindow.

Keeps UI action logic (confirmations, file dialogs, user notifications)
separate from window construction/layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet

from PySide6.QtWidgets import QFileDialog, QMessageBox

from .. import __version__
from ..errors import FormatError, ParseError, UserDataError
from ..userdata.models import DataSet, MapType, describe_selection

if TYPE_CHECKING:
    from .main_window import MainWindow


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _selection(self, action: str) -> FrozenSet[DataSet]:
        """Current dataset selection; warns and returns empty if none."""
        mw = self.main_window
        selection = mw.data_panel.selected_datasets()
        if not selection:
            QMessageBox.information(
                mw, "No Data Selected", f"Select at least one dataset to {action}."
            )
        return selection

    # === USER DATA ===

    def export_selected(self) -> None:
        """Export the selected datasets to a JSON file."""
        mw = self.main_window
        selection = self._selection("export")
        if not selection:
            return

        try:
            document = mw.codec.export(selection)
            file_path, _ = QFileDialog.getSaveFileName(
                mw,
                "Export User Data",
                str(Path.home() / document.filename),
                "JSON Files (*.json)",
            )
            if not file_path:
                return

            saved = document.save(file_path)
            mw.logger.info(f"Exported {describe_selection(selection)} to {saved}")
            mw.status_bar.showMessage(f"Exported to {saved.name}", 3000)
        except Exception as e:
            mw.logger.error(f"Export failed: {e}", exc_info=True)
            QMessageBox.critical(
                mw, "Export Failed", "Export failed. Check the log for details."
            )

    def import_selected(self) -> None:
        """Import the selected datasets from a JSON file."""
        mw = self.main_window
        selection = self._selection("import")
        if not selection:
            return

        file_path, _ = QFileDialog.getOpenFileName(
            mw, "Import User Data", str(Path.home()), "JSON Files (*.json)"
        )
        if not file_path:
            return

        reply = QMessageBox.question(
            mw,
            "Import User Data",
            f"This will overwrite current {describe_selection(selection)}. Continue?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        try:
            result = mw.codec.import_file(file_path, selection)
        except ParseError as e:
            mw.logger.error(f"Import failed, file is not valid JSON: {e}")
            QMessageBox.critical(
                mw,
                "Import Failed",
                "Import failed. Please ensure you uploaded a properly formed JSON file.",
            )
            return
        except FormatError as e:
            mw.logger.error(f"Import rejected: {e}")
            applied = (
                f"\n\nImported anyway: {describe_selection(e.applied)}."
                if e.applied
                else ""
            )
            QMessageBox.critical(mw, "Import Failed", f"Import failed. {e}{applied}")
            self.refresh_sizes()
            return
        except Exception as e:
            mw.logger.error(f"Import failed: {e}", exc_info=True)
            QMessageBox.critical(
                mw, "Import Failed", "Import failed. Check the log for details."
            )
            # Earlier writes of a multi-key import may have landed
            mw.state.reload_from(mw.user_store)
            self.refresh_sizes()
            return

        if not result.changed:
            QMessageBox.information(
                mw,
                "Nothing Imported",
                f"The file contains no {describe_selection(selection)}.",
            )
            return

        mw.status_bar.showMessage(
            f"Imported {describe_selection(result.applied)}", 3000
        )
        self.refresh_sizes()

    def clear_selected(self) -> None:
        """Clear the selected datasets after confirmation."""
        mw = self.main_window
        selection = self._selection("clear")
        if not selection:
            return

        reply = QMessageBox.question(
            mw,
            "Clear User Data",
            f"Are you sure you want to clear {describe_selection(selection)}? "
            "This cannot be undone.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        try:
            cleared = mw.codec.clear(selection)
        except UserDataError as e:
            mw.logger.error(f"Clear failed: {e}", exc_info=True)
            QMessageBox.critical(
                mw, "Clear Failed", "Clear failed. Check the log for details."
            )
            self.refresh_sizes()
            return

        mw.status_bar.showMessage(f"Cleared {describe_selection(cleared)}", 3000)
        self.refresh_sizes()

    def refresh_sizes(self) -> None:
        mw = self.main_window
        mw.data_panel.show_sizes(mw.codec.dataset_sizes())

    # === MAP ===

    def select_pin_icon(self, icon: str) -> None:
        """Arm or disarm pin placement from the palette."""
        mw = self.main_window
        if icon:
            mw.pin_controller.arm(icon)
            mw.status_bar.showMessage("Click on the map to place the pin", 3000)
        else:
            mw.pin_controller.disarm()
        mw.settings.maps.last_pin_icon = icon

    def pin_placement_failed(self, message: str) -> None:
        """Tell the user a placed pin could not be saved."""
        mw = self.main_window
        QMessageBox.critical(
            mw, "Place Pin", f"The pin could not be saved. {message}"
        )

    def select_map(self, map_id: MapType) -> None:
        mw = self.main_window
        mw.map_view.set_current_map(map_id)
        mw.settings.current_map = map_id
        mw.setWindowTitle(f"{map_id.display_name} Interactive Map")

    def reload_user_data(self) -> None:
        """Re-read everything from storage (picks up external changes)."""
        mw = self.main_window
        mw.state.reload_from(mw.user_store)
        self.refresh_sizes()
        mw.status_bar.showMessage("User data reloaded", 2000)

    def about(self) -> None:
        mw = self.main_window
        QMessageBox.about(
            mw,
            "About SR2 Interactive Map",
            f"SR2 Interactive Map {__version__}\n\n"
            "Plan plots, place pins and track found collectables.\n\n"
            f"Settings: {mw.settings.get_settings_file_path()}",
        )
