"""
Data manager panel: dataset checkboxes plus export/import/clear buttons.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..userdata.models import DataSet
from .icons import action_icon


class DataManagerPanel(QGroupBox):
    """Lets the user pick datasets and run an action on them.

    The panel only reports intent; ``MainWindowActions`` does the work.

    Signals:
        selection_changed: New selection as a frozenset of DataSet
    """

    selection_changed = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__("User Data", parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        layout = QVBoxLayout(self)

        hint = QLabel("Back up, restore or reset your map data.")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        self.checkboxes: Dict[DataSet, QCheckBox] = {}
        for dataset in DataSet:
            checkbox = QCheckBox(dataset.label.capitalize())
            checkbox.setObjectName(f"dataset-{dataset.value}")
            checkbox.toggled.connect(self._on_toggled)
            layout.addWidget(checkbox)
            self.checkboxes[dataset] = checkbox

        buttons = QHBoxLayout()
        self.export_button = QPushButton(action_icon("fa5s.file-export"), "Export Selected")
        self.import_button = QPushButton(action_icon("fa5s.file-import"), "Import Selected")
        self.clear_button = QPushButton(
            action_icon("fa5s.trash-alt", QColor("#d9534f")), "Clear Selected"
        )
        for button in (self.export_button, self.import_button, self.clear_button):
            buttons.addWidget(button)
        layout.addLayout(buttons)

        self.sizes_label = QLabel()
        layout.addWidget(self.sizes_label)

        self._update_buttons()

    def selected_datasets(self) -> FrozenSet[DataSet]:
        return frozenset(d for d, box in self.checkboxes.items() if box.isChecked())

    def set_selected_datasets(self, datasets: Iterable[DataSet]) -> None:
        selected = set(datasets)
        for dataset, box in self.checkboxes.items():
            box.setChecked(dataset in selected)

    def show_sizes(self, sizes: Dict[DataSet, int]) -> None:
        """Show stored record counts under the buttons."""
        self.sizes_label.setText(
            " | ".join(f"{d.label.capitalize()}: {sizes.get(d, 0)}" for d in DataSet)
        )

    def _on_toggled(self, _checked: bool) -> None:
        self._update_buttons()
        self.selection_changed.emit(self.selected_datasets())

    def _update_buttons(self) -> None:
        # An empty selection cannot be exported, imported or cleared
        enabled = bool(self.selected_datasets())
        for button in (self.export_button, self.import_button, self.clear_button):
            button.setEnabled(enabled)
