"""
User data package for SR2 Interactive Map.

Keeps the in-memory user data state consistent with persisted storage and
implements export, import and clear of the three datasets (plot plans,
user pins, found collectables).

Usage:
    from sr2map.userdata import DataSet, UserDataCodec

    codec.export({DataSet.PINS}).save(directory)
"""

from .models import (
    BACKUP_FILENAME,
    FOUND_KEYS,
    PINS_KEY,
    PLOTS_KEY,
    DataSet,
    MapType,
    Pin,
    describe_selection,
    empty_found,
    ordered_selection,
)
from .store import UserDataStore
from .state import UserDataState
from .sync import DirectUpdate, FullReload, Reconciler, StateSyncBridge
from .validators import (
    is_valid_found_export,
    is_valid_pins_export,
    is_valid_plot_export,
    matching_datasets,
    validate_dataset,
)
from .codec import ExportDocument, ImportResult, UserDataCodec

__all__ = [
    "BACKUP_FILENAME",
    "FOUND_KEYS",
    "PINS_KEY",
    "PLOTS_KEY",
    "DataSet",
    "MapType",
    "Pin",
    "describe_selection",
    "empty_found",
    "ordered_selection",
    "UserDataStore",
    "UserDataState",
    "DirectUpdate",
    "FullReload",
    "Reconciler",
    "StateSyncBridge",
    "is_valid_found_export",
    "is_valid_pins_export",
    "is_valid_plot_export",
    "matching_datasets",
    "validate_dataset",
    "ExportDocument",
    "ImportResult",
    "UserDataCodec",
]
