"""
Data models for persisted user data.

Records travel through the application as plain JSON dicts and lists, the
same shape they have on disk and in export files. The TypedDict definitions
below document that shape; ``Pin`` is the only record built in code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple, TypeAlias, TypedDict, Union


class MapType(str, Enum):
    """Identifier of a game map (the pin "dimension")."""

    SR1 = "sr1"
    SR2 = "sr2"

    @property
    def display_name(self) -> str:
        return "Slime Rancher" if self is MapType.SR1 else "Slime Rancher 2"


class DataSet(str, Enum):
    """The three independently persisted and exported datasets.

    Member order is the canonical processing order for every operation
    that touches more than one dataset: plots, then pins, then found.
    """

    PLOTS = "plots"
    PINS = "pins"
    FOUND = "found"

    @property
    def label(self) -> str:
        """Human readable name used in dialogs and error messages."""
        return _DATASET_LABELS[self]

    @property
    def backup_field(self) -> str:
        """Top-level field name inside a composite backup document."""
        return self.value

    @property
    def export_filename(self) -> str:
        """Fixed filename used when this dataset is exported on its own."""
        return _DATASET_FILENAMES[self]


_DATASET_LABELS = {
    DataSet.PLOTS: "plot plans",
    DataSet.PINS: "user pins",
    DataSet.FOUND: "found collectables",
}

_DATASET_FILENAMES = {
    DataSet.PLOTS: "plot_plans.json",
    DataSet.PINS: "user_pins.json",
    DataSet.FOUND: "found_data.json",
}

BACKUP_FILENAME = "sr2_interactivemap_backup.json"

# Persisted key layout
PLOTS_KEY = "planned_plots"
PINS_KEY = "user_pins"

GORDO_KEY = "found_gordos"
LOCKED_DOOR_KEY = "found_locked_doors"
MAP_NODE_KEY = "found_map_nodes"
RESEARCH_DRONE_KEY = "found_research_drones"
TREASURE_POD_KEY = "found_treasure_pods"
STABILIZING_GATE_KEY = "found_stabilizing_gates"
SHADOW_DOOR_KEY = "found_shadow_doors"

FOUND_KEYS: Tuple[str, ...] = (
    GORDO_KEY,
    LOCKED_DOOR_KEY,
    MAP_NODE_KEY,
    RESEARCH_DRONE_KEY,
    TREASURE_POD_KEY,
    STABILIZING_GATE_KEY,
    SHADOW_DOOR_KEY,
)


class Position(TypedDict):
    x: float
    y: float


class PinRecord(TypedDict):
    icon: str
    pos: Position
    dimension: str


class PlotPlan(TypedDict):
    site: str
    plotPlans: List[Any]


FoundMap: TypeAlias = Dict[str, List[Any]]
"""Maps a found key to the identifiers discovered in that category."""

CompositeBackup: TypeAlias = Dict[str, Any]
"""Export document with optional ``plots``, ``pins`` and ``found`` fields."""


@dataclass(frozen=True)
class Pin:
    """A pin placed on the map by the user."""

    icon: str
    x: float
    y: float
    dimension: MapType

    def to_record(self) -> PinRecord:
        return {
            "icon": self.icon,
            "pos": {"x": self.x, "y": self.y},
            "dimension": self.dimension.value,
        }


def empty_found() -> FoundMap:
    """Return a found map with every known key set to an empty list."""
    return {key: [] for key in FOUND_KEYS}


def ordered_selection(datasets: Iterable[Union[DataSet, str]]) -> Tuple[DataSet, ...]:
    """Normalize a dataset selection to a duplicate-free canonical order.

    Accepts enum members or their string values ("plots", "pins", "found").

    Raises:
        ValueError: If a value does not name a dataset
    """
    selected = {DataSet(dataset) for dataset in datasets}
    return tuple(dataset for dataset in DataSet if dataset in selected)


def describe_selection(datasets: Iterable[Union[DataSet, str]]) -> str:
    """Return "plot plans and user pins" style text for confirmation dialogs."""
    labels = [dataset.label for dataset in ordered_selection(datasets)]
    if len(labels) <= 1:
        return "".join(labels)
    return f"{', '.join(labels[:-1])} and {labels[-1]}"
