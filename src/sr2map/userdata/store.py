"""
Typed access to the persisted user datasets.
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from ..storage import KeyValueStore
from .models import (
    FOUND_KEYS,
    PINS_KEY,
    PLOTS_KEY,
    DataSet,
    FoundMap,
    PinRecord,
    PlotPlan,
    empty_found,
)


class UserDataStore:
    """Reads and writes plot plans, user pins and found records.

    Wraps a KeyValueStore with the fixed key layout and dataset-appropriate
    empty defaults. Found data spans seven keys, one per category.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # === READ ===

    def plots(self) -> List[PlotPlan]:
        """Get stored plot plans (empty list if missing or corrupt)."""
        return self.store.read(PLOTS_KEY, [])

    def pins(self) -> List[PinRecord]:
        """Get stored user pins in placement order."""
        return self.store.read(PINS_KEY, [])

    def found(self) -> FoundMap:
        """Get all found categories keyed by their storage key."""
        return {key: self.store.read(key, []) for key in FOUND_KEYS}

    def read_dataset(self, dataset: DataSet) -> Any:
        if dataset is DataSet.PLOTS:
            return self.plots()
        if dataset is DataSet.PINS:
            return self.pins()
        return self.found()

    def snapshot(self, datasets: Tuple[DataSet, ...]) -> Dict[DataSet, Any]:
        """Read several datasets at once, keyed by dataset."""
        return {dataset: self.read_dataset(dataset) for dataset in datasets}

    # === WRITE ===

    def write_plots(self, plots: List[PlotPlan]) -> None:
        self.store.write(PLOTS_KEY, plots)

    def write_pins(self, pins: List[PinRecord]) -> None:
        self.store.write(PINS_KEY, pins)

    def write_found(self, patch: Mapping[str, Any]) -> Tuple[str, ...]:
        """Write the known found keys present in ``patch``.

        Keys are written in the fixed category order; unknown keys are ignored.

        Returns:
            The found keys that were written
        """
        written: List[str] = []
        for key in FOUND_KEYS:
            if key in patch and patch[key] is not None:
                self.store.write(key, patch[key])
                written.append(key)

        ignored = set(patch) - set(FOUND_KEYS)
        if ignored:
            self.logger.debug(f"Ignored unknown found keys: {sorted(ignored)}")

        return tuple(written)

    def write_dataset(self, dataset: DataSet, value: Any) -> None:
        if dataset is DataSet.PLOTS:
            self.write_plots(value)
        elif dataset is DataSet.PINS:
            self.write_pins(value)
        else:
            self.write_found(value)

    @staticmethod
    def empty_value(dataset: DataSet) -> Any:
        """Return the value a cleared dataset holds."""
        if dataset is DataSet.FOUND:
            return empty_found()
        return []
