"""
Reconciliation of in-memory state after storage writes.

Two strategies share one contract:

- ``DirectUpdate`` hands the new value to a state setter
- ``FullReload`` re-derives all state from storage

A direct update that raises falls back to a full reload. Multi-key writes
(imports) always use the full reload since the writes are not atomic.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Protocol

from .models import DataSet

if TYPE_CHECKING:
    from .state import UserDataState
    from .store import UserDataStore

logger = logging.getLogger(__name__)


class Reconciler(Protocol):
    """Brings in-memory state in line with a dataset's new stored value."""

    def reconcile(self, dataset: DataSet, value: Any) -> None: ...


class FullReload:
    """Reconcile by reloading everything from storage."""

    def __init__(self, reload: Callable[[], None]):
        self._reload = reload

    def reconcile(self, dataset: DataSet, value: Any) -> None:
        logger.info(f"Full reload after {dataset.label} change")
        self.run()

    def run(self) -> None:
        self._reload()


class DirectUpdate:
    """Reconcile by applying the new value through a state setter."""

    def __init__(self, apply: Callable[[Any], None], fallback: FullReload):
        self._apply = apply
        self._fallback = fallback

    def reconcile(self, dataset: DataSet, value: Any) -> None:
        try:
            self._apply(value)
        except Exception:
            logger.exception(
                f"Direct update of {dataset.label} failed, falling back to full reload"
            )
            self._fallback.reconcile(dataset, value)
        else:
            logger.debug(f"Applied direct update to {dataset.label}")


class StateSyncBridge:
    """Chooses a reconciliation strategy per dataset.

    Args:
        reload: Callable that re-derives all state from storage
        setters: Optional per-dataset direct-update callbacks. Datasets without
            a setter are reconciled with a full reload.
    """

    def __init__(
        self,
        reload: Callable[[], None],
        setters: Optional[Mapping[DataSet, Callable[[Any], None]]] = None,
    ):
        self._full_reload = FullReload(reload)
        self._strategies: Dict[DataSet, Reconciler] = {}
        for dataset, setter in (setters or {}).items():
            if setter is not None:
                self._strategies[dataset] = DirectUpdate(setter, self._full_reload)

    @classmethod
    def for_state(
        cls, state: "UserDataState", store: "UserDataStore"
    ) -> "StateSyncBridge":
        """Wire a bridge to the shared state object.

        Plots and pins are replaced, found data is merged so that unrelated
        found-state fields survive.
        """
        return cls(
            reload=lambda: state.reload_from(store),
            setters={
                DataSet.PLOTS: state.set_plots,
                DataSet.PINS: state.set_pins,
                DataSet.FOUND: state.merge_found,
            },
        )

    def for_dataset(self, dataset: DataSet) -> Reconciler:
        return self._strategies.get(dataset, self._full_reload)

    def reconcile(self, dataset: DataSet, value: Any) -> None:
        self.for_dataset(dataset).reconcile(dataset, value)

    def reload(self) -> None:
        """Unconditional full reload (used after multi-key writes)."""
        logger.info("Full reload requested")
        self._full_reload.run()
