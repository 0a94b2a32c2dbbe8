"""Shared fixtures for SR2 Interactive Map tests."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest
from PySide6.QtCore import QCoreApplication

from sr2map.storage import MemoryStore
from sr2map.userdata import (
    DataSet,
    StateSyncBridge,
    UserDataCodec,
    UserDataState,
    UserDataStore,
)


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> Iterator[QCoreApplication]:
    """Signals and QSettings need a core application instance."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app  # type: ignore[misc]


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo handler changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    levels = {
        name: logging.getLogger(name).level for name in ("", "sr2map", "sr2map.userdata")
    }
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class ReloadRecorder:
    """Full-reload callback that counts calls and really reloads state."""

    def __init__(self, state: UserDataState, store: UserDataStore):
        self.state = state
        self.store = store
        self.count = 0

    def __call__(self) -> None:
        self.count += 1
        self.state.reload_from(self.store)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def user_store(memory_store: MemoryStore) -> UserDataStore:
    return UserDataStore(memory_store)


@pytest.fixture
def state() -> UserDataState:
    return UserDataState()


@pytest.fixture
def reloads(state: UserDataState, user_store: UserDataStore) -> ReloadRecorder:
    return ReloadRecorder(state, user_store)


@pytest.fixture
def codec(
    user_store: UserDataStore, state: UserDataState, reloads: ReloadRecorder
) -> UserDataCodec:
    """Codec wired like the main window: direct updates plus a full reload."""
    bridge = StateSyncBridge(
        reload=reloads,
        setters={
            DataSet.PLOTS: state.set_plots,
            DataSet.PINS: state.set_pins,
            DataSet.FOUND: state.merge_found,
        },
    )
    return UserDataCodec(user_store, bridge)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture
def sample_plots() -> List[Dict[str, Any]]:
    return [
        {"site": "conservatory-1", "plotPlans": [{"plot": "corral", "slime": "pink"}]},
        {"site": "rainbow-fields-2", "plotPlans": []},
    ]


@pytest.fixture
def sample_pins() -> List[Dict[str, Any]]:
    return [
        {"icon": "a", "pos": {"x": 1, "y": 2}, "dimension": "sr2"},
        {"icon": "star", "pos": {"x": -10.5, "y": 300.25}, "dimension": "sr1"},
    ]


@pytest.fixture
def sample_found() -> Dict[str, List[str]]:
    return {
        "found_gordos": ["gordo_pink", "gordo_tabby"],
        "found_locked_doors": [],
        "found_map_nodes": ["node_1"],
        "found_research_drones": ["drone_a"],
        "found_treasure_pods": ["pod_1", "pod_2", "pod_3"],
        "found_stabilizing_gates": [],
        "found_shadow_doors": ["shadow_1"],
    }
