"""
Export, import and clear of user datasets.

Export always produces a composite backup document. Import accepts either a
composite backup or a single-dataset document (a bare plot or pin list, or a
flat found map) and merges it into storage: datasets that are not both
present in the document and selected by the user are left untouched.
"""

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import orjson

from ..errors import EmptySelectionError, FormatError, ParseError
from .models import (
    BACKUP_FILENAME,
    CompositeBackup,
    DataSet,
    ordered_selection,
)
from .store import UserDataStore
from .sync import StateSyncBridge
from .validators import matching_datasets, validate_dataset

Selection = Iterable[Union[DataSet, str]]

_LIST_DATASETS = (DataSet.PLOTS, DataSet.PINS)


@dataclass(frozen=True)
class ExportDocument:
    """Serialized export ready to be saved.

    Attributes:
        filename: Fixed filename for the selected datasets
        backup: Composite backup; unselected fields are None
    """

    filename: str
    backup: CompositeBackup

    def to_bytes(self) -> bytes:
        """UTF-8 JSON with two-space indentation."""
        return orjson.dumps(self.backup, option=orjson.OPT_INDENT_2)

    def save(self, target: Union[str, Path]) -> Path:
        """Write the document to ``target``.

        If ``target`` is a directory the fixed filename is used inside it.

        Returns:
            Path of the written file
        """
        path = Path(target)
        if path.is_dir():
            path = path / self.filename
        path.write_bytes(self.to_bytes())
        return path


@dataclass
class ImportResult:
    """Outcome of a successful (possibly partial) import."""

    applied: Tuple[DataSet, ...] = ()
    found_keys: Tuple[str, ...] = ()
    skipped: Tuple[DataSet, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.applied)


def parse_document(text: Union[str, bytes]) -> Any:
    """Parse an import document.

    Raises:
        ParseError: If the document is blank or not valid JSON
    """
    # A leading UTF-8 byte order mark is dropped, as text decoding would
    if isinstance(text, bytes):
        if text.startswith(codecs.BOM_UTF8):
            text = text[len(codecs.BOM_UTF8):]
    elif text.startswith("\ufeff"):
        text = text[1:]

    if not text or not text.strip():
        raise ParseError("Empty file.")
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"File is not valid JSON: {e}") from e


def is_composite(document: Any) -> bool:
    """A composite backup is an object with at least one backup field."""
    return isinstance(document, dict) and any(
        dataset.backup_field in document for dataset in DataSet
    )


class UserDataCodec:
    """Moves datasets between storage, export documents and in-memory state."""

    def __init__(self, store: UserDataStore, bridge: StateSyncBridge):
        self.store = store
        self.bridge = bridge
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def _selection(datasets: Selection, action: str) -> Tuple[DataSet, ...]:
        selection = ordered_selection(datasets)
        if not selection:
            raise EmptySelectionError(action)
        return selection

    # === EXPORT ===

    def export(self, datasets: Selection) -> ExportDocument:
        """Build a composite backup holding only the selected datasets."""
        selection = self._selection(datasets, "export")

        backup: CompositeBackup = {dataset.backup_field: None for dataset in DataSet}
        for dataset, value in self.store.snapshot(selection).items():
            backup[dataset.backup_field] = value

        filename = (
            selection[0].export_filename if len(selection) == 1 else BACKUP_FILENAME
        )
        self.logger.info(
            f"Exporting {', '.join(d.value for d in selection)} as {filename}"
        )
        return ExportDocument(filename=filename, backup=backup)

    # === IMPORT ===

    def import_file(self, path: Union[str, Path], datasets: Selection) -> ImportResult:
        """Read ``path`` and import it (see import_text)."""
        path = Path(path)
        self.logger.info(f"Importing user data from {path}")
        return self.import_text(path.read_bytes(), datasets)

    def import_text(
        self, text: Union[str, bytes], datasets: Selection
    ) -> ImportResult:
        """Import a document into storage and reload state.

        Raises:
            EmptySelectionError: If no dataset is selected
            ParseError: If the document is not JSON (nothing is written)
            FormatError: If a selected dataset fails validation. Valid
                datasets of a composite document are written before raising.
                A bare list that fits more than one selected dataset is
                rejected without writing.
            StorageError: If storage rejects a write (may leave a partial import)
        """
        selection = self._selection(datasets, "import")
        document = parse_document(text)

        if is_composite(document):
            return self._import_composite(document, selection)
        return self._import_single(document, selection)

    def _import_composite(
        self, document: CompositeBackup, selection: Tuple[DataSet, ...]
    ) -> ImportResult:
        applied: List[DataSet] = []
        rejected: List[DataSet] = []
        skipped: List[DataSet] = []
        found_keys: Tuple[str, ...] = ()

        for dataset in selection:
            payload = document.get(dataset.backup_field)
            if payload is None:
                self.logger.debug(f"Backup has no {dataset.label}, leaving as is")
                skipped.append(dataset)
                continue

            try:
                validate_dataset(dataset, payload)
            except FormatError:
                self.logger.warning(f"Backup contains invalid {dataset.label}")
                rejected.append(dataset)
                continue

            if dataset is DataSet.FOUND:
                found_keys = self.store.write_found(payload)
            else:
                self.store.write_dataset(dataset, payload)
            applied.append(dataset)

        unselected = [
            d for d in DataSet
            if d not in selection and document.get(d.backup_field) is not None
        ]
        if unselected:
            self.logger.debug(
                f"Ignoring unselected backup fields: {[d.value for d in unselected]}"
            )

        self._finish(applied)
        if rejected:
            raise FormatError(rejected, applied=applied)

        return ImportResult(
            applied=tuple(applied), found_keys=found_keys, skipped=tuple(skipped)
        )

    def _import_single(
        self, document: Any, selection: Tuple[DataSet, ...]
    ) -> ImportResult:
        applied: List[DataSet] = []
        found_keys: Tuple[str, ...] = ()

        if isinstance(document, list):
            # A bare list must belong to exactly one selected list dataset
            candidates = [d for d in selection if d in _LIST_DATASETS]
            accepting = matching_datasets(document, candidates)
            if len(accepting) > 1:
                self.logger.warning(
                    f"List matches more than one selected dataset: "
                    f"{[d.value for d in accepting]}"
                )
                raise FormatError(accepting)
            for dataset in accepting:
                self.store.write_dataset(dataset, document)
                applied.append(dataset)
        elif DataSet.FOUND in selection and matching_datasets(document, [DataSet.FOUND]):
            found_keys = self.store.write_found(document)
            applied.append(DataSet.FOUND)

        if not applied:
            self.logger.warning(
                f"Document matches none of the selected datasets: "
                f"{[d.value for d in selection]}"
            )
            raise FormatError(selection)

        self._finish(applied)
        return ImportResult(applied=tuple(applied), found_keys=found_keys)

    def _finish(self, applied: List[DataSet]) -> None:
        if not applied:
            return
        self.logger.info(f"Imported {', '.join(d.label for d in applied)}")
        self.bridge.reload()

    # === CLEAR ===

    def clear(self, datasets: Selection) -> Tuple[DataSet, ...]:
        """Reset the selected datasets to empty, in storage and in state.

        Confirmation is the caller's job; there is no way back.

        Returns:
            The cleared datasets in processing order
        """
        selection = self._selection(datasets, "clear")

        for dataset in selection:
            empty = self.store.empty_value(dataset)
            self.store.write_dataset(dataset, empty)
            self.logger.info(f"Cleared {dataset.label}")
            self.bridge.reconcile(dataset, empty)

        return selection

    def dataset_sizes(self, datasets: Optional[Selection] = None) -> Dict[DataSet, int]:
        """Count stored records per dataset (found counts all identifiers)."""
        selection = ordered_selection(datasets) if datasets else tuple(DataSet)
        sizes: Dict[DataSet, int] = {}
        for dataset, value in self.store.snapshot(selection).items():
            if dataset is DataSet.FOUND:
                sizes[dataset] = sum(len(ids) for ids in value.values())
            else:
                sizes[dataset] = len(value)
        return sizes
