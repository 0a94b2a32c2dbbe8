"""
Exception types for SR2 Interactive Map user data handling.

All failures raised by the storage, import/export and clear layers derive from
``UserDataError`` so that GUI actions can catch them at a single boundary.
"""

from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from .userdata.models import DataSet


class UserDataError(Exception):
    """Base class for user data synchronization failures."""
    pass


class ParseError(UserDataError):
    """Raised when an imported document is empty or not valid JSON.

    Always raised before anything is written to storage.
    """
    pass


class FormatError(UserDataError):
    """Raised when parsed JSON does not match a dataset's expected shape.

    Attributes:
        datasets: Datasets whose content was rejected
        applied: Datasets from the same document that were still written
    """

    def __init__(
        self,
        datasets: Iterable["DataSet"],
        applied: Iterable["DataSet"] = (),
    ) -> None:
        self.datasets: Tuple["DataSet", ...] = tuple(datasets)
        self.applied: Tuple["DataSet", ...] = tuple(applied)
        names = ", ".join(dataset.label for dataset in self.datasets) or "user data"
        super().__init__(f"Invalid {names} format.")


class StorageError(UserDataError):
    """Raised when the storage backend rejects a write (quota, access, format)."""
    pass


class EmptySelectionError(UserDataError):
    """Raised when an export, import or clear is requested without datasets."""

    def __init__(self, action: str = "this action") -> None:
        self.action = action
        super().__init__(f"Select at least one dataset for {action}.")
