"""
SR2 Interactive Map: map companion for Slime Rancher 2

Place pins, plan plots and track found collectables, with export, import
and reset of all user data.
"""

__version__ = "0.1.0"
__author__ = "SR2 Interactive Map Contributors"

from .errors import (
    EmptySelectionError,
    FormatError,
    ParseError,
    StorageError,
    UserDataError,
)
from .utils.logging_config import setup_logging

__all__ = [
    "EmptySelectionError",
    "FormatError",
    "ParseError",
    "StorageError",
    "UserDataError",
    "setup_logging",
]
