"""Utility helpers for SR2 Interactive Map."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
