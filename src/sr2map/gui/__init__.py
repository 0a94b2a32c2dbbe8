"""
GUI components for SR2 Interactive Map.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
