"""Series Renamer GUI Package."""
from .main_window import MainWindow
from .theme import DARK_STYLESHEET

__all__ = [
    "MainWindow",
    "DARK_STYLESHEET",
]
