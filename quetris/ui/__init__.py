"""Qt UI components for the game."""

from .dialog_helpers import show_error, show_info, show_warning
from .game_window import QuizGameWindow
from .qt_scheduler import QtScheduler

__all__ = [
    "QuizGameWindow",
    "QtScheduler",
    "show_error",
    "show_info",
    "show_warning",
]
