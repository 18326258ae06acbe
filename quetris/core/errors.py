"""Exception hierarchy shared by the engine, loaders and UI."""

from __future__ import annotations


class QuetrisError(Exception):
    """Base class for all game errors."""


class QuizDataError(QuetrisError):
    """Raised when quiz content is missing, malformed or could not be fetched."""


class GridConfigError(QuetrisError):
    """Raised when grid or timing parameters cannot host the current question."""


class GameStartError(QuetrisError):
    """Raised when a session cannot start from the selected level."""
