"""Domain models for the falling-option quiz game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question whose answer is one of its option strings."""

    id: int
    text: str
    options: tuple[str, ...]
    answer: str


@dataclass(frozen=True, slots=True)
class Level:
    """Ordered group of questions played as one session."""

    id: int
    title: str
    questions: tuple[Question, ...]


@dataclass(frozen=True, slots=True)
class QuizData:
    """Read-only quiz content supplied once per session."""

    levels: tuple[Level, ...]

    def level_count(self) -> int:
        return len(self.levels)


@dataclass(slots=True)
class FallingOption:
    """An answer option currently travelling down the grid."""

    text: str
    column: int
    row: int
    key: str


@dataclass(slots=True)
class CatcherState:
    column: int


@dataclass(frozen=True, slots=True)
class CaughtResult:
    """Outcome of the single catch allowed per question attempt."""

    is_correct: bool
    matched_text: str


@dataclass(slots=True)
class SessionState:
    """Top-level play-through state, reset on exit or a new start."""

    started: bool = False
    current_level_index: int = 0
    current_question_index: int = 0
    score: int = 0
    completed: bool = False


class GamePhase(Enum):
    """Coarse engine phase used for input gating and rendering."""

    LEVEL_SELECT = auto()
    REVEALING = auto()  # grid sliding in, falling not yet permitted
    FALLING = auto()
    EXHAUSTED = auto()  # every option left the grid uncaught
    CAUGHT = auto()
    COMPLETED = auto()


@dataclass(slots=True)
class GridSnapshot:
    """Point-in-time copy of the grid handed to the renderer."""

    phase: GamePhase
    options: list[FallingOption] = field(default_factory=list)
    catcher_column: int = 0
    caught: CaughtResult | None = None
    grid_visible: bool = False
    grid_animating: bool = False
