"""Service tracking the selected level and the active question."""

from __future__ import annotations

from quetris.core.models import Level, Question, QuizData


class LevelNavigator:
    """Bounds-checked cursor over levels and their questions."""

    def __init__(self, quiz_data: QuizData) -> None:
        self._quiz_data = quiz_data
        self._level_index: int = 0
        self._question_index: int = 0

    @property
    def level_index(self) -> int:
        return self._level_index

    @property
    def question_index(self) -> int:
        return self._question_index

    def level_count(self) -> int:
        return self._quiz_data.level_count()

    def max_level_index(self) -> int:
        return max(0, self.level_count() - 1)

    def prev_level(self) -> bool:
        """Select the previous level. Returns False at the first level."""
        if self._level_index <= 0:
            return False
        self._level_index -= 1
        return True

    def next_level(self) -> bool:
        """Select the next level. Returns False at the last level."""
        if self._level_index >= self.max_level_index():
            return False
        self._level_index += 1
        return True

    def current_level(self) -> Level | None:
        if 0 <= self._level_index < self.level_count():
            return self._quiz_data.levels[self._level_index]
        return None

    def current_question(self) -> Question | None:
        level = self.current_level()
        if level is None or not 0 <= self._question_index < len(level.questions):
            return None
        return level.questions[self._question_index]

    def question_count(self) -> int:
        level = self.current_level()
        return len(level.questions) if level else 0

    def is_last_question(self) -> bool:
        return self._question_index >= self.question_count() - 1

    def advance_question(self) -> bool:
        """Move to the next question. Returns False when the level is finished."""
        if self.is_last_question():
            return False
        self._question_index += 1
        return True

    def reset_questions(self) -> None:
        self._question_index = 0
