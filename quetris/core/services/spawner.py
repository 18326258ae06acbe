"""Service that materialises a question's options as falling entities."""

from __future__ import annotations

from itertools import count
import random

from quetris.core.errors import GridConfigError, QuizDataError
from quetris.core.models import FallingOption, Question


class OptionSpawner:
    """Places each option in its own random column at the top row."""

    def __init__(self, grid_columns: int, seed: int | None = None) -> None:
        self._grid_columns = grid_columns
        self._rng = random.Random(seed)
        self._serial = count()

    def set_grid_columns(self, grid_columns: int) -> None:
        self._grid_columns = grid_columns

    def spawn(self, question: Question, level_index: int, question_index: int) -> list[FallingOption]:
        option_count = len(question.options)
        if option_count > self._grid_columns:
            raise GridConfigError(
                f"Question {question.id} has {option_count} options but the grid "
                f"only has {self._grid_columns} columns."
            )
        if question.answer not in question.options:
            raise QuizDataError(f"Question {question.id} has no option matching its answer.")

        columns = list(range(self._grid_columns))
        self._rng.shuffle(columns)

        batch = next(self._serial)
        return [
            FallingOption(
                text=option,
                column=columns[index],
                row=0,
                key=f"{level_index}-{question_index}-{index}-{batch}",
            )
            for index, option in enumerate(question.options)
        ]
