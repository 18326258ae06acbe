"""Descent and catch detection for the live batch of falling options."""

from __future__ import annotations

from quetris.core.models import CaughtResult, FallingOption


class FallScheduler:
    """Owns the live options and advances them one row per tick.

    A tick is one atomic step: every option descends a row, then the catch
    scan runs against the new rows. An option is caught when it is on (or
    past) the last row in the catcher's column. Only the first such option
    counts; any further candidate is dropped as missed, as is every option
    that has left the grid.
    """

    def __init__(self, grid_rows: int) -> None:
        self._grid_rows = grid_rows
        self._options: list[FallingOption] = []

    @property
    def options(self) -> list[FallingOption]:
        return list(self._options)

    @property
    def last_row(self) -> int:
        return self._grid_rows - 1

    def set_grid_rows(self, grid_rows: int) -> None:
        self._grid_rows = grid_rows

    def load(self, options: list[FallingOption]) -> None:
        self._options = list(options)

    def clear(self) -> None:
        self._options = []

    def is_exhausted(self) -> bool:
        return not self._options

    def descend(self) -> None:
        for option in self._options:
            option.row += 1

    def drop_all(self) -> None:
        """Move every live option straight to the last row."""
        for option in self._options:
            option.row = self.last_row

    def scan(self, catcher_column: int, answer: str) -> CaughtResult | None:
        caught: CaughtResult | None = None
        remaining: list[FallingOption] = []
        for option in self._options:
            if option.row >= self.last_row and option.column == catcher_column:
                if caught is None:
                    caught = CaughtResult(is_correct=option.text == answer, matched_text=option.text)
                continue
            if option.row < self._grid_rows:
                remaining.append(option)
        self._options = remaining
        return caught

    def tick(self, catcher_column: int, answer: str) -> CaughtResult | None:
        self.descend()
        return self.scan(catcher_column, answer)
