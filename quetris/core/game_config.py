"""Tunable grid and timing parameters."""

from __future__ import annotations

from dataclasses import dataclass, replace

from quetris.constants.game_constants import (
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_GRID_COLUMNS,
    MAX_GRID_ROWS,
    MAX_TICK_INTERVAL_MS,
    MIN_GRID_COLUMNS,
    MIN_GRID_ROWS,
    MIN_TICK_INTERVAL_MS,
    REVEAL_DELAY_MS,
    SWIPE_THRESHOLD_PX,
    TICK_INTERVAL_MS,
)
from quetris.core.errors import GridConfigError


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Grid size, tick period and input thresholds used by one engine."""

    grid_columns: int = GRID_COLUMNS
    grid_rows: int = GRID_ROWS
    tick_interval_ms: int = TICK_INTERVAL_MS
    reveal_delay_ms: int = REVEAL_DELAY_MS
    swipe_threshold_px: int = SWIPE_THRESHOLD_PX

    def __post_init__(self) -> None:
        if not MIN_GRID_COLUMNS <= self.grid_columns <= MAX_GRID_COLUMNS:
            raise GridConfigError(
                f"Grid columns must be between {MIN_GRID_COLUMNS} and {MAX_GRID_COLUMNS}."
            )
        if not MIN_GRID_ROWS <= self.grid_rows <= MAX_GRID_ROWS:
            raise GridConfigError(
                f"Grid rows must be between {MIN_GRID_ROWS} and {MAX_GRID_ROWS}."
            )
        if not MIN_TICK_INTERVAL_MS <= self.tick_interval_ms <= MAX_TICK_INTERVAL_MS:
            raise GridConfigError(
                f"Tick interval must be between {MIN_TICK_INTERVAL_MS} and {MAX_TICK_INTERVAL_MS} ms."
            )
        if self.reveal_delay_ms < 0:
            raise GridConfigError("Reveal delay cannot be negative.")
        if self.swipe_threshold_px <= 0:
            raise GridConfigError("Swipe threshold must be a positive number of pixels.")

    @property
    def last_row(self) -> int:
        return self.grid_rows - 1

    @property
    def default_catcher_column(self) -> int:
        """Centre-left column, e.g. 1 in a 4-wide grid."""
        return (self.grid_columns - 1) // 2

    def with_changes(self, **changes: int) -> GameConfig:
        return replace(self, **changes)
