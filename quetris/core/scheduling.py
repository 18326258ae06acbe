"""Timer interface the engine schedules its tick and reveal delay through."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Stop the timer; a cancelled callback never fires again."""


class Scheduler(Protocol):
    """Host event loop capable of repeating and one-shot callbacks."""

    def call_repeating(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        ...

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        ...
