"""Normalises keyboard, pointer and touch input into game actions."""

from __future__ import annotations

from enum import Enum, auto
import logging

from quetris.core.game_engine import QuizGameEngine
from quetris.core.models import GamePhase

logger = logging.getLogger(__name__)


class GameAction(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    DROP = auto()
    CONFIRM = auto()
    CANCEL = auto()


KEY_BINDINGS: dict[str, GameAction] = {
    "Left": GameAction.MOVE_LEFT,
    "Right": GameAction.MOVE_RIGHT,
    "Down": GameAction.DROP,
    "Return": GameAction.CONFIRM,
    "Enter": GameAction.CONFIRM,
    "Escape": GameAction.CANCEL,
}


class SwipeDetector:
    """Turns a vertical touch gesture into a drop.

    Only the downward displacement matters; horizontal swipes are ignored
    because lateral movement is covered by clicks and the keyboard.
    """

    def __init__(self, threshold_px: int) -> None:
        self.threshold_px = threshold_px
        self._start_y: float | None = None

    def begin(self, y: float) -> None:
        self._start_y = y

    def end(self, y: float) -> GameAction | None:
        if self._start_y is None:
            return None
        delta_y = y - self._start_y
        self._start_y = None
        if delta_y > self.threshold_px:
            return GameAction.DROP
        return None

    def cancel(self) -> None:
        self._start_y = None


class InputArbiter:
    """Decides what each action means for the engine's current phase."""

    def __init__(self, engine: QuizGameEngine) -> None:
        self.engine = engine
        self.swipe = SwipeDetector(engine.config.swipe_threshold_px)

    def handle_key(self, key_name: str) -> bool:
        action = KEY_BINDINGS.get(key_name)
        if action is None:
            return False
        return self.handle_action(action)

    def handle_column_click(self, column: int) -> bool:
        return self.engine.set_catcher_column(column)

    def handle_touch_start(self, y: float) -> None:
        self.swipe.threshold_px = self.engine.config.swipe_threshold_px
        self.swipe.begin(y)

    def handle_touch_end(self, y: float) -> bool:
        action = self.swipe.end(y)
        if action is None:
            return False
        return self.handle_action(action)

    def handle_action(self, action: GameAction) -> bool:
        """Apply `action`; returns True when it changed the game."""
        engine = self.engine
        phase = engine.phase

        if phase is GamePhase.LEVEL_SELECT:
            if action is GameAction.MOVE_LEFT:
                return engine.prev_level()
            if action is GameAction.MOVE_RIGHT:
                return engine.next_level()
            if action is GameAction.CONFIRM:
                engine.start()
                return True
            return False

        if action is GameAction.CANCEL:
            return engine.exit_to_level_select()

        if phase is GamePhase.COMPLETED:
            return action is GameAction.CONFIRM and engine.return_to_level_select()

        if phase is GamePhase.CAUGHT:
            if action is not GameAction.CONFIRM:
                return False
            caught = engine.caught
            return engine.advance() if caught and caught.is_correct else engine.retry()

        if phase is GamePhase.EXHAUSTED:
            return action is GameAction.CONFIRM and engine.redrop()

        if action is GameAction.MOVE_LEFT:
            return engine.move_catcher(-1)
        if action is GameAction.MOVE_RIGHT:
            return engine.move_catcher(1)
        if action is GameAction.DROP:
            return engine.drop()
        logger.debug("Ignoring %s during %s", action.name, phase.name)
        return False
