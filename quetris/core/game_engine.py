"""Game loop and grid-state engine shared by the Qt shell and the tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from functools import partial
import logging

from quetris.core.errors import GameStartError, GridConfigError
from quetris.core.game_config import GameConfig
from quetris.core.models import (
    CatcherState,
    CaughtResult,
    FallingOption,
    GamePhase,
    GridSnapshot,
    Level,
    Question,
    QuizData,
    SessionState,
)
from quetris.core.scheduling import Scheduler, TimerHandle
from quetris.core.services.fall_scheduler import FallScheduler
from quetris.core.services.navigator import LevelNavigator
from quetris.core.services.spawner import OptionSpawner

logger = logging.getLogger(__name__)

QuestionAnswerCallback = Callable[[int, bool], None]
LevelCompleteCallback = Callable[[int, int], None]


class QuizGameEngine:
    """Facade over navigator, spawner and fall scheduler.

    The engine is the single mutator of the session, the catcher, the live
    options and the caught result. Timer callbacks read those fields directly
    and carry the epoch they were scheduled in; any transition that changes
    the question, level or session cancels both timers and bumps the epoch,
    so a late callback from an earlier batch is ignored.
    """

    def __init__(
        self,
        quiz_data: QuizData,
        scheduler: Scheduler,
        config: GameConfig | None = None,
        *,
        on_question_answer: QuestionAnswerCallback | None = None,
        on_level_complete: LevelCompleteCallback | None = None,
        on_state_changed: Callable[[], None] | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._scheduler = scheduler
        self.on_question_answer = on_question_answer
        self.on_level_complete = on_level_complete
        self.on_state_changed = on_state_changed

        self._navigator = LevelNavigator(quiz_data)
        self._spawner = OptionSpawner(self._config.grid_columns, seed=seed)
        self._fall = FallScheduler(self._config.grid_rows)

        self._session = SessionState()
        self._catcher = CatcherState(column=self._config.default_catcher_column)
        self._caught: CaughtResult | None = None
        self._phase = GamePhase.LEVEL_SELECT
        self._can_fall = False
        self._grid_visible = False
        self._grid_animating = False
        self._loading = False

        self._tick_handle: TimerHandle | None = None
        self._reveal_handle: TimerHandle | None = None
        self._epoch = 0

    # --- Read access ---

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def session(self) -> SessionState:
        return replace(self._session)

    @property
    def catcher_column(self) -> int:
        return self._catcher.column

    @property
    def caught(self) -> CaughtResult | None:
        return self._caught

    @property
    def options(self) -> list[FallingOption]:
        return self._fall.options

    @property
    def can_fall(self) -> bool:
        return self._can_fall

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_ticking(self) -> bool:
        return self._tick_handle is not None

    def level_count(self) -> int:
        return self._navigator.level_count()

    def current_level(self) -> Level | None:
        return self._navigator.current_level()

    def current_question(self) -> Question | None:
        return self._navigator.current_question()

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            phase=self._phase,
            options=[
                FallingOption(text=o.text, column=o.column, row=o.row, key=o.key)
                for o in self._fall.options
            ],
            catcher_column=self._catcher.column,
            caught=self._caught,
            grid_visible=self._grid_visible,
            grid_animating=self._grid_animating,
        )

    # --- Level selection ---

    def prev_level(self) -> bool:
        if self._session.started:
            return False
        moved = self._navigator.prev_level()
        if moved:
            self._sync_indices()
            self._notify()
        return moved

    def next_level(self) -> bool:
        if self._session.started:
            return False
        moved = self._navigator.next_level()
        if moved:
            self._sync_indices()
            self._notify()
        return moved

    def apply_config(self, config: GameConfig) -> None:
        if self._session.started:
            raise GridConfigError("Grid settings can only change at level select.")
        self._config = config
        self._spawner.set_grid_columns(config.grid_columns)
        self._fall.set_grid_rows(config.grid_rows)
        self._catcher.column = config.default_catcher_column
        self._notify()

    # --- Session lifecycle ---

    def start(self) -> None:
        """Begin a session on the selected level, revealing the grid first."""
        if self._session.started:
            raise GameStartError("A session is already running.")
        level = self._navigator.current_level()
        if level is None or not level.questions:
            raise GameStartError("The selected level has no questions to play.")
        oversized = [q.id for q in level.questions if len(q.options) > self._config.grid_columns]
        if oversized:
            raise GridConfigError(
                f"Questions {oversized} have more options than the {self._config.grid_columns} grid columns."
            )

        self._reset_session()
        self._session.started = True
        logger.info("Starting level %s (%s)", level.id, level.title)
        try:
            self._spawn_current(reveal=True)
        except Exception:
            self._reset_session()
            raise

    def advance(self) -> bool:
        """Load the next question after a correct catch."""
        if self._phase is not GamePhase.CAUGHT or not self._caught or not self._caught.is_correct:
            return False
        if not self._navigator.advance_question():
            return False
        self._sync_indices()
        self._spawn_current(reveal=False)
        return True

    def retry(self) -> bool:
        """Re-spawn the current question after an incorrect catch."""
        if self._phase is not GamePhase.CAUGHT or not self._caught or self._caught.is_correct:
            return False
        logger.debug("Retrying question %s", self._session.current_question_index)
        self._spawn_current(reveal=False)
        return True

    def redrop(self) -> bool:
        """Re-spawn the current question after every option fell past the catcher."""
        if self._phase is not GamePhase.EXHAUSTED:
            return False
        self._spawn_current(reveal=False)
        return True

    def exit_to_level_select(self) -> bool:
        if not self._session.started:
            return False
        logger.info("Exiting to level select")
        self._reset_session()
        self._notify()
        return True

    def return_to_level_select(self) -> bool:
        """Leave the completion screen."""
        if self._phase is not GamePhase.COMPLETED:
            return False
        return self.exit_to_level_select()

    def shutdown(self) -> None:
        self._cancel_timers()

    def set_loading(self, loading: bool) -> None:
        """Gate input and pause falling while an external load is in progress."""
        if loading == self._loading:
            return
        self._loading = loading
        if loading:
            self._stop_ticking()
        elif self._phase is GamePhase.FALLING:
            self._start_ticking()
        self._notify()

    # --- Catcher and drop ---

    def catcher_movable(self) -> bool:
        return (
            self._phase in (GamePhase.REVEALING, GamePhase.FALLING)
            and self._caught is None
            and not self._loading
        )

    def move_catcher(self, delta: int) -> bool:
        return self.set_catcher_column(self._catcher.column + delta)

    def set_catcher_column(self, column: int) -> bool:
        if not self.catcher_movable():
            return False
        clamped = max(0, min(self._config.grid_columns - 1, column))
        if clamped == self._catcher.column:
            return False
        self._catcher.column = clamped
        self._notify()
        return True

    def drop(self) -> bool:
        """Send every live option to the last row; the next tick resolves it."""
        if (
            self._phase is not GamePhase.FALLING
            or not self._can_fall
            or self._caught is not None
            or self._loading
        ):
            return False
        self._fall.drop_all()
        self._notify()
        return True

    # --- Internals ---

    def _spawn_current(self, *, reveal: bool) -> None:
        question = self._navigator.current_question()
        if question is None:
            raise GameStartError("No question at the current position.")
        options = self._spawner.spawn(
            question,
            self._navigator.level_index,
            self._navigator.question_index,
        )

        self._cancel_timers()
        self._caught = None
        self._can_fall = False
        self._catcher.column = self._config.default_catcher_column
        self._fall.load(options)

        if reveal:
            self._grid_visible = True
            self._grid_animating = True
            self._phase = GamePhase.REVEALING
            self._reveal_handle = self._scheduler.call_later(
                self._config.reveal_delay_ms,
                partial(self._finish_reveal, self._epoch),
            )
        else:
            self._begin_falling()
        self._notify()

    def _finish_reveal(self, epoch: int) -> None:
        if epoch != self._epoch:
            return
        self._reveal_handle = None
        self._grid_animating = False
        self._begin_falling()
        self._notify()

    def _begin_falling(self) -> None:
        self._phase = GamePhase.FALLING
        self._can_fall = True
        self._start_ticking()

    def _start_ticking(self) -> None:
        if self._tick_handle is not None or self._loading or not self._can_fall:
            return
        self._tick_handle = self._scheduler.call_repeating(
            self._config.tick_interval_ms,
            partial(self._on_tick, self._epoch),
        )

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _cancel_timers(self) -> None:
        self._stop_ticking()
        if self._reveal_handle is not None:
            self._reveal_handle.cancel()
            self._reveal_handle = None
        self._epoch += 1

    def _on_tick(self, epoch: int) -> None:
        if epoch != self._epoch or self._phase is not GamePhase.FALLING:
            return
        question = self._navigator.current_question()
        if question is None:
            self._stop_ticking()
            return

        caught = self._fall.tick(self._catcher.column, question.answer)
        if caught is not None:
            self._resolve_catch(question, caught)
        elif self._fall.is_exhausted():
            self._stop_ticking()
            self._phase = GamePhase.EXHAUSTED
            logger.debug("All options of question %s were missed", question.id)
        self._notify()

    def _resolve_catch(self, question: Question, caught: CaughtResult) -> None:
        self._stop_ticking()
        self._caught = caught
        self._phase = GamePhase.CAUGHT
        logger.info(
            "Caught '%s' for question %s (%s)",
            caught.matched_text,
            question.id,
            "correct" if caught.is_correct else "wrong",
        )
        if self.on_question_answer is not None:
            self.on_question_answer(question.id, caught.is_correct)

        if not caught.is_correct:
            return
        self._session.score += 1
        if self._navigator.is_last_question():
            self._session.completed = True
            self._phase = GamePhase.COMPLETED
            level = self._navigator.current_level()
            if level is not None:
                logger.info("Level %s complete with score %d", level.id, self._session.score)
                if self.on_level_complete is not None:
                    self.on_level_complete(level.id, self._session.score)

    def _reset_session(self) -> None:
        self._cancel_timers()
        self._navigator.reset_questions()
        self._session = SessionState(current_level_index=self._navigator.level_index)
        self._catcher.column = self._config.default_catcher_column
        self._caught = None
        self._fall.clear()
        self._phase = GamePhase.LEVEL_SELECT
        self._can_fall = False
        self._grid_visible = False
        self._grid_animating = False

    def _sync_indices(self) -> None:
        self._session.current_level_index = self._navigator.level_index
        self._session.current_question_index = self._navigator.question_index

    def _notify(self) -> None:
        if self.on_state_changed is not None:
            self.on_state_changed()
