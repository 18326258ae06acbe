from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count

import pytest

from quetris.core.game_config import GameConfig
from quetris.core.game_engine import QuizGameEngine
from quetris.core.models import Level, Question, QuizData
from quetris.core.quiz_loader import parse_quiz_data


@dataclass
class FakeTimer:
    due_ms: int
    interval_ms: int
    callback: Callable[[], None]
    repeating: bool
    seq: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Manual clock: timers only fire inside `advance`."""

    now_ms: int = 0
    timers: list[FakeTimer] = field(default_factory=list)
    _seq: count = field(default_factory=count)

    def call_repeating(self, interval_ms: int, callback: Callable[[], None]) -> FakeTimer:
        return self._add(interval_ms, callback, repeating=True)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        return self._add(delay_ms, callback, repeating=False)

    def _add(self, interval_ms: int, callback: Callable[[], None], *, repeating: bool) -> FakeTimer:
        timer = FakeTimer(
            due_ms=self.now_ms + interval_ms,
            interval_ms=interval_ms,
            callback=callback,
            repeating=repeating,
            seq=next(self._seq),
        )
        self.timers.append(timer)
        return timer

    def active_timers(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [t for t in self.active_timers() if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            if timer.repeating:
                timer.due_ms += timer.interval_ms
            else:
                timer.cancelled = True
            timer.callback()
        self.now_ms = target


def make_quiz(*levels: list[tuple[list[str], str]]) -> QuizData:
    """Build quiz data from per-level lists of (options, answer) pairs."""
    question_ids = count(1)
    built = []
    for level_number, questions in enumerate(levels, start=1):
        built.append(
            Level(
                id=level_number * 100,
                title=f"Level {level_number}",
                questions=tuple(
                    Question(id=next(question_ids), text=f"Question {i}", options=tuple(options), answer=answer)
                    for i, (options, answer) in enumerate(questions, start=1)
                ),
            )
        )
    return QuizData(levels=tuple(built))


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def single_question_quiz() -> QuizData:
    return make_quiz([(["A", "B", "C", "D"], "B")])


@pytest.fixture()
def two_question_quiz() -> QuizData:
    return make_quiz(
        [(["A", "B", "C", "D"], "B"), (["yes", "no"], "yes")],
        [(["1", "2", "3"], "3")],
    )


@dataclass
class EngineRecorder:
    answers: list[tuple[int, bool]] = field(default_factory=list)
    completions: list[tuple[int, int]] = field(default_factory=list)
    state_changes: int = 0

    def on_question_answer(self, question_id: int, is_correct: bool) -> None:
        self.answers.append((question_id, is_correct))

    def on_level_complete(self, level_id: int, score: int) -> None:
        self.completions.append((level_id, score))

    def on_state_changed(self) -> None:
        self.state_changes += 1


@pytest.fixture()
def recorder() -> EngineRecorder:
    return EngineRecorder()


@pytest.fixture()
def make_engine(scheduler: FakeScheduler, config: GameConfig, recorder: EngineRecorder):
    def _make(quiz_data: QuizData, game_config: GameConfig | None = None, seed: int | None = 7) -> QuizGameEngine:
        return QuizGameEngine(
            quiz_data,
            scheduler,
            game_config or config,
            on_question_answer=recorder.on_question_answer,
            on_level_complete=recorder.on_level_complete,
            on_state_changed=recorder.on_state_changed,
            seed=seed,
        )

    return _make


@pytest.fixture()
def sample_payload() -> dict:
    return {
        "levels": [
            {
                "id": 1,
                "title": "Basics",
                "questions": [
                    {"id": 10, "question": "2 + 2?", "options": ["3", "4", "5"], "answer": "4"},
                    {"id": 11, "question": "Capital of France?", "options": ["Paris", "Rome"], "answer": "Paris"},
                ],
            },
            {
                "id": 2,
                "title": "More",
                "questions": [
                    {"id": 20, "question": "Pick B", "options": ["A", "B"], "answer": "B"},
                ],
            },
        ]
    }


@pytest.fixture()
def sample_quiz(sample_payload: dict) -> QuizData:
    return parse_quiz_data(sample_payload)
