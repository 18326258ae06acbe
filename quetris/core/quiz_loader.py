"""Utilities for turning raw quiz payloads into validated domain models.

Payload format (JSON, identical to what the remote store returns once the
level and question tables are joined):

    {
      "levels": [
        {
          "id": 1,
          "title": "Basics",
          "questions": [
            {"id": 10, "question": "2 + 2?", "options": ["3", "4"], "answer": "4"}
          ]
        }
      ]
    }

Architecture note:
    Validation happens once, at load time, so the engine can assume every
    question it sees has distinct options and an answer that is one of them.
    Field shapes are checked by the pydantic records below, which the
    Supabase source reuses for its rows; `build_question` adds the rules that
    span fields. The spawner re-checks the answer for `Question` objects
    built directly.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from quetris.core.errors import QuizDataError
from quetris.core.models import Level, Question, QuizData

_MIN_OPTIONS = 2

_RecordT = TypeVar("_RecordT", bound=BaseModel)


class QuestionRecord(BaseModel):
    """One question as stored in a quiz file or the `questions` table."""

    id: int
    question: str
    options: list[str]
    answer: str


class LevelRecord(BaseModel):
    """Level header shared by quiz files and the `levels` table."""

    id: int
    title: str


class LevelPayload(LevelRecord):
    questions: list[QuestionRecord]


class QuizPayload(BaseModel):
    levels: list[LevelPayload]


def load_quiz_from_file(file_path: Path) -> QuizData:
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise QuizDataError(f"{file_path.name} is not UTF-8 text: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise QuizDataError(f"{file_path.name} is not valid JSON: {exc.msg}") from exc
    return parse_quiz_data(payload)


def parse_quiz_data(payload: Any) -> QuizData:
    """Validate a `{levels: [...]}` payload and return `QuizData`."""
    quiz = validate_record(QuizPayload, payload)
    if not quiz.levels:
        raise QuizDataError("Quiz data must contain at least one level.")
    return QuizData(levels=tuple(_build_level(level) for level in quiz.levels))


def validate_record(model: type[_RecordT], payload: Any) -> _RecordT:
    """Run pydantic validation, reporting failures as `QuizDataError`."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "payload"
        raise QuizDataError(
            f"Malformed {model.__name__} at {location}: {first['msg']}"
            f" ({exc.error_count()} error(s))"
        ) from exc


def _build_level(record: LevelPayload) -> Level:
    if not record.questions:
        raise QuizDataError(f"Level {record.id} ('{record.title}') has no questions.")
    return Level(
        id=record.id,
        title=record.title,
        questions=tuple(build_question_from_record(question) for question in record.questions),
    )


def build_question_from_record(record: QuestionRecord) -> Question:
    return build_question(record.id, record.question, record.options, record.answer)


def build_question(question_id: int, text: str, options: list[str], answer: str) -> Question:
    """Create a `Question` after checking the option and answer invariants."""
    context = f"question {question_id}"
    if len(options) < _MIN_OPTIONS:
        raise QuizDataError(f"{context}: at least {_MIN_OPTIONS} options are required.")
    if any(not option.strip() for option in options):
        raise QuizDataError(f"{context}: option text cannot be empty.")
    if len(set(options)) != len(options):
        raise QuizDataError(f"{context}: options must be distinct.")
    if answer not in options:
        raise QuizDataError(f"{context}: answer '{answer}' is not one of the options.")
    if not text.strip():
        raise QuizDataError(f"{context}: question text cannot be empty.")
    return Question(id=question_id, text=text.strip(), options=tuple(options), answer=answer)
