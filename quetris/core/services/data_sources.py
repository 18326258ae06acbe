"""Pluggable sources of quiz content."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from quetris.core.errors import QuizDataError
from quetris.core.models import QuizData
from quetris.core.quiz_loader import load_quiz_from_file, parse_quiz_data

logger = logging.getLogger(__name__)

_BUNDLED_QUIZ_PATH = Path(__file__).resolve().parents[2] / "data" / "default_quiz.json"


class QuizDataSource(Protocol):
    """Anything that can produce validated quiz data."""

    def load_quiz_data(self) -> QuizData:
        ...


class BundledQuizDataSource:
    """Default dataset shipped inside the package."""

    def load_quiz_data(self) -> QuizData:
        return parse_quiz_data(json.loads(_BUNDLED_QUIZ_PATH.read_text(encoding="utf-8")))


class JsonFileQuizDataSource:
    """Quiz data read from a JSON file on disk."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path

    def load_quiz_data(self) -> QuizData:
        try:
            return load_quiz_from_file(self.file_path)
        except OSError as exc:
            raise QuizDataError(f"Could not read {self.file_path}: {exc}") from exc


def resolve_quiz_data(source: QuizDataSource | None) -> QuizData:
    """Load from `source`, or from the bundled dataset when none is given."""
    if source is None:
        logger.info("No quiz data source configured; using bundled dataset")
        source = BundledQuizDataSource()
    return source.load_quiz_data()
