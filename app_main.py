"""Application entry point for Quetris."""

from __future__ import annotations

import os
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quetris.constants.network_constants import QUIZ_FILE_ENV, SUPABASE_KEY_ENV, SUPABASE_URL_ENV
from quetris.core.errors import QuizDataError
from quetris.core.models import QuizData
from quetris.core.services.data_sources import (
    JsonFileQuizDataSource,
    QuizDataSource,
    resolve_quiz_data,
)
from quetris.core.services.remote_source import SupabaseQuizDataSource
from quetris.ui.dialog_helpers import show_error
from quetris.ui.game_window import QuizGameWindow
from quetris.utils.logging_config import configure_logging


def _configured_source() -> QuizDataSource | None:
    """Pick the quiz source from the environment; None means the bundled dataset.

    A quiz file takes precedence over the remote store, which needs both its
    URL and key.
    """
    quiz_file = os.environ.get(QUIZ_FILE_ENV)
    if quiz_file:
        return JsonFileQuizDataSource(Path(quiz_file))
    url = os.environ.get(SUPABASE_URL_ENV)
    key = os.environ.get(SUPABASE_KEY_ENV)
    if url and key:
        return SupabaseQuizDataSource(url, key)
    return None


def _load_quiz_data() -> QuizData:
    source = _configured_source()
    if isinstance(source, SupabaseQuizDataSource):
        with source:
            return resolve_quiz_data(source)
    return resolve_quiz_data(source)


def main() -> None:
    """Initialize logging, load quiz data, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Quetris…")

    app = QApplication(sys.argv)
    try:
        quiz_data = _load_quiz_data()
    except QuizDataError as exc:
        logger.error("No usable quiz data: %s", exc)
        show_error(None, "Failed to load quiz data", str(exc))
        sys.exit(1)

    logger.info("Loaded %d levels", quiz_data.level_count())
    window = QuizGameWindow(
        quiz_data,
        on_question_answer=lambda question_id, correct: logger.info(
            "Question %s answered %s", question_id, "correctly" if correct else "incorrectly"
        ),
        on_level_complete=lambda level_id, score: logger.info(
            "Level %s completed with score %d", level_id, score
        ),
    )
    window.resize(900, 800)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
