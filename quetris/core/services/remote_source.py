"""Quiz data fetched from a Supabase (PostgREST) project."""

from __future__ import annotations

import logging

import httpx

from quetris.constants.network_constants import (
    LEVELS_TABLE,
    QUESTIONS_TABLE,
    REQUEST_TIMEOUT_SECONDS,
)
from quetris.core.errors import QuizDataError
from quetris.core.models import Level, QuizData
from quetris.core.quiz_loader import (
    LevelRecord,
    QuestionRecord,
    build_question_from_record,
    validate_record,
)

logger = logging.getLogger(__name__)


class QuestionRow(QuestionRecord):
    level_id: int
    difficulty: int = 0


class SupabaseQuizDataSource:
    """Reads the `levels` and `questions` tables and joins them into levels.

    Levels are ordered by id, questions by level, difficulty and id. Any
    transport, HTTP status or row validation failure surfaces as
    `QuizDataError` so callers only have to handle "no usable data".
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=REQUEST_TIMEOUT_SECONDS)
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    def load_quiz_data(self) -> QuizData:
        level_rows = [
            validate_record(LevelRecord, row)
            for row in self._select(LEVELS_TABLE, order="id.asc")
        ]
        question_rows = [
            validate_record(QuestionRow, row)
            for row in self._select(QUESTIONS_TABLE, order="level_id.asc,difficulty.asc,id.asc")
        ]
        if not level_rows:
            raise QuizDataError("No quiz levels found in the remote store.")

        levels = []
        for level_row in level_rows:
            questions = tuple(
                build_question_from_record(row)
                for row in question_rows
                if row.level_id == level_row.id
            )
            if not questions:
                logger.warning("Skipping level %s (%s): no questions", level_row.id, level_row.title)
                continue
            levels.append(Level(id=level_row.id, title=level_row.title, questions=questions))

        if not levels:
            raise QuizDataError("No remote level has any questions.")
        logger.info("Loaded %d levels from %s", len(levels), self._base_url)
        return QuizData(levels=tuple(levels))

    def _select(self, table: str, *, order: str) -> list[dict]:
        url = f"{self._base_url}/rest/v1/{table}"
        try:
            response = self._client.get(
                url,
                params={"select": "*", "order": order},
                headers=self._headers,
            )
            response.raise_for_status()
            rows = response.json()
        except httpx.HTTPError as exc:
            logger.exception("Fetching %s failed", table)
            raise QuizDataError(f"Failed to fetch {table}: {exc}") from exc
        except ValueError as exc:
            raise QuizDataError(f"Failed to decode {table}: {exc}") from exc
        if not isinstance(rows, list):
            raise QuizDataError(f"Unexpected payload for {table}.")
        return rows

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SupabaseQuizDataSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

