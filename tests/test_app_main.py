import json
import os

import httpx
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PySide6.QtWidgets")

import app_main  # noqa: E402
from quetris.constants.network_constants import (  # noqa: E402
    QUIZ_FILE_ENV,
    SUPABASE_KEY_ENV,
    SUPABASE_URL_ENV,
)
from quetris.core.services.data_sources import JsonFileQuizDataSource  # noqa: E402
from quetris.core.services.remote_source import SupabaseQuizDataSource  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (QUIZ_FILE_ENV, SUPABASE_URL_ENV, SUPABASE_KEY_ENV):
        monkeypatch.delenv(name, raising=False)


def test_no_environment_means_bundled_data():
    assert app_main._configured_source() is None


def test_quiz_file_takes_precedence(monkeypatch, tmp_path, sample_payload):
    path = tmp_path / "quiz.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    monkeypatch.setenv(QUIZ_FILE_ENV, str(path))
    monkeypatch.setenv(SUPABASE_URL_ENV, "https://example.supabase.co")
    monkeypatch.setenv(SUPABASE_KEY_ENV, "key")

    source = app_main._configured_source()

    assert isinstance(source, JsonFileQuizDataSource)
    assert app_main._load_quiz_data().levels[0].title == "Basics"


def test_remote_store_needs_url_and_key(monkeypatch):
    monkeypatch.setenv(SUPABASE_URL_ENV, "https://example.supabase.co")
    assert app_main._configured_source() is None

    monkeypatch.setenv(SUPABASE_KEY_ENV, "key")
    source = app_main._configured_source()
    assert isinstance(source, SupabaseQuizDataSource)
    source.close()


def test_remote_client_is_closed_after_loading(monkeypatch):
    def handler(request):
        table = request.url.path.rsplit("/", 1)[-1]
        if table == "levels":
            return httpx.Response(200, json=[{"id": 1, "title": "Remote"}])
        return httpx.Response(
            200,
            json=[{"id": 5, "level_id": 1, "question": "Pick", "options": ["a", "b"], "answer": "a"}],
        )

    client = httpx.Client(transport=httpx.MockTransport(handler))
    source = SupabaseQuizDataSource("https://example.supabase.co", "key", client=client)
    monkeypatch.setattr(app_main, "_configured_source", lambda: source)

    quiz = app_main._load_quiz_data()

    assert quiz.levels[0].title == "Remote"
    assert client.is_closed
