import json

import pytest

from quetris.core.errors import QuizDataError
from quetris.core.services.data_sources import (
    BundledQuizDataSource,
    JsonFileQuizDataSource,
    resolve_quiz_data,
)


def test_bundled_dataset_is_valid_and_playable():
    quiz = BundledQuizDataSource().load_quiz_data()

    assert quiz.level_count() >= 1
    for level in quiz.levels:
        assert level.questions
        for question in level.questions:
            assert question.answer in question.options
            assert len(question.options) <= 4


def test_resolve_without_source_uses_bundled_dataset():
    assert resolve_quiz_data(None) == BundledQuizDataSource().load_quiz_data()


def test_json_file_source(tmp_path, sample_payload):
    path = tmp_path / "quiz.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")

    quiz = resolve_quiz_data(JsonFileQuizDataSource(path))

    assert [level.title for level in quiz.levels] == ["Basics", "More"]


def test_missing_json_file_is_a_data_error(tmp_path):
    with pytest.raises(QuizDataError, match="Could not read"):
        JsonFileQuizDataSource(tmp_path / "absent.json").load_quiz_data()


def test_undecodable_json_file_is_a_data_error(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b'{"levels": [\xff\xfe]}')

    with pytest.raises(QuizDataError):
        resolve_quiz_data(JsonFileQuizDataSource(path))
