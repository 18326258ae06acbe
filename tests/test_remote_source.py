import httpx
import pytest

from quetris.core.errors import QuizDataError
from quetris.core.quiz_loader import parse_quiz_data
from quetris.core.services.remote_source import SupabaseQuizDataSource

LEVELS = [
    {"id": 1, "title": "Warm-up"},
    {"id": 2, "title": "Unused"},
    {"id": 3, "title": "Hard"},
]
QUESTIONS = [
    {"id": 11, "level_id": 1, "question": "1 + 1?", "options": ["1", "2"], "answer": "2", "difficulty": 0},
    {"id": 12, "level_id": 1, "question": "2 + 2?", "options": ["4", "5"], "answer": "4", "difficulty": 1},
    {"id": 31, "level_id": 3, "question": "Pick C", "options": ["A", "B", "C"], "answer": "C"},
]


def _source(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SupabaseQuizDataSource("https://example.supabase.co/", "anon-key", client=client)


def _tables(levels=LEVELS, questions=QUESTIONS, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        table = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json=levels if table == "levels" else questions)

    return handler


def test_rows_are_joined_into_levels():
    seen = []
    quiz = _source(_tables(seen=seen)).load_quiz_data()

    assert [level.id for level in quiz.levels] == [1, 3]
    assert [q.id for q in quiz.levels[0].questions] == [11, 12]
    assert quiz.levels[1].questions[0].options == ("A", "B", "C")

    levels_request, questions_request = seen
    assert levels_request.url.path == "/rest/v1/levels"
    assert levels_request.url.params["order"] == "id.asc"
    assert questions_request.url.params["order"] == "level_id.asc,difficulty.asc,id.asc"
    assert levels_request.headers["apikey"] == "anon-key"
    assert levels_request.headers["Authorization"] == "Bearer anon-key"


def test_http_error_becomes_data_error():
    source = _source(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(QuizDataError, match="levels"):
        source.load_quiz_data()


def test_transport_failure_becomes_data_error():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(QuizDataError):
        _source(handler).load_quiz_data()


def test_malformed_rows_are_rejected():
    with pytest.raises(QuizDataError, match="QuestionRow"):
        _source(_tables(questions=[{"id": "x", "level_id": 1}])).load_quiz_data()


def test_non_list_payload_is_rejected():
    with pytest.raises(QuizDataError, match="Unexpected payload"):
        _source(lambda request: httpx.Response(200, json={"message": "nope"})).load_quiz_data()


def test_no_levels_is_an_error():
    with pytest.raises(QuizDataError, match="No quiz levels"):
        _source(_tables(levels=[])).load_quiz_data()


def test_levels_without_questions_are_an_error():
    with pytest.raises(QuizDataError, match="any questions"):
        _source(_tables(questions=[])).load_quiz_data()


def test_invalid_question_content_is_rejected():
    bad = [{"id": 1, "level_id": 1, "question": "?", "options": ["a", "b"], "answer": "c"}]
    with pytest.raises(QuizDataError, match="not one of the options"):
        _source(_tables(questions=bad)).load_quiz_data()


def test_file_and_remote_loaders_accept_the_same_records():
    level = {"id": "1", "title": "Shared"}
    question = {"id": "7", "question": "Pick B", "options": ["A", "B"], "answer": "B"}

    from_file = parse_quiz_data({"levels": [{**level, "questions": [question]}]})
    from_remote = _source(_tables(levels=[level], questions=[{**question, "level_id": "1"}])).load_quiz_data()

    assert from_file == from_remote
    assert from_remote.levels[0].questions[0].id == 7


def test_file_and_remote_loaders_reject_the_same_records():
    question = {"id": 7, "question": "Pick", "options": ["A", None], "answer": "A"}

    with pytest.raises(QuizDataError):
        parse_quiz_data({"levels": [{"id": 1, "title": "Shared", "questions": [question]}]})
    with pytest.raises(QuizDataError):
        _source(_tables(levels=[{"id": 1, "title": "Shared"}], questions=[{**question, "level_id": 1}])).load_quiz_data()


def test_context_manager_closes_the_client():
    client = httpx.Client(transport=httpx.MockTransport(_tables()))

    with SupabaseQuizDataSource("https://example.supabase.co", "key", client=client) as source:
        source.load_quiz_data()
        assert not client.is_closed

    assert client.is_closed
