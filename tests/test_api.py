import pytest
import requests
import responses
from responses import matchers

from trivia_tui.api import DEFAULT_BASE_URL, TriviaApi, TriviaApiError, TriviaQuestion

RAW_QUESTION = {
    "category": "Geography",
    "type": "multiple",
    "difficulty": "easy",
    "question": "What is the capital of France?",
    "correct_answer": "Paris",
    "incorrect_answers": ["Rome", "Berlin", "Madrid"],
}


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_from_dict_reads_all_fields():
    q = TriviaQuestion.from_dict(RAW_QUESTION)
    assert q.category == "Geography"
    assert q.type == "multiple"
    assert q.difficulty == "easy"
    assert q.question == "What is the capital of France?"
    assert q.correct_answer == "Paris"
    assert q.incorrect_answers == ("Rome", "Berlin", "Madrid")


def test_from_dict_missing_field_raises():
    data = dict(RAW_QUESTION)
    del data["correct_answer"]
    with pytest.raises(ValueError):
        TriviaQuestion.from_dict(data)


def test_all_answers_sorted_and_complete():
    q = TriviaQuestion.from_dict(RAW_QUESTION)
    answers = q.all_answers()
    assert answers == ["Berlin", "Madrid", "Paris", "Rome"]


def test_correct_index_points_at_correct_answer():
    q = TriviaQuestion.from_dict(RAW_QUESTION)
    assert q.all_answers()[q.correct_index()] == "Paris"


def test_source_example_answers():
    q = TriviaQuestion(
        category="General Knowledge",
        type="multiple",
        difficulty="easy",
        question="What is 2 + 2?",
        correct_answer="4",
        incorrect_answers=["2", "3", "5"],
    )
    assert q.all_answers() == ["2", "3", "4", "5"]
    assert q.all_answers()[q.correct_index()] == "4"


def test_fetch_questions_success(mocked):
    mocked.get(
        DEFAULT_BASE_URL,
        json={"response_code": 0, "results": [RAW_QUESTION, RAW_QUESTION]},
        match=[matchers.query_param_matcher({"amount": "2", "type": "multiple"})],
    )
    questions = TriviaApi().fetch_questions(2)
    assert questions == [TriviaQuestion.from_dict(RAW_QUESTION)] * 2


def test_fetch_questions_custom_base_url(mocked):
    url = "http://localhost/api.php"
    mocked.get(url, json={"response_code": 0, "results": [RAW_QUESTION]})
    api = TriviaApi(session=requests.Session(), base_url=url)
    questions = api.fetch_questions(1)
    assert [q.correct_answer for q in questions] == ["Paris"]


def test_fetch_questions_error_code(mocked):
    mocked.get(DEFAULT_BASE_URL, json={"response_code": 1, "results": []})
    with pytest.raises(TriviaApiError) as info:
        TriviaApi().fetch_questions(50)
    assert info.value.response_code == 1
    assert str(info.value) == "API returned error code: 1"


def test_fetch_questions_connection_error(mocked):
    mocked.get(DEFAULT_BASE_URL, body=requests.ConnectionError("down"))
    with pytest.raises(TriviaApiError) as info:
        TriviaApi().fetch_questions(3)
    assert info.value.response_code is None


def test_fetch_questions_invalid_json(mocked):
    mocked.get(DEFAULT_BASE_URL, body="not json")
    with pytest.raises(TriviaApiError):
        TriviaApi().fetch_questions(3)


def test_fetch_questions_malformed_result(mocked):
    mocked.get(
        DEFAULT_BASE_URL,
        json={"response_code": 0, "results": [{"category": "Geography"}]},
    )
    with pytest.raises(TriviaApiError):
        TriviaApi().fetch_questions(1)