"""Client for the Open Trivia Database question API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import requests

DEFAULT_BASE_URL = "https://opentdb.com/api.php"
REQUEST_TIMEOUT = 30.0


class TriviaApiError(Exception):
    """Raised when questions cannot be fetched or the API reports a failure."""

    def __init__(self, message: str, response_code: int | None = None) -> None:
        super().__init__(message)
        self.response_code = response_code


@dataclass(frozen=True)
class TriviaQuestion:
    """A multiple-choice trivia question."""

    category: str
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "incorrect_answers", tuple(self.incorrect_answers))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TriviaQuestion:
        """Build a question from one entry of the API's ``results`` list."""
        try:
            return cls(
                category=str(data["category"]),
                type=str(data["type"]),
                difficulty=str(data["difficulty"]),
                question=str(data["question"]),
                correct_answer=str(data["correct_answer"]),
                incorrect_answers=tuple(str(a) for a in data["incorrect_answers"]),
            )
        except KeyError as exc:
            raise ValueError(f"question is missing field {exc}") from exc
        except TypeError as exc:
            raise ValueError(f"malformed question: {exc}") from exc

    def all_answers(self) -> list[str]:
        """All answers, correct one included, in sorted order."""
        return sorted([*self.incorrect_answers, self.correct_answer])

    def correct_index(self) -> int:
        """Position of the correct answer within :meth:`all_answers`."""
        try:
            return self.all_answers().index(self.correct_answer)
        except ValueError:
            return 0


class TriviaApi:
    """Fetches multiple-choice questions over HTTP."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url

    def fetch_questions(self, amount: int) -> list[TriviaQuestion]:
        """Fetch ``amount`` multiple-choice questions.

        Raises TriviaApiError on transport failures, malformed replies and
        non-zero API response codes.
        """
        try:
            response = self._session.get(
                self._base_url,
                params={"amount": amount, "type": "multiple"},
                timeout=REQUEST_TIMEOUT,
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise TriviaApiError(f"request failed: {exc}") from exc

        if not isinstance(payload, Mapping):
            raise TriviaApiError("malformed response: expected a JSON object")
        try:
            code = int(payload["response_code"])
            raw_results = payload["results"]
        except (KeyError, TypeError, ValueError) as exc:
            raise TriviaApiError(f"malformed response: {exc}") from exc

        if code != 0:
            raise TriviaApiError(f"API returned error code: {code}", response_code=code)

        try:
            return [TriviaQuestion.from_dict(item) for item in raw_results]
        except (ValueError, TypeError) as exc:
            raise TriviaApiError(f"malformed response: {exc}") from exc