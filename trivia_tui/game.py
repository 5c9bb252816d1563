"""Game state machine for a round of trivia."""

from __future__ import annotations

import logging
from enum import Enum, auto

from .api import TriviaApi, TriviaApiError, TriviaQuestion

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_QUESTIONS = 10

FALLBACK_QUESTION = TriviaQuestion(
    category="General Knowledge",
    type="multiple",
    difficulty="easy",
    question="What is 2 + 2?",
    correct_answer="4",
    incorrect_answers=("2", "3", "5"),
)


class GameState(Enum):
    MENU = auto()
    LOADING = auto()
    QUESTION = auto()
    SHOW_RESULT = auto()
    GAME_OVER = auto()


class Game:
    """Tracks questions, answers and score across one or more rounds."""

    def __init__(
        self,
        api: TriviaApi | None = None,
        total_questions: int = DEFAULT_TOTAL_QUESTIONS,
    ) -> None:
        self.state = GameState.MENU
        self.api = api if api is not None else TriviaApi()
        self.questions: list[TriviaQuestion] = []
        self.current_question_index = 0
        self.score = 0
        self.total_questions = total_questions
        self.last_answer_correct = False
        self.selected_answer: int | None = None
        self.answer_results: list[bool] = []

    def start_game(self) -> None:
        """Fetch a fresh set of questions, falling back to a built-in one on failure."""
        self.state = GameState.LOADING
        self.score = 0
        self.current_question_index = 0
        self.answer_results.clear()

        try:
            self.questions = list(self.api.fetch_questions(self.total_questions))
        except TriviaApiError as exc:
            logger.warning("Failed to fetch questions: %s", exc)
            self.questions = [FALLBACK_QUESTION]
        self.state = GameState.QUESTION

    def answer_question(self, answer_index: int) -> None:
        """Record an answer to the current question; ignored if there is none."""
        question = self.current_question()
        if question is None:
            return
        self.last_answer_correct = answer_index == question.correct_index()
        self.selected_answer = answer_index
        if self.last_answer_correct:
            self.score += 1
        self.answer_results.append(self.last_answer_correct)
        self.state = GameState.SHOW_RESULT

    def next_question(self) -> None:
        """Move on to the next question, or end the game after the last one."""
        self.current_question_index += 1
        self.selected_answer = None
        if self.current_question_index >= len(self.questions):
            self.state = GameState.GAME_OVER
        else:
            self.state = GameState.QUESTION

    def reset_game(self) -> None:
        """Return to the menu and forget the current round."""
        self.state = GameState.MENU
        self.questions.clear()
        self.current_question_index = 0
        self.score = 0
        self.selected_answer = None
        self.answer_results.clear()

    def current_question(self) -> TriviaQuestion | None:
        if 0 <= self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    def progress(self) -> tuple[int, int]:
        """One-based number of the current question and the question count."""
        return self.current_question_index + 1, len(self.questions)