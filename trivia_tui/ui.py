"""Terminal rendering of the trivia game."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .game import Game, GameState

if TYPE_CHECKING:
    from blessed import Terminal

HEADER_TEXT = "🧠 Trivia Game 🧠"

MENU_LINES = (
    "",
    "Welcome to Terminal Trivia!",
    "",
    "Test your knowledge with questions from OpenTDB",
    "",
    "Press ENTER to start playing",
)

LOADING_LINES = (
    "",
    "Loading questions...",
    "",
    "Please wait while we fetch trivia questions",
)

_ENTITIES = (
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
)

_PERFORMANCE = (
    (90.0, "🏆 Excellent! You're a trivia master!"),
    (80.0, "🌟 Great job! Very impressive!"),
    (70.0, "👍 Good work! Keep it up!"),
    (60.0, "😊 Not bad! Room for improvement!"),
)
_PERFORMANCE_FALLBACK = "😅 Better luck next time!"

_FOOTERS = {
    GameState.MENU: "Press ENTER to start • Press 'q' to quit",
    GameState.QUESTION: "Press 1-4 to select answer • Press 'q' to quit",
    GameState.GAME_OVER: "Press ENTER to play again • Press 'q' to quit",
}
_FOOTER_FALLBACK = "Press 'q' to quit"

CORRECT = ("✓", "green")
INCORRECT = ("✗", "red")
CURRENT = ("●", "yellow")
PENDING = ("○", "gray")

_TERM_COLOURS = {
    "green": "green",
    "red": "red",
    "yellow": "yellow",
    "gray": "bright_black",
}

_PROGRESS_HEIGHT = 4
_BAR_HEIGHT = 3


def decode_html(text: str) -> str:
    """Replace the HTML entities the question API uses with plain characters."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def performance_message(percentage: float) -> str:
    """A verdict on the final score percentage."""
    for threshold, message in _PERFORMANCE:
        if percentage >= threshold:
            return message
    return _PERFORMANCE_FALLBACK


def footer_text(state: GameState) -> str:
    """Key help shown at the bottom of the screen for a state."""
    return _FOOTERS.get(state, _FOOTER_FALLBACK)


def progress_symbols(game: Game) -> list[tuple[str, str]]:
    """One (symbol, colour name) pair per question, answered ones first."""
    symbols = [CORRECT if ok else INCORRECT for ok in game.answer_results]
    total = len(game.questions)
    if game.current_question_index < total:
        symbols.append(CURRENT)
        symbols.extend(PENDING for _ in range(game.current_question_index + 1, total))
    else:
        symbols.extend(PENDING for _ in range(len(game.answer_results), total))
    return symbols


def score_line(game: Game) -> str:
    """Question number and running score."""
    current, total = game.progress()
    answered = max(len(game.answer_results), 1)
    return f"Question {current}/{total} | Score: {game.score}/{answered}"


def _score_percent(game: Game) -> float:
    if not game.questions:
        return math.nan
    return game.score / len(game.questions) * 100.0


def content_lines(game: Game) -> list[str]:
    """Plain text of the main panel for the game's current state."""
    state = game.state
    if state is GameState.MENU:
        return list(MENU_LINES)
    if state is GameState.LOADING:
        return list(LOADING_LINES)
    if state is GameState.GAME_OVER:
        percent = _score_percent(game)
        return [
            "",
            "🎉 Game Over! 🎉",
            "",
            f"Final Score: {game.score}/{len(game.questions)}",
            f"Percentage: {percent:.1f}%",
            "",
            performance_message(percent),
            "",
            "Press ENTER to play again",
        ]

    question = game.current_question()
    if question is None:
        return []
    if state is GameState.QUESTION:
        answers = [
            f"{number}. {decode_html(answer)}"
            for number, answer in enumerate(question.all_answers(), start=1)
        ]
        return [decode_html(question.question), "", *answers]
    verdict = "✅ Correct!" if game.last_answer_correct else "❌ Incorrect!"
    return [verdict, "", f"The correct answer was: {decode_html(question.correct_answer)}"]


def _panel_title(game: Game) -> str:
    state = game.state
    if state is GameState.QUESTION:
        question = game.current_question()
        if question is not None:
            return f"{question.category} | {question.difficulty}"
    return {
        GameState.MENU: "Menu",
        GameState.LOADING: "Loading",
        GameState.SHOW_RESULT: "Result",
        GameState.GAME_OVER: "Game Over",
    }.get(state, "")


def _fit(term: Terminal, line: str, width: int, align: str) -> list[str]:
    if width <= 0:
        return []
    parts = term.wrap(line, width) if line else []
    pad = term.center if align == "center" else term.ljust
    return [pad(part, width) for part in (parts or [""])]


def _box(
    term: Terminal,
    width: int,
    height: int,
    title: str,
    lines: list[str],
    align: str = "center",
) -> list[str]:
    if height < 2 or width < 2:
        return []
    inner = width - 2
    title = title[:inner]
    top = "┌" + title + "─" * max(inner - term.length(title), 0) + "┐"
    body: list[str] = []
    for line in lines:
        body.extend(_fit(term, line, inner, align))
    body = body[: height - 2]
    body.extend(" " * inner for _ in range(height - 2 - len(body)))
    return [top, *("│" + row + "│" for row in body), "└" + "─" * inner + "┘"]


def _styled_progress(term: Terminal, game: Game) -> str:
    return " ".join(
        getattr(term, _TERM_COLOURS[colour])(symbol)
        for symbol, colour in progress_symbols(game)
    )


def _middle(term: Terminal, game: Game, width: int, height: int) -> list[str]:
    state = game.state
    if state not in (GameState.QUESTION, GameState.SHOW_RESULT):
        return _box(term, width, height, _panel_title(game), content_lines(game))
    if game.current_question() is None:
        return []

    progress = _box(
        term,
        width,
        min(_PROGRESS_HEIGHT, height),
        "Progress",
        [_styled_progress(term, game), score_line(game)],
    )
    lines = content_lines(game)
    if state is GameState.QUESTION:
        lines = [lines[0], lines[1], *(term.white(answer) for answer in lines[2:])]
        align = "left"
    else:
        style = term.bold_green if game.last_answer_correct else term.bold_red
        lines = [style(lines[0]), *lines[1:]]
        align = "center"
    rest = height - len(progress)
    return progress + _box(term, width, rest, _panel_title(game), lines, align)


def draw(term: Terminal, game: Game) -> None:
    """Render the whole screen for the game's current state."""
    width, height = term.width, term.height
    rows = _box(term, width, _BAR_HEIGHT, "", [term.bold_cyan(HEADER_TEXT)])
    rows += _middle(term, game, width, max(height - 2 * _BAR_HEIGHT, 0))
    rows += _box(term, width, _BAR_HEIGHT, "", [term.bright_black(footer_text(game.state))])
    screen = "".join(term.move_xy(0, y) + row for y, row in enumerate(rows[:height]))
    term.stream.write(term.home + term.clear + screen)
    term.stream.flush()