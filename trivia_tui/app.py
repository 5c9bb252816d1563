"""Interactive terminal front end for the trivia game."""

from __future__ import annotations

import argparse
import time
from typing import TYPE_CHECKING

from .game import DEFAULT_TOTAL_QUESTIONS, Game, GameState
from .ui import draw

if TYPE_CHECKING:
    from blessed import Terminal

POLL_TIMEOUT = 0.1
DEFAULT_RESULT_DELAY = 2.0
_ANSWER_KEYS = "1234"
_ENTER_KEYS = ("\n", "\r")


def _is_enter(key: str) -> bool:
    return getattr(key, "name", None) == "KEY_ENTER" or str(key) in _ENTER_KEYS


def handle_key(game: Game, key: str) -> bool:
    """Apply one key press to the game; return False when the player quits."""
    text = str(key)
    if text == "q":
        return False
    if len(text) == 1 and text in _ANSWER_KEYS:
        if game.state is GameState.QUESTION:
            game.answer_question(int(text) - 1)
    elif _is_enter(key):
        if game.state is GameState.MENU:
            game.start_game()
        elif game.state is GameState.GAME_OVER:
            game.reset_game()
    return True


def run_game(term: Terminal, game: Game, result_delay: float = DEFAULT_RESULT_DELAY) -> None:
    """Draw, read keys and advance the game until the player quits."""
    while True:
        draw(term, game)
        key = term.inkey(timeout=POLL_TIMEOUT)
        if key and not handle_key(game, key):
            break
        if game.state is GameState.SHOW_RESULT:
            draw(term, game)
            time.sleep(result_delay)
            game.next_question()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play multiple-choice trivia in the terminal.")
    parser.add_argument(
        "--questions",
        type=int,
        default=DEFAULT_TOTAL_QUESTIONS,
        help="number of questions per round (default: %(default)s)",
    )
    parser.add_argument(
        "--result-delay",
        type=float,
        default=DEFAULT_RESULT_DELAY,
        help="seconds to show each answer's result (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.questions < 1:
        parser.error("--questions must be at least 1")
    if args.result_delay < 0:
        parser.error("--result-delay must not be negative")
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the game in full-screen mode."""
    from blessed import Terminal

    args = _parse_args(argv)
    term = Terminal()
    game = Game(total_questions=args.questions)
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        run_game(term, game, args.result_delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())