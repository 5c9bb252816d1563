# trivia-tui

A trivia quiz that runs full-screen in your terminal. Each round fetches
multiple-choice questions from the Open Trivia Database. By default a
round has ten questions. As you play, a progress bar shows which answers
you got right and which you got wrong. At the end of the round you get a
final score.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Playing

```
trivia-tui
```

Options:

| Option                   | Meaning                                                  |
|--------------------------|----------------------------------------------------------|
| `--questions N`          | Number of questions per round. The default is 10 and the value must be at least 1. |
| `--result-delay SECONDS` | How long each answer's result stays on screen. The default is 2.0 and the value must not be negative. |

Controls:

| Key       | Action                                                     |
|-----------|------------------------------------------------------------|
| `Enter`   | Start a game from the menu, or go back to the menu after game over |
| `1`–`4`   | Pick an answer for the current question                    |
| `q`       | Quit                                                       |

The answer choices are listed in sorted order. After you answer, the
screen shows whether you were right and gives the correct answer. When
the result delay has passed, the game moves on to the next question.

The progress panel marks each answered question with `✓` if it was
correct or `✗` if it was not. The current question is marked `●` and
the questions still to come are marked `○`. Below the marks is the
question number and your running score.

Sometimes the questions can't be fetched: the request fails, the reply
is malformed, or the service returns an error code. In that case a
warning is logged and the round uses a single built-in question, so you
can still play.

At the end of a round you see your score, your percentage and a short
rating:

- 90% and above: trivia master
- 80% and above: great job
- 70% and above: good work
- 60% and above: not bad
- below 60%: better luck next time

## Using the pieces from Python

The game logic in `trivia_tui.game` contains no terminal code, so you
can drive it on its own:

```python
from trivia_tui.api import TriviaApi
from trivia_tui.game import Game, GameState

game = Game(TriviaApi(), 10)
game.start_game()
while game.state is not GameState.GAME_OVER:
    question = game.current_question()
    game.answer_question(question.correct_index())
    game.next_question()
print(game.score)
```

- `trivia_tui.api.TriviaApi(session=None, base_url=...)` fetches
  questions with `fetch_questions(amount)`. If the request fails, the
  reply is malformed or the API returns a non-zero response code, it
  raises `TriviaApiError`. For an error code, the code is in the
  exception's `response_code` attribute.
- `TriviaQuestion.all_answers()` returns every answer choice in sorted
  order. `TriviaQuestion.correct_index()` gives the position of the right
  answer in that list. `TriviaQuestion.from_dict()` builds a question
  from one entry of the API's `results` list.
- `Game` moves through the `GameState` values `MENU`, `LOADING`,
  `QUESTION`, `SHOW_RESULT` and `GAME_OVER`. `progress()` returns the
  one-based number of the current question and the total number of
  questions.
- `trivia_tui.ui` turns a game into text. `decode_html`,
  `performance_message`, `footer_text`, `progress_symbols`, `score_line`
  and `content_lines` return plain values. `draw(term, game)` renders
  the whole screen on a `blessed` terminal.
- `trivia_tui.app.handle_key(game, key)` applies a single key press. It
  returns `False` when the key is `q`. `run_game(term, game, result_delay)`
  runs the input loop.

## What it does not do

Scores are not saved between rounds or between runs, so there are no
high scores. Questions are always multiple choice, and you cannot choose
a category or a difficulty.

## Running the tests

```
pytest
```