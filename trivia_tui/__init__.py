"""Terminal trivia quiz game: question API client, game state and full-screen UI."""

__version__ = "0.1.0"