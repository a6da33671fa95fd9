"""Exceptions raised by the game core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from setgame.game.engine import Game


class GameError(Exception):
    """Base class for recoverable game outcomes.

    The game the operation was applied to is attached as ``game`` so that
    callers using the functional API get the (unchanged) game back.
    """

    def __init__(self, message: str = "", game: Game | None = None):
        super().__init__(message)
        self.game = game


class InvalidMoveError(GameError):
    """Malformed move: duplicate or out-of-range position."""


class ForeignObjectError(InvalidMoveError):
    """Move or card belongs to a different game instance."""


class GameOverError(InvalidMoveError):
    """Move attempted after the game reached its terminal state."""


class NotASetError(GameError):
    """Well-formed move whose cards do not form a set."""


class DeckExhaustedError(GameError):
    """Not enough cards left in the deck to draw."""


class InvalidCardError(ValueError):
    """Card constructed from an out-of-range or empty encoding."""
