"""Set and Projective Set game core."""

from .api import (
    attempt_move,
    cards_in_play,
    draw_three,
    find_sets,
    new_game,
    remaining_cards,
    run_analysis,
    score,
)
from .errors import (
    DeckExhaustedError,
    ForeignObjectError,
    GameError,
    GameOverError,
    InvalidCardError,
    InvalidMoveError,
    NotASetError,
)
from .game import ClassicGame, Game, ProjectiveGame
from .models import Card, GameCard, GameStatus, Move, ProjectiveCard, Variant

__all__ = [
    "Card",
    "ClassicGame",
    "DeckExhaustedError",
    "ForeignObjectError",
    "Game",
    "GameCard",
    "GameError",
    "GameOverError",
    "GameStatus",
    "InvalidCardError",
    "InvalidMoveError",
    "Move",
    "NotASetError",
    "ProjectiveCard",
    "ProjectiveGame",
    "Variant",
    "attempt_move",
    "cards_in_play",
    "draw_three",
    "find_sets",
    "new_game",
    "remaining_cards",
    "run_analysis",
    "score",
]
