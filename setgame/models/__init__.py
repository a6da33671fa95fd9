"""Game models."""

from .card import CLASSIC_DECK_SIZE, Card, Colour, Number, Shading, Shape
from .game_state import AnyCard, GameCard, GameStatus, Move, MoveOutcome, Variant
from .projective import COLOURS, PROJECTIVE_DECK_SIZE, ProjectiveCard

__all__ = [
    "AnyCard",
    "CLASSIC_DECK_SIZE",
    "COLOURS",
    "Card",
    "Colour",
    "GameCard",
    "GameStatus",
    "Move",
    "MoveOutcome",
    "Number",
    "PROJECTIVE_DECK_SIZE",
    "ProjectiveCard",
    "Shading",
    "Shape",
    "Variant",
]
