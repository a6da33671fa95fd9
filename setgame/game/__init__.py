"""Game logic."""

from .analyzer import (
    find_projective_sets,
    find_sets,
    has_projective_set,
    has_set,
    is_projective_set,
    is_set,
    third_card,
)
from .deck import (
    Deck,
    make_deck,
    make_projective_deck,
    make_shuffled_deck,
    make_shuffled_projective_deck,
)
from .engine import ClassicGame, Game
from .projective import ProjectiveGame
from .validator import MoveError, MoveValidator, ValidationResult

__all__ = [
    "ClassicGame",
    "Deck",
    "Game",
    "MoveError",
    "MoveValidator",
    "ProjectiveGame",
    "ValidationResult",
    "find_projective_sets",
    "find_sets",
    "has_projective_set",
    "has_set",
    "is_projective_set",
    "is_set",
    "make_deck",
    "make_projective_deck",
    "make_shuffled_deck",
    "make_shuffled_projective_deck",
    "third_card",
]
