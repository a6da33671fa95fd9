"""Projective Set game."""

import random
from typing import Sequence

from setgame.models.game_state import Variant
from setgame.models.projective import ProjectiveCard

from .analyzer import (
    find_projective_sets,
    find_sets,
    has_projective_set,
    is_projective_set,
)
from .deck import make_shuffled_projective_deck
from .engine import Game


class ProjectiveGame(Game):
    """Projective Set: 63 cards, 7 in play.

    A selection of three or more cards is a set when every colour appears
    an even number of times. Any seven distinct cards always contain one.
    """

    variant = Variant.PROJECTIVE
    steady_size = 7
    max_cards = None

    def _new_deck(self, rng: random.Random | None) -> list[ProjectiveCard]:
        return make_shuffled_projective_deck(rng)

    def _is_set(self, cards: Sequence[ProjectiveCard]) -> bool:
        return is_projective_set(*cards)

    def has_set(self) -> bool:
        """Check if a set of any size is available in the play area."""
        return has_projective_set(self._in_play)

    def find_sets(self) -> list[tuple[int, int, int]]:
        """Find all three-card sets in the play area."""
        return find_sets(self._in_play, predicate=is_projective_set)

    def find_all_sets(self) -> list[tuple[int, ...]]:
        """Find sets of every size, smallest first."""
        return find_projective_sets(self._in_play)
