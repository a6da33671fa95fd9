"""Game state models shared by both variants."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union
from uuid import UUID

from pydantic import BaseModel

from .card import Card
from .projective import ProjectiveCard

AnyCard = Union[Card, ProjectiveCard]


class Variant(str, Enum):
    """Game variant."""

    CLASSIC = "classic"
    PROJECTIVE = "projective"


class GameStatus(str, Enum):
    """Lifecycle state of a game."""

    ACTIVE = "active"  # Deck has cards or a set is still on the table
    EXHAUSTED = "exhausted"  # Terminal: empty deck and no set in play


class Move(BaseModel, frozen=True):
    """Selection of play-area positions, bound to the game that issued it."""

    game_id: UUID
    positions: tuple[int, ...]

    def __str__(self) -> str:
        return "Move(" + ", ".join(str(p) for p in self.positions) + ")"


class GameCard(BaseModel, frozen=True):
    """Card currently in play, bound to the game that dealt it."""

    game_id: UUID
    card: AnyCard

    def __str__(self) -> str:
        return str(self.card)


@dataclass
class MoveOutcome:
    """Result of an accepted move."""

    positions: tuple[int, ...]
    removed: list[AnyCard]
    placed: list[AnyCard] = field(default_factory=list)  # Cards dealt in place
    score: int = 0

    @property
    def replenished(self) -> bool:
        """Check if any removed card was replaced from the deck."""
        return bool(self.placed)
