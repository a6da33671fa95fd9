"""Deck construction and drawing."""

import random
from typing import Generic, Iterable, TypeVar

from setgame.errors import DeckExhaustedError
from setgame.models.card import Card, Colour, Number, Shading, Shape
from setgame.models.projective import PROJECTIVE_DECK_SIZE, ProjectiveCard

CardT = TypeVar("CardT", Card, ProjectiveCard)


def make_deck() -> list[Card]:
    """Create the 81 classic cards in canonical order (number varies slowest)."""
    return [
        Card(number=number, shape=shape, shading=shading, colour=colour)
        for number in Number
        for shape in Shape
        for shading in Shading
        for colour in Colour
    ]


def make_shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """Create the classic deck in uniformly random order."""
    deck = make_deck()
    (rng or random).shuffle(deck)
    return deck


def make_projective_deck() -> list[ProjectiveCard]:
    """Create the 63 projective cards ordered by encoding (1-63)."""
    return [ProjectiveCard.from_int(i) for i in range(1, PROJECTIVE_DECK_SIZE + 1)]


def make_shuffled_projective_deck(
    rng: random.Random | None = None,
) -> list[ProjectiveCard]:
    """Create the projective deck in uniformly random order."""
    deck = make_projective_deck()
    (rng or random).shuffle(deck)
    return deck


class Deck(Generic[CardT]):
    """Draw pile used as a stack: the next card is the last element.

    Popping from the end keeps draws O(1) without reordering the list.
    """

    def __init__(self, cards: Iterable[CardT] | None = None):
        """Initialize deck.

        Args:
            cards: Cards in stack order (last element is drawn first).
        """
        self._cards: list[CardT] = list(cards) if cards else []

    def draw(self) -> CardT:
        """Remove and return the next card.

        Raises:
            DeckExhaustedError: If the deck is empty.
        """
        if not self._cards:
            raise DeckExhaustedError("Deck is empty")
        return self._cards.pop()

    def draw_many(self, count: int) -> list[CardT]:
        """Draw ``count`` cards, or none at all if fewer remain.

        Raises:
            DeckExhaustedError: If fewer than ``count`` cards remain.
        """
        if count > len(self._cards):
            raise DeckExhaustedError(
                f"Cannot draw {count} cards: only {len(self._cards)} remaining"
            )
        return [self._cards.pop() for _ in range(count)]

    def is_empty(self) -> bool:
        """Check if no cards remain."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
