"""Shared fixtures for game tests."""

from itertools import product

import pytest

from setgame.game.deck import make_deck
from setgame.models.card import Card, Colour, Number, Shading, Shape

# Positions of the only set in the planted layout
PLANTED_SET = (2, 5, 9)


def make_card(number: int, shape: int, shading: int, colour: int) -> Card:
    """Build a classic card from attribute values 0-2."""
    return Card(
        number=Number(number),
        shape=Shape(shape),
        shading=Shading(shading),
        colour=Colour(colour),
    )


@pytest.fixture
def binary_cards() -> list[Card]:
    """The 16 cards whose attributes only take values 0 and 1.

    No three of them form a set: a set needs every attribute all equal or
    all different, and two values cannot be all different across three cards.
    """
    return [make_card(*values) for values in product((0, 1), repeat=4)]


def planted_layout(binary: list[Card], size: int, positions: tuple[int, int, int]) -> list[Card]:
    """Lay out ``size`` cards containing exactly one set at ``positions``.

    The set is {0000, 0001, 0002}. The filler cards come from the binary
    cap; none of them completes a set with 0002 because the completing card
    would need a 2 in one of the first three attributes.
    """
    a, b = binary[0], binary[1]
    c = make_card(0, 0, 0, 2)
    planted = dict(zip(positions, (a, b, c)))
    filler = iter(binary[2:])
    return [planted[i] if i in planted else next(filler) for i in range(size)]


@pytest.fixture
def planted(binary_cards) -> tuple[list[Card], list[Card]]:
    """12-card layout with one set at (2, 5, 9), plus the rest of the deck."""
    layout = planted_layout(binary_cards, 12, PLANTED_SET)
    deck = [card for card in make_deck() if card not in layout]
    return layout, deck


@pytest.fixture
def layout_factory(binary_cards):
    """Build (layout, deck) pairs for arbitrary sizes and set positions."""

    def build(size: int, positions: tuple[int, int, int], deck_size: int | None = None):
        layout = planted_layout(binary_cards, size, positions)
        deck = [card for card in make_deck() if card not in layout]
        if deck_size is not None:
            deck = deck[:deck_size]
        return layout, deck

    return build
