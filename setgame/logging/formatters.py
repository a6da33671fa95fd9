"""Formatters for game log output."""

from typing import Iterable

from setgame.models.card import Card, Colour, Shading, Shape
from setgame.models.game_state import AnyCard
from setgame.models.projective import ProjectiveCard

SHAPE_CODES: dict[Shape, str] = {
    Shape.OVAL: "O",
    Shape.WAVE: "W",
    Shape.DIAMOND: "D",
}

SHADING_CODES: dict[Shading, str] = {
    Shading.EMPTY: "E",
    Shading.HALF: "H",
    Shading.FULL: "F",
}

COLOUR_CODES: dict[Colour, str] = {
    Colour.RED: "R",
    Colour.GREEN: "G",
    Colour.PURPLE: "P",
}

# Projective colours in encoding order
PROJECTIVE_CODES: dict[str, str] = {
    "red": "R",
    "orange": "O",
    "yellow": "Y",
    "green": "G",
    "blue": "B",
    "purple": "P",
}


def format_card(card: AnyCard) -> str:
    """Format a single card to a short code.

    Args:
        card: Card to format.

    Returns:
        Classic cards as number, shape, shading, colour (e.g. "2WHG");
        projective cards as the initials of their colours (e.g. "RYB").
    """
    if isinstance(card, ProjectiveCard):
        return "".join(PROJECTIVE_CODES[name] for name in card.colours())
    if isinstance(card, Card):
        return (
            f"{int(card.number) + 1}{SHAPE_CODES[card.shape]}"
            f"{SHADING_CODES[card.shading]}{COLOUR_CODES[card.colour]}"
        )
    raise TypeError(f"Not a card: {card!r}")


def format_cards(cards: Iterable[AnyCard]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Returns:
        Comma-separated card codes (e.g. "1OER,2OER,3OER").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
