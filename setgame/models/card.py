"""Classic Set card model."""

from enum import IntEnum

from pydantic import BaseModel

from setgame.errors import InvalidCardError


class Number(IntEnum):
    """Number of symbols printed on the card."""

    ONE = 0
    TWO = 1
    THREE = 2


class Shape(IntEnum):
    """Symbol shape."""

    OVAL = 0
    WAVE = 1
    DIAMOND = 2


class Shading(IntEnum):
    """Symbol fill."""

    EMPTY = 0
    HALF = 1
    FULL = 2


class Colour(IntEnum):
    """Symbol colour."""

    RED = 0
    GREEN = 1
    PURPLE = 2


# Attribute order used for encoding and deck enumeration (slowest first)
ATTRIBUTES = ("number", "shape", "shading", "colour")

NUM_VALUES = 3
CLASSIC_DECK_SIZE = NUM_VALUES ** len(ATTRIBUTES)


class Card(BaseModel, frozen=True):
    """Single classic card: one value for each of the four attributes."""

    number: Number
    shape: Shape
    shading: Shading
    colour: Colour

    def values(self) -> tuple[int, int, int, int]:
        """Get attribute values in encoding order."""
        return (self.number, self.shape, self.shading, self.colour)

    def to_int(self) -> int:
        """Encode the card as its index (0-80) in the canonical deck."""
        code = 0
        for value in self.values():
            code = code * NUM_VALUES + int(value)
        return code

    @classmethod
    def from_int(cls, code: int) -> "Card":
        """Decode a canonical deck index back into a card.

        Args:
            code: Index in 0-80.

        Returns:
            Card at that index.

        Raises:
            InvalidCardError: If the index is out of range.
        """
        if not 0 <= code < CLASSIC_DECK_SIZE:
            raise InvalidCardError(f"Classic card index out of range: {code}")

        digits = []
        for _ in ATTRIBUTES:
            code, digit = divmod(code, NUM_VALUES)
            digits.append(digit)
        number, shape, shading, colour = reversed(digits)
        return cls(
            number=Number(number),
            shape=Shape(shape),
            shading=Shading(shading),
            colour=Colour(colour),
        )

    def __str__(self) -> str:
        count = int(self.number) + 1
        plural = "s" if count > 1 else ""
        return (
            f"{count} {self.shading.name.lower()} "
            f"{self.colour.name.lower()} {self.shape.name.lower()}{plural}"
        )

    def __repr__(self) -> str:
        return (
            f"Card({self.number.name}, {self.shape.name}, "
            f"{self.shading.name}, {self.colour.name})"
        )
