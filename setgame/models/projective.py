"""Projective Set card model.

A projective card is a non-empty subset of six colours. Encoded as an
integer, bit 5 is red and bit 0 is purple, so the 63 valid cards are the
integers 1-63.
"""

from pydantic import BaseModel

from setgame.errors import InvalidCardError

COLOURS = ("red", "orange", "yellow", "green", "blue", "purple")

PROJECTIVE_DECK_SIZE = 2 ** len(COLOURS) - 1


class ProjectiveCard(BaseModel, frozen=True):
    """Single projective card: a present/absent flag for each colour."""

    red: bool = False
    orange: bool = False
    yellow: bool = False
    green: bool = False
    blue: bool = False
    purple: bool = False

    def __init__(self, **data: bool):
        """Initialize card from colour flags.

        Raises:
            InvalidCardError: If no colour is present.
        """
        super().__init__(**data)
        # Checked after pydantic validation so the error is not wrapped
        if not any(self.flags()):
            raise InvalidCardError("Projective card must have at least one colour")

    def flags(self) -> tuple[bool, ...]:
        """Get colour flags in encoding order (red first)."""
        return tuple(getattr(self, name) for name in COLOURS)

    def colours(self) -> list[str]:
        """Get names of the colours present on this card."""
        return [name for name in COLOURS if getattr(self, name)]

    def to_int(self) -> int:
        """Encode the card as an integer in 1-63."""
        code = 0
        for flag in self.flags():
            code = (code << 1) | int(flag)
        return code

    @classmethod
    def from_int(cls, code: int) -> "ProjectiveCard":
        """Decode an integer in 1-63 into a card.

        Raises:
            InvalidCardError: If the code is zero or outside the universe.
        """
        if code <= 0 or code > PROJECTIVE_DECK_SIZE:
            raise InvalidCardError(f"Invalid projective card number: {code}")

        top = len(COLOURS) - 1
        return cls(
            **{name: bool(code & (1 << (top - i))) for i, name in enumerate(COLOURS)}
        )

    def __str__(self) -> str:
        return "{" + ", ".join(self.colours()) + "}"

    def __repr__(self) -> str:
        return f"ProjectiveCard({self.to_int()})"
