"""Move validation for submitted selections."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence
from uuid import UUID

from setgame.models.game_state import AnyCard, GameCard, Move


class MoveError(IntEnum):
    """Reasons a selection is rejected before the set predicate runs."""

    NONE = 0
    FOREIGN_GAME = 1
    WRONG_COUNT = 2
    DUPLICATE_POSITION = 3
    OUT_OF_RANGE = 4
    CARD_NOT_IN_PLAY = 5


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: MoveError = MoveError.NONE
    error_message: str = ""
    positions: tuple[int, ...] = field(default_factory=tuple)


class MoveValidator:
    """Validates selections against one game's play area.

    The validator holds the game's capability token and rejects moves and
    cards branded with any other token.
    """

    def __init__(self, game_id: UUID, min_cards: int = 3, max_cards: int | None = 3):
        """Initialize validator.

        Args:
            game_id: Token of the game this validator guards
            min_cards: Smallest allowed selection
            max_cards: Largest allowed selection (None for no limit)
        """
        self.game_id = game_id
        self.min_cards = min_cards
        self.max_cards = max_cards

    def validate(self, move: Move, play_area_size: int) -> ValidationResult:
        """Validate a move against the current play area.

        Args:
            move: Move to check
            play_area_size: Number of cards currently in play

        Returns:
            ValidationResult
        """
        if move.game_id != self.game_id:
            return ValidationResult(
                is_valid=False,
                error=MoveError.FOREIGN_GAME,
                error_message="Move was issued by a different game",
            )

        positions = move.positions
        count = len(positions)
        if count < self.min_cards or (self.max_cards is not None and count > self.max_cards):
            expected = (
                str(self.min_cards)
                if self.min_cards == self.max_cards
                else f"at least {self.min_cards}"
            )
            return ValidationResult(
                is_valid=False,
                error=MoveError.WRONG_COUNT,
                error_message=f"Expected {expected} positions, got {count}",
            )

        if len(set(positions)) != count:
            return ValidationResult(
                is_valid=False,
                error=MoveError.DUPLICATE_POSITION,
                error_message=f"Repeated position in {positions}",
            )

        for position in positions:
            if not 0 <= position < play_area_size:
                return ValidationResult(
                    is_valid=False,
                    error=MoveError.OUT_OF_RANGE,
                    error_message=(
                        f"Position {position} outside play area of {play_area_size} cards"
                    ),
                )

        return ValidationResult(is_valid=True, positions=tuple(positions))

    def resolve_cards(
        self,
        cards: Sequence[GameCard],
        in_play: Sequence[AnyCard],
    ) -> ValidationResult:
        """Map branded cards to their current play-area positions.

        Args:
            cards: Cards handed back by the caller
            in_play: Current play area

        Returns:
            ValidationResult whose positions follow the order of ``cards``
        """
        positions = []
        for game_card in cards:
            if game_card.game_id != self.game_id:
                return ValidationResult(
                    is_valid=False,
                    error=MoveError.FOREIGN_GAME,
                    error_message=f"Card {game_card} was dealt by a different game",
                )
            try:
                positions.append(in_play.index(game_card.card))
            except ValueError:
                return ValidationResult(
                    is_valid=False,
                    error=MoveError.CARD_NOT_IN_PLAY,
                    error_message=f"Card {game_card} is no longer in play",
                )

        return self.validate(Move(game_id=self.game_id, positions=tuple(positions)), len(in_play))
