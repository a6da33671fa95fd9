"""Game engine: play area, replenishment and scoring."""

from __future__ import annotations

import logging
import random
from typing import ClassVar, NoReturn, Sequence
from uuid import uuid4

from setgame.errors import (
    DeckExhaustedError,
    ForeignObjectError,
    GameOverError,
    InvalidMoveError,
    NotASetError,
)
from setgame.logging import GameLogger
from setgame.models.card import Card
from setgame.models.game_state import (
    AnyCard,
    GameCard,
    GameStatus,
    Move,
    MoveOutcome,
    Variant,
)

from .analyzer import find_sets, has_set, is_set
from .deck import Deck, make_shuffled_deck
from .validator import MoveError, MoveValidator, ValidationResult

logger = logging.getLogger(__name__)

# Cards added by a forced deal
DRAW_COUNT = 3


class Game:
    """Base game: one deck, one play area and a score.

    Subclasses fix the variant, the steady-state play-area size and the set
    rule. A game is not thread-safe; use one instance per thread.

    Every game carries a random ``game_id``. Moves and in-play cards handed
    out by a game are branded with that id, and the game refuses branded
    objects coming from any other instance.
    """

    variant: ClassVar[Variant]
    steady_size: ClassVar[int]
    min_cards: ClassVar[int] = 3
    max_cards: ClassVar[int | None] = 3

    def __init__(
        self,
        deck: Sequence[AnyCard] | None = None,
        in_play: Sequence[AnyCard] | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize and deal a new game.

        Args:
            deck: Draw pile in stack order (last card drawn first).
                A freshly shuffled full deck is used if not provided.
            in_play: Initial play area. If not provided, the steady-state
                number of cards is dealt from the deck.
            rng: Random source for the shuffle
            game_logger: GameLogger instance for event logging
        """
        self.game_id = uuid4()
        self.game_logger = game_logger
        self.validator = MoveValidator(self.game_id, self.min_cards, self.max_cards)

        cards = list(deck) if deck is not None else self._new_deck(rng)
        dealt = list(in_play) if in_play is not None else []
        all_cards = dealt + cards
        if len(set(all_cards)) != len(all_cards):
            raise ValueError("Deck and play area must not contain duplicate cards")

        self._deck: Deck = Deck(cards)
        self._in_play: list[AnyCard] = dealt
        self._score = 0
        self._original_size = len(all_cards)

        if in_play is None:
            self._deal_initial()

        logger.info(
            f"Game {self.game_id} ({self.variant.value}) started with "
            f"{len(self._in_play)} cards in play, {len(self._deck)} in deck"
        )
        if self.game_logger:
            self.game_logger.log_game_start(
                self.game_id,
                self.variant.value,
                self._in_play,
                len(self._deck),
            )

    @classmethod
    def from_cards(
        cls,
        in_play: Sequence[AnyCard],
        deck: Sequence[AnyCard],
        game_logger: GameLogger | None = None,
    ) -> Game:
        """Create a game with a fixed play area and draw pile.

        Args:
            in_play: Cards on the table, in position order
            deck: Draw pile in stack order (last card drawn first)
            game_logger: GameLogger instance for event logging
        """
        return cls(deck=deck, in_play=in_play, game_logger=game_logger)

    # Variant hooks

    def _new_deck(self, rng: random.Random | None) -> list[AnyCard]:
        raise NotImplementedError

    def _is_set(self, cards: Sequence[AnyCard]) -> bool:
        raise NotImplementedError

    def has_set(self) -> bool:
        """Check if any set is available in the play area."""
        raise NotImplementedError

    def find_sets(self) -> list[tuple[int, ...]]:
        """Find all sets in the play area as position tuples."""
        raise NotImplementedError

    # Read-only queries

    @property
    def score(self) -> int:
        """Current score (may be negative)."""
        return self._score

    @property
    def remaining_cards(self) -> int:
        """Number of cards left in the deck."""
        return len(self._deck)

    @property
    def original_size(self) -> int:
        """Number of cards the game started with (play area plus deck)."""
        return self._original_size

    @property
    def status(self) -> GameStatus:
        """Current lifecycle state."""
        if self._deck.is_empty() and not self.has_set():
            return GameStatus.EXHAUSTED
        return GameStatus.ACTIVE

    @property
    def is_exhausted(self) -> bool:
        """Check if the game has reached its terminal state."""
        return self.status == GameStatus.EXHAUSTED

    def cards_in_play(self) -> list[AnyCard]:
        """Get the play area in position order."""
        return list(self._in_play)

    def played_cards(self) -> list[GameCard]:
        """Get the play area as cards branded with this game's id."""
        return [GameCard(game_id=self.game_id, card=c) for c in self._in_play]

    def move(self, *positions: int) -> Move:
        """Create a move bound to this game."""
        return Move(game_id=self.game_id, positions=tuple(positions))

    def find_moves(self) -> list[Move]:
        """Get every available set as a move bound to this game."""
        return [self.move(*positions) for positions in self.find_sets()]

    # Mutations

    def attempt_move(self, move: Move | Sequence[int]) -> MoveOutcome:
        """Submit a selection of play-area positions.

        Args:
            move: Move issued by this game, or plain positions

        Returns:
            MoveOutcome describing removed and newly dealt cards

        Raises:
            GameOverError: If the game is exhausted
            ForeignObjectError: If the move belongs to another game
            InvalidMoveError: If positions are repeated or out of range
            NotASetError: If the cards do not form a set (costs a point)
        """
        if not isinstance(move, Move):
            move = self.move(*move)

        self._check_active()
        validation = self.validator.validate(move, len(self._in_play))
        if not validation.is_valid:
            self._reject(validation)

        return self._play(validation.positions)

    def take_cards(self, cards: Sequence[GameCard]) -> MoveOutcome:
        """Submit a selection of in-play cards previously handed out.

        Same outcomes as attempt_move; cards dealt by another game or no
        longer on the table are rejected as invalid moves.
        """
        self._check_active()
        validation = self.validator.resolve_cards(cards, self._in_play)
        if not validation.is_valid:
            self._reject(validation)

        return self._play(validation.positions)

    def draw_three(self) -> list[GameCard]:
        """Deal three extra cards when no set can be found.

        Costs one point. All-or-nothing: with fewer than three cards left the
        game is left untouched and not penalised.

        Returns:
            The newly dealt cards, in their new play-area order

        Raises:
            DeckExhaustedError: If fewer than three cards remain
        """
        if len(self._deck) < DRAW_COUNT:
            raise DeckExhaustedError(
                f"Cannot draw {DRAW_COUNT} cards: only {len(self._deck)} remaining",
                game=self,
            )

        drawn = self._deck.draw_many(DRAW_COUNT)
        self._in_play.extend(drawn)
        self._score -= 1

        logger.debug(
            f"Game {self.game_id}: drew {DRAW_COUNT}, "
            f"{len(self._in_play)} in play, score {self._score}"
        )
        if self.game_logger:
            self.game_logger.log_draw(self.game_id, drawn, self._score, len(self._deck))

        return [GameCard(game_id=self.game_id, card=c) for c in drawn]

    # Internals

    def _deal_initial(self) -> None:
        """Deal the steady-state play area from the top of the deck."""
        # Fresh decks always hold more cards than the initial deal
        self._in_play = self._deck.draw_many(self.steady_size)

    def _check_active(self) -> None:
        if self.is_exhausted:
            raise GameOverError("No sets remain and the deck is empty", game=self)

    def _reject(self, validation: ValidationResult) -> NoReturn:
        """Raise the error matching a failed validation."""
        if validation.error == MoveError.FOREIGN_GAME:
            logger.warning(f"Game {self.game_id}: {validation.error_message}")
            raise ForeignObjectError(validation.error_message, game=self)
        raise InvalidMoveError(validation.error_message, game=self)

    def _play(self, positions: tuple[int, ...]) -> MoveOutcome:
        """Score a validated selection and replenish the play area."""
        cards = [self._in_play[i] for i in positions]

        if not self._is_set(cards):
            self._score -= 1
            logger.debug(f"Game {self.game_id}: {positions} is not a set, score {self._score}")
            if self.game_logger:
                self.game_logger.log_move(
                    self.game_id, positions, cards, False, self._score, self._in_play
                )
            raise NotASetError(f"Cards at {positions} do not form a set", game=self)

        self._score += 1
        placed = self._replenish(positions)

        logger.debug(
            f"Game {self.game_id}: set at {positions}, "
            f"{len(self._in_play)} in play, score {self._score}"
        )
        if self.game_logger:
            self.game_logger.log_move(
                self.game_id, positions, cards, True, self._score, self._in_play
            )

        if self.is_exhausted:
            logger.info(f"Game {self.game_id} finished with score {self._score}")
            if self.game_logger:
                self.game_logger.log_game_end(self.game_id, self._score, self._in_play)

        return MoveOutcome(
            positions=positions,
            removed=cards,
            placed=placed,
            score=self._score,
        )

    def _replenish(self, positions: tuple[int, ...]) -> list[AnyCard]:
        """Remove matched cards, refilling in place when at steady size.

        Returns:
            Cards dealt into the play area
        """
        if self._deck.is_empty():
            self._remove_descending(positions)
            return []

        if len(self._in_play) <= self.steady_size:
            placed: list[AnyCard] = []
            unfilled: list[int] = []
            for i in positions:
                if self._deck.is_empty():
                    unfilled.append(i)
                    continue
                card = self._deck.draw()
                self._in_play[i] = card
                placed.append(card)
            self._remove_descending(unfilled)
            return placed

        self._shrink(positions)
        return []

    def _remove_descending(self, positions: Sequence[int]) -> None:
        """Delete positions from the highest down so lower ones stay valid."""
        for i in sorted(positions, reverse=True):
            del self._in_play[i]

    def _shrink(self, positions: Sequence[int]) -> None:
        """Remove matched cards from an oversized play area.

        Positions below the new end keep their place and are filled with
        cards taken from the tail; matched cards at or past the new end are
        simply dropped.
        """
        new_end = len(self._in_play) - len(positions)
        before = [i for i in positions if i < new_end]
        after = sorted((i for i in positions if i >= new_end), reverse=True)

        for i in after:
            del self._in_play[i]
        for i in before:
            self._in_play[i] = self._in_play.pop()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.game_id}, in_play={len(self._in_play)}, "
            f"remaining={len(self._deck)}, score={self._score})"
        )


class ClassicGame(Game):
    """Classic Set: 81 cards, 12 in play, sets of three."""

    variant = Variant.CLASSIC
    steady_size = 12

    def _new_deck(self, rng: random.Random | None) -> list[Card]:
        return make_shuffled_deck(rng)

    def _is_set(self, cards: Sequence[Card]) -> bool:
        return is_set(*cards)

    def has_set(self) -> bool:
        """Check if any set is available in the play area."""
        return has_set(self._in_play)

    def find_sets(self) -> list[tuple[int, int, int]]:
        """Find all sets in the play area as position triples."""
        return find_sets(self._in_play)
