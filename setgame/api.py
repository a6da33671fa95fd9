"""Functional entry points for UI and CLI front ends.

Each call takes a game and returns it. Failures raise a GameError subclass
whose ``game`` attribute holds the same, unchanged game (apart from the
score penalty of NotASetError).
"""

from __future__ import annotations

import random
from typing import Sequence

from setgame.analysis.harness import run_analysis as _run_analysis
from setgame.config import Config
from setgame.game.engine import ClassicGame, Game
from setgame.game.projective import ProjectiveGame
from setgame.logging import GameLogger
from setgame.models.game_state import AnyCard, Move, Variant

GAME_CLASSES: dict[Variant, type[Game]] = {
    Variant.CLASSIC: ClassicGame,
    Variant.PROJECTIVE: ProjectiveGame,
}


def new_game(
    variant: Variant | str | None = None,
    config: Config | None = None,
    game_logger: GameLogger | None = None,
) -> Game:
    """Shuffle a full deck and deal a new game.

    Args:
        variant: Game variant (uses config if not specified)
        config: Configuration (uses defaults if not provided)
        game_logger: GameLogger instance for event logging. If not
            provided and config.game_log is enabled, one is opened from it
            and left on the game as ``game.game_logger`` for the caller to close.

    Returns:
        A new game with score 0
    """
    config = config or Config()
    variant = Variant(variant) if variant is not None else config.game.variant
    if game_logger is None and config.game_log.enabled:
        game_logger = GameLogger(config.game_log)
        game_logger.open()
    seed = config.game.seed
    rng = random.Random(seed) if seed is not None else None
    return GAME_CLASSES[variant](rng=rng, game_logger=game_logger)


def attempt_move(game: Game, positions: Move | Sequence[int]) -> Game:
    """Submit a selection of positions; see Game.attempt_move."""
    game.attempt_move(positions)
    return game


def draw_three(game: Game) -> Game:
    """Deal three extra cards; see Game.draw_three."""
    game.draw_three()
    return game


def find_sets(game: Game) -> list[tuple[int, ...]]:
    """Get the positions of every set in play."""
    return game.find_sets()


def score(game: Game) -> int:
    """Get the game's score."""
    return game.score


def remaining_cards(game: Game) -> int:
    """Get the number of cards left in the deck."""
    return game.remaining_cards


def cards_in_play(game: Game) -> list[AnyCard]:
    """Get the play area in position order."""
    return game.cards_in_play()


def run_analysis(
    trial_count: int | None = None,
    thread_count: int | None = None,
    config: Config | None = None,
) -> dict[int, int]:
    """Run the parallel set-free estimate and return its histogram."""
    config = config or Config()
    result = _run_analysis(
        trial_count=trial_count,
        thread_count=thread_count,
        config=config.analysis,
    )
    return result.histogram
