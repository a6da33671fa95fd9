"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO
from uuid import UUID

from pydantic import BaseModel

from setgame.models.game_state import AnyCard

from .formatters import format_cards


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event,
    so a game can be replayed move by move.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def open(self) -> None:
        """Open the log file for appending if logging is enabled."""
        if self._file is None and self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(
        self,
        game_id: UUID,
        variant: str,
        in_play: Sequence[AnyCard],
        remaining: int,
    ) -> None:
        """Log game start with the initial deal.

        Args:
            game_id: Game token.
            variant: "classic" or "projective".
            in_play: Initial play area.
            remaining: Cards left in the deck.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "game": str(game_id),
            "variant": variant,
            "in_play": format_cards(in_play),
            "remaining": remaining,
        })

    def log_move(
        self,
        game_id: UUID,
        positions: Sequence[int],
        cards: Sequence[AnyCard],
        accepted: bool,
        score: int,
        in_play: Sequence[AnyCard],
    ) -> None:
        """Log a move that reached the set predicate.

        Args:
            game_id: Game token.
            positions: Selected positions.
            cards: Selected cards.
            accepted: Whether the cards formed a set.
            score: Score after the move.
            in_play: Play area after the move.
        """
        self._write({
            "type": "move",
            "game": str(game_id),
            "positions": list(positions),
            "cards": format_cards(cards),
            "accepted": accepted,
            "score": score,
            "in_play": format_cards(in_play),
        })

    def log_draw(
        self,
        game_id: UUID,
        drawn: Sequence[AnyCard],
        score: int,
        remaining: int,
    ) -> None:
        """Log a forced deal of extra cards.

        Args:
            game_id: Game token.
            drawn: Cards added to the play area.
            score: Score after the penalty.
            remaining: Cards left in the deck.
        """
        self._write({
            "type": "draw",
            "game": str(game_id),
            "cards": format_cards(drawn),
            "score": score,
            "remaining": remaining,
        })

    def log_game_end(
        self,
        game_id: UUID,
        score: int,
        in_play: Sequence[AnyCard],
    ) -> None:
        """Log game end when no set remains and the deck is empty.

        Args:
            game_id: Game token.
            score: Final score.
            in_play: Cards left on the table.
        """
        self._write({
            "type": "game_end",
            "game": str(game_id),
            "score": score,
            "in_play": format_cards(in_play),
        })
