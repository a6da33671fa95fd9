"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from setgame.logging.game_logger import GameLogConfig
from setgame.models.game_state import Variant


class GameConfig(BaseModel):
    """Game configuration."""

    variant: Variant = Variant.CLASSIC
    seed: int | None = None  # Fixed shuffle seed for reproducible games


class AnalysisConfig(BaseModel):
    """Monte-Carlo analysis configuration."""

    trial_count: int = Field(default=10000, ge=0)
    thread_count: int = Field(default=16, ge=1)
    channel_capacity: int = Field(default=100, ge=1)  # Bounded result queue size
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_file: str | None = None  # Also write records to this file


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    analysis: AnalysisConfig = AnalysisConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
