"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from turngames.core.game import DEFAULT_SYMBOLS
from turngames.logging.game_logger import GameLogConfig


class TicTacToeConfig(BaseModel):
    """Tic-tac-toe configuration."""

    board_size: int = 3
    num_players: int = 2
    symbols: list[str] = list(DEFAULT_SYMBOLS)


class TofeConfig(BaseModel):
    """2048 configuration."""

    hard_mode: bool = False


class RunnerConfig(BaseModel):
    """Self-play runner configuration."""

    num_games: int = 10
    seed: int | None = None
    max_moves: int = 10000  # Safety cap for a single 2048 game


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_boards: bool = False


class Config(BaseModel):
    """Root configuration."""

    tictactoe: TicTacToeConfig = TicTacToeConfig()
    tofe: TofeConfig = TofeConfig()
    runner: RunnerConfig = RunnerConfig()
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
