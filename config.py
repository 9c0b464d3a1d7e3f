"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    if not seed:
        return None
    try:
        return int(seed)
    except ValueError:
        raise ValueError(f"Invalid BLACKJACK_SEED: {seed!r} (expected an integer)") from None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    dealer_stands_on: int = 17
    initial_player_cards: int = 2
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration. Records are written to stderr."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
