"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default table configuration."""

    min_bet: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MIN_BET", "1000"))
    )
    max_bet: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MAX_BET", "100000000"))
    )
    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PAYOUT", "1.5"))
    )
    dealer_draw_threshold: int = 16
    initial_cards: int = 2
    max_players: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MAX_PLAYERS", "7"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
