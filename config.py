"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_bool(name: str, default: bool) -> bool:
    """Parse a true/false environment variable."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means a random shuffle."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    file: str | None = field(default_factory=lambda: os.getenv("BLACKJACK_LOG_FILE") or None)
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal display configuration."""

    # NO_COLOR (https://no-color.org) wins over BLACKJACK_COLOR
    color: bool = field(
        default_factory=lambda: "NO_COLOR" not in os.environ
        and _parse_bool("BLACKJACK_COLOR", True)
    )


@dataclass(frozen=True)
class GameConfig:
    """Game configuration."""

    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
