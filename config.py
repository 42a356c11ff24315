"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from typing import Literal

DeckPolicy = Literal["reshuffle", "fail"]
DECK_POLICIES: tuple[str, ...] = ("reshuffle", "fail")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Game rules and table setup."""

    initial_chips: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_INITIAL_CHIPS", "100"))
    )
    dealer_stands_on: int = 17
    # What to do when the deck runs out mid-game
    deck_policy: DeckPolicy = field(
        default_factory=lambda: os.getenv("BLACKJACK_DECK_POLICY", "reshuffle").lower()  # type: ignore[return-value]
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.initial_chips < 0:
            raise ValueError("initial_chips cannot be negative")
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")
        if self.deck_policy not in DECK_POLICIES:
            raise ValueError(f"deck_policy must be one of {', '.join(DECK_POLICIES)}")


@dataclass(frozen=True)
class LogConfig:
    """Diagnostic logging and result log configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    results_path: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_RESULTS_PATH", "game_results.txt")
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = AppConfig()
