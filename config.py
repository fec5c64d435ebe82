"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from bjsim.strategy.rules import RoundConfig


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _parse_count_system() -> str | None:
    """Parse BJSIM_COUNT_SYSTEM; 'none' or empty turns counting off."""
    value = os.getenv("BJSIM_COUNT_SYSTEM", "hilo").strip().lower()
    if value in ("", "none"):
        return None
    return value


def _parse_seed() -> int | None:
    value = os.getenv("BJSIM_SEED")
    return int(value) if value else None


@dataclass(frozen=True)
class TableConfig:
    """Default table rules and player policy."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("BJSIM_DECKS", "2")))
    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BJSIM_BJ_PAYOUT", "0.5"))
    )
    dealer_hits_soft_17: bool = field(
        default_factory=lambda: _env_bool("BJSIM_HIT_SOFT_17", "false")
    )
    max_split_hands: int = field(
        default_factory=lambda: int(os.getenv("BJSIM_MAX_SPLIT_HANDS", "4"))
    )
    resplit_aces: bool = field(
        default_factory=lambda: _env_bool("BJSIM_RESPLIT_ACES", "false")
    )
    double_after_split: bool = field(
        default_factory=lambda: _env_bool("BJSIM_DOUBLE_AFTER_SPLIT", "true")
    )
    surrender: str = field(default_factory=lambda: os.getenv("BJSIM_SURRENDER", "late"))
    strategy_complexity: str = field(
        default_factory=lambda: os.getenv("BJSIM_STRATEGY", "advanced")
    )
    counting_system: str | None = field(default_factory=_parse_count_system)

    def to_round_config(self) -> RoundConfig:
        """Build validated round rules from these defaults."""
        return RoundConfig(
            num_decks=self.num_decks,
            blackjack_payout=self.blackjack_payout,
            dealer_hits_soft_17=self.dealer_hits_soft_17,
            max_split_hands=self.max_split_hands,
            resplit_aces=self.resplit_aces,
            double_after_split=self.double_after_split,
            surrender=self.surrender,  # type: ignore[arg-type]
            strategy_complexity=self.strategy_complexity,  # type: ignore[arg-type]
            counting_system=self.counting_system,  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class SimulationConfig:
    """Default simulation plan."""

    num_trials: int = field(default_factory=lambda: int(os.getenv("BJSIM_TRIALS", "10000")))
    hands_per_trial: int = field(
        default_factory=lambda: int(os.getenv("BJSIM_HANDS_PER_TRIAL", "1000"))
    )
    base_bet: float = field(default_factory=lambda: float(os.getenv("BJSIM_BASE_BET", "100")))
    seed: int | None = field(default_factory=_parse_seed)
    workers: int = field(default_factory=lambda: int(os.getenv("BJSIM_WORKERS", "1")))
    verbose: bool = field(default_factory=lambda: _env_bool("BJSIM_VERBOSE", "false"))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    table: TableConfig = field(default_factory=TableConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


# Global configuration instance
config = AppConfig()
