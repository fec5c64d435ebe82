"""Blackjack rule variations."""

from dataclasses import dataclass, replace
from typing import Literal

SurrenderRule = Literal["none", "early", "late"]
StrategyComplexity = Literal["simple", "basic", "advanced"]
CountingSystemName = Literal["hilo", "wong_halves", "omega2"]


@dataclass(frozen=True)
class RoundConfig:
    """
    Table rules and player policy for a round.

    Everything the strategy oracle may consult, including the live true
    count, which the round engine refreshes through with_true_count().
    """

    # Deck configuration
    num_decks: int = 2

    # Bonus over even money for a natural (0.5 = 3:2, 0.2 = 6:5)
    blackjack_payout: float = 0.5

    # Dealer rules
    dealer_hits_soft_17: bool = False  # H17 vs S17

    # Split rules
    max_split_hands: int = 4  # Maximum number of hands from splitting
    resplit_aces: bool = False  # RSA
    double_after_split: bool = True  # DAS

    # Surrender rules
    surrender: SurrenderRule = "late"

    # Player policy
    strategy_complexity: StrategyComplexity = "advanced"
    counting_system: CountingSystemName | None = "hilo"
    true_count: float = 0.0

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")
        if self.blackjack_payout < 0:
            raise ValueError("blackjack_payout must not be negative")
        if self.max_split_hands < 1:
            raise ValueError("max_split_hands must be at least 1")
        if self.surrender not in ("none", "early", "late"):
            raise ValueError(f"Unknown surrender rule: {self.surrender!r}")
        if self.strategy_complexity not in ("simple", "basic", "advanced"):
            raise ValueError(
                f"Unknown strategy complexity: {self.strategy_complexity!r}"
            )
        if self.counting_system not in (None, "hilo", "wong_halves", "omega2"):
            raise ValueError(f"Unknown counting system: {self.counting_system!r}")

    @property
    def is_counting(self) -> bool:
        """Check if a counting system drives bets and index plays."""
        return self.counting_system is not None

    def with_true_count(self, true_count: float) -> "RoundConfig":
        """Return a copy carrying the given live true count."""
        return replace(self, true_count=true_count)

    @property
    def table_key(self) -> "RoundConfig":
        """Return these rules with the live count zeroed, for caching tables."""
        if self.true_count == 0.0:
            return self
        return replace(self, true_count=0.0)

    @classmethod
    def vegas_strip(cls) -> "RoundConfig":
        """Standard Vegas Strip rules."""
        return cls(
            num_decks=6,
            dealer_hits_soft_17=False,
            blackjack_payout=0.5,
            double_after_split=True,
            resplit_aces=False,
            surrender="late",
        )

    @classmethod
    def downtown_vegas(cls) -> "RoundConfig":
        """Downtown Las Vegas rules (typically H17)."""
        return cls(
            num_decks=6,
            dealer_hits_soft_17=True,
            blackjack_payout=0.5,
            double_after_split=True,
            resplit_aces=False,
            surrender="late",
        )

    @classmethod
    def single_deck(cls) -> "RoundConfig":
        """Single deck rules."""
        return cls(
            num_decks=1,
            dealer_hits_soft_17=True,
            blackjack_payout=0.5,
            double_after_split=False,
            resplit_aces=False,
            surrender="none",
        )

    @classmethod
    def atlantic_city(cls) -> "RoundConfig":
        """Atlantic City rules."""
        return cls(
            num_decks=8,
            dealer_hits_soft_17=False,
            blackjack_payout=0.5,
            double_after_split=True,
            resplit_aces=False,
            surrender="late",
        )


PRESETS = {
    "vegas_strip": RoundConfig.vegas_strip,
    "downtown_vegas": RoundConfig.downtown_vegas,
    "single_deck": RoundConfig.single_deck,
    "atlantic_city": RoundConfig.atlantic_city,
}
