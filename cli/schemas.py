"""Pydantic schemas for simulation requests and reports."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from bjsim.simulation import SimulationResult
from bjsim.strategy.rules import RoundConfig


class SimulationRequest(BaseModel):
    """A fully merged, validated simulation request."""

    model_config = ConfigDict(frozen=True)

    # Table rules
    num_decks: int = Field(..., ge=1, le=8, description="Decks in the shoe")
    blackjack_payout: float = Field(
        ..., ge=0, description="Bonus over even money for a natural (0.5 = 3:2)"
    )
    dealer_hits_soft_17: bool
    max_split_hands: int = Field(..., ge=1, le=16)
    resplit_aces: bool
    double_after_split: bool
    surrender: Literal["none", "early", "late"]

    # Player policy
    strategy_complexity: Literal["simple", "basic", "advanced"]
    counting_system: Literal["hilo", "wong_halves", "omega2"] | None

    # Simulation plan
    num_trials: int = Field(..., ge=1)
    hands_per_trial: int = Field(..., ge=1)
    base_bet: float = Field(..., gt=0)
    seed: int | None = None
    workers: int = Field(default=1, ge=1)

    def to_round_config(self) -> RoundConfig:
        """Build the engine's round rules."""
        return RoundConfig(
            num_decks=self.num_decks,
            blackjack_payout=self.blackjack_payout,
            dealer_hits_soft_17=self.dealer_hits_soft_17,
            max_split_hands=self.max_split_hands,
            resplit_aces=self.resplit_aces,
            double_after_split=self.double_after_split,
            surrender=self.surrender,
            strategy_complexity=self.strategy_complexity,
            counting_system=self.counting_system,
        )


class SimulationReport(BaseModel):
    """Simulation outcome, in percent of the base bet per round."""

    average: float
    std_dev: float
    standard_error: float
    trials: int
    hands_per_trial: int
    trial_results: list[float]

    @classmethod
    def from_result(
        cls, result: SimulationResult, request: SimulationRequest
    ) -> "SimulationReport":
        """Build a report from a finished simulation."""
        return cls(
            average=result.estimate.mean,
            std_dev=result.estimate.std_dev,
            standard_error=result.estimate.standard_error,
            trials=result.estimate.trials,
            hands_per_trial=request.hands_per_trial,
            trial_results=list(result.trial_results),
        )

    def summary_lines(self) -> list[str]:
        """Console summary: average and standard deviation."""
        return [f"Average:{self.average}%", f"StdDev:{self.std_dev}%"]

    def file_lines(self) -> list[str]:
        """Result-file lines: the summary, then one line per trial."""
        return self.summary_lines() + [f"{value}%" for value in self.trial_results]
