"""Summary statistics over per-trial results."""

from dataclasses import dataclass
import math
from typing import Sequence


@dataclass(frozen=True)
class EdgeEstimate:
    """Player edge estimate from a set of trials (percent of the base bet)."""

    mean: float
    std_dev: float  # Population standard deviation across trials
    trials: int

    @property
    def standard_error(self) -> float:
        """Standard error of the mean."""
        if self.trials == 0:
            return 0.0
        return self.std_dev / math.sqrt(self.trials)

    @property
    def house_edge(self) -> float:
        """The edge from the house's side (positive = house advantage)."""
        return -self.mean


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; raises ValueError on empty input."""
    if not values:
        raise ValueError("mean requires at least one value")
    return math.fsum(values) / len(values)


def population_std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N, not N - 1)."""
    avg = mean(values)
    return math.sqrt(math.fsum((value - avg) ** 2 for value in values) / len(values))


def summarize(values: Sequence[float]) -> EdgeEstimate:
    """Compute mean and population standard deviation over trial results."""
    return EdgeEstimate(
        mean=mean(values),
        std_dev=population_std_dev(values),
        trials=len(values),
    )
