"""Statistical calculations for simulation results."""

from bjsim.statistics.summary import EdgeEstimate, mean, population_std_dev, summarize

__all__ = [
    "EdgeEstimate",
    "mean",
    "population_std_dev",
    "summarize",
]
