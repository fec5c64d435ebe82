"""Strategy tables, deviations and the strategy oracle."""

from bjsim.strategy.rules import PRESETS, RoundConfig
from bjsim.strategy.actions import Action
from bjsim.strategy.basic import BasicStrategy
from bjsim.strategy.deviations import IndexPlay, ILLUSTRIOUS_18, FAB_4
from bjsim.strategy.oracle import StrategyOracle, always_stand, recommend

__all__ = [
    "PRESETS",
    "RoundConfig",
    "Action",
    "BasicStrategy",
    "IndexPlay",
    "ILLUSTRIOUS_18",
    "FAB_4",
    "StrategyOracle",
    "always_stand",
    "recommend",
]
