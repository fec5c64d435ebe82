"""Blackjack edge simulator engine - no I/O, no UI."""

from bjsim.cards import ACE, TEN, RANKS, Shoe
from bjsim.hand import HandTotal, PlayerHand, evaluate, is_blackjack, settle_round
from bjsim.strategy import Action, RoundConfig, recommend
from bjsim.game import RoundEngine
from bjsim.simulation import SimulationResult, Simulator, run_trial

__all__ = [
    "ACE",
    "TEN",
    "RANKS",
    "Shoe",
    "HandTotal",
    "PlayerHand",
    "evaluate",
    "is_blackjack",
    "settle_round",
    "Action",
    "RoundConfig",
    "recommend",
    "RoundEngine",
    "SimulationResult",
    "Simulator",
    "run_trial",
]
