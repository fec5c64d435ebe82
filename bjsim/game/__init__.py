"""Round engine, hand play and tracing events."""

from bjsim.game.events import EventEmitter, EventType, GameEvent
from bjsim.game.state import RoundState
from bjsim.game.betting import bet_multiplier, size_bet
from bjsim.game.play import HandOutcome, HandPlayer, play_dealer_hand
from bjsim.game.engine import RoundEngine

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "RoundState",
    "bet_multiplier",
    "size_bet",
    "HandOutcome",
    "HandPlayer",
    "play_dealer_hand",
    "RoundEngine",
]
