"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: WAITING_FOR_BET → DEALING → PLAYER_TURN → DEALER_TURN → SETTLING → ROUND_COMPLETE
    DEALING goes straight to SETTLING on an early surrender or a natural.
    """

    WAITING_FOR_BET = auto()
    DEALING = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    SETTLING = auto()
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
