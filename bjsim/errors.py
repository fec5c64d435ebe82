"""Exceptions raised by the simulation engine.

Every error here is fatal: the engine never retries or substitutes a
default action.
"""


class SimulationError(Exception):
    """Base class for simulation engine errors."""


class ShoeExhaustedError(SimulationError, IndexError):
    """A card was requested from an empty shoe."""


class UnknownActionError(SimulationError, ValueError):
    """The strategy oracle returned something that is not a player action."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Strategy oracle returned an unknown action: {value!r}")
        self.value = value


class IllegalActionError(SimulationError):
    """The strategy oracle returned an action the hand state does not permit."""
