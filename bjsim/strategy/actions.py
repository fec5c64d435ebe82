"""Player actions."""

from enum import Enum

from bjsim.errors import UnknownActionError


class Action(Enum):
    """Possible player actions."""

    HIT = "hit"
    STAND = "stand"
    DOUBLE = "double"
    SPLIT = "split"
    SURRENDER = "surrender"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: object) -> "Action":
        """
        Convert an oracle answer into an Action.

        Accepts Action members and their string values in any case.

        Raises:
            UnknownActionError: For anything else
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownActionError(value)
