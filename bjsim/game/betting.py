"""Count-driven bet sizing."""

# (true count at or above, multiplier), checked in order
_RAMP: tuple[tuple[float, float], ...] = (
    (4.0, 4.0),
    (2.0, 2.0),
)
NEGATIVE_COUNT_INDEX = -3.0
NEGATIVE_COUNT_MULTIPLIER = 0.5


def bet_multiplier(true_count: float) -> float:
    """
    Return the bet multiplier for a true count.

    4x at +4 or more, 2x at +2 or more, half at -3 or less, else 1x.
    """
    for index, multiplier in _RAMP:
        if true_count >= index:
            return multiplier
    if true_count <= NEGATIVE_COUNT_INDEX:
        return NEGATIVE_COUNT_MULTIPLIER
    return 1.0


def size_bet(base_bet: float, true_count: float | None) -> float:
    """Size a bet from the base unit; no count means a flat bet."""
    if true_count is None:
        return base_bet
    return base_bet * bet_multiplier(true_count)
