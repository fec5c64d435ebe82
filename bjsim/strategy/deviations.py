"""Strategy deviations based on true count (Illustrious 18, Fab 4)."""

from dataclasses import dataclass
from typing import Iterable, Literal

from bjsim.strategy.actions import Action


@dataclass(frozen=True)
class IndexPlay:
    """
    An index play (strategy deviation based on count).

    When the true count crosses the index, deviate from basic strategy.
    """

    # Hand description
    player_total: int
    is_soft: bool
    is_pair: bool
    dealer_upcard: int  # 2-11 (11 = Ace)

    # Basic strategy action (what you'd normally do)
    basic_action: Action

    # Deviation action (what to do once the index is crossed)
    deviation_action: Action

    # True count threshold
    index: float

    # Direction: deviate when TC is >= index ("at_or_above") or <= index ("at_or_below")
    direction: Literal["at_or_above", "at_or_below"] = "at_or_above"

    def should_deviate(self, true_count: float) -> bool:
        """Check if the deviation should be taken at the given true count."""
        if self.direction == "at_or_above":
            return true_count >= self.index
        return true_count <= self.index

    def get_action(self, true_count: float) -> Action:
        """Get the correct action for the given true count."""
        if self.should_deviate(true_count):
            return self.deviation_action
        return self.basic_action

    @property
    def description(self) -> str:
        """Describe the play, e.g. 'stand on 16 vs 10 at TC 0 or higher'."""
        upcard = "A" if self.dealer_upcard == 11 else str(self.dealer_upcard)
        hand = f"{self.player_total // 2}s" if self.is_pair else str(self.player_total)
        bound = "higher" if self.direction == "at_or_above" else "lower"
        return (
            f"{self.deviation_action} on {hand} vs {upcard} "
            f"at TC {self.index:+g} or {bound}"
        )


def _play(
    total: int,
    upcard: int,
    basic: Action,
    deviation: Action,
    index: float,
    pair: bool = False,
) -> IndexPlay:
    # Plays that hit instead of standing trigger as the count falls
    direction = "at_or_below" if deviation == Action.HIT else "at_or_above"
    return IndexPlay(
        player_total=total,
        is_soft=False,
        is_pair=pair,
        dealer_upcard=upcard,
        basic_action=basic,
        deviation_action=deviation,
        index=index,
        direction=direction,
    )


H, S, D, P, R = Action.HIT, Action.STAND, Action.DOUBLE, Action.SPLIT, Action.SURRENDER

# The Illustrious 18 (Schlesinger), ordered by value, without the insurance
# play since insurance is never offered.
ILLUSTRIOUS_18: list[IndexPlay] = [
    _play(16, 10, H, S, 0),
    _play(15, 10, H, S, 4),
    _play(20, 5, S, P, 5, pair=True),
    _play(20, 6, S, P, 4, pair=True),
    _play(10, 10, H, D, 4),
    _play(12, 3, H, S, 2),
    _play(12, 2, H, S, 3),
    _play(11, 11, H, D, 1),
    _play(9, 2, H, D, 1),
    _play(10, 11, H, D, 4),
    _play(9, 7, H, D, 3),
    _play(16, 9, H, S, 5),
    _play(13, 2, S, H, -1),
    _play(12, 4, S, H, 0),
    _play(12, 5, S, H, -2),
    _play(12, 6, S, H, -1),
    _play(13, 3, S, H, -2),
]

# The Fab 4 surrender plays
FAB_4: list[IndexPlay] = [
    _play(14, 10, H, R, 3),
    _play(15, 9, H, R, 2),
    _play(15, 11, H, R, 1),
    _play(14, 11, H, R, 3),
]

del H, S, D, P, R


def find_deviation(
    player_total: int,
    is_soft: bool,
    is_pair: bool,
    dealer_upcard: int,
    true_count: float,
    include_surrender: bool = True,
    plays: Iterable[IndexPlay] | None = None,
) -> IndexPlay | None:
    """
    Find any applicable deviation for the given situation.

    Args:
        player_total: Player's hand total
        is_soft: Whether the hand is soft
        is_pair: Whether the hand is a splittable pair
        dealer_upcard: Dealer's upcard (2-11)
        true_count: Current true count
        include_surrender: Whether to include Fab 4 surrender plays
        plays: Index plays to search (Illustrious 18 + Fab 4 if None)

    Returns:
        The applicable IndexPlay if found and TC crosses its index, else None
    """
    if plays is None:
        plays = ILLUSTRIOUS_18 + FAB_4 if include_surrender else ILLUSTRIOUS_18

    for play in plays:
        if not include_surrender and play.deviation_action == Action.SURRENDER:
            continue
        if (
            play.player_total == player_total
            and play.is_soft == is_soft
            and play.is_pair == is_pair
            and play.dealer_upcard == dealer_upcard
            and play.should_deviate(true_count)
        ):
            return play

    return None
