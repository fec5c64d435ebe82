"""The strategy oracle: which action to take for a hand.

The round engine treats the oracle as an opaque collaborator and accepts
any callable matching StrategyOracle. recommend() is the default, built on
the basic strategy tables and count index plays.
"""

from typing import Protocol, Sequence

from bjsim.hand import evaluate, is_pair
from bjsim.strategy.actions import Action
from bjsim.strategy.basic import BasicStrategy, upcard_value
from bjsim.strategy.deviations import find_deviation
from bjsim.strategy.rules import RoundConfig


class StrategyOracle(Protocol):
    """Callable that recommends a player action."""

    def __call__(
        self,
        cards: Sequence[int],
        dealer_up: int,
        num_hands: int,
        hit_allowed: bool,
        config: RoundConfig,
    ) -> Action | str:
        ...


_strategy_cache: dict[RoundConfig, BasicStrategy] = {}


def strategy_for(config: RoundConfig) -> BasicStrategy:
    """Return the (cached) basic strategy tables for a rule set."""
    key = config.table_key
    strategy = _strategy_cache.get(key)
    if strategy is None:
        strategy = BasicStrategy(key)
        _strategy_cache[key] = strategy
    return strategy


def mimic_dealer(cards: Sequence[int], config: RoundConfig) -> Action:
    """Play like the dealer: hit below 17, and soft 17 under H17."""
    total, soft = evaluate(cards)
    if total < 17 or (total == 17 and soft and config.dealer_hits_soft_17):
        return Action.HIT
    return Action.STAND


def recommend(
    cards: Sequence[int],
    dealer_up: int,
    num_hands: int,
    hit_allowed: bool,
    config: RoundConfig,
) -> Action:
    """
    Recommend an action for a player hand.

    Args:
        cards: The player's cards (ranks 1-10)
        dealer_up: The dealer's upcard rank
        num_hands: Number of hands currently in play (more than 1 after a split)
        hit_allowed: False for the pre-play check, where only an early
            surrender is meaningful
        config: Rules, strategy complexity and the live true count

    Returns:
        The recommended action
    """
    if config.strategy_complexity == "simple":
        if not hit_allowed:
            return Action.STAND
        return mimic_dealer(cards, config)

    total, soft = evaluate(cards)
    upcard = upcard_value(dealer_up)
    first_decision = len(cards) == 2 and num_hands == 1

    if hit_allowed:
        can_surrender = first_decision and config.surrender != "none"
    else:
        can_surrender = first_decision and config.surrender == "early"
    can_double = len(cards) == 2 and (num_hands == 1 or config.double_after_split)
    can_split = is_pair(cards) and num_hands < config.max_split_hands
    pair = is_pair(cards) and can_split

    action: Action | None = None
    if config.strategy_complexity == "advanced" and config.is_counting:
        play = find_deviation(
            player_total=total,
            is_soft=soft,
            is_pair=pair,
            dealer_upcard=upcard,
            true_count=config.true_count,
            include_surrender=can_surrender,
        )
        if play is not None and (play.deviation_action != Action.DOUBLE or can_double):
            action = play.deviation_action

    if action is None:
        action = strategy_for(config).get_action(
            player_total=total,
            dealer_upcard=upcard,
            is_soft=soft,
            is_pair=pair,
            pair_rank=upcard_value(cards[0]) if pair else None,
            can_double=can_double,
            can_surrender=can_surrender,
            can_split=can_split,
        )

    if not hit_allowed:
        # The pre-play check only asks whether to surrender now
        return Action.SURRENDER if action == Action.SURRENDER else Action.STAND
    return action


def always_stand(
    cards: Sequence[int],
    dealer_up: int,
    num_hands: int,
    hit_allowed: bool,
    config: RoundConfig,
) -> Action:
    """Stand on everything; a fixed baseline policy."""
    return Action.STAND
