"""Playing out player hands (oracle-driven) and the dealer hand (fixed rules)."""

from enum import Enum, auto
from typing import Any, Sequence

from bjsim.cards import Shoe
from bjsim.errors import IllegalActionError
from bjsim.game.events import EventEmitter, EventType
from bjsim.hand import BLACKJACK, PlayerHand, evaluate
from bjsim.strategy.actions import Action
from bjsim.strategy.oracle import StrategyOracle, recommend
from bjsim.strategy.rules import RoundConfig


class HandOutcome(Enum):
    """How a call to HandPlayer.play() ended."""

    STAND = auto()
    SURRENDER = auto()
    DOUBLE = auto()
    BUST = auto()
    SPLIT = auto()  # The caller performs the split and replays the hand


class HandPlayer:
    """
    Plays a single player hand against the strategy oracle.

    Each call queries the oracle until the hand reaches a terminal outcome.
    Splits are only signalled; the round engine owns the hand list.
    """

    def __init__(
        self,
        shoe: Shoe,
        oracle: StrategyOracle = recommend,
        events: EventEmitter | None = None,
    ) -> None:
        self.shoe = shoe
        self.oracle = oracle
        self.events = events

    def query(
        self,
        cards: Sequence[int],
        dealer_up: int,
        num_hands: int,
        hit_allowed: bool,
        rules: RoundConfig,
    ) -> Action:
        """Ask the oracle for an action, rejecting anything unknown."""
        answer = self.oracle(tuple(cards), dealer_up, num_hands, hit_allowed, rules)
        return Action.coerce(answer)

    def play(
        self,
        hand: PlayerHand,
        dealer_up: int,
        num_hands: int,
        rules: RoundConfig,
    ) -> HandOutcome:
        """
        Play one hand to a terminal outcome.

        Args:
            hand: The hand to play (mutated in place)
            dealer_up: The dealer's upcard rank
            num_hands: Number of hands currently in play
            rules: Rules passed through to the oracle

        Returns:
            The outcome; SPLIT asks the caller to split this hand

        Raises:
            IllegalActionError: Surrender after the first decision, or a split
                of a non-pair or beyond max_split_hands
        """
        while True:
            action = self.query(hand.cards, dealer_up, num_hands, True, rules)

            if action == Action.STAND:
                self._emit(EventType.PLAYER_STAND, hand=str(hand))
                return HandOutcome.STAND

            if action == Action.SURRENDER:
                if num_hands != 1 or len(hand.cards) != 2:
                    raise IllegalActionError(
                        f"Surrender is only allowed as the first decision, got it on {hand}"
                    )
                hand.surrendered = True
                self._emit(EventType.PLAYER_SURRENDER, hand=str(hand))
                return HandOutcome.SURRENDER

            if action == Action.DOUBLE:
                hand.bet *= 2
                hand.doubled = True
                hand.add_card(self.shoe.deal())
                self._emit(EventType.PLAYER_DOUBLE, hand=str(hand), bet=hand.bet)
                return HandOutcome.DOUBLE

            if action == Action.HIT:
                hand.add_card(self.shoe.deal())
                self._emit(EventType.PLAYER_HIT, hand=str(hand))
                if hand.total > BLACKJACK:
                    self._emit(EventType.PLAYER_BUSTS, hand=str(hand))
                    return HandOutcome.BUST
                continue

            # Action.SPLIT
            if not hand.is_pair:
                raise IllegalActionError(f"Cannot split a non-pair: {hand}")
            if num_hands >= rules.max_split_hands:
                raise IllegalActionError(
                    f"Cannot split beyond {rules.max_split_hands} hands"
                )
            return HandOutcome.SPLIT

    def _emit(self, event_type: EventType, **data: Any) -> None:
        if self.events is not None:
            self.events.emit_new(event_type, **data)


def dealer_should_hit(cards: Sequence[int], hits_soft_17: bool) -> bool:
    """Determine if the dealer draws: below 17, or soft 17 under H17."""
    total, soft = evaluate(cards)
    if total < 17:
        return True
    return total == 17 and soft and hits_soft_17


def play_dealer_hand(cards: list[int], shoe: Shoe, hits_soft_17: bool) -> int:
    """
    Draw dealer cards until the house rules say stand.

    Returns:
        The number of cards drawn
    """
    drawn = 0
    while dealer_should_hit(cards, hits_soft_17):
        cards.append(shoe.deal())
        drawn += 1
    return drawn
