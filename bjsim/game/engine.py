"""Round engine: one full round of blackjack driven by a state machine."""

from typing import Any

from transitions import Machine

from bjsim.cards import ACE, Shoe, rank_label
from bjsim.game.betting import size_bet
from bjsim.game.events import EventEmitter, EventType
from bjsim.game.play import HandOutcome, HandPlayer, play_dealer_hand
from bjsim.game.state import RoundState
from bjsim.hand import BLACKJACK, PlayerHand, evaluate, is_blackjack, settle_hand, settle_round
from bjsim.strategy.actions import Action
from bjsim.strategy.oracle import StrategyOracle, recommend
from bjsim.strategy.rules import RoundConfig


class RoundEngine:
    """
    Plays rounds of blackjack against a strategy oracle.

    The engine owns the hand list for the round in progress; the shoe is
    shared across rounds and reshuffled when it runs low. Communication
    happens through return values and, when an emitter is injected, events.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "place_bet", "source": "waiting_for_bet", "dest": "dealing"},
        {"trigger": "deal_cards", "source": "dealing", "dest": "player_turn"},
        # Early surrender or a natural on either side skips play
        {"trigger": "short_circuit", "source": "dealing", "dest": "settling"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "settling"},
        {"trigger": "resolve", "source": "settling", "dest": "round_complete"},
        {"trigger": "new_round", "source": "round_complete", "dest": "waiting_for_bet"},
    ]

    def __init__(
        self,
        rules: RoundConfig,
        shoe: Shoe,
        oracle: StrategyOracle = recommend,
        base_bet: float = 100,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize the round engine.

        Args:
            rules: Table rules and player policy
            shoe: The shoe to deal from (owned by this engine's trial)
            oracle: Strategy oracle consulted for every player decision
            base_bet: Bet unit before count-based sizing
            events: Optional emitter for tracing rounds
        """
        if base_bet <= 0:
            raise ValueError("base_bet must be positive")

        self.rules = rules
        self.shoe = shoe
        self.base_bet = base_bet
        self.events = events
        self.player = HandPlayer(shoe, oracle=oracle, events=events)

        self.round_rules = rules
        self.bet: float = base_bet
        self.player_hands: list[PlayerHand] = []
        self.dealer_cards: list[int] = []
        self.last_result: float = 0.0
        self.rounds_played = 0

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def dealer_up(self) -> int:
        """Return the dealer's upcard."""
        return self.dealer_cards[0]

    def play_round(self) -> float:
        """
        Play one full round.

        Returns:
            The round's net signed result in bet currency
        """
        self._place_bet()
        self._deal_initial_cards()

        if self._resolved_before_play():
            self.short_circuit()
        else:
            self.deal_cards()
            self._play_player_hands()
            self.player_done()
            self._play_dealer()
            self.dealer_plays()

        return self._settle()

    def _place_bet(self) -> None:
        """Reshuffle if needed, then size the bet from the live count."""
        if self.shoe.needs_reshuffle:
            self.shoe.initialize(self.rules.num_decks)
            self._emit(EventType.SHOE_SHUFFLED, cards=self.shoe.cards_remaining)

        if self.rules.is_counting:
            true_count = self.shoe.true_count()
            self.round_rules = self.rules.with_true_count(true_count)
            self.bet = size_bet(self.base_bet, true_count)
        else:
            self.round_rules = self.rules
            self.bet = size_bet(self.base_bet, None)

        self._emit(
            EventType.BET_PLACED,
            amount=self.bet,
            true_count=round(self.round_rules.true_count, 2),
        )
        self.place_bet()

    def _deal_initial_cards(self) -> None:
        """Deal two cards to the dealer, then two to the player."""
        self.dealer_cards = [self.shoe.deal(), self.shoe.deal()]

        hand = PlayerHand(bet=self.bet)
        hand.add_card(self.shoe.deal())
        hand.add_card(self.shoe.deal())
        self.player_hands = [hand]

        self._emit(
            EventType.ROUND_STARTED,
            player=str(hand),
            dealer_up=rank_label(self.dealer_up),
        )

    def _resolved_before_play(self) -> bool:
        """Offer early surrender, then check both hands for a natural."""
        hand = self.player_hands[0]

        action = self.player.query(hand.cards, self.dealer_up, 1, False, self.round_rules)
        if action == Action.SURRENDER:
            hand.surrendered = True
            self._emit(EventType.PLAYER_SURRENDER, hand=str(hand), early=True)
            return True

        player_bj = is_blackjack(hand.cards)
        dealer_bj = is_blackjack(self.dealer_cards)
        if player_bj:
            self._emit(EventType.PLAYER_BLACKJACK)
        if dealer_bj:
            self._emit(EventType.DEALER_BLACKJACK)
        return player_bj or dealer_bj

    def _play_player_hands(self) -> None:
        """
        Play every player hand, including hands created by splits.

        A split appends the new hand to the list and replays the current
        slot, so the list grows while it is being walked.
        """
        index = 0
        while index < len(self.player_hands):
            hand = self.player_hands[index]

            if hand.split_ace and not self._may_play_split_aces(hand):
                self._emit(EventType.SPLIT_ACE_STANDS, hand=str(hand))
                index += 1
                continue

            outcome = self.player.play(
                hand, self.dealer_up, len(self.player_hands), self.round_rules
            )
            if outcome == HandOutcome.SPLIT:
                self._split(index)
                continue

            index += 1

    def _may_play_split_aces(self, hand: PlayerHand) -> bool:
        """A split Ace hand only acts again to resplit, within the hand limit."""
        return (
            self.rules.resplit_aces
            and hand.is_pair
            and len(self.player_hands) < self.rules.max_split_hands
        )

    def _split(self, index: int) -> None:
        """Split the hand at index into two hands, one fresh card each."""
        hand = self.player_hands[index]
        new_hand = PlayerHand(cards=[hand.cards.pop()], bet=hand.bet)

        if new_hand.cards[0] == ACE:
            hand.split_ace = True
            new_hand.split_ace = True

        new_hand.add_card(self.shoe.deal())
        hand.add_card(self.shoe.deal())
        self.player_hands.append(new_hand)

        self._emit(
            EventType.PLAYER_SPLIT,
            hand=str(hand),
            new_hand=str(new_hand),
            num_hands=len(self.player_hands),
        )

    def _play_dealer(self) -> None:
        """Dealer draws to 17 (or soft 17 under H17)."""
        drawn = play_dealer_hand(
            self.dealer_cards, self.shoe, self.rules.dealer_hits_soft_17
        )
        total = evaluate(self.dealer_cards).total
        if drawn:
            self._emit(EventType.DEALER_HITS, cards=drawn)
        if total > BLACKJACK:
            self._emit(EventType.DEALER_BUSTS, total=total)
        else:
            self._emit(EventType.DEALER_STANDS, total=total)

    def _settle(self) -> float:
        """Settle all hands and finish the round."""
        payout = self.rules.blackjack_payout
        result = settle_round(self.player_hands, self.dealer_cards, payout)

        if self.events is not None:
            natural_eligible = len(self.player_hands) == 1
            for i, hand in enumerate(self.player_hands):
                self._emit(
                    EventType.HAND_SETTLED,
                    hand_index=i,
                    hand=str(hand),
                    amount=settle_hand(hand, self.dealer_cards, payout, natural_eligible),
                )
            self._emit(
                EventType.ROUND_ENDED,
                dealer=" ".join(rank_label(rank) for rank in self.dealer_cards),
                result=result,
            )

        self.last_result = result
        self.rounds_played += 1
        self.resolve()
        self.new_round()
        return result

    def _emit(self, event_type: EventType, **data: Any) -> None:
        if self.events is not None:
            self.events.emit_new(event_type, **data)
