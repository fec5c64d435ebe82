"""Hand evaluation and settlement for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Sequence

from bjsim.cards import ACE, rank_label

BLACKJACK = 21


class HandTotal(NamedTuple):
    """A hand's best total and whether an Ace is counted as 11."""

    total: int
    soft: bool


def evaluate(cards: Sequence[int]) -> HandTotal:
    """
    Calculate the best total of a hand.

    Aces count as 1; one Ace is promoted to 11 when that does not bust.
    A second Ace is never promoted, since 11 + 11 always busts. Totals over
    21 are returned as-is and never flagged soft.
    """
    total = sum(cards)
    if total <= 11 and ACE in cards:
        return HandTotal(total + 10, True)
    return HandTotal(total, False)


def is_blackjack(cards: Sequence[int]) -> bool:
    """Check if the cards are a natural (exactly 2 cards totaling 21)."""
    return len(cards) == 2 and evaluate(cards).total == BLACKJACK


def is_pair(cards: Sequence[int]) -> bool:
    """Check if the cards are a pair (two cards of the same rank)."""
    return len(cards) == 2 and cards[0] == cards[1]


@dataclass
class PlayerHand:
    """One player hand within a round."""

    cards: list[int] = field(default_factory=list)
    bet: float = 0
    surrendered: bool = False
    split_ace: bool = False
    doubled: bool = False

    def add_card(self, rank: int) -> None:
        """Add a card to the hand."""
        self.cards.append(rank)

    @property
    def total(self) -> int:
        """Return the best hand total."""
        return evaluate(self.cards).total

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is counted as 11."""
        return evaluate(self.cards).soft

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > BLACKJACK

    @property
    def is_pair(self) -> bool:
        """Check if the hand is a pair."""
        return is_pair(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(rank_label(rank) for rank in self.cards)
        hand_total = evaluate(self.cards)
        if self.surrendered:
            value_str = "(SURRENDER)"
        elif hand_total.total > BLACKJACK:
            value_str = "(BUST)"
        elif hand_total.soft:
            value_str = f"(soft {hand_total.total})"
        else:
            value_str = f"({hand_total.total})"
        return f"{cards_str} {value_str}"


def settle_hand(
    hand: PlayerHand,
    dealer_cards: Sequence[int],
    blackjack_payout: float,
    natural_eligible: bool = True,
) -> float:
    """
    Settle one player hand against the dealer.

    Args:
        hand: The player hand
        dealer_cards: The dealer's final cards
        blackjack_payout: Bonus over even money for a natural (0.5 pays 3:2)
        natural_eligible: False once the round's hand was split, so a
            two-card 21 counts as an ordinary 21

    Returns:
        Signed result in bet currency
    """
    if hand.surrendered:
        return -hand.bet / 2

    player_bj = natural_eligible and is_blackjack(hand.cards)
    dealer_bj = is_blackjack(dealer_cards)

    if player_bj and dealer_bj:
        return 0
    if player_bj:
        return hand.bet * (1 + blackjack_payout)
    if dealer_bj:
        return -hand.bet

    player_total = hand.total
    dealer_total = evaluate(dealer_cards).total

    if player_total > BLACKJACK:
        return -hand.bet
    if dealer_total > BLACKJACK:
        return hand.bet
    if player_total > dealer_total:
        return hand.bet
    if player_total < dealer_total:
        return -hand.bet
    return 0


def settle_round(
    hands: Sequence[PlayerHand],
    dealer_cards: Sequence[int],
    blackjack_payout: float,
) -> float:
    """Settle every hand of a round and return the summed result."""
    natural_eligible = len(hands) == 1
    return sum(
        settle_hand(hand, dealer_cards, blackjack_payout, natural_eligible)
        for hand in hands
    )
