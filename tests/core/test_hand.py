"""Tests for hand evaluation and settlement."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bjsim.hand import (
    HandTotal,
    PlayerHand,
    evaluate,
    is_blackjack,
    is_pair,
    settle_hand,
    settle_round,
)


class TestEvaluate:
    """Tests for evaluate()."""

    @pytest.mark.parametrize(
        "cards,expected",
        [
            ([1, 10], HandTotal(21, True)),
            ([1, 1], HandTotal(12, True)),
            ([1, 1, 9], HandTotal(21, True)),
            ([1, 5, 10], HandTotal(16, False)),
            ([10, 10, 5], HandTotal(25, False)),
            ([1, 6], HandTotal(17, True)),
            ([10, 6], HandTotal(16, False)),
            ([1, 1, 1, 1], HandTotal(14, True)),
            ([1], HandTotal(11, True)),
            ([], HandTotal(0, False)),
        ],
    )
    def test_totals(self, cards, expected):
        """Test best totals and softness."""
        assert evaluate(cards) == expected

    def test_soft_to_hard_transition(self):
        """Test an Ace drops from 11 to 1 once it would bust."""
        cards = [1, 6]
        assert evaluate(cards).soft
        cards.append(10)
        assert evaluate(cards) == (17, False)

    @given(st.lists(st.integers(min_value=1, max_value=10), min_size=1, max_size=12))
    def test_total_properties(self, cards):
        """Test soft totals never bust and never undercount the card sum."""
        total, soft = evaluate(cards)
        assert total >= sum(cards)
        if soft:
            assert total <= 21
            assert total == sum(cards) + 10
        else:
            assert total == sum(cards)


class TestHandPredicates:
    """Tests for blackjack and pair detection."""

    @pytest.mark.parametrize("cards", [[1, 10], [10, 1]])
    def test_blackjack(self, cards):
        """Test two-card 21 is a natural."""
        assert is_blackjack(cards)

    def test_three_card_21_is_not_blackjack(self):
        """Test that 21 with 3+ cards is not blackjack."""
        assert not is_blackjack([7, 7, 7])

    def test_pair(self):
        """Test pair detection."""
        assert is_pair([8, 8])
        assert is_pair([10, 10])
        assert not is_pair([8, 9])
        assert not is_pair([8, 8, 8])


class TestPlayerHand:
    """Tests for the PlayerHand class."""

    def test_empty_hand(self):
        """Test empty hand properties."""
        hand = PlayerHand()
        assert len(hand) == 0
        assert hand.total == 0
        assert not hand.is_soft
        assert not hand.is_busted

    def test_add_card(self):
        """Test adding cards to hand."""
        hand = PlayerHand(bet=100)
        hand.add_card(10)
        hand.add_card(6)
        assert list(hand) == [10, 6]
        assert hand.total == 16

    def test_bust(self):
        """Test bust detection."""
        hand = PlayerHand(cards=[10, 10, 6])
        assert hand.is_busted

    def test_str(self):
        """Test string representation."""
        assert str(PlayerHand(cards=[1, 6])) == "A 6 (soft 17)"
        assert str(PlayerHand(cards=[10, 6])) == "T 6 (16)"
        assert str(PlayerHand(cards=[10, 6, 9])) == "T 6 9 (BUST)"
        assert str(PlayerHand(cards=[10, 6], surrendered=True)) == "T 6 (SURRENDER)"


class TestSettleHand:
    """Tests for settling a single hand."""

    def test_natural_pays_three_to_two(self):
        """Test a natural pays bet * (1 + payout)."""
        hand = PlayerHand(cards=[1, 10], bet=100)
        assert settle_hand(hand, [10, 7], 0.5) == 150

    def test_six_to_five(self):
        """Test a 6:5 natural."""
        hand = PlayerHand(cards=[1, 10], bet=100)
        assert settle_hand(hand, [10, 7], 0.2) == pytest.approx(120)

    def test_dealer_natural(self):
        """Test a dealer natural beats a non-natural hand."""
        hand = PlayerHand(cards=[10, 10], bet=100)
        assert settle_hand(hand, [1, 10], 0.5) == -100

    def test_both_naturals_push(self):
        """Test two naturals push."""
        hand = PlayerHand(cards=[1, 10], bet=100)
        assert settle_hand(hand, [10, 1], 0.5) == 0

    def test_surrender_loses_half(self):
        """Test surrender loses half the bet, even against a dealer natural."""
        hand = PlayerHand(cards=[10, 6], bet=100, surrendered=True)
        assert settle_hand(hand, [10, 7], 0.5) == -50
        assert settle_hand(hand, [1, 10], 0.5) == -50

    def test_player_bust_loses_even_if_dealer_busts(self):
        """Test a busted player loses regardless of the dealer."""
        hand = PlayerHand(cards=[10, 6, 10], bet=100)
        assert settle_hand(hand, [10, 6, 10], 0.5) == -100

    def test_dealer_bust_wins(self):
        """Test a standing hand wins when the dealer busts."""
        hand = PlayerHand(cards=[10, 2], bet=100)
        assert settle_hand(hand, [10, 6, 9], 0.5) == 100

    @pytest.mark.parametrize(
        "player,dealer,expected",
        [([10, 9], [10, 8], 100), ([10, 7], [10, 8], -100), ([10, 8], [10, 8], 0)],
    )
    def test_compare_totals(self, player, dealer, expected):
        """Test higher total wins and equal totals push."""
        hand = PlayerHand(cards=player, bet=100)
        assert settle_hand(hand, dealer, 0.5) == expected

    def test_doubled_bet(self):
        """Test a doubled hand settles on its doubled bet."""
        hand = PlayerHand(cards=[5, 6, 10], bet=200, doubled=True)
        assert settle_hand(hand, [10, 7], 0.5) == 200

    def test_split_21_is_not_a_natural(self):
        """Test a two-card 21 after a split pays even money."""
        hand = PlayerHand(cards=[1, 10], bet=100, split_ace=True)
        assert settle_hand(hand, [10, 7], 0.5, natural_eligible=False) == 100
        assert settle_hand(hand, [10, 1], 0.5, natural_eligible=False) == -100


class TestSettleRound:
    """Tests for settling a whole round."""

    def test_single_hand_natural(self):
        """Test a lone hand keeps natural eligibility."""
        hands = [PlayerHand(cards=[1, 10], bet=100)]
        assert settle_round(hands, [10, 7], 0.5) == 150

    def test_split_hands_sum(self):
        """Test split hands settle independently and sum."""
        hands = [
            PlayerHand(cards=[1, 10], bet=100, split_ace=True),
            PlayerHand(cards=[1, 5], bet=100, split_ace=True),
        ]
        assert settle_round(hands, [10, 7], 0.5) == 0
