"""Card ranks and the multi-deck Shoe."""

from random import Random
from typing import Iterable, Iterator

from bjsim.counting.base import CountingSystem
from bjsim.counting.hilo import HiLoSystem
from bjsim.errors import ShoeExhaustedError

# Ranks are plain ints: 1 is an Ace, 10 covers 10/J/Q/K.
ACE = 1
TEN = 10
RANKS: tuple[int, ...] = tuple(range(ACE, TEN + 1))

CARDS_PER_DECK = 52
SUITS_PER_DECK = 4

# Refill once fewer than max(26, 13 * decks) cards remain
MIN_RESHUFFLE_CARDS = 26
RESHUFFLE_CARDS_PER_DECK = 13


def rank_for_face(face: int) -> int:
    """
    Collapse a face value (1-13) to its blackjack rank.

    Args:
        face: 1 for Ace, 2-10 for pips, 11-13 for J/Q/K

    Returns:
        The rank (1-10)
    """
    if not 1 <= face <= 13:
        raise ValueError(f"Invalid face value: {face}")
    return min(face, TEN)


def rank_label(rank: int) -> str:
    """Return a short label for a rank ('A', '2'..'9', 'T')."""
    if rank == ACE:
        return "A"
    if rank == TEN:
        return "T"
    return str(rank)


class Shoe:
    """
    A multi-deck shoe of ranks with a running count.

    The shoe starts empty; the first round finds it below the reshuffle
    threshold and initializes it.
    """

    def __init__(
        self,
        num_decks: int = 2,
        counting_system: CountingSystem | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize an empty shoe.

        Args:
            num_decks: Number of 52-card decks per fill
            counting_system: Count updated on every dealt card (Hi-Lo if None)
            rng: Random number generator for shuffling
        """
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")

        self._num_decks = num_decks
        self._counter = counting_system or HiLoSystem()
        self._rng = rng or Random()
        self._cards: list[int] = []

    @classmethod
    def stacked(cls, cards: Iterable[int], num_decks: int = 1) -> "Shoe":
        """
        Build a shoe that deals the given ranks in order, first card first.

        The cards are not shuffled and the count starts at zero.
        """
        shoe = cls(num_decks=num_decks)
        shoe._cards = list(cards)[::-1]
        return shoe

    def initialize(self, num_decks: int | None = None) -> None:
        """
        Refill the shoe with full decks, shuffle, and reset the count.

        Args:
            num_decks: New deck count (keeps the current one if None)
        """
        if num_decks is not None:
            if num_decks < 1:
                raise ValueError("Shoe must have at least 1 deck")
            self._num_decks = num_decks

        copies = SUITS_PER_DECK * self._num_decks
        self._cards = [
            rank_for_face(face)
            for face in range(1, 14)
            for _ in range(copies)
        ]
        self._rng.shuffle(self._cards)
        self._counter.reset()

    def deal(self) -> int:
        """Remove the top card, update the count, and return its rank."""
        if not self._cards:
            raise ShoeExhaustedError("Cannot deal from an empty shoe")
        rank = self._cards.pop()
        self._counter.count_card(rank)
        return rank

    def true_count(self) -> float:
        """Return the running count divided by the decks remaining."""
        return self._counter.true_count(self.decks_remaining)

    @property
    def count(self) -> float:
        """Return the running count."""
        return self._counter.running_count

    @property
    def counting_system(self) -> CountingSystem:
        """Return the counting system tracking this shoe."""
        return self._counter

    @property
    def reshuffle_threshold(self) -> int:
        """Return the card count below which the shoe is refilled."""
        return max(MIN_RESHUFFLE_CARDS, RESHUFFLE_CARDS_PER_DECK * self._num_decks)

    @property
    def needs_reshuffle(self) -> bool:
        """Check if fewer cards remain than the reshuffle threshold."""
        return len(self._cards) < self.reshuffle_threshold

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def decks_remaining(self) -> float:
        """Return the number of decks remaining."""
        return len(self._cards) / CARDS_PER_DECK

    @property
    def total_cards(self) -> int:
        """Return the number of cards in a full shoe."""
        return self._num_decks * CARDS_PER_DECK

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self._num_decks

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[int]:
        # Next card to be dealt first
        return reversed(self._cards)
