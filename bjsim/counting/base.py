"""Abstract base class for card counting systems."""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping

# Copies of each rank (1-10) in one 52-card deck; 10 covers T/J/Q/K.
RANK_COPIES_PER_DECK: Mapping[int, int] = {
    **{rank: 4 for rank in range(1, 10)},
    10: 16,
}


class CountingSystem(ABC):
    """
    Abstract base class for card counting systems.

    All counting systems track a running count and can compute a true count
    based on decks remaining.
    """

    def __init__(self) -> None:
        """Initialize the counting system."""
        self._running_count: float = 0.0
        self._cards_seen: int = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the counting system."""
        ...

    @property
    @abstractmethod
    def tag_values(self) -> Mapping[int, float]:
        """
        Return the tag value mapping for this system.

        Maps each rank (1 = Ace, 10 = any ten-value card) to its count value.
        """
        ...

    @property
    def is_balanced(self) -> bool:
        """Return whether the tags sum to 0 over a complete deck."""
        return self.full_deck_sum == 0

    @property
    def full_deck_sum(self) -> float:
        """Calculate the sum of tag values for a full 52-card deck."""
        return sum(
            self.tag_values[rank] * copies
            for rank, copies in RANK_COPIES_PER_DECK.items()
        )

    def count_card(self, rank: int) -> float:
        """
        Count a single card and update the running count.

        Args:
            rank: The rank of the card (1-10)

        Returns:
            The tag value of the card
        """
        tag_value = self.tag_values[rank]
        self._running_count += tag_value
        self._cards_seen += 1
        return tag_value

    def count_cards(self, ranks: Iterable[int]) -> float:
        """Count multiple cards and return their total tag value."""
        total = 0.0
        for rank in ranks:
            total += self.count_card(rank)
        return total

    @property
    def running_count(self) -> float:
        """Return the current running count."""
        return self._running_count

    def true_count(self, decks_remaining: float) -> float:
        """
        Calculate the true count.

        Args:
            decks_remaining: Number of decks remaining in the shoe

        Returns:
            The true count (running count / decks remaining)
        """
        if decks_remaining <= 0:
            return 0.0
        return self._running_count / decks_remaining

    @property
    def cards_seen(self) -> int:
        """Return the number of cards seen."""
        return self._cards_seen

    def reset(self) -> None:
        """Reset the count to zero."""
        self._running_count = 0.0
        self._cards_seen = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(running_count={self._running_count})"
