"""Hi-Lo card counting system."""

from typing import Mapping

from bjsim.counting.base import CountingSystem


class HiLoSystem(CountingSystem):
    """
    Hi-Lo counting system.

    Tag values:
        2-6: +1 (low cards)
        7-9: 0  (neutral)
        10, A: -1 (high cards)
    """

    _TAG_VALUES: Mapping[int, float] = {
        1: -1,
        2: 1,
        3: 1,
        4: 1,
        5: 1,
        6: 1,
        7: 0,
        8: 0,
        9: 0,
        10: -1,
    }

    @property
    def name(self) -> str:
        return "Hi-Lo"

    @property
    def tag_values(self) -> Mapping[int, float]:
        return self._TAG_VALUES
