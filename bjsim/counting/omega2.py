"""Omega II card counting system."""

from typing import Mapping

from bjsim.counting.base import CountingSystem


class Omega2System(CountingSystem):
    """
    Omega II counting system.

    Multi-level and balanced; aces are neutral.

    Tag values:
        2, 3, 7: +1
        4, 5, 6: +2
        8, A: 0
        9: -1
        10: -2
    """

    _TAG_VALUES: Mapping[int, float] = {
        1: 0,
        2: 1,
        3: 1,
        4: 2,
        5: 2,
        6: 2,
        7: 1,
        8: 0,
        9: -1,
        10: -2,
    }

    @property
    def name(self) -> str:
        return "Omega II"

    @property
    def tag_values(self) -> Mapping[int, float]:
        return self._TAG_VALUES
