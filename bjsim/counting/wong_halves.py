"""Wong Halves card counting system."""

from typing import Mapping

from bjsim.counting.base import CountingSystem


class WongHalvesSystem(CountingSystem):
    """
    Wong Halves counting system.

    A multi-level balanced system using fractional values.

    Tag values:
        2, 7: +0.5
        3, 4, 6: +1
        5: +1.5
        8: 0
        9: -0.5
        10, A: -1
    """

    _TAG_VALUES: Mapping[int, float] = {
        1: -1.0,
        2: 0.5,
        3: 1.0,
        4: 1.0,
        5: 1.5,
        6: 1.0,
        7: 0.5,
        8: 0.0,
        9: -0.5,
        10: -1.0,
    }

    @property
    def name(self) -> str:
        return "Wong Halves"

    @property
    def tag_values(self) -> Mapping[int, float]:
        return self._TAG_VALUES
