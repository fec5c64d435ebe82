"""Card counting systems."""

from bjsim.counting.base import CountingSystem
from bjsim.counting.hilo import HiLoSystem
from bjsim.counting.omega2 import Omega2System
from bjsim.counting.wong_halves import WongHalvesSystem

COUNTING_SYSTEMS: dict[str, type[CountingSystem]] = {
    "hilo": HiLoSystem,
    "wong_halves": WongHalvesSystem,
    "omega2": Omega2System,
}


def create_counting_system(name: str | None) -> CountingSystem:
    """
    Create a fresh counting system for a selector name.

    None selects Hi-Lo, which the shoe always tracks.
    """
    if name is None:
        return HiLoSystem()
    try:
        return COUNTING_SYSTEMS[name]()
    except KeyError:
        raise ValueError(f"Unknown counting system: {name!r}") from None


__all__ = [
    "COUNTING_SYSTEMS",
    "CountingSystem",
    "HiLoSystem",
    "Omega2System",
    "WongHalvesSystem",
    "create_counting_system",
]
