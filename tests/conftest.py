"""Pytest fixtures for simulator tests."""

from random import Random
from typing import Callable, Sequence

import pytest

from bjsim.cards import Shoe
from bjsim.counting import HiLoSystem, Omega2System, WongHalvesSystem
from bjsim.game.events import EventEmitter
from bjsim.strategy import Action, BasicStrategy, RoundConfig

# Neutral under Hi-Lo, and never a dealer draw once the dealer holds 17+
FILLER = 9


class ScriptedOracle:
    """Strategy oracle driven by a decision function, recording every query."""

    def __init__(self, decide: Callable[[tuple[int, ...], bool], object]) -> None:
        self.decide = decide
        self.calls: list[tuple[tuple[int, ...], int, int, bool]] = []

    def __call__(
        self,
        cards: Sequence[int],
        dealer_up: int,
        num_hands: int,
        hit_allowed: bool,
        config: RoundConfig,
    ) -> object:
        self.calls.append((tuple(cards), dealer_up, num_hands, hit_allowed))
        return self.decide(tuple(cards), hit_allowed)

    @property
    def play_calls(self) -> list[tuple[tuple[int, ...], int, int, bool]]:
        """Queries made during play (excluding the pre-play surrender check)."""
        return [call for call in self.calls if call[3]]


def stacked_shoe(cards: Sequence[int], num_decks: int = 1) -> Shoe:
    """A shoe dealing the given ranks first, padded with neutral cards."""
    return Shoe.stacked(list(cards) + [FILLER] * 52, num_decks=num_decks)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A freshly initialized 2-deck shoe."""
    s = Shoe(num_decks=2, rng=rng)
    s.initialize()
    return s


@pytest.fixture
def hilo():
    """Hi-Lo counting system."""
    return HiLoSystem()


@pytest.fixture
def omega2():
    """Omega II counting system."""
    return Omega2System()


@pytest.fixture
def wong_halves():
    """Wong Halves counting system."""
    return WongHalvesSystem()


@pytest.fixture
def rules():
    """Default rules: 2 decks, 3:2, S17, late surrender, Hi-Lo."""
    return RoundConfig()


@pytest.fixture
def flat_rules():
    """Rules without counting or surrender, so bets stay flat."""
    return RoundConfig(counting_system=None, surrender="none")


@pytest.fixture
def basic_strategy(rules):
    """Basic strategy for default rules."""
    return BasicStrategy(rules)


@pytest.fixture
def events():
    """An event emitter that keeps history."""
    return EventEmitter()


@pytest.fixture
def stack():
    """Factory for shoes that deal the given ranks first."""
    return stacked_shoe


@pytest.fixture
def scripted():
    """Factory for scripted oracles."""
    return ScriptedOracle


@pytest.fixture
def split_pairs_then_stand():
    """Oracle that splits every pair and stands otherwise."""
    return ScriptedOracle(
        lambda cards, hit_allowed: (
            Action.SPLIT if hit_allowed and len(cards) == 2 and cards[0] == cards[1]
            else Action.STAND
        )
    )
