"""Tests for Monte Carlo trials and the simulator."""

import math
from random import Random

import pytest

from bjsim.cards import Shoe
from bjsim.game import EventEmitter, EventType, RoundEngine
from bjsim.simulation import Simulator, run_trial
from bjsim.strategy import RoundConfig, always_stand


@pytest.fixture
def small_rules():
    return RoundConfig(counting_system=None)


class TestRunTrial:
    """Tests for a single trial."""

    def test_seeded_trial_is_reproducible(self, small_rules):
        """Test the same seed gives the same trial result."""
        first = run_trial(small_rules, 200, seed=11, oracle=always_stand)
        second = run_trial(small_rules, 200, seed=11, oracle=always_stand)
        assert first == second

    def test_return_is_percent_of_base_bet(self, small_rules):
        """Test the trial return is 100 * total / hands / base bet."""
        hands, base_bet = 150, 25
        engine = RoundEngine(
            small_rules,
            Shoe(num_decks=small_rules.num_decks, rng=Random(3)),
            oracle=always_stand,
            base_bet=base_bet,
        )
        total = sum(engine.play_round() for _ in range(hands))

        result = run_trial(small_rules, hands, base_bet=base_bet, seed=3, oracle=always_stand)
        assert result == pytest.approx(100 * total / hands / base_bet)

    def test_trial_events(self, small_rules):
        """Test a traced trial reports every round."""
        events = EventEmitter()
        run_trial(small_rules, 20, seed=1, oracle=always_stand, events=events)
        assert len(events.of_type(EventType.ROUND_ENDED)) == 20


class TestSimulator:
    """Tests for running many trials."""

    def test_result_shape(self, small_rules):
        """Test one result per trial and a matching summary."""
        result = Simulator(
            small_rules, num_trials=5, hands_per_trial=50, seed=42, oracle=always_stand
        ).run()

        assert len(result.trial_results) == 5
        assert result.estimate.trials == 5
        assert result.average == pytest.approx(sum(result.trial_results) / 5)
        assert result.std_dev >= 0

    def test_seeded_run_is_reproducible(self, small_rules):
        """Test a seeded run repeats exactly."""
        first = Simulator(small_rules, num_trials=4, hands_per_trial=100, seed=7).run()
        second = Simulator(small_rules, num_trials=4, hands_per_trial=100, seed=7).run()
        assert first.trial_results == second.trial_results

    def test_trials_are_independent(self, small_rules):
        """Test trials use different seeds."""
        simulator = Simulator(small_rules, num_trials=10, hands_per_trial=1, seed=1)
        seeds = simulator.trial_seeds()
        assert len(set(seeds)) == 10

    def test_workers_match_single_process(self, small_rules):
        """Test a seeded run gives the same results with a worker pool."""
        kwargs = dict(num_trials=4, hands_per_trial=50, seed=3, oracle=always_stand)
        single = Simulator(small_rules, workers=1, **kwargs).run()
        pooled = Simulator(small_rules, workers=2, **kwargs).run()
        assert pooled.trial_results == single.trial_results

    def test_default_rules_run(self):
        """Test a short run with the default rules and strategy."""
        result = Simulator(RoundConfig(), num_trials=3, hands_per_trial=300, seed=1).run()
        assert all(math.isfinite(value) for value in result.trial_results)

    def test_trial_completed_events(self, small_rules):
        """Test each finished trial is reported."""
        events = EventEmitter()
        Simulator(
            small_rules, num_trials=3, hands_per_trial=10, seed=5, events=events
        ).run()

        completed = events.of_type(EventType.TRIAL_COMPLETED)
        assert [event.data["trial"] for event in completed] == [0, 1, 2]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_trials": 0},
            {"hands_per_trial": 0},
            {"base_bet": 0},
            {"workers": 0},
            {"workers": 2, "events": EventEmitter()},
        ],
    )
    def test_invalid_arguments(self, small_rules, kwargs):
        """Test bad simulation plans are rejected."""
        with pytest.raises(ValueError):
            Simulator(small_rules, **kwargs)
