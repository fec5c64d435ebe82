"""Tests for request and report schemas."""

import pytest
from pydantic import ValidationError

from bjsim.simulation import SimulationResult
from bjsim.statistics import summarize
from cli.schemas import SimulationReport, SimulationRequest


def make_request(**overrides):
    fields = dict(
        num_decks=6,
        blackjack_payout=0.5,
        dealer_hits_soft_17=True,
        max_split_hands=4,
        resplit_aces=False,
        double_after_split=True,
        surrender="late",
        strategy_complexity="basic",
        counting_system=None,
        num_trials=2,
        hands_per_trial=10,
        base_bet=100,
    )
    fields.update(overrides)
    return SimulationRequest(**fields)


class TestSimulationRequest:
    """Tests for request validation."""

    def test_to_round_config(self):
        """Test a request builds matching round rules."""
        rules = make_request().to_round_config()
        assert rules.num_decks == 6
        assert rules.dealer_hits_soft_17
        assert rules.strategy_complexity == "basic"
        assert not rules.is_counting

    @pytest.mark.parametrize(
        "overrides",
        [
            {"num_decks": 0},
            {"num_decks": 9},
            {"blackjack_payout": -1},
            {"surrender": "always"},
            {"counting_system": "ko"},
            {"num_trials": 0},
            {"base_bet": 0},
            {"workers": 0},
        ],
    )
    def test_invalid(self, overrides):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            make_request(**overrides)


class TestSimulationReport:
    """Tests for report formatting."""

    @pytest.fixture
    def report(self):
        values = [1.5, -2.5]
        result = SimulationResult(trial_results=values, estimate=summarize(values))
        return SimulationReport.from_result(result, make_request())

    def test_from_result(self, report):
        """Test the report carries the summary."""
        assert report.average == -0.5
        assert report.std_dev == 2.0
        assert report.trials == 2
        assert report.hands_per_trial == 10

    def test_summary_lines(self, report):
        """Test the console summary."""
        assert report.summary_lines() == ["Average:-0.5%", "StdDev:2.0%"]

    def test_file_lines(self, report):
        """Test the result file lists the summary, then each trial."""
        assert report.file_lines() == ["Average:-0.5%", "StdDev:2.0%", "1.5%", "-2.5%"]
