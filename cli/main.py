"""
Command-line entry point for the blackjack edge simulator.

Usage:
    bjsim [OUTPUT] --decks 6 --hit-soft-17 --trials 1000 --hands 1000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from bjsim.game.events import EventEmitter, GameEvent
from bjsim.simulation import Simulator
from bjsim.strategy.rules import PRESETS
from cli.output import append_report
from cli.schemas import SimulationReport, SimulationRequest
from config import AppConfig, config

logger = logging.getLogger(__name__)

# Flags that override a rule from the preset or configured table defaults
_RULE_FLAGS = (
    "num_decks",
    "blackjack_payout",
    "dealer_hits_soft_17",
    "max_split_hands",
    "resplit_aces",
    "double_after_split",
    "surrender",
    "strategy_complexity",
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="bjsim",
        description="Estimate blackjack player edge by Monte Carlo simulation",
    )

    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Append the summary and per-trial results to this file",
    )

    rules = parser.add_argument_group("table rules")
    rules.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Start from a named rule set instead of the configured defaults",
    )
    rules.add_argument("--decks", dest="num_decks", type=int, help="Number of decks")
    rules.add_argument(
        "--payout",
        dest="blackjack_payout",
        type=float,
        help="Natural bonus over even money (0.5 pays 3:2, 0.2 pays 6:5)",
    )
    soft_17 = rules.add_mutually_exclusive_group()
    soft_17.add_argument(
        "--hit-soft-17", dest="dealer_hits_soft_17", action="store_const", const=True
    )
    soft_17.add_argument(
        "--stand-soft-17", dest="dealer_hits_soft_17", action="store_const", const=False
    )
    rules.add_argument("--max-split-hands", dest="max_split_hands", type=int)
    resplit_aces = rules.add_mutually_exclusive_group()
    resplit_aces.add_argument(
        "--resplit-aces", dest="resplit_aces", action="store_const", const=True
    )
    resplit_aces.add_argument(
        "--no-resplit-aces", dest="resplit_aces", action="store_const", const=False
    )
    das = rules.add_mutually_exclusive_group()
    das.add_argument(
        "--double-after-split",
        dest="double_after_split",
        action="store_const",
        const=True,
    )
    das.add_argument(
        "--no-double-after-split",
        dest="double_after_split",
        action="store_const",
        const=False,
    )
    rules.add_argument("--surrender", choices=["none", "early", "late"])

    policy = parser.add_argument_group("player policy")
    policy.add_argument(
        "--strategy",
        dest="strategy_complexity",
        choices=["simple", "basic", "advanced"],
    )
    policy.add_argument(
        "--count",
        dest="counting_system",
        choices=["hilo", "wong_halves", "omega2", "none"],
        help="Counting system driving bets and index plays ('none' for flat bets)",
    )

    plan = parser.add_argument_group("simulation")
    plan.add_argument("--trials", dest="num_trials", type=int)
    plan.add_argument("--hands", dest="hands_per_trial", type=int)
    plan.add_argument("--bet", dest="base_bet", type=float)
    plan.add_argument("--seed", type=int)
    plan.add_argument("--workers", type=int)

    parser.add_argument(
        "--verbose", action="store_true", help="Log every simulation event"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the summary as JSON"
    )
    return parser


def build_request(
    args: argparse.Namespace, app_config: AppConfig = config
) -> SimulationRequest:
    """
    Merge command line flags over a preset or the configured defaults.

    Raises:
        pydantic.ValidationError: If the merged values are out of range
    """
    if args.preset:
        base = PRESETS[args.preset]()
        fields = {name: getattr(base, name) for name in _RULE_FLAGS}
        fields["counting_system"] = base.counting_system
    else:
        table = app_config.table
        fields = {name: getattr(table, name) for name in _RULE_FLAGS}
        fields["counting_system"] = table.counting_system

    for name in _RULE_FLAGS:
        value = getattr(args, name)
        if value is not None:
            fields[name] = value
    if args.counting_system is not None:
        fields["counting_system"] = (
            None if args.counting_system == "none" else args.counting_system
        )

    plan = app_config.simulation
    for name in ("num_trials", "hands_per_trial", "base_bet", "seed", "workers"):
        value = getattr(args, name)
        fields[name] = value if value is not None else getattr(plan, name)

    return SimulationRequest(**fields)


def log_event(event: GameEvent) -> None:
    """Log a simulation event."""
    logger.debug("%s", event)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        request = build_request(args)
    except ValueError as exc:
        parser.error(str(exc))

    events: EventEmitter | None = None
    if args.verbose or config.simulation.verbose:
        if request.workers > 1:
            parser.error("--verbose requires a single worker")
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
        events = EventEmitter(keep_history=False)
        events.subscribe(log_event)

    simulator = Simulator(
        request.to_round_config(),
        num_trials=request.num_trials,
        hands_per_trial=request.hands_per_trial,
        base_bet=request.base_bet,
        seed=request.seed,
        workers=request.workers,
        events=events,
    )
    logger.info(
        "Running %d trials of %d hands", request.num_trials, request.hands_per_trial
    )
    result = simulator.run()
    report = SimulationReport.from_result(result, request)

    if args.json:
        print(report.model_dump_json(exclude={"trial_results"}, indent=2))
    else:
        for line in report.summary_lines():
            print(line)

    if args.output is not None:
        try:
            append_report(args.output, report)
        except OSError as exc:
            print(f"Failed to write results to {args.output}: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
