"""Monte Carlo trials: many rounds per trial, many trials per run."""

from dataclasses import dataclass
from multiprocessing import Pool
from random import Random

from bjsim.cards import Shoe
from bjsim.counting import create_counting_system
from bjsim.game.engine import RoundEngine
from bjsim.game.events import EventEmitter, EventType
from bjsim.statistics.summary import EdgeEstimate, summarize
from bjsim.strategy.oracle import StrategyOracle, recommend
from bjsim.strategy.rules import RoundConfig


@dataclass(frozen=True)
class SimulationResult:
    """Per-trial returns (percent of the base bet) and their summary."""

    trial_results: list[float]
    estimate: EdgeEstimate

    @property
    def average(self) -> float:
        return self.estimate.mean

    @property
    def std_dev(self) -> float:
        return self.estimate.std_dev


def run_trial(
    rules: RoundConfig,
    hands_per_trial: int,
    base_bet: float = 100,
    seed: int | None = None,
    oracle: StrategyOracle = recommend,
    events: EventEmitter | None = None,
) -> float:
    """
    Play one trial with its own shoe and random source.

    Returns:
        The trial's return as a percentage of the base bet per round
    """
    shoe = Shoe(
        num_decks=rules.num_decks,
        counting_system=create_counting_system(rules.counting_system),
        rng=Random(seed),
    )
    engine = RoundEngine(rules, shoe, oracle=oracle, base_bet=base_bet, events=events)

    running_total = 0.0
    for _ in range(hands_per_trial):
        running_total += engine.play_round()

    return 100 * running_total / hands_per_trial / base_bet


class Simulator:
    """
    Runs independent trials and aggregates their returns.

    Trial seeds come from one master random source, so a seeded run gives
    the same results whatever the worker count.
    """

    def __init__(
        self,
        rules: RoundConfig,
        num_trials: int = 10000,
        hands_per_trial: int = 1000,
        base_bet: float = 100,
        seed: int | None = None,
        workers: int = 1,
        oracle: StrategyOracle = recommend,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a simulation run.

        Args:
            rules: Table rules and player policy
            num_trials: Number of independent trials
            hands_per_trial: Rounds played per trial
            base_bet: Bet unit before count-based sizing
            seed: Master seed (None for an unseeded run)
            workers: Worker processes; tracing needs a single worker
            oracle: Strategy oracle (must be picklable when workers > 1)
            events: Optional emitter for tracing rounds and trials
        """
        if num_trials < 1:
            raise ValueError("num_trials must be at least 1")
        if hands_per_trial < 1:
            raise ValueError("hands_per_trial must be at least 1")
        if base_bet <= 0:
            raise ValueError("base_bet must be positive")
        if workers < 1:
            raise ValueError("workers must be at least 1")
        if events is not None and workers > 1:
            raise ValueError("event tracing requires a single worker")

        self.rules = rules
        self.num_trials = num_trials
        self.hands_per_trial = hands_per_trial
        self.base_bet = base_bet
        self.seed = seed
        self.workers = workers
        self.oracle = oracle
        self.events = events

    def trial_seeds(self) -> list[int]:
        """Draw one seed per trial from the master random source."""
        master = Random(self.seed)
        return [master.getrandbits(64) for _ in range(self.num_trials)]

    def run(self) -> SimulationResult:
        """Run every trial and summarize the results."""
        seeds = self.trial_seeds()

        if self.workers > 1:
            jobs = [
                (self.rules, self.hands_per_trial, self.base_bet, seed, self.oracle)
                for seed in seeds
            ]
            with Pool(processes=self.workers) as pool:
                results = pool.starmap(run_trial, jobs)
        else:
            results = []
            for trial, seed in enumerate(seeds):
                result = run_trial(
                    self.rules,
                    self.hands_per_trial,
                    self.base_bet,
                    seed,
                    self.oracle,
                    self.events,
                )
                results.append(result)
                if self.events is not None:
                    self.events.emit_new(
                        EventType.TRIAL_COMPLETED, trial=trial, result=result
                    )

        return SimulationResult(trial_results=results, estimate=summarize(results))
