# simulations/trials.py

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .common import RiddleSpec

from prisoners_riddle.cycle_following_strategy import CycleFollowingStrategy, longest_cycle
from prisoners_riddle.permutation_generator import PermutationGenerator
from prisoners_riddle.random_search_strategy import RandomSearchStrategy


# Random search draws from seed + SEARCH_SEED_OFFSET so its stream never
# coincides with any trial's permutation stream.
SEARCH_SEED_OFFSET = 1 << 64


@dataclass(frozen=True)
class TrialResult:
    random_search: bool
    cycle_following: bool
    longest_cycle: Optional[int] = None


@dataclass
class WorkerTally:
    """
    Counters owned by a single worker. Merged only after every worker is done.
    """
    random_search: int = 0
    cycle_following: int = 0
    longest_cycles: Counter = field(default_factory=Counter)

    def record(self, result: TrialResult) -> None:
        if result.random_search:
            self.random_search += 1
        if result.cycle_following:
            self.cycle_following += 1
        if result.longest_cycle is not None:
            self.longest_cycles[result.longest_cycle] += 1

    def merge(self, other: "WorkerTally") -> None:
        self.random_search += other.random_search
        self.cycle_following += other.cycle_following
        self.longest_cycles.update(other.longest_cycles)


def run_trial(spec: RiddleSpec, seed: int) -> TrialResult:
    """
    One trial: a fresh box assignment evaluated under both strategies.
    """
    boxes = PermutationGenerator(spec.prisoners).generate(seed)

    random_ok = RandomSearchStrategy(spec.open_limit).evaluate(boxes, seed + SEARCH_SEED_OFFSET)
    method_ok = CycleFollowingStrategy(spec.open_limit).evaluate(boxes)

    return TrialResult(
        random_search=random_ok,
        cycle_following=method_ok,
        longest_cycle=longest_cycle(boxes) if spec.track_cycles else None,
    )


def run_trial_range(spec: RiddleSpec, trials: range) -> WorkerTally:
    """
    Run every trial index in `trials` and count successes locally.

    Seeds depend on the trial index only, never on which worker runs it.
    """
    tally = WorkerTally()
    for i in trials:
        tally.record(run_trial(spec, spec.seed + i))
    return tally
