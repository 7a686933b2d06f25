# simulations/run.py

from __future__ import annotations

import logging
from dataclasses import replace
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional, Tuple

from .common import InvalidConfiguration, RiddleSpec, SimulationResult, Timer
from .trials import WorkerTally, run_trial_range


logger = logging.getLogger(__name__)


def partition_trials(trials: int, workers: int) -> List[range]:
    """
    Split [0, trials) into `workers` contiguous ranges whose sizes differ by
    at most one. Ranges are empty when there are more workers than trials.
    """
    if trials < 0:
        raise ValueError("trials must be >= 0")
    if workers <= 0:
        raise ValueError("workers must be > 0")

    step, extra = divmod(trials, workers)
    ranges = []
    start = 0
    for w in range(workers):
        stop = start + step + (1 if w < extra else 0)
        ranges.append(range(start, stop))
        start = stop
    return ranges


def simulate(spec: RiddleSpec) -> SimulationResult:
    """
    Run spec.trials independent trials across spec.workers and merge the
    per-worker counts.

    workers == 1 runs in the calling process. Otherwise each non-empty
    range goes to its own process; all of them are awaited before any
    counts are added up, in range order.
    """
    logger.info(
        "simulate prisoners=%d open_limit=%d trials=%d workers=%d seed=%d",
        spec.prisoners,
        spec.open_limit,
        spec.trials,
        spec.workers,
        spec.seed,
    )

    total = WorkerTally()
    ranges = [r for r in partition_trials(spec.trials, spec.workers) if len(r) > 0]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("partition: %s", [(r.start, r.stop) for r in ranges])

    with Timer() as t:
        if spec.workers == 1 or len(ranges) <= 1:
            tallies = [run_trial_range(spec, r) for r in ranges]
        else:
            with ProcessPoolExecutor(max_workers=len(ranges)) as pool:
                futures = [pool.submit(run_trial_range, spec, r) for r in ranges]
                tallies = [f.result() for f in futures]

        for tally in tallies:
            total.merge(tally)

    result = SimulationResult(
        spec=spec,
        random_search_successes=total.random_search,
        cycle_following_successes=total.cycle_following,
        runtime_s=t.elapsed_s,
        longest_cycles=dict(sorted(total.longest_cycles.items())),
        meta={"ranges": len(ranges)},
    )
    logger.info(
        "simulate done random_search=%d cycle_following=%d runtime=%.3fs",
        result.random_search_successes,
        result.cycle_following_successes,
        t.elapsed_s,
    )
    return result


def simulate_counts(
    prisoners: int,
    open_limit: Optional[int],
    trials: int,
    workers: int = 1,
) -> Tuple[int, int]:
    """
    Engine entry point: (random search successes, cycle following successes).
    """
    spec = RiddleSpec(prisoners=prisoners, open_limit=open_limit, trials=trials, workers=workers)
    return simulate(spec).as_counts()


def run_experiment(
    prisoners: int,
    trials: int,
    open_limit: Optional[int] = None,
    workers: int = 1,
    seed: int = 0,
    track_cycles: bool = False,
) -> SimulationResult:
    """
    Run a single simulation and return a SimulationResult.

    Parameters
    ----------
    prisoners:
        Number of prisoners (and boxes).
    trials:
        Number of independent trials.
    open_limit:
        Boxes each prisoner may open (defaults to prisoners // 2).
    workers:
        Number of worker processes; results do not depend on it.
    seed:
        Base seed; trial i uses seed + i.
    track_cycles:
        Also collect a histogram of longest cycle lengths.

    Returns
    -------
    SimulationResult
    """
    spec = RiddleSpec(
        prisoners=prisoners,
        trials=trials,
        open_limit=open_limit,
        workers=workers,
        seed=seed,
        track_cycles=track_cycles,
    )
    return simulate(spec)


def sweep_open_limits(
    prisoners: int,
    open_limits: Iterable[int],
    trials: int,
    workers: int = 1,
    seed: int = 0,
) -> List[SimulationResult]:
    """
    Convenience helper: one simulation per open limit, all with the same
    seeds, so every limit sees the same box assignments.

    Every configuration is validated before the first simulation starts.
    """
    base = RiddleSpec(prisoners=prisoners, trials=trials, workers=workers, seed=seed)
    specs = [replace(base, open_limit=limit) for limit in open_limits]
    if not specs:
        raise InvalidConfiguration("open_limits must be non-empty")

    return [simulate(spec) for spec in specs]
