# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging
import time


DEFAULT_PRISONERS = 100
DEFAULT_TRIALS = 1_000_000


class InvalidConfiguration(ValueError):
    """Raised for a RiddleSpec that cannot be simulated."""


@dataclass(frozen=True)
class RiddleSpec:
    """
    Parameters shared by every trial of one simulation.

    open_limit defaults to half the prisoners (at least one box).
    """
    prisoners: int
    trials: int
    open_limit: Optional[int] = None
    workers: int = 1  # number of independent worker processes
    seed: int = 0  # trial i is seeded with seed + i
    track_cycles: bool = False

    def __post_init__(self) -> None:
        if self.prisoners <= 0:
            raise InvalidConfiguration("prisoners must be > 0")
        if self.open_limit is None:
            object.__setattr__(self, "open_limit", max(1, self.prisoners // 2))
        if self.open_limit < 1:
            raise InvalidConfiguration("open_limit must be >= 1")
        if self.open_limit > self.prisoners:
            raise InvalidConfiguration(
                f"open_limit must be <= prisoners ({self.prisoners})"
            )
        if self.trials < 0:
            raise InvalidConfiguration("trials must be >= 0")
        if self.workers <= 0:
            raise InvalidConfiguration("workers must be > 0")
        if self.seed < 0:
            raise InvalidConfiguration("seed must be >= 0")


@dataclass
class SimulationResult:
    """
    Common return type for a simulation run.
    """
    spec: RiddleSpec
    random_search_successes: int
    cycle_following_successes: int

    runtime_s: Optional[float] = None
    # longest cycle length -> number of trials (only when spec.track_cycles)
    longest_cycles: Dict[int, int] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: a trial contributes at most once to each counter
        for name, count in (
            ("random_search_successes", self.random_search_successes),
            ("cycle_following_successes", self.cycle_following_successes),
        ):
            if count < 0 or count > self.spec.trials:
                raise ValueError(
                    f"{name} out of range: {count} not in [0, {self.spec.trials}]"
                )

        if self.spec.track_cycles:
            tracked = sum(self.longest_cycles.values())
            if tracked != self.spec.trials:
                raise ValueError(
                    f"longest cycle histogram mismatch: expected {self.spec.trials}, got {tracked}"
                )

    @property
    def random_search_rate(self) -> float:
        return _rate(self.random_search_successes, self.spec.trials)

    @property
    def cycle_following_rate(self) -> float:
        return _rate(self.cycle_following_successes, self.spec.trials)

    def as_counts(self) -> Tuple[int, int]:
        return self.random_search_successes, self.cycle_following_successes


def _rate(successes: int, trials: int) -> float:
    if trials == 0:
        return 0.0
    return successes / trials


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def get_logger(*, verbose: bool = False) -> logging.Logger:
    """
    Configure and return the simulations logger (stderr only).
    """
    logger = logging.getLogger("simulations")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid duplicate handlers if called multiple times in-process.
    if getattr(logger, "_configured", False):
        return logger

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)

    logger.addHandler(sh)
    logger.propagate = False
    logger._configured = True  # type: ignore[attr-defined]
    return logger


def format_report(r: SimulationResult) -> List[str]:
    """
    Human-friendly summary lines for printing in compare tools.
    """
    lines = [
        f"Iterations:    {r.spec.trials}",
        f"Prisoners:     {r.spec.prisoners}",
        f"Boxes to open: {r.spec.open_limit}",
        f"Prisoners won randomly:    {r.random_search_successes} -> {100.0 * r.random_search_rate:.4f}%",
        f"Prisoners won with method: {r.cycle_following_successes} -> {100.0 * r.cycle_following_rate:.4f}%",
    ]
    if r.runtime_s is not None:
        lines.append(f"Time:          {1000.0 * r.runtime_s:.0f}ms")
    return lines
