# simulations/compare.py

from __future__ import annotations

import argparse
import os
import sys

import matplotlib.pyplot as plt

from .common import DEFAULT_PRISONERS, DEFAULT_TRIALS, InvalidConfiguration, SimulationResult, format_report, get_logger
from .run import run_experiment, sweep_open_limits


def default_worker_count() -> int:
    # all but 2 cores, at least 2
    return max((os.cpu_count() or 1) - 2, 2)


def _plot_result(r: SimulationResult) -> None:
    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.bar(
        ["random search", "cycle following"],
        [100.0 * r.random_search_rate, 100.0 * r.cycle_following_rate],
        color=["#d62728", "#2ca02c"],
    )
    plt.ylabel("Group success rate (%)")
    plt.ylim(0, 100)

    plt.subplot(1, 2, 2)
    lengths = list(r.longest_cycles.keys())
    counts = list(r.longest_cycles.values())
    plt.bar(lengths, counts, width=1.0)
    plt.axvline(r.spec.open_limit + 0.5, color="black", linestyle="--", label="open limit")
    plt.xlabel("Longest cycle length")
    plt.ylabel("Number of trials")
    plt.legend()

    plt.suptitle(
        f"prisoners={r.spec.prisoners}, open_limit={r.spec.open_limit}, trials={r.spec.trials}"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()


def _plot_sweep(results: list[SimulationResult]) -> None:
    limits = [r.spec.open_limit for r in results]

    plt.figure(figsize=(8, 4))
    plt.plot(limits, [100.0 * r.random_search_rate for r in results], label="random search")
    plt.plot(limits, [100.0 * r.cycle_following_rate for r in results], label="cycle following")
    plt.xlabel("Boxes each prisoner may open")
    plt.ylabel("Group success rate (%)")
    plt.xlim(limits[0], limits[-1])
    plt.legend()
    plt.title(f"prisoners={results[0].spec.prisoners}, trials={results[0].spec.trials}")
    plt.tight_layout()
    plt.show()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate the 100 prisoners riddle success rates via Monte Carlo."
    )
    parser.add_argument("--prisoners", type=int, default=DEFAULT_PRISONERS, help="number of prisoners and boxes")
    parser.add_argument("--open-limit", type=int, default=None, help="boxes each prisoner may open (default: prisoners / 2)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of simulated attempts")
    parser.add_argument("--workers", type=int, default=1, help="number of worker processes")
    parser.add_argument("--parallel", action="store_true", help="use all but 2 CPU cores (at least 2)")
    parser.add_argument("--seed", type=int, default=0, help="base seed; trial i uses seed + i")
    parser.add_argument("--sweep", action="store_true", help="plot success rates for every open limit 1..prisoners")
    parser.add_argument("--plot", action="store_true", help="plot success rates and longest cycle lengths")
    parser.add_argument("--verbose", action="store_true", help="debug logging")

    args = parser.parse_args(argv)
    get_logger(verbose=args.verbose)

    workers = default_worker_count() if args.parallel else args.workers

    try:
        if args.sweep:
            results = sweep_open_limits(
                prisoners=args.prisoners,
                open_limits=range(1, args.prisoners + 1),
                trials=args.trials,
                workers=workers,
                seed=args.seed,
            )
            for r in results:
                print(
                    f"open_limit={r.spec.open_limit}: random={100.0 * r.random_search_rate:.4f}% "
                    f"method={100.0 * r.cycle_following_rate:.4f}%"
                )
            _plot_sweep(results)
            return 0

        result = run_experiment(
            prisoners=args.prisoners,
            trials=args.trials,
            open_limit=args.open_limit,
            workers=workers,
            seed=args.seed,
            track_cycles=args.plot,
        )
    except InvalidConfiguration as e:
        parser.error(str(e))

    for line in format_report(result):
        print(line)

    if args.plot:
        _plot_result(result)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
