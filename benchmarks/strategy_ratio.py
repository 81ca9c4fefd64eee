"""
Benchmark optimality ratio and run time of every greedy strategy over random catalogs.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from activity_selection.catalog.generate import random_catalog
from activity_selection.strategies.registry import strategy_keys
from activity_selection.utils.logging import configure_logging, logger
from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    run_single_trial,
    summarize,
)


PROFILES = {
    "small": {
        "activities": 16,
        "horizon": 24,
        "max_duration": 6,
    },
    "medium": {
        "activities": 256,
        "horizon": 480,
        "max_duration": 32,
    },
    "large": {
        "activities": 4096,
        "horizon": 10_000,
        "max_duration": 120,
    },
}


def run_benchmark(args: argparse.Namespace) -> list[BenchmarkResult]:
    results: list[BenchmarkResult] = []
    for trial in range(args.trials):
        seed = args.seed + trial
        catalog = random_catalog(
            args.activities,
            horizon=args.horizon,
            max_duration=args.max_duration,
            seed=seed,
        )
        logger.debug("trial %d: %d activities (seed=%d)", trial, len(catalog), seed)
        for strategy in args.strategies:
            results.append(
                run_single_trial(
                    args.profile,
                    strategy,
                    trial,
                    catalog=catalog,
                )
            )
    return results


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    profile_cfg = PROFILES.get(args.profile)
    if not profile_cfg:
        return args
    for key, value in profile_cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--strategies", nargs="+", choices=strategy_keys(), default=strategy_keys())
    parser.add_argument("--trials", type=int, default=20)
    parser.add_argument("--seed", type=int, default=2024)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--activities", type=int, default=None)
    parser.add_argument("--horizon", type=int, default=None)
    parser.add_argument("--max-duration", type=int, default=None)
    parser.add_argument("--export", type=Path, help="Optional JSON output path.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    args = _apply_profile(args)
    if args.activities is None:
        args.activities = 256
    if args.horizon is None:
        args.horizon = 480
    if args.max_duration is None:
        args.max_duration = 32
    return args


def main() -> None:
    args = parse_args()
    configure_logging(args.verbose)
    results = run_benchmark(args)
    summary = summarize(results)
    print(format_summary_table(summary))

    if args.export:
        export_json(results, args.export)
        print(f"\nSaved raw results to {args.export}")


if __name__ == "__main__":
    main()
