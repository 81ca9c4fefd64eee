"""
Generate synthetic catalogs and compare greedy strategies against the optimum.
"""

from __future__ import annotations

import argparse

from activity_selection.analysis import analyze_catalog, format_comparison_table
from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.generate import random_catalog
from activity_selection.utils.logging import configure_logging


PROFILES = {
    "small": {
        "activities": 11,
        "horizon": 14,
        "max_duration": 6,
    },
    "medium": {
        "activities": 64,
        "horizon": 96,
        "max_duration": 12,
    },
    "large": {
        "activities": 512,
        "horizon": 1_000,
        "max_duration": 40,
    },
}


def describe_catalog(catalog: ActivityCatalog, *, show_rows: bool = False) -> None:
    report = analyze_catalog(catalog, include_snapshots=False)
    print("=== Catalog Diagnostics ===")
    print(f"Activities: {len(catalog)} (timeline end {catalog.timeline_end()})")
    print(f"Optimal selection: {report.bounds['optimal_count']}")
    print(
        f"Layout rows: {report.rows.num_rows} "
        f"(peak overlap {report.overlap.max_overlap} at t={report.overlap.argmax_time})"
    )
    print(format_comparison_table(report.comparisons))
    if show_rows:
        print("Rows:")
        for idx, row in enumerate(report.rows):
            print(f"  {idx}: " + " ".join(activity.label() for activity in row))


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
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--activities", type=int, default=None)
    parser.add_argument("--horizon", type=int, default=None)
    parser.add_argument("--max-duration", type=int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--show-rows", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    args = _apply_profile(args)
    if args.activities is None:
        args.activities = 64
    if args.horizon is None:
        args.horizon = 96
    if args.max_duration is None:
        args.max_duration = 12
    return args


def main() -> None:
    args = parse_args()
    configure_logging(args.verbose)
    catalog = random_catalog(
        args.activities,
        horizon=args.horizon,
        max_duration=args.max_duration,
        seed=args.seed,
    )
    describe_catalog(catalog, show_rows=args.show_rows)


if __name__ == "__main__":
    main()
