"""
Ground-truth baseline for comparisons.

Earliest-end-time greedy is optimal for unweighted interval scheduling, so
the baseline is just another `select` run with the ordering pinned to `end`.
"""

from __future__ import annotations

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.strategies.greedy import SelectionResult, select
from activity_selection.strategies.registry import StrategyKey


def optimal_selection(catalog: ActivityCatalog) -> SelectionResult:
    return select(catalog, StrategyKey.END)


def optimal_count(catalog: ActivityCatalog) -> int:
    return optimal_selection(catalog).count
