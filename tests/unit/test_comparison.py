from __future__ import annotations

import pytest

from activity_selection.analysis.comparison import (
    Comparison,
    best_strategy,
    compare,
    evaluate_strategies,
    format_comparison_table,
)
from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.defaults import DEFAULT_CATALOG
from activity_selection.strategies.greedy import SelectionResult, select
from activity_selection.strategies.registry import StrategyKey


def test_compare_reports_ratio_against_optimum() -> None:
    comparison = compare(select(DEFAULT_CATALOG, "start"), 4)

    assert isinstance(comparison, Comparison)
    assert comparison.label == "Earliest Start Time"
    assert comparison.count == 3
    assert comparison.ratio == pytest.approx(0.75)
    assert comparison.percent() == "75.0%"
    assert not comparison.is_optimal


def test_compare_empty_catalog_has_no_ratio() -> None:
    comparison = compare(select(ActivityCatalog(), "end"), 0)
    assert comparison.ratio is None
    assert comparison.percent() == "N/A"
    assert comparison.is_optimal


def test_compare_rejects_count_above_optimum() -> None:
    result = SelectionResult(strategy=StrategyKey.END, selected_ids=(1, 4, 8, 11))
    with pytest.raises(ValueError):
        compare(result, 3)


def test_evaluate_strategies_sorted_best_first() -> None:
    comparisons = evaluate_strategies(DEFAULT_CATALOG)

    assert [c.strategy for c in comparisons] == ["end", "start", "duration", "latestStart"]
    assert [c.count for c in comparisons] == [4, 3, 3, 1]
    assert comparisons[-1].percent() == "25.0%"
    assert all(c.optimal == 4 for c in comparisons)


def test_evaluate_strategies_subset() -> None:
    comparisons = evaluate_strategies(DEFAULT_CATALOG, ["latestStart", "duration"])
    assert [c.strategy for c in comparisons] == ["duration", "latestStart"]


def test_best_strategy_is_optimal(random_catalogs: ActivityCatalog) -> None:
    best = best_strategy(random_catalogs)
    assert best.is_optimal


def test_best_strategy_requires_strategies() -> None:
    with pytest.raises(ValueError):
        best_strategy(DEFAULT_CATALOG, [])


def test_format_comparison_table() -> None:
    table = format_comparison_table(evaluate_strategies(DEFAULT_CATALOG))
    lines = table.splitlines()

    assert lines[0].startswith("strategy")
    assert len(lines) == 6
    assert "Earliest End Time (Optimal)" in table
    assert format_comparison_table([]) == "No results recorded."
