"""
How each greedy strategy measures up against the optimal count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.strategies.greedy import SelectionResult, select
from activity_selection.strategies.optimal import optimal_count
from activity_selection.strategies.registry import (
    STRATEGIES,
    StrategyLike,
    get_strategy,
    iter_strategies,
)
from activity_selection.utils.logging import logger


@dataclass(frozen=True)
class Comparison:
    strategy: str
    label: str
    count: int
    optimal: int
    ratio: Optional[float]
    is_optimal: bool

    def percent(self) -> str:
        if self.ratio is None:
            return "N/A"
        return f"{self.ratio * 100:.1f}%"


def compare(result: SelectionResult, optimal: int) -> Comparison:
    """
    Combine a selection with the optimal count. With nothing to select
    (`optimal == 0`) the ratio is undefined and reported as `None`.
    """
    strategy = get_strategy(result.strategy)
    if optimal < 0:
        raise ValueError("optimal count must be non-negative.")
    if result.count > optimal:
        raise ValueError(
            f"Selection of {result.count} activities exceeds the optimal count {optimal}."
        )
    if optimal == 0:
        logger.warning("optimality ratio undefined for an empty catalog")
        ratio = None
    else:
        ratio = result.count / optimal
    return Comparison(
        strategy=strategy.key.value,
        label=strategy.label,
        count=result.count,
        optimal=optimal,
        ratio=ratio,
        is_optimal=result.count == optimal,
    )


def evaluate_strategies(
    catalog: ActivityCatalog, strategies: Iterable[StrategyLike] | None = None
) -> List[Comparison]:
    """
    Run every requested strategy (all registered ones by default) and sort
    the comparisons best first; ties keep registry order.
    """
    resolved = [get_strategy(s) for s in strategies] if strategies is not None else list(iter_strategies())
    optimal = optimal_count(catalog)
    comparisons = [compare(select(catalog, strategy), optimal) for strategy in resolved]
    registry_order = {key.value: idx for idx, key in enumerate(STRATEGIES)}
    comparisons.sort(key=lambda c: (-c.count, registry_order[c.strategy]))
    return comparisons


def best_strategy(
    catalog: ActivityCatalog, strategies: Iterable[StrategyLike] | None = None
) -> Comparison:
    comparisons = evaluate_strategies(catalog, strategies)
    if not comparisons:
        raise ValueError("No strategies provided for best_strategy.")
    return comparisons[0]


def format_comparison_table(comparisons: Sequence[Comparison]) -> str:
    """
    Format comparisons into a readable table.
    """
    if not comparisons:
        return "No results recorded."

    headers = ["strategy", "label", "count", "optimal", "ratio", "optimal?"]
    rows = [
        [
            c.strategy,
            c.label,
            str(c.count),
            str(c.optimal),
            c.percent(),
            "yes" if c.is_optimal else "no",
        ]
        for c in comparisons
    ]
    widths = [max(len(h), *(len(row[i]) for row in rows)) for i, h in enumerate(headers)]

    lines = [
        " | ".join(h.ljust(w) for h, w in zip(headers, widths)),
        "-+-".join("-" * w for w in widths),
    ]
    for row in rows:
        lines.append(" | ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    return "\n".join(lines)
