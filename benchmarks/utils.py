from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from statistics import mean
from time import perf_counter
from typing import Dict, List, Optional, Sequence

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.strategies.greedy import select
from activity_selection.strategies.optimal import optimal_count
from activity_selection.strategies.registry import StrategyLike, get_strategy


@dataclass
class BenchmarkResult:
    """
    Structured summary for a single benchmark trial.
    """

    benchmark: str
    strategy: str
    trial: int
    wall_time_s: float
    num_activities: int
    count: int
    optimal: int
    ratio: Optional[float]
    extra_metrics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        result = asdict(self)
        return result


def run_single_trial(
    benchmark_name: str,
    strategy: StrategyLike,
    trial: int,
    *,
    catalog: ActivityCatalog,
    extra_metrics: Optional[Dict[str, float]] = None,
) -> BenchmarkResult:
    """
    Time a single greedy run and record how close it came to the optimum.

    Args:
        benchmark_name: Label for the benchmark family (e.g. "random").
        strategy: Strategy key to run.
        trial: Integer trial index.
        catalog: Problem instance for this trial.
        extra_metrics: Optional dictionary of custom metrics to attach.
    """
    resolved = get_strategy(strategy)

    start = perf_counter()
    result = select(catalog, resolved)
    wall = perf_counter() - start

    optimal = optimal_count(catalog)
    return BenchmarkResult(
        benchmark=benchmark_name,
        strategy=resolved.key.value,
        trial=trial,
        wall_time_s=wall,
        num_activities=len(catalog),
        count=result.count,
        optimal=optimal,
        ratio=(result.count / optimal) if optimal else None,
        extra_metrics=extra_metrics or {},
    )


def summarize(results: Sequence[BenchmarkResult]) -> List[dict]:
    """
    Aggregate benchmark results by strategy and return summaries suitable for printing.
    """
    summaries: List[dict] = []
    by_strategy: dict[str, List[BenchmarkResult]] = {}
    for res in results:
        by_strategy.setdefault(res.strategy, []).append(res)

    for strategy, group in sorted(by_strategy.items(), key=lambda kv: kv[0]):
        ratios = [r.ratio for r in group if r.ratio is not None]
        summaries.append(
            {
                "strategy": strategy,
                "trials": len(group),
                "wall_time_mean_s": mean(r.wall_time_s for r in group),
                "count_mean": mean(r.count for r in group),
                "optimal_mean": mean(r.optimal for r in group),
                "ratio_mean": mean(ratios) if ratios else None,
                "ratio_min": min(ratios) if ratios else None,
                "optimal_hits": sum(1 for r in group if r.count == r.optimal),
            }
        )
    return summaries


def export_json(results: Sequence[BenchmarkResult], destination: Path) -> None:
    """
    Write raw benchmark results to JSON for later analysis.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    payload = [res.to_dict() for res in results]
    destination.write_text(json.dumps(payload, indent=2))


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:.4f}"


def format_summary_table(summary: Sequence[dict]) -> str:
    """
    Format aggregated summaries into a readable table.
    """
    if not summary:
        return "No results recorded."

    headers = [
        "strategy",
        "trials",
        "wall_time_mean_s",
        "count_mean",
        "optimal_mean",
        "ratio_mean",
        "ratio_min",
        "optimal_hits",
    ]

    col_widths: dict[str, int] = {}
    for header in headers:
        max_len = len(header)
        for row in summary:
            value = row[header]
            cell = (
                _format_value(value)
                if isinstance(value, (float, type(None)))
                else str(value)
            )
            max_len = max(max_len, len(cell))
        col_widths[header] = max_len

    def format_cell(h: str, value: object) -> str:
        if isinstance(value, (float, type(None))):
            return _format_value(value).ljust(col_widths[h])
        return str(value).ljust(col_widths[h])

    lines = [
        " | ".join(h.ljust(col_widths[h]) for h in headers),
        "-+-".join("-" * col_widths[h] for h in headers),
    ]
    for row in summary:
        lines.append(" | ".join(format_cell(h, row[h]) for h in headers))
    return "\n".join(lines)
