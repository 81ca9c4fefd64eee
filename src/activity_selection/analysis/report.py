from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from activity_selection.analysis.bounds import bounds_report
from activity_selection.analysis.comparison import Comparison, evaluate_strategies
from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.layout.overlap import OverlapSummary, summarize_overlap
from activity_selection.layout.row_packing import RowAssignment, pack
from activity_selection.strategies.greedy import SelectionResult, select
from activity_selection.strategies.registry import StrategyLike


@dataclass(frozen=True)
class CatalogReport:
    selection: Optional[SelectionResult]
    comparisons: List[Comparison]
    rows: RowAssignment
    overlap: OverlapSummary
    bounds: Dict[str, int]


def analyze_catalog(
    catalog: ActivityCatalog,
    *,
    strategy: StrategyLike | None = None,
    include_snapshots: bool = True,
) -> CatalogReport:
    """
    Everything a presentation layer needs in one pass: the chosen strategy's
    selection (if any), every strategy's comparison, and the fixed layout.
    """
    selection = select(catalog, strategy) if strategy is not None else None
    return CatalogReport(
        selection=selection,
        comparisons=evaluate_strategies(catalog),
        rows=pack(catalog),
        overlap=summarize_overlap(catalog, include_snapshots=include_snapshots),
        bounds=bounds_report(catalog),
    )
