"""
Reference bounds that strategy results and layouts are judged against.
"""

from __future__ import annotations

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.layout.overlap import max_overlap
from activity_selection.strategies.optimal import optimal_count


def bounds_report(catalog: ActivityCatalog) -> dict[str, int]:
    """
    Aggregate the upper bound on any selection size and the lower bound on
    the number of layout rows.
    """
    peak = max_overlap(catalog)
    return {
        "num_activities": len(catalog),
        "optimal_count": optimal_count(catalog),
        "max_overlap": peak,
        "min_rows": peak,
    }
