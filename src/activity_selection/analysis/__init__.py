"""
Comparison and reporting on top of the algorithmic core.

Key responsibilities:
- Relate each strategy's selection size to the optimal count.
- Collect the bounds (optimal count, peak overlap) results are judged by.
- Bundle selection, comparisons and layout into one report.
"""

from .comparison import Comparison, best_strategy, compare, evaluate_strategies, format_comparison_table
from .bounds import bounds_report
from .report import CatalogReport, analyze_catalog

__all__ = [
    "Comparison",
    "best_strategy",
    "compare",
    "evaluate_strategies",
    "format_comparison_table",
    "bounds_report",
    "CatalogReport",
    "analyze_catalog",
]
