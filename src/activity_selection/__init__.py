"""
activity-selection

Greedy interval scheduling strategies, the optimal reference count, and
first-fit row packing for laying activities out.
"""

from .catalog import DEFAULT_CATALOG, Activity, ActivityCatalog
from .strategies import SelectionResult, StrategyKey, UnknownStrategyError, optimal_count, select
from .layout import RowAssignment, pack
from .engine import ActivitySelectionEngine

__all__ = [
    "Activity",
    "ActivityCatalog",
    "DEFAULT_CATALOG",
    "SelectionResult",
    "StrategyKey",
    "UnknownStrategyError",
    "optimal_count",
    "select",
    "RowAssignment",
    "pack",
    "ActivitySelectionEngine",
]
