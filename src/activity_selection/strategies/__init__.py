"""
Greedy activity selection.

- Strategy registry: closed set of ordering rules (see `registry.py`)
- Greedy selector shared by every strategy (see `greedy.py`)
- Optimal reference count (see `optimal.py`)
"""

from .registry import (
    STRATEGIES,
    Strategy,
    StrategyKey,
    UnknownStrategyError,
    get_strategy,
    iter_strategies,
    strategy_keys,
)
from .greedy import SelectionResult, select, select_activities
from .optimal import optimal_count, optimal_selection

__all__ = [
    "STRATEGIES",
    "Strategy",
    "StrategyKey",
    "UnknownStrategyError",
    "get_strategy",
    "iter_strategies",
    "strategy_keys",
    "SelectionResult",
    "select",
    "select_activities",
    "optimal_count",
    "optimal_selection",
]
