"""
Closed set of greedy ordering strategies.

Each strategy is a tagged `StrategyKey` dispatched to one named ordering
function. Adding a strategy means adding a key, a key function and a row in
`STRATEGIES`; the greedy selector itself never changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Union

from activity_selection.catalog.activity import Activity, ActivityCatalog


class StrategyKey(str, Enum):
    END = "end"
    START = "start"
    DURATION = "duration"
    LATEST_START = "latestStart"


class UnknownStrategyError(ValueError):
    """Raised when a caller asks for a strategy that is not registered."""


SortKey = Callable[[Activity], float]
StrategyLike = Union["Strategy", StrategyKey, str]


def by_end(activity: Activity) -> float:
    return activity.end


def by_start(activity: Activity) -> float:
    return activity.start


def by_duration(activity: Activity) -> float:
    return activity.end - activity.start


def by_latest_start(activity: Activity) -> float:
    return -activity.start


@dataclass(frozen=True)
class Strategy:
    key: StrategyKey
    label: str
    sort_key: SortKey

    def order(self, catalog: ActivityCatalog) -> List[Activity]:
        return catalog.sorted_by(self.sort_key)


STRATEGIES: Mapping[StrategyKey, Strategy] = MappingProxyType(
    {
        StrategyKey.END: Strategy(StrategyKey.END, "Earliest End Time (Optimal)", by_end),
        StrategyKey.START: Strategy(StrategyKey.START, "Earliest Start Time", by_start),
        StrategyKey.DURATION: Strategy(StrategyKey.DURATION, "Shortest Duration", by_duration),
        StrategyKey.LATEST_START: Strategy(
            StrategyKey.LATEST_START, "Latest Start Time", by_latest_start
        ),
    }
)


def strategy_keys() -> List[str]:
    return [key.value for key in STRATEGIES]


def get_strategy(key: StrategyLike) -> Strategy:
    """
    Resolve a `Strategy`, `StrategyKey` or raw key string to a registered strategy.
    """
    if isinstance(key, Strategy):
        return key
    try:
        resolved = StrategyKey(key)
    except ValueError:
        raise UnknownStrategyError(
            f"Unknown strategy `{key}`; expected one of {strategy_keys()}."
        ) from None
    return STRATEGIES[resolved]


def iter_strategies() -> Iterator[Strategy]:
    return iter(STRATEGIES.values())
