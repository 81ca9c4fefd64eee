from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from activity_selection.catalog.activity import Activity, ActivityCatalog
from activity_selection.strategies.registry import StrategyKey, StrategyLike, get_strategy
from activity_selection.utils.logging import logger


@dataclass(frozen=True)
class SelectionResult:
    """
    Ids accepted by one greedy run, in acceptance order.
    """
    strategy: StrategyKey
    selected_ids: Tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.selected_ids)

    def as_set(self) -> FrozenSet[int]:
        return frozenset(self.selected_ids)

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self.selected_ids


def select_activities(catalog: ActivityCatalog, strategy: StrategyLike) -> List[Activity]:
    """
    Greedy scan over the strategy ordering: accept an activity iff it starts at
    or after the end of the previously accepted one.
    """
    resolved = get_strategy(strategy)
    cursor = float("-inf")
    accepted: List[Activity] = []

    for activity in resolved.order(catalog):
        if activity.start >= cursor:
            accepted.append(activity)
            cursor = activity.end

    return accepted


def select(catalog: ActivityCatalog, strategy: StrategyLike) -> SelectionResult:
    resolved = get_strategy(strategy)
    accepted = select_activities(catalog, resolved)
    logger.debug(
        "strategy=%s accepted %d of %d activities",
        resolved.key.value,
        len(accepted),
        len(catalog),
    )
    return SelectionResult(
        strategy=resolved.key,
        selected_ids=tuple(activity.id for activity in accepted),
    )
