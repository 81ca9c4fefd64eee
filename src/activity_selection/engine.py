from __future__ import annotations

from activity_selection.analysis.comparison import Comparison, compare
from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.defaults import DEFAULT_CATALOG
from activity_selection.layout.row_packing import RowAssignment, pack
from activity_selection.strategies.greedy import SelectionResult, select
from activity_selection.strategies.optimal import optimal_count
from activity_selection.strategies.registry import StrategyLike
from activity_selection.utils.config import config
from activity_selection.validate import validate_rows, validate_selection


class ActivitySelectionEngine:
    """
    Entry point for a presentation layer.

    Holds nothing but the read-only catalog; every call recomputes its result
    from scratch, so an engine can be shared freely between callers.
    """

    def __init__(self, catalog: ActivityCatalog = DEFAULT_CATALOG) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ActivityCatalog:
        return self._catalog

    def get_optimal_count(self) -> int:
        return optimal_count(self._catalog)

    def run_strategy(self, strategy_key: StrategyLike) -> SelectionResult:
        """
        Run one registered strategy; unknown keys raise `UnknownStrategyError`.
        """
        result = select(self._catalog, strategy_key)
        if config.validate_results:
            validate_selection(self._catalog, result)
        return result

    def compute_rows(self) -> RowAssignment:
        rows = pack(self._catalog)
        if config.validate_results:
            validate_rows(self._catalog, rows)
        return rows

    def compare(self, strategy_key: StrategyLike) -> Comparison:
        return compare(self.run_strategy(strategy_key), self.get_optimal_count())
