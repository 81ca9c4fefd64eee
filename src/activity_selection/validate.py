"""
Structural validation of selection results and row layouts.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from activity_selection.catalog.activity import Activity, ActivityCatalog
from activity_selection.layout.row_packing import RowAssignment
from activity_selection.strategies.greedy import SelectionResult


def validate_selection(catalog: ActivityCatalog, result: SelectionResult) -> None:
    """
    Check that a selection only references catalog activities, holds no
    duplicates and is pairwise non-overlapping.
    """
    _ensure_known_ids(catalog, result.selected_ids)
    if len(set(result.selected_ids)) != len(result.selected_ids):
        raise ValueError("Selection contains duplicate activity ids.")
    chosen = sorted((catalog.get(i) for i in result.selected_ids), key=lambda a: a.start)
    _ensure_disjoint(chosen, context="selection")


def validate_rows(catalog: ActivityCatalog, rows: RowAssignment) -> None:
    """
    Check that a layout places every catalog activity exactly once and that
    each row is in ascending start order without overlaps.
    """
    placed: List[int] = [activity.id for row in rows for activity in row]
    _ensure_known_ids(catalog, placed)
    if len(set(placed)) != len(placed):
        raise ValueError("Layout places an activity more than once.")
    missing = set(catalog.ids()) - set(placed)
    if missing:
        raise ValueError(f"Layout drops activities: {sorted(missing)}")

    for idx, row in enumerate(rows):
        if not row:
            raise ValueError(f"Row {idx} is empty.")
        starts = [activity.start for activity in row]
        if starts != sorted(starts):
            raise ValueError(f"Row {idx} is not in ascending start order.")
        _ensure_disjoint(row, context=f"row {idx}")


def _ensure_known_ids(catalog: ActivityCatalog, ids: Iterable[int]) -> None:
    unknown = [i for i in ids if i not in catalog]
    if unknown:
        raise ValueError(f"Unknown activity ids: {unknown}")


def _ensure_disjoint(ordered: Sequence[Activity], *, context: str) -> None:
    # sorted by start, so adjacent pairs are enough
    for prev, curr in zip(ordered, ordered[1:]):
        if prev.overlaps(curr):
            raise ValueError(
                f"Overlapping activities in {context}: {prev.label()} and {curr.label()}."
            )
