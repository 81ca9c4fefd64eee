from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from activity_selection.catalog.activity import Activity, ActivityCatalog
from activity_selection.strategies.registry import by_start
from activity_selection.utils.logging import logger


Row = Tuple[Activity, ...]


@dataclass(frozen=True)
class RowAssignment:
    """
    Partition of a catalog into display rows.

    Rows are in creation order; each row lists its activities in the order
    they were placed (ascending start).
    """
    rows: Tuple[Row, ...] = ()

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def row_of(self, activity_id: int) -> int:
        for idx, row in enumerate(self.rows):
            if any(activity.id == activity_id for activity in row):
                return idx
        raise KeyError(f"Activity {activity_id} is not placed in any row.")

    def as_ids(self) -> List[List[int]]:
        return [[activity.id for activity in row] for row in self.rows]


def pack(catalog: ActivityCatalog) -> RowAssignment:
    """
    First-fit interval partitioning over the whole catalog.

    Activities are taken in ascending start order and dropped into the first
    row whose last occupant has already ended; otherwise a new row is opened.
    Processed in start order, first-fit uses exactly as many rows as the
    largest number of activities active at one instant.
    """
    rows: List[List[Activity]] = []

    for activity in catalog.sorted_by(by_start):
        for row in rows:
            # rows fill in start order, so the last occupant is the only possible conflict
            if row[-1].end <= activity.start:
                row.append(activity)
                break
        else:
            rows.append([activity])

    logger.debug("packed %d activities into %d rows", len(catalog), len(rows))
    return RowAssignment(rows=tuple(tuple(row) for row in rows))
