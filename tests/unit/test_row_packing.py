from __future__ import annotations

import pytest

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.defaults import DEFAULT_CATALOG
from activity_selection.layout.overlap import max_overlap
from activity_selection.layout.row_packing import RowAssignment, pack
from activity_selection.validate import validate_rows


def test_pack_reference_catalog() -> None:
    rows = pack(DEFAULT_CATALOG)

    assert isinstance(rows, RowAssignment)
    # five activities are live at t=3: ids 1, 2, 3, 5 and 10
    assert rows.num_rows == 5
    assert rows.as_ids() == [[3, 7, 11], [1, 4, 8], [10], [2, 6], [5, 9]]
    assert rows.row_of(8) == 1
    validate_rows(DEFAULT_CATALOG, rows)


def test_pack_row_count_matches_peak_overlap(random_catalogs: ActivityCatalog) -> None:
    rows = pack(random_catalogs)
    assert rows.num_rows == max_overlap(random_catalogs)
    validate_rows(random_catalogs, rows)


def test_pack_places_every_activity_exactly_once(random_catalogs: ActivityCatalog) -> None:
    placed = sorted(activity.id for row in pack(random_catalogs) for activity in row)
    assert placed == sorted(random_catalogs.ids())


def test_pack_rows_are_sorted_by_start(random_catalogs: ActivityCatalog) -> None:
    for row in pack(random_catalogs):
        starts = [activity.start for activity in row]
        assert starts == sorted(starts)
        for prev, curr in zip(row, row[1:]):
            assert prev.end <= curr.start


def test_pack_touching_activities_share_a_row() -> None:
    catalog = ActivityCatalog.from_pairs([(0, 2), (2, 4), (1, 3)])
    assert pack(catalog).as_ids() == [[1, 2], [3]]


def test_pack_empty_catalog() -> None:
    rows = pack(ActivityCatalog())
    assert rows.num_rows == 0
    assert rows.as_ids() == []


def test_pack_is_idempotent() -> None:
    assert pack(DEFAULT_CATALOG) == pack(DEFAULT_CATALOG)


def test_row_of_unknown_activity_raises() -> None:
    with pytest.raises(KeyError):
        pack(DEFAULT_CATALOG).row_of(99)
