from __future__ import annotations

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.defaults import DEFAULT_CATALOG
from activity_selection.layout.overlap import (
    OverlapSnapshot,
    OverlapSummary,
    max_overlap,
    overlap_profile,
    summarize_overlap,
)


def test_overlap_profile_records_entering_and_exiting() -> None:
    profile = overlap_profile(DEFAULT_CATALOG)

    assert [snap.time for snap in profile] == list(range(15))
    at_three = profile[3]
    assert isinstance(at_three, OverlapSnapshot)
    assert at_three.entering == (2, 5)
    assert at_three.exiting == ()
    assert at_three.active == 5

    at_five = profile[5]
    assert at_five.exiting == (2,)
    assert at_five.entering == (4, 6)
    assert at_five.active == 5
    assert profile[-1].active == 0


def test_end_before_start_at_shared_coordinate() -> None:
    catalog = ActivityCatalog.from_pairs([(0, 2), (2, 4)])
    assert max_overlap(catalog) == 1


def test_summarize_overlap_reference_catalog() -> None:
    summary = summarize_overlap(DEFAULT_CATALOG)

    assert isinstance(summary, OverlapSummary)
    assert summary.max_overlap == 5
    assert summary.argmax_time == 3
    assert summary.average_overlap > 0
    assert summarize_overlap(DEFAULT_CATALOG, include_snapshots=False).snapshots == []


def test_summarize_overlap_empty_catalog() -> None:
    summary = summarize_overlap(ActivityCatalog())
    assert summary.max_overlap == 0
    assert summary.argmax_time is None
    assert summary.snapshots == []
