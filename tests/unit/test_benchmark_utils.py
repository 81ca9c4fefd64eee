from __future__ import annotations

import json

from activity_selection.catalog.activity import ActivityCatalog
from activity_selection.catalog.defaults import DEFAULT_CATALOG
from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    run_single_trial,
    summarize,
)


def test_run_single_trial_records_ratio() -> None:
    result = run_single_trial("reference", "start", 0, catalog=DEFAULT_CATALOG)

    assert result.strategy == "start"
    assert result.count == 3
    assert result.optimal == 4
    assert result.ratio == 0.75
    assert result.wall_time_s >= 0


def test_run_single_trial_empty_catalog() -> None:
    result = run_single_trial("empty", "end", 0, catalog=ActivityCatalog())
    assert result.ratio is None


def test_summarize_and_format_table() -> None:
    results = [
        BenchmarkResult("demo", "end", 0, wall_time_s=0.5, num_activities=10, count=4, optimal=4, ratio=1.0),
        BenchmarkResult("demo", "end", 1, wall_time_s=0.7, num_activities=10, count=3, optimal=3, ratio=1.0),
        BenchmarkResult("demo", "start", 0, wall_time_s=0.8, num_activities=10, count=2, optimal=4, ratio=0.5),
    ]

    summary = summarize(results)
    table = format_summary_table(summary)

    assert [row["strategy"] for row in summary] == ["end", "start"]
    assert summary[0]["optimal_hits"] == 2
    assert summary[1]["ratio_min"] == 0.5
    assert "strategy" in table
    assert format_summary_table([]) == "No results recorded."


def test_export_json(tmp_path) -> None:
    result = run_single_trial("reference", "duration", 0, catalog=DEFAULT_CATALOG)
    destination = tmp_path / "out" / "results.json"
    export_json([result], destination)

    payload = json.loads(destination.read_text())
    assert payload[0]["strategy"] == "duration"
    assert payload[0]["count"] == 3
