"""
Instantaneous overlap of a catalog over time.

The peak value is the clique number of the interval graph, which is the
fewest rows any layout can use.
"""

from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Dict, List, Tuple

from activity_selection.catalog.activity import ActivityCatalog


@dataclass(frozen=True)
class OverlapSnapshot:
    time: float
    active: int
    entering: Tuple[int, ...]
    exiting: Tuple[int, ...]


@dataclass(frozen=True)
class OverlapSummary:
    snapshots: List[OverlapSnapshot]
    max_overlap: int
    argmax_time: float | None
    average_overlap: float


def overlap_profile(catalog: ActivityCatalog) -> List[OverlapSnapshot]:
    """
    Sweep start/end events in time order, one snapshot per distinct time.

    Intervals are half-open, so at a shared coordinate the ending activities
    leave before the starting ones enter.
    """
    events: Dict[float, Tuple[List[int], List[int]]] = {}
    for activity in catalog:
        events.setdefault(activity.start, ([], []))[0].append(activity.id)
        events.setdefault(activity.end, ([], []))[1].append(activity.id)

    active = 0
    snapshots: List[OverlapSnapshot] = []
    for time in sorted(events):
        entering, exiting = events[time]
        active -= len(exiting)
        active += len(entering)
        snapshots.append(
            OverlapSnapshot(
                time=time,
                active=active,
                entering=tuple(entering),
                exiting=tuple(exiting),
            )
        )

    return snapshots


def summarize_overlap(catalog: ActivityCatalog, *, include_snapshots: bool = True) -> OverlapSummary:
    snapshots = overlap_profile(catalog)

    if not snapshots:
        return OverlapSummary(
            snapshots=[],
            max_overlap=0,
            argmax_time=None,
            average_overlap=0.0,
        )

    peak = max(s.active for s in snapshots)
    argmax_time = next(s.time for s in snapshots if s.active == peak)
    # the final snapshot always closes everything, leave it out of the average
    open_spans = snapshots[:-1]
    avg = float(mean(s.active for s in open_spans)) if open_spans else 0.0

    return OverlapSummary(
        snapshots=snapshots if include_snapshots else [],
        max_overlap=peak,
        argmax_time=argmax_time,
        average_overlap=avg,
    )


def max_overlap(catalog: ActivityCatalog) -> int:
    """
    Largest number of activities active at any single instant.
    """
    return summarize_overlap(catalog, include_snapshots=False).max_overlap
