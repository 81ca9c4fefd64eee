"""
Synthetic catalogs for experiments, benchmarks and property tests.
"""

from __future__ import annotations

import numpy as np

from .activity import Activity, ActivityCatalog


def random_catalog(
    num_activities: int,
    *,
    horizon: int = 24,
    max_duration: int = 6,
    seed: int = 0,
) -> ActivityCatalog:
    """
    Draw `num_activities` integer intervals with starts in `[0, horizon)` and
    durations in `[1, max_duration]`. The same seed always yields the same catalog.
    """
    if num_activities < 0:
        raise ValueError("num_activities must be non-negative.")
    if horizon <= 0:
        raise ValueError("horizon must be positive.")
    if max_duration <= 0:
        raise ValueError("max_duration must be positive.")

    rng = np.random.default_rng(seed)
    starts = rng.integers(0, horizon, size=num_activities)
    durations = rng.integers(1, max_duration + 1, size=num_activities)

    return ActivityCatalog(
        tuple(
            Activity(id=idx + 1, start=int(start), end=int(start + duration))
            for idx, (start, duration) in enumerate(zip(starts, durations))
        )
    )
