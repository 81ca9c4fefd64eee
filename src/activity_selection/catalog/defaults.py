"""
Reference problem instance.
"""

from __future__ import annotations

from .activity import ActivityCatalog

DEFAULT_PAIRS = (
    (1, 4),
    (3, 5),
    (0, 6),
    (5, 7),
    (3, 8),
    (5, 9),
    (6, 10),
    (8, 11),
    (8, 12),
    (2, 13),
    (12, 14),
)

DEFAULT_CATALOG = ActivityCatalog.from_pairs(DEFAULT_PAIRS)
