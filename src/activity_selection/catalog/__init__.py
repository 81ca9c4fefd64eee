"""
Activity entity and the immutable catalog (problem instance).

- `Activity` and `ActivityCatalog` (see `activity.py`)
- `DEFAULT_CATALOG`, the 11-activity reference instance
- `random_catalog` for synthetic instances
"""

from .activity import Activity, ActivityCatalog
from .defaults import DEFAULT_CATALOG, DEFAULT_PAIRS
from .generate import random_catalog

__all__ = [
    "Activity",
    "ActivityCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_PAIRS",
    "random_catalog",
]
