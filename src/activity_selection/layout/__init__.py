"""
Display layout for a catalog.

- `pack` assigns every activity to a non-overlapping row (see `row_packing.py`)
- Overlap profiling gives the lower bound on the number of rows (see `overlap.py`)
"""

from .row_packing import RowAssignment, pack
from .overlap import OverlapSnapshot, OverlapSummary, max_overlap, overlap_profile, summarize_overlap

__all__ = [
    "RowAssignment",
    "pack",
    "OverlapSnapshot",
    "OverlapSummary",
    "max_overlap",
    "overlap_profile",
    "summarize_overlap",
]
