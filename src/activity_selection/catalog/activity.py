from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Dict, Iterable, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class Activity:
    """A half-open `[start, end)` time span with a stable identifier."""

    id: int
    start: float
    end: float

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError(f"Activity id must be a positive integer, got {self.id!r}.")
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"Activity {self.id} has non-numeric {name}: {value!r}.")
            if not math.isfinite(value):
                raise ValueError(f"Activity {self.id} has non-finite {name}: {value!r}.")
        if self.start >= self.end:
            raise ValueError(
                f"Activity {self.id} must start before it ends "
                f"(start={self.start}, end={self.end})."
            )

    def duration(self) -> float:
        return self.end - self.start

    def contains(self, t: float) -> bool:
        return self.start <= t < self.end

    def overlaps(self, other: "Activity") -> bool:
        # touching endpoints do not conflict
        return self.start < other.end and other.start < self.end

    def label(self) -> str:
        return f"A{self.id} [{self.start},{self.end}]"


@dataclass(frozen=True)
class ActivityCatalog:
    """
    Immutable, ordered problem instance.

    Catalog order is significant: every stable sort in the library falls back
    to it when two activities compare equal.
    """

    activities: Tuple[Activity, ...] = ()
    _by_id: Dict[int, Activity] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        activities = tuple(self.activities)
        object.__setattr__(self, "activities", activities)

        by_id: Dict[int, Activity] = {}
        duplicates: List[int] = []
        for activity in activities:
            if not isinstance(activity, Activity):
                raise ValueError(f"Catalog entries must be Activity instances, got {activity!r}.")
            if activity.id in by_id:
                duplicates.append(activity.id)
            by_id[activity.id] = activity
        if duplicates:
            raise ValueError(f"Duplicate activity ids in catalog: {sorted(set(duplicates))}")
        object.__setattr__(self, "_by_id", by_id)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]], *, first_id: int = 1) -> "ActivityCatalog":
        """
        Build a catalog from `(start, end)` pairs, numbering ids sequentially.
        """
        return cls(
            tuple(
                Activity(id=first_id + offset, start=start, end=end)
                for offset, (start, end) in enumerate(pairs)
            )
        )

    def __len__(self) -> int:
        return len(self.activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.activities)

    def __getitem__(self, index: Any) -> Any:
        return self.activities[index]

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._by_id

    def ids(self) -> List[int]:
        return [activity.id for activity in self.activities]

    def get(self, activity_id: int) -> Activity:
        try:
            return self._by_id[activity_id]
        except KeyError:
            raise KeyError(f"No activity with id {activity_id} in catalog.") from None

    def timeline_end(self) -> float:
        return max((activity.end for activity in self.activities), default=0)

    def sorted_by(
        self, key: Callable[[Activity], Any], *, reverse: bool = False
    ) -> List[Activity]:
        """Return a stably sorted copy; the catalog itself is never reordered."""
        return sorted(self.activities, key=key, reverse=reverse)
