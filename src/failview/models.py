"""Input data types: failure rows and failure-count time points.

Both types are built from the plain dicts a bug-details backend returns.
Parsing is lenient about missing optional data (empty log excerpts, absent
test-run counts) but rejects rows that are not mappings at all.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, List, Optional, Union

from .normalize import split_lines


_STRING_FIELDS = (
    "push_time",
    "tree",
    "revision",
    "platform",
    "build_type",
    "test_suite",
    "machine_name",
)


@dataclass
class FailureRecord:
    """One observed test failure linked to a bug.

    Attributes:
        push_time: When the revision was pushed (backend string form).
        tree: Repository/branch name.
        revision: Source revision identifier.
        platform: Platform the job ran on.
        build_type: Build configuration (e.g. ``"debug"``, ``"opt"``).
        test_suite: Test suite name.
        machine_name: Worker that ran the job.
        job_id: Job whose log holds the failure, ``None`` if unknown.
        lines: Raw log-excerpt lines, possibly empty.
    """
    push_time: str
    tree: str
    revision: str
    platform: str
    build_type: str
    test_suite: str
    machine_name: str
    job_id: Optional[Union[int, str]]
    lines: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a plain dict for JSON encoding."""
        return asdict(self)

    @staticmethod
    def from_dict(d: Any) -> "FailureRecord":
        """Build a record from a backend row.

        Raises:
            ValueError: If *d* is not a mapping.
        """
        if not isinstance(d, dict):
            raise ValueError(f"Failure row must be an object, got {type(d).__name__}")

        lines = d.get("lines")
        if lines is None:
            lines = []
        elif isinstance(lines, str):
            lines = split_lines(lines)
        elif isinstance(lines, (list, tuple)):
            lines = [str(x) for x in lines]
        else:
            lines = []

        values = {name: str(d.get(name) or "") for name in _STRING_FIELDS}
        return FailureRecord(job_id=d.get("job_id"), lines=lines, **values)


@dataclass
class TimeSeriesPoint:
    """Failure count observed at one point in time (usually one day)."""
    timestamp: Union[str, int, float]
    count: Union[int, float, str]
    test_runs: Optional[Union[int, float]] = None

    @staticmethod
    def from_dict(d: Any) -> "TimeSeriesPoint":
        """Build a point from ``{timestamp, count}`` or ``{date, failure_count, test_runs}``.

        Raises:
            ValueError: If *d* is not a mapping or has no timestamp/count.
        """
        if not isinstance(d, dict):
            raise ValueError(f"Graph point must be an object, got {type(d).__name__}")

        ts = d.get("timestamp", d.get("date"))
        count = d.get("count", d.get("failure_count"))
        if ts is None or count is None:
            raise ValueError(f"Graph point needs a timestamp and a count: {d!r}")
        return TimeSeriesPoint(timestamp=ts, count=count, test_runs=d.get("test_runs"))
