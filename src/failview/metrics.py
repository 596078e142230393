"""Time-series aggregation of daily failure counts for charting.

``aggregate`` turns the failure-count history of a bug into two aligned
series: the observed counts (primary) and their trailing mean over the last
``window`` points (secondary). Each secondary value only depends on the point
itself and the points before it, so appending data never rewrites history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from .models import TimeSeriesPoint

Number = Union[int, float]

# One week of daily points
DEFAULT_WINDOW = 7


@dataclass
class AggregatedSeries:
    """Aligned chart series, one value per input point.

    Attributes:
        timestamps: Point timestamps in input order.
        primary: Observed failure counts.
        secondary: Trailing mean of ``primary`` over ``window`` points.
        frequency: Failures per test run (``0.0`` where runs are unknown).
        window: Trailing window size used for ``secondary``.
        total_failures: Sum of ``primary``.
        total_runs: Sum of known test-run counts.
    """
    timestamps: list
    primary: List[Number]
    secondary: List[float]
    frequency: List[float]
    window: int
    total_failures: Number
    total_runs: Number


def to_number(value) -> Number:
    """Coerce a count to ``int`` when integral, ``float`` otherwise.

    Raises:
        ValueError: If *value* is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric count: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    try:
        f = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Not a numeric count: {value!r}")
    return int(f) if f.is_integer() else f


def trailing_mean(values: Sequence[Number], window: int) -> List[float]:
    """Mean of each value and up to ``window - 1`` values before it."""
    out: List[float] = []
    for i in range(len(values)):
        chunk = values[max(0, i - window + 1):i + 1]
        out.append(sum(chunk) / len(chunk))
    return out


def aggregate(points: Sequence[TimeSeriesPoint], window: int = DEFAULT_WINDOW) -> AggregatedSeries:
    """Build the primary/secondary chart series from *points*.

    Raises:
        ValueError: If *points* is empty, *window* is below 1, or a count
            is not numeric.
    """
    if not points:
        raise ValueError("Cannot aggregate an empty series.")
    if window < 1:
        raise ValueError(f"Window must be at least 1, got {window}.")

    timestamps = [p.timestamp for p in points]
    primary = [to_number(p.count) for p in points]

    frequency: List[float] = []
    total_runs: Number = 0
    for count, p in zip(primary, points):
        runs = to_number(p.test_runs) if p.test_runs is not None else 0
        total_runs += runs
        # Failures can be recorded for days with no classified test runs
        frequency.append(count / runs if runs >= 1 else 0.0)

    return AggregatedSeries(
        timestamps=timestamps,
        primary=primary,
        secondary=trailing_mean(primary, window),
        frequency=frequency,
        window=window,
        total_failures=sum(primary),
        total_runs=total_runs,
    )
