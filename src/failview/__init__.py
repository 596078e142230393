"""Group a bug's test failures by log signature and chart them over time."""

from __future__ import annotations

from .catalog import CatalogEntry, build_catalog
from .filters import ALL, filter_records, matches
from .metrics import AggregatedSeries, aggregate
from .models import FailureRecord, TimeSeriesPoint
from .normalize import normalize_lines
from .styling import FLAGGED, NORMAL, classify

__all__ = [
    "ALL",
    "AggregatedSeries",
    "CatalogEntry",
    "FLAGGED",
    "FailureRecord",
    "NORMAL",
    "TimeSeriesPoint",
    "aggregate",
    "build_catalog",
    "classify",
    "filter_records",
    "matches",
    "normalize_lines",
]
