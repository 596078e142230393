"""Core pipeline: catalog, filter, classify, and aggregate into a report.

This module ties together the signature catalog, the row filter, row
styling, and the time-series aggregator. Each stage is a pure function; the
catalog is built once and threaded through the filter explicitly.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .catalog import build_catalog, catalog_index
from .filters import ALL, filter_records
from .metrics import DEFAULT_WINDOW, aggregate
from .models import FailureRecord, TimeSeriesPoint
from .normalize import normalize_lines
from .report import Report, ReportRow
from .styling import Policy, classify, failure_summary


def build_rows(
    records: Sequence[FailureRecord],
    index: Dict[str, str],
    policy: Optional[Policy] = None,
) -> List[ReportRow]:
    """Attach signature ids, style tags, and tooltip labels to *records*."""
    rows: List[ReportRow] = []
    for rec in records:
        rows.append(
            ReportRow(
                push_time=rec.push_time,
                tree=rec.tree,
                revision=rec.revision,
                platform=rec.platform,
                build_type=rec.build_type,
                test_suite=rec.test_suite,
                machine_name=rec.machine_name,
                job_id=rec.job_id,
                lines=list(rec.lines),
                signature_id=index.get(normalize_lines(rec.lines)),
                style=classify(rec, policy),
                summary=failure_summary(rec),
            )
        )
    return rows


def build_report(
    records: Sequence[FailureRecord],
    points: Sequence[TimeSeriesPoint],
    src_desc: str,
    selector: str = ALL,
    window: int = DEFAULT_WINDOW,
    policy: Optional[Policy] = None,
) -> Report:
    """Run the full pipeline over one fetched record set.

    ``series`` is ``None`` when there are no time points; an unknown
    *selector* simply matches no rows.

    Raises:
        ValueError: If *window* is below 1 or a point count is not numeric.
    """
    catalog = build_catalog(records)
    visible = filter_records(records, selector, catalog)
    rows = build_rows(visible, catalog_index(catalog), policy)

    series = aggregate(points, window) if points else None

    return Report(
        source=src_desc,
        selector=selector,
        total_failures=len(records),
        catalog=catalog,
        rows=rows,
        series=series,
    )
