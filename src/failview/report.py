"""Report data structures and output formatters (text and JSON)."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from typing import List, Optional

from .catalog import CatalogEntry
from .metrics import AggregatedSeries
from .normalize import remove_path


@dataclass
class ReportRow:
    """One visible row of the failure table.

    Attributes:
        push_time: When the revision was pushed.
        tree: Repository/branch name.
        revision: Source revision.
        platform: Platform the job ran on.
        build_type: Build configuration.
        test_suite: Test suite name.
        machine_name: Worker that ran the job.
        job_id: Job holding the failure log.
        lines: Raw log-excerpt lines.
        signature_id: Catalog id of the row's signature, ``None`` without lines.
        style: ``"normal"`` or ``"flagged"``.
        summary: Tooltip label, e.g. ``"2 unexpected-fails"``.
    """
    push_time: str
    tree: str
    revision: str
    platform: str
    build_type: str
    test_suite: str
    machine_name: str
    job_id: object
    lines: List[str]
    signature_id: Optional[str]
    style: str
    summary: str


@dataclass
class Report:
    """Top-level report container."""
    source: str
    selector: str
    total_failures: int
    catalog: List[CatalogEntry]
    rows: List[ReportRow]
    series: Optional[AggregatedSeries]


def print_text_report(report: Report, show_lines: bool) -> None:
    """Print a human-readable report to stdout."""
    print("\n=== Bug Failure Report ===")
    print(f"Source: {report.source} | filter={report.selector}")
    print(f"{report.total_failures} total failures, {len(report.catalog)} distinct signatures")
    print()

    if report.catalog:
        print("Signatures:")
        for e in report.catalog:
            first = e.signature.splitlines()[0] if e.signature else ""
            print(f"  {e.id[:12]}  x{e.count:<5} {first}")
        print()

    if not report.rows:
        print("No failures to show.")
    for r in report.rows:
        marker = "!" if r.style == "flagged" else " "
        print(f"{marker} {r.push_time:<20} {r.tree:<16} {r.revision[:12]:<12} "
              f"{r.platform:<24} {r.build_type:<6} {r.test_suite:<24} {r.machine_name:<20} "
              f"{r.summary}")
        if show_lines:
            for line in r.lines:
                print(f"    {remove_path(line)}")

    if report.series is None:
        return

    s = report.series
    print(f"\nFailures over time (trend = {s.window}-point trailing mean):")
    print(f"  {'date':<22} {'count':>7} {'trend':>9} {'per run':>9}")
    for ts, count, trend, freq in zip(s.timestamps, s.primary, s.secondary, s.frequency):
        print(f"  {str(ts):<22} {count:>7} {trend:>9.2f} {freq:>9.3f}")
    print(f"  total failures={s.total_failures} total runs={s.total_runs}")


def report_to_json(report: Report) -> str:
    """Serialize the full report to a pretty-printed JSON string."""
    return json.dumps(asdict(report), indent=2)
