"""CLI entry point for failview.

Parses arguments, reads failure rows and failure counts from one source,
runs the catalog -> filter -> aggregate pipeline, and prints the report.
"""

from __future__ import annotations

import argparse
import os
import sys
from datetime import date, timedelta

from .core import build_report
from .filters import ALL
from .metrics import DEFAULT_WINDOW
from .report import print_text_report, report_to_json
from .sources import read_data
from .styling import any_policy, hint_policy, missing_job_policy


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = argparse.ArgumentParser(
        prog="failview",
        description="Group a bug's test failures by log signature and summarize them over time.",
    )

    today = date.today()

    src = parser.add_argument_group("Sources (choose one)")
    src.add_argument("--file", help="JSON file with failure rows (or {failures, graph})")
    src.add_argument("--graph-file", help="JSON file with daily failure counts")
    src.add_argument("--server", default=os.getenv("FAILVIEW_SERVER", ""), help="Bug-details API base URL")
    src.add_argument("--bug", type=int, help="Bug number to fetch from --server")

    parser.add_argument("--startday", default=(today - timedelta(days=7)).isoformat(), help="First day (YYYY-MM-DD)")
    parser.add_argument("--endday", default=today.isoformat(), help="Last day (YYYY-MM-DD)")
    parser.add_argument("--tree", default=os.getenv("FAILVIEW_TREE", "all"), help="Tree to query")

    parser.add_argument("--signature", default=ALL, help='Only show rows with this signature id ("all" for every row)')
    parser.add_argument("--window", type=int, default=int(os.getenv("FAILVIEW_WINDOW", str(DEFAULT_WINDOW))),
                        help="Trailing window (points) for the trend series")
    parser.add_argument("--flag-hints", default="", help="Comma-separated keywords that flag a row")
    parser.add_argument("--show-lines", action="store_true", help="Print each row's log lines")
    parser.add_argument("--json", action="store_true", help="Output report as JSON")

    args = parser.parse_args(argv)

    if args.file and args.bug is not None:
        parser.error("Choose exactly one source: --file or --server/--bug")
    if not args.file and args.bug is None:
        parser.error("Choose exactly one source: --file or --server/--bug")
    if args.bug is not None and not args.server:
        parser.error("--bug requires --server (or FAILVIEW_SERVER)")
    if args.graph_file and not args.file:
        parser.error("--graph-file requires --file")
    if args.window < 1:
        parser.error("--window must be at least 1")

    return args


def main(argv=None) -> None:
    """Entry point: read failures, build the report, print it."""
    args = parse_args(argv)

    policy = missing_job_policy
    hints = [h.strip() for h in args.flag_hints.split(",") if h.strip()]
    if hints:
        policy = any_policy(missing_job_policy, hint_policy(hints))

    try:
        records, points, src_desc = read_data(args)
        report = build_report(
            records,
            points,
            src_desc=src_desc,
            selector=args.signature,
            window=args.window,
            policy=policy,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(report_to_json(report))
    else:
        print_text_report(report, show_lines=args.show_lines)

    if args.signature != ALL and not report.rows:
        print(f"No failures match signature {args.signature}.", file=sys.stderr)


if __name__ == "__main__":
    main()
