"""Input source dispatcher: routes CLI args to the appropriate reader."""

from __future__ import annotations

from typing import List, Tuple

from ..models import FailureRecord, TimeSeriesPoint
from .file import read_file
from .http import read_http


def read_data(args) -> Tuple[List[FailureRecord], List[TimeSeriesPoint], str]:
    """Dispatch to the correct input source based on parsed CLI arguments.

    Returns:
        A tuple of ``(records, points, source_description)`` where the
        description identifies the source for report metadata (e.g.
        ``"file:failures.json"``).

    Raises:
        RuntimeError: If no source was set on *args*.
    """
    if args.file:
        records, points = read_file(args.file, args.graph_file)
        return records, points, f"file:{args.file}"

    if args.server:
        records, points = read_http(args.server, args.bug, args.startday, args.endday, args.tree)
        return records, points, f"http:{args.server.rstrip('/')}#{args.bug}"

    raise RuntimeError("No input source provided.")
