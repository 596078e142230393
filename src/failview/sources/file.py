"""Read failure rows and graph points from local JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from ..models import FailureRecord, TimeSeriesPoint


def load_json(path: str) -> Any:
    """Parse the JSON document at *path*.

    Raises:
        RuntimeError: If *path* does not exist or is not valid JSON.
    """
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"File not found: {p}")
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Invalid JSON in {p}: {e}")


def read_file(path: str, graph_path: Optional[str] = None) -> Tuple[List[FailureRecord], List[TimeSeriesPoint]]:
    """Read failure rows (and optionally graph points) from JSON files.

    *path* holds either a list of failure rows or an object with
    ``failures`` and ``graph`` lists. *graph_path*, when given, holds the
    graph points list and takes precedence over an embedded ``graph``.
    """
    data = load_json(path)
    if isinstance(data, dict):
        rows = data.get("failures") or []
        graph = data.get("graph") or []
    else:
        rows, graph = data, []

    if graph_path:
        graph = load_json(graph_path)

    if not isinstance(rows, list) or not isinstance(graph, list):
        raise RuntimeError(f"Expected lists of failures and graph points in {path}")

    return [FailureRecord.from_dict(r) for r in rows], [TimeSeriesPoint.from_dict(g) for g in graph]
