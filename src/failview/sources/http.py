"""Fetch failure rows and graph points from a bug-details HTTP API."""

from __future__ import annotations

from typing import List, Tuple

import requests

from ..models import FailureRecord, TimeSeriesPoint

FAILURES_PATH = "/api/failuresbybug/"
GRAPH_PATH = "/api/failurecount/"


def _get_json(url: str, params: dict) -> list:
    r = requests.get(url, params=params, headers={"Accept": "application/json"}, timeout=30)
    r.raise_for_status()
    data = r.json()
    if not isinstance(data, list):
        raise RuntimeError(f"Unexpected response from {url}: expected a list")
    return data


def read_http(
    server: str,
    bug: int,
    startday: str,
    endday: str,
    tree: str,
) -> Tuple[List[FailureRecord], List[TimeSeriesPoint]]:
    """GET the failure rows and daily failure counts for *bug*.

    Raises:
        requests.RequestException: On connection errors or non-2xx responses.
        RuntimeError: If a response body is not a JSON list.
    """
    base = server.rstrip("/")
    params = {"startday": startday, "endday": endday, "tree": tree, "bug": bug}
    rows = _get_json(base + FAILURES_PATH, params)
    graph = _get_json(base + GRAPH_PATH, params)
    return [FailureRecord.from_dict(r) for r in rows], [TimeSeriesPoint.from_dict(g) for g in graph]
