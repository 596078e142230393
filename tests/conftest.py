"""Shared pytest fixtures for the failview test suite.

Provides sample failure rows, graph points, and an argument factory so
individual test modules stay focused on assertions rather than setup.
"""

from __future__ import annotations

import argparse

import pytest

from failview.models import FailureRecord, TimeSeriesPoint


def _make_record(lines=None, job_id=101, **overrides) -> FailureRecord:
    fields = dict(
        push_time="2024-01-15 10:30:00",
        tree="autoland",
        revision="a1b2c3d4e5f6",
        platform="linux1804-64",
        build_type="debug",
        test_suite="mochitest-browser-chrome",
        machine_name="t-linux-xlarge-0123",
        job_id=job_id,
        lines=list(lines or []),
    )
    fields.update(overrides)
    return FailureRecord(**fields)


@pytest.fixture
def make_record():
    """Factory fixture building a FailureRecord with plausible defaults.

    Example::

        rec = make_record(lines=["12:00 | ERROR | boom"], job_id=None)
    """
    return _make_record


@pytest.fixture
def sample_rows() -> list[dict]:
    """Backend-shaped failure rows as returned by the failures-by-bug API.

    Two rows share a signature that differs only in the leading segment,
    one row has a different failure, and one row has no log lines.
    """
    return [
        {
            "push_time": "2024-01-15 10:30:00",
            "tree": "autoland",
            "revision": "a1b2c3d4e5f6",
            "platform": "linux1804-64",
            "build_type": "debug",
            "test_suite": "mochitest-browser-chrome",
            "machine_name": "t-linux-xlarge-0123",
            "job_id": 101,
            "bug_id": 1234567,
            "lines": ["12:00:01 | TEST-UNEXPECTED-FAIL | browser/base/test.js | assertion failed"],
        },
        {
            "push_time": "2024-01-16 09:00:00",
            "tree": "mozilla-central",
            "revision": "f6e5d4c3b2a1",
            "platform": "windows10-64",
            "build_type": "opt",
            "test_suite": "mochitest-browser-chrome",
            "machine_name": "t-win-0456",
            "job_id": 102,
            "bug_id": 1234567,
            "lines": ["13:45:10 | TEST-UNEXPECTED-FAIL | browser/base/test.js | assertion failed"],
        },
        {
            "push_time": "2024-01-17 08:15:00",
            "tree": "autoland",
            "revision": "0011223344aa",
            "platform": "macosx1015-64",
            "build_type": "opt",
            "test_suite": "xpcshell",
            "machine_name": "t-mac-0789",
            "job_id": 103,
            "bug_id": 1234567,
            "lines": [
                "TEST-UNEXPECTED-TIMEOUT | dom/tests/test_timer.js | timed out",
                "PROCESS-CRASH | dom/tests/test_timer.js | application crashed",
            ],
        },
        {
            "push_time": "2024-01-17 11:00:00",
            "tree": "autoland",
            "revision": "99887766ffee",
            "platform": "android-em-7-0",
            "build_type": "debug",
            "test_suite": "xpcshell",
            "machine_name": "t-android-0001",
            "job_id": None,
            "bug_id": 1234567,
            "lines": [],
        },
    ]


@pytest.fixture
def sample_records(sample_rows) -> list[FailureRecord]:
    """``sample_rows`` parsed into FailureRecord objects."""
    return [FailureRecord.from_dict(r) for r in sample_rows]


@pytest.fixture
def sample_graph() -> list[dict]:
    """Backend-shaped daily failure counts as returned by the failure-count API."""
    return [
        {"date": "2024-01-15", "failure_count": 1, "test_runs": 10},
        {"date": "2024-01-16", "failure_count": 1, "test_runs": 0},
        {"date": "2024-01-17", "failure_count": 2, "test_runs": 8},
    ]


@pytest.fixture
def sample_points(sample_graph) -> list[TimeSeriesPoint]:
    """``sample_graph`` parsed into TimeSeriesPoint objects."""
    return [TimeSeriesPoint.from_dict(g) for g in sample_graph]


@pytest.fixture
def make_args():
    """Factory fixture that builds ``argparse.Namespace`` objects with sensible defaults.

    Callers pass keyword overrides for only the fields they care about.

    Example::

        args = make_args(file="/tmp/failures.json", signature="all")
    """

    def _make(**overrides) -> argparse.Namespace:
        # Mirror every attribute that cli.parse_args sets on the Namespace
        defaults = dict(
            file="",
            graph_file="",
            server="",
            bug=None,
            startday="2024-01-10",
            endday="2024-01-17",
            tree="all",
            signature="all",
            window=7,
            flag_hints="",
            show_lines=False,
            json=False,
        )
        defaults.update(overrides)
        return argparse.Namespace(**defaults)

    return _make
