"""Per-row presentation hints for the failure table.

A row is either ``"normal"`` or ``"flagged"``. Which rows get flagged is a
deployment choice, so ``classify`` takes a predicate. The default flags rows
that have no job to link to.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from .models import FailureRecord

NORMAL = "normal"
FLAGGED = "flagged"

Policy = Callable[[FailureRecord], bool]

DISABLED_HINTS = (
    "disabled",
    "annotated",
    "marked",
)


def missing_job_policy(record: FailureRecord) -> bool:
    """Flag records without an associated job."""
    return record.job_id is None or str(record.job_id).strip() == ""


def hint_policy(
    hints: Iterable[str] = DISABLED_HINTS,
    fields: Sequence[str] = ("test_suite", "machine_name"),
) -> Policy:
    """Build a predicate flagging records whose *fields* contain any of *hints*.

    Matching is a case-insensitive substring test.
    """
    lowered = tuple(h.lower() for h in hints if h)

    def _policy(record: FailureRecord) -> bool:
        for name in fields:
            t = str(getattr(record, name, "") or "").lower()
            if any(h in t for h in lowered):
                return True
        return False

    return _policy


def any_policy(*policies: Policy) -> Policy:
    """Combine predicates: flag when any of *policies* flags."""
    def _policy(record: FailureRecord) -> bool:
        return any(p(record) for p in policies)

    return _policy


def classify(record: FailureRecord, policy: Optional[Policy] = None) -> str:
    """Return ``FLAGGED`` if *policy* flags *record*, ``NORMAL`` otherwise."""
    p = policy or missing_job_policy
    return FLAGGED if p(record) else NORMAL


def failure_summary(record: FailureRecord) -> str:
    """Tooltip label such as ``"3 unexpected-fails"``."""
    n = len(record.lines)
    return f"{n} unexpected-fail{'s' if n > 1 else ''}"
