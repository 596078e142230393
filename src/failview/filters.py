"""Signature filter over failure records."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .catalog import CatalogEntry, lookup_id
from .models import FailureRecord
from .normalize import normalize_lines

ALL = "all"


def matches(record: FailureRecord, selector: str, catalog: Sequence[CatalogEntry]) -> bool:
    """Return True if *record* belongs to the signature group *selector*.

    ``ALL`` matches every record. Any other selector matches only when the
    record's signature is in *catalog* under that id.
    """
    if selector == ALL:
        return True
    sig = normalize_lines(record.lines)
    if not sig:
        return False
    return lookup_id(catalog, sig) == selector


def filter_records(
    records: Iterable[FailureRecord],
    selector: str,
    catalog: Sequence[CatalogEntry],
) -> List[FailureRecord]:
    """Return the records matching *selector*, in input order."""
    return [r for r in records if matches(r, selector, catalog)]
