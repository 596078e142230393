"""Signature catalog: the distinct failure signatures seen in one record set.

The catalog populates the signature filter. Entries keep first-appearance
order and each carries an id derived from its signature, so the same
signature always maps to the same id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .models import FailureRecord
from .normalize import normalize_lines, signature_id


@dataclass
class CatalogEntry:
    """One distinct signature.

    Attributes:
        signature: Normalized log excerpt.
        id: SHA-1 hex digest of ``signature``.
        count: Number of records carrying this signature.
        sample: First raw log line that produced this signature.
    """
    signature: str
    id: str
    count: int
    sample: str


def build_catalog(records: Iterable[FailureRecord]) -> List[CatalogEntry]:
    """Normalize every record's log lines and collapse duplicates.

    Records without log lines, or whose lines normalize to ``""``, are
    skipped.
    """
    entries: Dict[str, CatalogEntry] = {}

    for rec in records:
        if not rec.lines:
            continue
        sig = normalize_lines(rec.lines)
        if not sig:
            continue
        entry = entries.get(sig)
        if entry is None:
            entries[sig] = CatalogEntry(signature=sig, id=signature_id(sig), count=1, sample=rec.lines[0])
        else:
            entry.count += 1

    # dicts keep insertion order, i.e. first appearance
    return list(entries.values())


def catalog_index(catalog: Sequence[CatalogEntry]) -> Dict[str, str]:
    """Map each signature in *catalog* to its id."""
    return {e.signature: e.id for e in catalog}


def lookup_id(catalog: Sequence[CatalogEntry], signature: str) -> Optional[str]:
    """Return the id of *signature* in *catalog*, or ``None`` if absent."""
    for e in catalog:
        if e.signature == signature:
            return e.id
    return None
