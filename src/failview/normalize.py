"""Failure log excerpt normalizer.

Log excerpts attached to a failure differ from one occurrence to the next
only in a volatile leading segment (a timestamp, a counter, a log-level
marker) separated from the message by ``" | "``. Dropping that segment lets
semantically identical failures collapse into one signature string.
"""

from __future__ import annotations

import hashlib
import re
from typing import List, Optional, Sequence, Union

DELIMITER = " | "

# Leading directory path such as ``dom/tests/mochitest/`` in front of a test name
_PATH_PREFIX_RE = re.compile(r"/?(?:[\w.-]+/)+")


def split_lines(text: str) -> List[str]:
    """Split *text* on ``\\n`` only, tolerating CRLF line endings.

    An empty string is one empty line, so a blank list element and a blank
    line inside a string count the same.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _split_lines(raw: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(raw, str):
        return split_lines(raw)
    out: List[str] = []
    for item in raw:
        out.extend(split_lines(str(item)))
    return out


def normalize_line(line: str) -> str:
    """Drop the first ``" | "`` segment of *line* when it has more than two."""
    parts = line.split(DELIMITER)
    if len(parts) > 2:
        parts = parts[1:]
    return DELIMITER.join(parts)


def normalize_lines(raw: Optional[Union[str, Sequence[str]]]) -> str:
    """Return the signature for a log excerpt.

    *raw* may be one multi-line string or a sequence of lines; both forms give
    the same result for the same content. ``None`` and empty input give ``""``.
    """
    if not raw:
        return ""
    return "\n".join(normalize_line(line) for line in _split_lines(raw))


def signature_id(signature: str) -> str:
    """Return a stable SHA-1 hex digest identifying *signature*."""
    return hashlib.sha1(signature.encode("utf-8")).hexdigest()


def remove_path(line: str) -> str:
    """Strip the first directory path from *line*, keeping the file name."""
    return _PATH_PREFIX_RE.sub("", line, count=1)
