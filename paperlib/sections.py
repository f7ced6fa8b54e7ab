"""Split a paper into named sections using header-line heuristics."""

from __future__ import annotations

import re

from paperlib.models import RawDocument
from paperlib.vocabulary import SECTION_HEADERS

UNKNOWN_SECTION = "unknown"
_MAX_HEADER_LEN = 100
_NUMBERED_RE = re.compile(r"^\d+\.?\s")


def is_likely_header(line: str) -> bool:
    """
    Shape test for a header line.

    Either ALL CAPS (longer than 2 chars), or capitalised and numbered
    ('3. Results'); never ending in a period.
    """
    is_all_caps = line == line.upper() and len(line) > 2
    is_title_case = line[:1] == line[:1].upper()
    is_numbered = bool(_NUMBERED_RE.match(line))
    return (
        (is_all_caps or (is_title_case and is_numbered))
        and len(line) < _MAX_HEADER_LEN
        and not line.endswith(".")
    )


def match_header(line: str) -> str | None:
    """Return the section name a header line introduces, or None."""
    if not is_likely_header(line):
        return None
    lower = line.lower()
    for header in SECTION_HEADERS:
        # substring match also covers equality and prefix
        if header in lower:
            return header
    return None


def identify_sections(doc: RawDocument) -> dict[str, str]:
    """
    Map section name -> newline-joined content.

    Text before the first header goes under "unknown". A repeated header
    replaces the content stored for the earlier occurrence.
    """
    sections: dict[str, str] = {}
    current = UNKNOWN_SECTION
    buf: list[str] = []

    for line in doc.lines:
        name = match_header(line)
        if name is None:
            buf.append(line)
            continue
        if buf:
            sections[current] = "\n".join(buf).strip()
        current = name
        buf = []

    if buf:
        sections[current] = "\n".join(buf).strip()
    return sections
