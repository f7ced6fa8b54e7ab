"""Title recovery from the first lines of extracted paper text.

Strategies run in order and the first non-None result wins. Callers that own
the PDF path fall back to title_from_filename() when every strategy declines.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from paperlib.vocabulary import (
    SECTION_HEADERS,
    TITLE_AFFILIATIONS,
    TITLE_BOILERPLATE,
    TITLE_BOILERPLATE_LOWER,
    TITLE_FIGURE_REFS,
)

TitleStrategy = Callable[[Sequence[str]], "str | None"]

_PATTERN_SCAN_LINES = 50
_POSITIONAL_START = 5
_POSITIONAL_END = 30

_PERSON_NAME_RE = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+$")
_NUMBERED_ITEM_RE = re.compile(r"^\d+[\.\)]\s")
_DIGITS_ONLY_RE = re.compile(r"^\d+$")
_BRACKETS_RE = re.compile(r"[{}\[\]]")
_WHITESPACE_RE = re.compile(r"\s+")


def _has_boilerplate(line: str) -> bool:
    if any(marker in line for marker in TITLE_BOILERPLATE):
        return True
    lower = line.lower()
    return any(marker in lower for marker in TITLE_BOILERPLATE_LOWER)


def _word_count(line: str) -> int:
    return len(line.split(" "))


def _clean_title(line: str) -> str:
    t = re.sub(r"^\d+\.?\s*", "", line)
    t = _BRACKETS_RE.sub("", t)
    t = _WHITESPACE_RE.sub(" ", t)
    t = re.sub(r"^\W*", "", t)
    t = re.sub(r"\W*$", "", t)
    return t.strip()


def _looks_like_title(line: str) -> bool:
    lower = line.lower()
    words = _word_count(line)
    return (
        8 < len(line) < 150
        and not any(header in lower for header in SECTION_HEADERS)
        and not any(word in line for word in TITLE_AFFILIATIONS)
        and not _PERSON_NAME_RE.match(line)
        and line != line.upper()
        and 2 < words < 20
        and not _NUMBERED_ITEM_RE.match(line)
        and not any(ref in line for ref in TITLE_FIGURE_REFS)
    )


def pattern_title(lines: Sequence[str]) -> str | None:
    """Strict scan of the first 50 lines."""
    for raw in lines[:_PATTERN_SCAN_LINES]:
        line = raw.strip()
        if (
            _has_boilerplate(line)
            or not 8 <= len(line) <= 150
            or _DIGITS_ONLY_RE.match(line)
        ):
            continue
        if not _looks_like_title(line):
            continue
        cleaned = _clean_title(line)
        if len(cleaned) > 10 and _word_count(cleaned) >= 3:
            return cleaned
    return None


def positional_title(lines: Sequence[str]) -> str | None:
    """Relaxed scan of lines 5-30 for the first substantial multi-word line."""
    for raw in lines[_POSITIONAL_START:_POSITIONAL_END]:
        line = raw.strip()
        if not 15 < len(line) < 120 or not 4 <= _word_count(line) <= 15:
            continue
        if _has_boilerplate(line) or "arXiv" in line:
            continue
        if line[:1].isdigit() or "Figure" in line or "Table" in line:
            continue
        return _WHITESPACE_RE.sub(" ", _BRACKETS_RE.sub("", line)).strip()
    return None


TITLE_STRATEGIES: tuple[TitleStrategy, ...] = (pattern_title, positional_title)


def extract_title(
    lines: Sequence[str],
    strategies: Sequence[TitleStrategy] = TITLE_STRATEGIES,
) -> str | None:
    """Return the first title any strategy produces, or None."""
    for strategy in strategies:
        title = strategy(lines)
        if title:
            return title
    return None
