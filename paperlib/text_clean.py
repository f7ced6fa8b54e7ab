"""Pure text cleaning and splitting helpers."""

from __future__ import annotations

import re
from pathlib import Path

from paperlib.errors import EmptyInputError


# License/copyright lines that PDF extraction leaves at the top of pages
_BOILERPLATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\s*permission to make digital or hard copies\b", re.I),
    re.compile(r"^\s*request permissions from\b", re.I),
    re.compile(r"^\s*copyrights for components of this work\b", re.I),
    re.compile(r"^\s*©\s*\d{4}\b", re.I),
    re.compile(r"^\s*acm isbn\b", re.I),
    re.compile(r"^\s*this work is licensed under\b", re.I),
)

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_SAFE_NAME_DROP_RE = re.compile(r"[^a-z0-9\s\-]")
_SAFE_NAME_MAX = 50
DEFAULT_SAFE_NAME = "paper_implementation"


def ensure_text(text: str | None) -> str:
    """Return text unchanged, or raise EmptyInputError if it is blank."""
    if text is None or not text.strip():
        raise EmptyInputError("input text is empty")
    return text


def _collapse_blank_runs(s: str) -> str:
    s = re.sub(r"[ \t]+\n", "\n", s)
    s = re.sub(r"\n{3,}", "\n\n", s)
    return s.strip()


def _dehyphenate_wrapped_words(s: str) -> str:
    """Join words split across lines: 'recur-\\nsive' -> 'recursive'."""
    return re.sub(r"([A-Za-z])-\n([A-Za-z])", r"\1\2", s)


def _strip_boilerplate_lines(s: str) -> str:
    kept = [
        ln for ln in s.splitlines()
        if not any(p.search(ln) for p in _BOILERPLATE_PATTERNS)
    ]
    return "\n".join(kept)


def clean_pdf_text(raw_text: str) -> str:
    """
    Clean text handed over by the PDF extractor.

    Removes control characters (keeping tabs and newlines), dehyphenates
    wrapped words, drops license boilerplate and collapses blank-line runs to a
    single paragraph break. Line structure is otherwise preserved, since section
    and title detection depend on it.
    """
    txt = raw_text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n\n")
    txt = _CONTROL_CHARS_RE.sub("", txt)
    txt = _dehyphenate_wrapped_words(txt)
    txt = _strip_boilerplate_lines(txt)
    return _collapse_blank_runs(txt)


def split_paragraphs(text: str) -> list[str]:
    """Split on literal blank-line boundaries. Paragraphs are not trimmed."""
    return text.split("\n\n") if text else []


def title_from_filename(path: Path | str) -> str:
    """Fallback title: file stem with separators turned into spaces."""
    stem = Path(path).stem
    return _WHITESPACE_RE.sub(" ", re.sub(r"[_\-]+", " ", stem)).strip()


def to_safe_name(title: str | None) -> str:
    """
    Convert a paper title to a directory/file stem.

    'Attention Is All You Need!' -> 'attention_is_all_you_need'
    """
    if not title:
        return DEFAULT_SAFE_NAME
    t = _SAFE_NAME_DROP_RE.sub("", title.lower())
    t = _WHITESPACE_RE.sub("_", t)
    t = re.sub(r"_+", "_", t).strip("_")
    return t[:_SAFE_NAME_MAX] or DEFAULT_SAFE_NAME
