"""Topical keywords: the most frequent noun phrases of a paper."""

from __future__ import annotations

from collections import Counter

from paperlib.segment import Tagger, noun_phrases

MAX_KEYWORDS = 15
MIN_TERM_LEN = 4
MIN_OCCURRENCES = 3


def extract_keywords(text: str, tagger: Tagger | None = None) -> tuple[str, ...]:
    """
    Lower-cased noun phrases seen at least 3 times, most frequent first.

    Terms of 3 characters or fewer are dropped. Equal counts keep first-seen order.
    """
    counts: Counter[str] = Counter()
    for phrase in noun_phrases(text, tagger=tagger):
        term = phrase.lower()
        if len(term) >= MIN_TERM_LEN:
            counts[term] += 1

    frequent = [(term, n) for term, n in counts.items() if n >= MIN_OCCURRENCES]
    frequent.sort(key=lambda item: item[1], reverse=True)
    return tuple(term for term, _n in frequent[:MAX_KEYWORDS])
