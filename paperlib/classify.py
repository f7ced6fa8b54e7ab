"""Coarse topical classification by keyword co-occurrence."""

from __future__ import annotations

from typing import Mapping, Sequence

from paperlib.models import AlgorithmBlock, Classification, freeze_mapping
from paperlib.vocabulary import CLASSIFICATION_BUCKETS


def score_categories(text: str) -> dict[str, int]:
    """Number of each bucket's keywords that occur in text (substring match)."""
    lower = text.lower()
    return {
        category: sum(1 for kw in keywords if kw in lower)
        for category, keywords in CLASSIFICATION_BUCKETS.items()
    }


def classify_paper(
    sections: Mapping[str, str],
    algorithm_blocks: Sequence[AlgorithmBlock],
) -> Classification:
    """
    Pick the bucket with the most keyword hits across all section text.

    Ties go to the bucket declared first. Confidence is "high" when any
    algorithm block was found.
    """
    scores = score_categories(" ".join(sections.values()))
    # max() keeps the first maximal key in declaration order
    primary = max(scores, key=scores.__getitem__) if scores else "unknown"
    return Classification(
        primary_type=primary,
        scores=freeze_mapping(scores),
        confidence="high" if algorithm_blocks else "medium",
    )
