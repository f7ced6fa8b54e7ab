"""Find spans of paper text that describe algorithms or contain pseudocode.

Two passes feed one ranked list:

- sentence pass: each sentence scoring above 0.3 on algorithm_confidence()
  contributes the window of sentences [i-2, i+5) as an "algorithm" block;
- paragraph pass: each blank-line-separated paragraph scoring above 0.4 on
  code_confidence() is emitted whole as a "pseudocode" block.

Keyword matches are plain case-insensitive substring tests, so short terms
such as "if" or "for" also fire inside longer words.
"""

from __future__ import annotations

import re

from paperlib.models import AlgorithmBlock
from paperlib.segment import split_sentences
from paperlib.text_clean import split_paragraphs
from paperlib.vocabulary import (
    ALGORITHM_KEYWORDS,
    CODE_INDICATORS,
    CONTROL_FLOW,
    MATH_KEYWORDS,
    PROCEDURAL_TERMS,
)

MAX_BLOCKS = 10
MIN_CONFIDENCE = 0.3
SENTENCE_THRESHOLD = 0.3
PARAGRAPH_THRESHOLD = 0.4
WINDOW_BEFORE = 2
WINDOW_AFTER = 5

_NUMBERED_STEP_RE = re.compile(r"\d+[\.\)]\s")
_CALL_RE = re.compile(r"\w+\([^)]*\)")
_INDEX_RE = re.compile(r"\w+\[\w+\]")
_INDENTED_RE = re.compile(r"^\s{2,}")


def _count_matches(lower_text: str, terms: tuple[str, ...]) -> int:
    return sum(1 for term in terms if term.lower() in lower_text)


def algorithm_confidence(text: str) -> float:
    """Score in [0, 1] that text describes an algorithm."""
    lower = text.lower()
    score = 0.0
    score += _count_matches(lower, ALGORITHM_KEYWORDS) * 0.2
    score += _count_matches(lower, CODE_INDICATORS) * 0.15
    score += _count_matches(lower, MATH_KEYWORDS) * 0.1
    score += _count_matches(lower, PROCEDURAL_TERMS) * 0.1
    if _NUMBERED_STEP_RE.search(text):
        score += 0.2
    if _CALL_RE.search(text):
        score += 0.15
    return min(1.0, score)


def code_confidence(text: str) -> float:
    """Score in [0, 1] that text is a pseudocode listing."""
    lower = text.lower()
    score = 0.0

    lines = text.split("\n")
    indented = sum(1 for ln in lines if _INDENTED_RE.match(ln))
    if indented > len(lines) * 0.3:
        score += 0.3

    score += _count_matches(lower, CONTROL_FLOW) * 0.15

    # ":=" is covered by "="
    if "=" in text or "←" in text:
        score += 0.2

    if _CALL_RE.search(text) or _INDEX_RE.search(text):
        score += 0.2

    if "begin" in lower and "end" in lower:
        score += 0.3

    return min(1.0, score)


def relevant_keywords(text: str) -> tuple[str, ...]:
    """Vocabulary terms found in text, deduplicated, in vocabulary order."""
    lower = text.lower()
    found: dict[str, None] = {}
    for vocab in (ALGORITHM_KEYWORDS, CODE_INDICATORS, MATH_KEYWORDS):
        for term in vocab:
            if term.lower() in lower:
                found.setdefault(term, None)
    return tuple(found)


def _sentence_blocks(sentences: list[str]) -> list[AlgorithmBlock]:
    blocks: list[AlgorithmBlock] = []
    for i, sentence in enumerate(sentences):
        confidence = algorithm_confidence(sentence)
        if confidence <= SENTENCE_THRESHOLD:
            continue
        start = max(0, i - WINDOW_BEFORE)
        end = min(len(sentences), i + WINDOW_AFTER)
        blocks.append(AlgorithmBlock(
            type="algorithm",
            content=" ".join(sentences[start:end]).strip(),
            position=i,
            confidence=confidence,
            keywords=relevant_keywords(sentence),
        ))
    return blocks


def _paragraph_blocks(paragraphs: list[str]) -> list[AlgorithmBlock]:
    blocks: list[AlgorithmBlock] = []
    for i, paragraph in enumerate(paragraphs):
        confidence = code_confidence(paragraph)
        if confidence <= PARAGRAPH_THRESHOLD:
            continue
        blocks.append(AlgorithmBlock(
            type="pseudocode",
            content=paragraph.strip(),
            position=i,
            confidence=confidence,
            keywords=relevant_keywords(paragraph),
        ))
    return blocks


def extract_algorithm_blocks(text: str) -> list[AlgorithmBlock]:
    """
    Return up to 10 blocks, highest confidence first.

    Ties keep scan order: sentence-pass blocks before paragraph-pass blocks,
    each in document order.
    """
    sentences = split_sentences(text)
    if not sentences:
        return []

    candidates = _sentence_blocks(sentences) + _paragraph_blocks(split_paragraphs(text))
    kept = [b for b in candidates if b.confidence > MIN_CONFIDENCE]
    kept.sort(key=lambda b: b.confidence, reverse=True)
    return kept[:MAX_BLOCKS]
