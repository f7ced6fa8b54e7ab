"""Pipeline entry point: raw paper text -> PaperAnalysis.

Pure functions: no I/O, no shared mutable state. The four independent
analyses (sections, title, algorithm blocks, keywords) may run on an executor;
classification waits for sections and algorithm blocks.
"""

from __future__ import annotations

from collections import Counter
from concurrent.futures import Executor
from typing import Any, Mapping, Sequence

from paperlib.algorithms import MAX_BLOCKS, extract_algorithm_blocks
from paperlib.classify import classify_paper
from paperlib.errors import MalformedUpstreamError
from paperlib.keywords import extract_keywords
from paperlib.models import (
    AlgorithmBlock,
    AnalysisMetrics,
    Classification,
    PaperAnalysis,
    RawDocument,
    freeze_mapping,
)
from paperlib.sections import identify_sections
from paperlib.segment import Tagger, split_sentences, split_words
from paperlib.title import extract_title
from paperlib.vocabulary import STOPWORDS

UNKNOWN_TITLE = "Unknown Paper"
_ALGORITHM_SECTION_HINTS = ("algorithm", "method", "approach")


def _main_algorithm_section(sections: Mapping[str, str]) -> str:
    for name in sections:
        if any(hint in name for hint in _ALGORITHM_SECTION_HINTS):
            return name
    return "unknown"


def compute_metrics(
    sections: Mapping[str, str],
    algorithm_blocks: Sequence[AlgorithmBlock],
) -> AnalysisMetrics:
    n_blocks = len(algorithm_blocks)
    avg = sum(b.confidence for b in algorithm_blocks) / n_blocks if n_blocks else 0.0
    return AnalysisMetrics(
        total_sections=len(sections),
        algorithm_blocks=n_blocks,
        has_abstract=bool(sections.get("abstract")),
        has_conclusion=bool(sections.get("conclusion") or sections.get("discussion")),
        main_algorithm_section=_main_algorithm_section(sections),
        avg_confidence=avg,
    )


def _validate(
    title: Any,
    sections: Any,
    algorithm_blocks: Any,
    keywords: Any,
    classification: Any,
) -> None:
    if not isinstance(title, str):
        raise MalformedUpstreamError(f"title must be a string, got {type(title).__name__}")
    if not isinstance(sections, Mapping):
        raise MalformedUpstreamError(f"sections must be a mapping, got {type(sections).__name__}")
    for name, content in sections.items():
        if not isinstance(name, str) or not isinstance(content, str):
            raise MalformedUpstreamError(f"section {name!r} is not a str -> str entry")
    if isinstance(algorithm_blocks, (str, bytes)) or not isinstance(algorithm_blocks, Sequence):
        raise MalformedUpstreamError("algorithm_blocks must be a sequence")
    if len(algorithm_blocks) > MAX_BLOCKS:
        raise MalformedUpstreamError(f"too many algorithm blocks: {len(algorithm_blocks)}")
    for block in algorithm_blocks:
        if not isinstance(block, AlgorithmBlock):
            raise MalformedUpstreamError(f"not an AlgorithmBlock: {block!r}")
        if not 0.0 <= block.confidence <= 1.0:
            raise MalformedUpstreamError(f"confidence out of range: {block.confidence}")
    if isinstance(keywords, (str, bytes)) or not isinstance(keywords, Sequence):
        raise MalformedUpstreamError("keywords must be a sequence of strings")
    if not all(isinstance(k, str) for k in keywords):
        raise MalformedUpstreamError("keywords must be a sequence of strings")
    if not isinstance(classification, Classification):
        raise MalformedUpstreamError(
            f"classification must be a Classification, got {type(classification).__name__}"
        )


def assemble_analysis(
    title: str,
    sections: Mapping[str, str],
    algorithm_blocks: Sequence[AlgorithmBlock],
    keywords: Sequence[str],
    classification: Classification,
) -> PaperAnalysis:
    """
    Combine stage outputs into one immutable PaperAnalysis.

    Raises: MalformedUpstreamError if any input has the wrong structure.
    """
    _validate(title, sections, algorithm_blocks, keywords, classification)
    blocks = tuple(algorithm_blocks)
    return PaperAnalysis(
        title=title,
        sections=freeze_mapping(sections),
        algorithm_blocks=blocks,
        keywords=tuple(keywords),
        classification=classification,
        metrics=compute_metrics(sections, blocks),
    )


def analyze_paper(
    text: str,
    fallback_title: str | None = None,
    executor: Executor | None = None,
    tagger: Tagger | None = None,
) -> PaperAnalysis:
    """
    Analyze paper text.

    Title priority: extracted title, then fallback_title (typically derived
    from the file name by the caller), then "Unknown Paper".

    Empty text yields an analysis with no sections, blocks or keywords.
    """
    text = text or ""
    doc = RawDocument.from_text(text)

    if executor is None:
        sections = identify_sections(doc)
        title = extract_title(doc.lines)
        blocks = extract_algorithm_blocks(text)
        keywords = extract_keywords(text, tagger=tagger)
    else:
        f_sections = executor.submit(identify_sections, doc)
        f_title = executor.submit(extract_title, doc.lines)
        f_blocks = executor.submit(extract_algorithm_blocks, text)
        f_keywords = executor.submit(extract_keywords, text, tagger)
        sections = f_sections.result()
        title = f_title.result()
        blocks = f_blocks.result()
        keywords = f_keywords.result()

    classification = classify_paper(sections, blocks)
    return assemble_analysis(
        title=title or fallback_title or UNKNOWN_TITLE,
        sections=sections,
        algorithm_blocks=blocks,
        keywords=keywords,
        classification=classification,
    )


def degraded_analysis(title: str | None = None) -> PaperAnalysis:
    """Default analysis for a paper whose pipeline failed."""
    return assemble_analysis(
        title=title or UNKNOWN_TITLE,
        sections={},
        algorithm_blocks=(),
        keywords=(),
        classification=classify_paper({}, ()),
    )


def text_statistics(text: str, top_n: int = 20) -> dict[str, Any]:
    """Word/sentence counts and the most frequent content words."""
    words = [w.lower() for w in split_words(text) if any(ch.isalnum() for ch in w)]
    n_sentences = len(split_sentences(text))
    meaningful = Counter(w for w in words if len(w) > 3 and w not in STOPWORDS)
    return {
        "total_words": len(words),
        "unique_words": len(set(words)),
        "total_sentences": n_sentences,
        "avg_words_per_sentence": round(len(words) / n_sentences) if n_sentences else 0,
        "top_words": [{"word": w, "count": n} for w, n in meaningful.most_common(top_n)],
    }
