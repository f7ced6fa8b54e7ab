"""Data models for paper2code."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Paper:
    """A source PDF with its extracted text and document-info metadata."""
    pdf_path: Path
    text: str
    pages: int = 0
    metadata: Mapping[str, str | None] = field(default_factory=dict)


@dataclass(frozen=True)
class RawDocument:
    """Ordered, non-empty, trimmed lines of a paper's text."""
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> RawDocument:
        stripped = (ln.strip() for ln in (text or "").split("\n"))
        return cls(lines=tuple(ln for ln in stripped if ln))

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class AlgorithmBlock:
    """A span of text believed to describe an algorithm or hold pseudocode."""
    type: str  # "algorithm" | "pseudocode"
    content: str
    position: int
    confidence: float
    keywords: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": self.content,
            "position": self.position,
            "confidence": self.confidence,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class Classification:
    primary_type: str
    scores: Mapping[str, int]
    confidence: str  # "high" | "medium"

    def to_dict(self) -> dict[str, Any]:
        return {
            "primaryType": self.primary_type,
            "scores": dict(self.scores),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class AnalysisMetrics:
    """Read-only summary derived from the other PaperAnalysis fields."""
    total_sections: int
    algorithm_blocks: int
    has_abstract: bool
    has_conclusion: bool
    main_algorithm_section: str
    avg_confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalSections": self.total_sections,
            "algorithmBlocks": self.algorithm_blocks,
            "hasAbstract": self.has_abstract,
            "hasConclusion": self.has_conclusion,
            "mainAlgorithmSection": self.main_algorithm_section,
            "avgConfidence": self.avg_confidence,
        }


@dataclass(frozen=True)
class PaperAnalysis:
    """Structured summary of one paper. Built only by assemble_analysis()."""
    title: str
    sections: Mapping[str, str]
    algorithm_blocks: tuple[AlgorithmBlock, ...]
    keywords: tuple[str, ...]
    classification: Classification
    metrics: AnalysisMetrics

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "sections": dict(self.sections),
            "algorithmBlocks": [b.to_dict() for b in self.algorithm_blocks],
            "keywords": list(self.keywords),
            "classification": self.classification.to_dict(),
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class GeneratedCode:
    """Parsed response of the code-generation model."""
    full_response: str
    code_blocks: tuple[str, ...]
    explanation: str

    @property
    def main_implementation(self) -> str:
        return self.code_blocks[0] if self.code_blocks else ""

    @property
    def has_code(self) -> bool:
        return bool(self.code_blocks)


def freeze_mapping(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view over a private copy of data."""
    return MappingProxyType(dict(data))
