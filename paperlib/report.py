"""Human-readable rendering of PaperAnalysis results."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Sequence

from paperlib.models import PaperAnalysis
from paperlib.prompting import format_confidence

PREVIEW_BLOCKS = 3
PREVIEW_CHARS = 150


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    flat = re.sub(r"\s+", " ", text).strip()
    return flat if len(flat) <= limit else flat[:limit].rstrip() + "..."


def render_analysis(analysis: PaperAnalysis) -> str:
    """Plain-text summary for the terminal."""
    m = analysis.metrics
    c = analysis.classification
    lines = [
        f"Title: {analysis.title}",
        f"Classification: {c.primary_type} ({c.confidence} confidence)",
        "",
        f"Sections ({m.total_sections}):",
    ]
    for name, content in analysis.sections.items():
        lines.append(f"  - {name}: {len(content)} chars")
    lines += [
        "",
        "Statistics:",
        f"  Algorithm blocks:       {m.algorithm_blocks}",
        f"  Average confidence:     {format_confidence(m.avg_confidence)}",
        f"  Has abstract:           {'yes' if m.has_abstract else 'no'}",
        f"  Has conclusion:         {'yes' if m.has_conclusion else 'no'}",
        f"  Main algorithm section: {m.main_algorithm_section}",
        f"  Keywords:               {', '.join(analysis.keywords) or 'none'}",
    ]
    for i, block in enumerate(analysis.algorithm_blocks[:PREVIEW_BLOCKS], start=1):
        if i == 1:
            lines += ["", "Top algorithm blocks:"]
        lines.append(
            f"  [{i}] {block.type} @ {block.position} "
            f"({format_confidence(block.confidence)}): {_preview(block.content)}"
        )
    return "\n".join(lines)


def build_markdown(analyses: Sequence[PaperAnalysis]) -> str:
    """Combined markdown report for a batch of papers."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    lines: list[str] = ["# Paper Analysis Report", "", f"_Generated: {now}_", "", "## Index", ""]
    for a in analyses:
        anchor = re.sub(r"[^a-z0-9]+", "-", a.title.lower()).strip("-")
        lines.append(f"- [{a.title}](#{anchor})")
    lines += ["", "---", ""]

    for a in analyses:
        lines += [
            f"## {a.title}",
            "",
            f"- **Classification**: {a.classification.primary_type} ({a.classification.confidence})",
            f"- **Sections**: {', '.join(a.sections) or 'none'}",
            f"- **Keywords**: {', '.join(a.keywords) or 'none'}",
            f"- **Algorithm blocks**: {a.metrics.algorithm_blocks} "
            f"(avg confidence {format_confidence(a.metrics.avg_confidence)})",
            "",
        ]
        for block in a.algorithm_blocks[:PREVIEW_BLOCKS]:
            lines.append(f"> **{block.type}** ({format_confidence(block.confidence)}): {_preview(block.content)}")
            lines.append("")

    return "\n".join(lines).rstrip() + "\n"
