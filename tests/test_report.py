from paperlib.content_analysis import analyze_paper, degraded_analysis
from paperlib.report import build_markdown, render_analysis

SAMPLE = (
    "1. Introduction\nThis is filler.\n\n2. Methodology\n"
    "We propose Algorithm 1: iterate, then recurse, then return the result."
)


def test_render_analysis(tagger):
    text = render_analysis(analyze_paper(SAMPLE, fallback_title="Sample", tagger=tagger))
    assert "Sections (2):" in text
    assert "  - methodology: " in text
    assert "Top algorithm blocks:" in text
    assert "[1] algorithm @ " in text


def test_render_degraded():
    text = render_analysis(degraded_analysis("Broken"))
    assert text.startswith("Title: Broken")
    assert "Top algorithm blocks:" not in text
    assert "Keywords:               none" in text


def test_build_markdown_index_and_sections():
    md = build_markdown([degraded_analysis("Deep Residual Learning")])
    assert md.startswith("# Paper Analysis Report\n")
    assert "- [Deep Residual Learning](#deep-residual-learning)" in md
    assert "## Deep Residual Learning" in md
    assert md.endswith("\n")
