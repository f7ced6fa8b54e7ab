"""Code generation: prompt an OpenAI-compatible model, document and save the result."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Final

from paperlib.errors import GenerationError
from paperlib.models import GeneratedCode, PaperAnalysis
from paperlib.prompting import build_code_prompt, format_confidence, parse_code_response
from paperlib.text_clean import to_safe_name


DEFAULT_MODEL: Final[str] = "gpt-4o-mini"
DOC_BLOCKS: Final[int] = 3
DOC_PREVIEW_CHARS: Final[int] = 300


def make_client() -> Any:
    """
    Build an OpenAI client from the environment.

    OPENAI_BASE_URL may point at any OpenAI-compatible server (e.g. a local
    Ollama at http://localhost:11434/v1).
    """
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise GenerationError(
            "OPENAI_API_KEY environment variable is required. "
            "Set it in .env or export OPENAI_API_KEY=sk-..."
        )
    try:
        from openai import OpenAI  # type: ignore
    except ImportError as e:
        raise GenerationError("openai package not installed. Run: pip install openai") from e

    base_url = os.environ.get("OPENAI_BASE_URL")
    return OpenAI(api_key=api_key, base_url=base_url) if base_url else OpenAI(api_key=api_key)


def generate_implementation(
    analysis: PaperAnalysis,
    language: str = "python",
    client: Any = None,
    model: str | None = None,
) -> GeneratedCode:
    """
    Ask the model for an implementation of the paper's algorithms.

    Raises: GenerationError if the client is misconfigured or the response
    holds no fenced code block.
    """
    client = client or make_client()
    model = model or os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)
    prompt = build_code_prompt(analysis, language=language)
    resp = client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": prompt}],
    )
    content = (resp.choices[0].message.content or "").strip()
    result = parse_code_response(content)
    if not result.has_code:
        raise GenerationError("No code was generated from the paper analysis")
    return result


def build_documentation(analysis: PaperAnalysis, generated: GeneratedCode) -> str:
    """Markdown README describing the paper and the generated implementation."""
    title = analysis.title or "Algorithm Implementation"
    lines: list[str] = [
        f"# {title}",
        "",
        "## Overview",
        "",
        f"This implementation is based on the research paper: **{title}**",
        "",
        f"**Classification:** {analysis.classification.primary_type}",
        f"**Keywords:** {', '.join(analysis.keywords) or 'None'}",
        "",
        "## Paper Summary",
        "",
        analysis.sections.get("abstract") or "No abstract available",
        "",
        "## Algorithm Analysis",
        "",
        f"The paper describes {len(analysis.algorithm_blocks)} main algorithm block(s):",
        "",
    ]
    blocks = analysis.algorithm_blocks[:DOC_BLOCKS]
    if not blocks:
        lines += ["No algorithm blocks identified", ""]
    for i, block in enumerate(blocks, start=1):
        lines += [
            f"### Algorithm Block {i}",
            f"**Confidence:** {format_confidence(block.confidence)}",
            f"**Keywords:** {', '.join(block.keywords) or 'None'}",
            "",
            f"{block.content[:DOC_PREVIEW_CHARS]}...",
            "",
        ]
    lines += [
        "## Implementation Details",
        "",
        generated.explanation or "Implementation generated automatically from paper analysis.",
        "",
        "## Paper Information",
        "",
        f"**Sections Found:** {', '.join(analysis.sections)}",
        f"**Algorithm Blocks:** {len(analysis.algorithm_blocks)}",
        f"**Classification Confidence:** {analysis.classification.confidence}",
    ]
    return "\n".join(lines).rstrip() + "\n"


def save_implementation(
    out_dir: Path,
    analysis: PaperAnalysis,
    generated: GeneratedCode | None = None,
    extension: str = "py",
) -> Path:
    """
    Write <out_dir>/<safe_name>/ with analysis.json and, when generated is
    given, the main source file and README.md. Returns the directory.
    """
    safe_name = to_safe_name(analysis.title)
    target = Path(out_dir) / safe_name
    target.mkdir(parents=True, exist_ok=True)

    (target / "analysis.json").write_text(
        json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    if generated is not None:
        (target / f"{safe_name}.{extension}").write_text(
            generated.main_implementation.rstrip() + "\n", encoding="utf-8"
        )
        (target / "README.md").write_text(
            build_documentation(analysis, generated), encoding="utf-8"
        )
    return target
