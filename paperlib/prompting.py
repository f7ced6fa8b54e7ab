"""Prompt construction for the code-generation model, and response parsing."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Final

from paperlib.models import GeneratedCode, PaperAnalysis


DEFAULT_MAX_PROMPT_BLOCKS: Final[int] = 5
DEFAULT_ABSTRACT_CHARS: Final[int] = 800

DEFAULT_SYSTEM_PROMPT: Final[str] = (
    "You are an expert {language} developer specializing in implementing research "
    "algorithms. Focus on creating comprehensive, well-structured implementations that "
    "capture the essence and core algorithms from research papers. The code does not "
    "need to be runnable - focus on architectural completeness and algorithmic accuracy."
)

DEFAULT_CODE_PROMPT: Final[str] = (
    "Paper Analysis:\n"
    "Title: {title}\n"
    "Classification: {classification}\n"
    "Abstract: {abstract}\n\n"
    "Key Algorithm Blocks:\n{blocks}\n\n"
    "Keywords: {keywords}\n\n"
    "Requirements:\n"
    "1. Generate comprehensive {language} implementation\n"
    "2. Create multiple classes/functions representing different components from the paper\n"
    "3. Include detailed docstrings explaining the theoretical background\n"
    "4. Add comments referencing paper sections\n"
    "5. Follow {style} style guidelines\n"
    "6. Focus on architectural completeness over execution\n"
    "7. Include type hints and parameter descriptions\n"
    "8. Structure code to reflect the paper's conceptual organization\n"
    "9. Include mathematical formulations as comments where relevant\n"
    "10. Create placeholder implementations for complex operations\n\n"
    "Task: Create a comprehensive {language} codebase that represents all major "
    "concepts and algorithms from this paper.\n\n"
    "Generate the complete implementation:"
)

_FENCED_RE = re.compile(r"```(?:python|py|javascript|js|java|cpp|c\+\+)?[ \t]*\n(.*?)\n```", re.S)
_ANY_FENCE_RE = re.compile(r"```.*?```", re.S)

_CONFIG_CACHE: dict[str, Any] | None = None


def load_config(path: Path | str = "prompts.json") -> dict[str, Any]:
    """Load prompt overrides from prompts.json if it exists (cached)."""
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    path = Path(path)
    _CONFIG_CACHE = {}
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            data = None
        if isinstance(data, dict):
            _CONFIG_CACHE = data
    return _CONFIG_CACHE


def reset_config() -> None:
    global _CONFIG_CACHE
    _CONFIG_CACHE = None


def format_confidence(confidence: float) -> str:
    return f"{confidence * 100:.1f}%"


def _render_blocks(analysis: PaperAnalysis, limit: int) -> str:
    blocks = analysis.algorithm_blocks[:limit]
    if not blocks:
        return "No algorithm blocks identified"
    return "\n\n".join(
        f"Block {i} (Confidence: {format_confidence(b.confidence)}):\n{b.content}"
        for i, b in enumerate(blocks, start=1)
    )


def build_code_prompt(analysis: PaperAnalysis, language: str = "python") -> str:
    """
    Build the code-generation prompt from a truncated view of the analysis:
    title, primary type, abstract, top algorithm blocks and keywords.
    """
    config = load_config()
    system_template = config.get("system_prompt", DEFAULT_SYSTEM_PROMPT)
    code_template = config.get("code_prompt", DEFAULT_CODE_PROMPT)
    max_blocks = int(config.get("max_prompt_blocks", DEFAULT_MAX_PROMPT_BLOCKS))
    abstract_chars = int(config.get("abstract_chars", DEFAULT_ABSTRACT_CHARS))

    abstract = (analysis.sections.get("abstract") or "")[:abstract_chars]
    body = (
        code_template
        .replace("{title}", analysis.title or "Research Paper Implementation")
        .replace("{classification}", analysis.classification.primary_type or "algorithm")
        .replace("{abstract}", abstract or "N/A")
        .replace("{blocks}", _render_blocks(analysis, max_blocks))
        .replace("{keywords}", ", ".join(analysis.keywords) or "None")
        .replace("{style}", "PEP 8" if language == "python" else "language-specific")
        .replace("{language}", language)
    )
    return system_template.replace("{language}", language) + "\n\n" + body


def parse_code_response(response: str) -> GeneratedCode:
    """Split a model response into fenced code blocks and surrounding prose."""
    blocks = tuple(m.group(1).strip() for m in _FENCED_RE.finditer(response))
    return GeneratedCode(
        full_response=response,
        code_blocks=blocks,
        explanation=_ANY_FENCE_RE.sub("", response).strip(),
    )
