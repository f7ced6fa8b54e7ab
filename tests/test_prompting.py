import json

from paperlib.classify import classify_paper
from paperlib.content_analysis import assemble_analysis
from paperlib.models import AlgorithmBlock
from paperlib.prompting import build_code_prompt, parse_code_response, reset_config


def make_analysis(n_blocks=7, abstract="We sort heaps.", keywords=("heap", "graph")):
    blocks = [
        AlgorithmBlock(type="algorithm", content=f"content {i}", position=i, confidence=0.9 - i * 0.05)
        for i in range(n_blocks)
    ]
    sections = {"abstract": abstract} if abstract else {}
    return assemble_analysis(
        title="Fast Heaps for Graph Search",
        sections=sections,
        algorithm_blocks=blocks,
        keywords=keywords,
        classification=classify_paper(sections, blocks),
    )


def test_prompt_carries_truncated_view():
    prompt = build_code_prompt(make_analysis())
    assert prompt.startswith("You are an expert python developer")
    assert "Title: Fast Heaps for Graph Search" in prompt
    assert "Classification: algorithm" in prompt
    assert "Abstract: We sort heaps." in prompt
    assert "Block 1 (Confidence: 90.0%):\ncontent 0" in prompt
    assert "Block 5 (Confidence: 70.0%):\ncontent 4" in prompt
    assert "Block 6" not in prompt
    assert "Keywords: heap, graph" in prompt
    assert "PEP 8" in prompt


def test_prompt_defaults_for_missing_fields():
    prompt = build_code_prompt(make_analysis(n_blocks=0, abstract="", keywords=()), language="rust")
    assert "Abstract: N/A" in prompt
    assert "No algorithm blocks identified" in prompt
    assert "Keywords: None" in prompt
    assert "language-specific" in prompt
    assert "comprehensive rust implementation" in prompt


def test_abstract_truncated():
    prompt = build_code_prompt(make_analysis(abstract="a" * 2000))
    assert "a" * 800 in prompt
    assert "a" * 801 not in prompt


def test_prompts_json_overrides(tmp_path):
    (tmp_path / "prompts.json").write_text(
        json.dumps({"max_prompt_blocks": 1, "system_prompt": "Write {language}."}),
        encoding="utf-8",
    )
    reset_config()
    prompt = build_code_prompt(make_analysis(), language="go")
    assert prompt.startswith("Write go.")
    assert "Block 1 " in prompt
    assert "Block 2 " not in prompt


def test_parse_code_response():
    response = "Here is code:\n```python\nprint(1)\n```\nDone.\n```\nx = 2\n```"
    result = parse_code_response(response)
    assert result.code_blocks == ("print(1)", "x = 2")
    assert result.main_implementation == "print(1)"
    assert result.explanation == "Here is code:\n\nDone."
    assert result.has_code


def test_parse_response_without_code():
    result = parse_code_response("I cannot help with that.")
    assert not result.has_code
    assert result.main_implementation == ""
    assert result.explanation == "I cannot help with that."
