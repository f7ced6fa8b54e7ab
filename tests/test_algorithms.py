import pytest

from paperlib.algorithms import (
    algorithm_confidence,
    code_confidence,
    extract_algorithm_blocks,
    relevant_keywords,
)

SAMPLE = (
    "1. Introduction\nThis is filler.\n\n2. Methodology\n"
    "We propose Algorithm 1: iterate, then recurse, then return the result."
)

PSEUDOCODE = (
    "procedure BubbleSort(A)\n"
    "  for i := 1 to n do\n"
    "    if A[i] > A[i+1] then\n"
    "      swap(A[i], A[i+1])\n"
    "end"
)


def test_algorithm_confidence_of_methodology_sentence():
    sentence = "We propose Algorithm 1: iterate, then recurse, then return the result."
    # "algorithm" 0.2 + "return" 0.15 + "then" 0.1
    assert algorithm_confidence(sentence) == pytest.approx(0.45)


def test_algorithm_confidence_bonuses_and_cap():
    assert algorithm_confidence("the weather") == 0.0
    assert algorithm_confidence("1. go") == pytest.approx(0.2)
    assert algorithm_confidence("call run(x)") == pytest.approx(0.15)
    dense = "First, the recursive algorithm will sort the heap, then merge the tree and return."
    assert algorithm_confidence(dense) == 1.0


def test_code_confidence():
    assert code_confidence(PSEUDOCODE) == 1.0
    assert code_confidence("The weather is nice today.") == 0.0
    assert code_confidence("x := y") == pytest.approx(0.2)


def test_relevant_keywords_are_deduplicated_in_vocabulary_order():
    assert relevant_keywords("We sort the heap in O(n log n) time") == ("sort", "heap", "time", "O(")
    assert relevant_keywords("a function") == ("function",)
    assert relevant_keywords("") == ()


def test_sample_surfaces_algorithm_block():
    blocks = extract_algorithm_blocks(SAMPLE)
    assert blocks
    assert blocks[0].type == "algorithm"
    assert "Algorithm 1" in blocks[0].content
    assert "algorithm" in blocks[0].keywords


def test_pseudocode_paragraph_is_emitted_whole():
    text = "We describe the sorting routine below.\n\n" + PSEUDOCODE
    pseudo = [b for b in extract_algorithm_blocks(text) if b.type == "pseudocode"]
    assert pseudo
    assert pseudo[0].content == PSEUDOCODE
    assert pseudo[0].position == 1
    assert pseudo[0].confidence == 1.0


def test_output_is_capped_sorted_and_stable():
    text = " ".join(
        f"Step {i}: the algorithm will sort the array and return the heap." for i in range(30)
    )
    blocks = extract_algorithm_blocks(text)
    assert len(blocks) == 10
    assert all(0.0 <= b.confidence <= 1.0 for b in blocks)
    assert [b.position for b in blocks] == list(range(10))
    # window [i-2, i+5) clamped at the start
    assert blocks[0].content.count("Step") == 5
    assert blocks[3].content.startswith("Step 1:")


def test_mixed_scores_are_non_increasing():
    text = (
        "We first compute the graph. Nothing here at all. "
        "The recursive algorithm will sort the heap, then return.\n\n" + PSEUDOCODE
    )
    confidences = [b.confidence for b in extract_algorithm_blocks(text)]
    assert confidences == sorted(confidences, reverse=True)
    assert all(c > 0.3 for c in confidences)


def test_no_sentences_no_blocks():
    assert extract_algorithm_blocks("") == []
    assert extract_algorithm_blocks("   \n\n  ") == []


def test_deterministic():
    text = SAMPLE + "\n\n" + PSEUDOCODE
    assert extract_algorithm_blocks(text) == extract_algorithm_blocks(text)
