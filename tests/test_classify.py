from paperlib.classify import classify_paper, score_categories
from paperlib.models import AlgorithmBlock


def test_machine_learning_vocabulary_wins():
    text = " ".join(["neural training model"] * 3)
    result = classify_paper({"unknown": text}, [])
    assert result.primary_type == "machine-learning"
    assert result.scores["machine-learning"] == 3
    assert result.confidence == "medium"


def test_scores_cover_all_buckets_in_order():
    scores = score_categories("")
    assert list(scores) == ["algorithm", "data-structure", "machine-learning", "theoretical", "systems"]
    assert set(scores.values()) == {0}


def test_tie_goes_to_first_declared_bucket():
    # tree and graph count for both algorithm and data-structure
    assert classify_paper({"x": "tree graph"}, []).primary_type == "algorithm"


def test_matching_is_case_insensitive_across_sections():
    sections = {"abstract": "A PROOF of the Theorem.", "results": "complexity bound"}
    assert classify_paper(sections, []).primary_type == "theoretical"


def test_blocks_raise_confidence():
    block = AlgorithmBlock(type="algorithm", content="x", position=0, confidence=0.5)
    assert classify_paper({}, [block]).confidence == "high"


def test_scores_are_read_only():
    result = classify_paper({}, [])
    try:
        result.scores["algorithm"] = 9
    except TypeError:
        pass
    else:
        raise AssertionError("scores should be read-only")
