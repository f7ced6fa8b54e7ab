import nltk

from paperlib.keywords import extract_keywords
from paperlib.segment import noun_phrases, split_sentences, split_words

TEXT = (
    "The graph uses a heap. The Graph has a tree. The graph holds a heap. "
    "The heap is big. The tree is tall. The map is small. The map is large. "
    "The map is old. The map is new."
)


def test_split_sentences_and_words():
    assert split_sentences("The heap grows. The tree shrinks.") == [
        "The heap grows.",
        "The tree shrinks.",
    ]
    assert split_sentences("   ") == []
    assert split_words("The heap grows.") == ["The", "heap", "grows", "."]


def test_noun_phrases_chunk_adjectives_with_nouns(tagger):
    assert noun_phrases("A binary heap and a graph.", tagger=tagger) == ["binary heap", "graph"]


def test_frequent_terms_ranked_by_count(tagger):
    # heap x3, graph x3 (case-folded), tree x2, map x4 but too short
    assert extract_keywords(TEXT, tagger=tagger) == ("graph", "heap")


def test_keywords_unique_lowercase_and_long_enough(tagger):
    text = " ".join(["The Binary Heap and the network."] * 5 + ["The node and the model."] * 3)
    keywords = extract_keywords(text, tagger=tagger)
    assert keywords == ("binary heap", "network", "node", "model")
    assert len(set(keywords)) == len(keywords)
    assert all(k == k.lower() and len(k) > 3 for k in keywords)


def test_keywords_capped_at_fifteen():
    words = [f"term{i:02d}" for i in range(20)]
    text = " ".join([f"The {w} works." for w in words] * 3)

    def tag_terms(tokens):
        return [(t, "NN" if t.startswith("term") else "DT") for t in tokens]

    keywords = extract_keywords(text, tagger=tag_terms)
    assert keywords == tuple(words[:15])


def test_empty_text_has_no_keywords():
    assert extract_keywords("") == ()


def test_missing_tagger_model_never_downloads(monkeypatch):
    downloads = []

    def no_model(tokens):
        raise LookupError("averaged_perceptron_tagger_eng not found")

    monkeypatch.setattr(nltk, "pos_tag", no_model)
    monkeypatch.setattr(nltk, "download", lambda *a, **kw: downloads.append(a))

    assert extract_keywords("The heap grows. The heap shrinks. The heap holds.") == ()
    assert noun_phrases("A binary heap.") == []
    assert downloads == []
