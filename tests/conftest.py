import pytest

from paperlib.prompting import reset_config

NOUNS = {"graph", "heap", "tree", "queue", "node", "map", "model", "network"}
ADJECTIVES = {"binary", "neural"}


def fake_tagger(tokens):
    """Tag a fixed noun/adjective vocabulary; everything else is a determiner."""
    tagged = []
    for tok in tokens:
        low = tok.lower()
        if low in NOUNS:
            tagged.append((tok, "NN"))
        elif low in ADJECTIVES:
            tagged.append((tok, "JJ"))
        else:
            tagged.append((tok, "DT"))
    return tagged


@pytest.fixture
def tagger():
    return fake_tagger


@pytest.fixture(autouse=True)
def _isolated_prompt_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
