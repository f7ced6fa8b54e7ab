"""Sentence, word and noun-phrase segmentation backed by NLTK."""

from __future__ import annotations

from typing import Callable, Iterable

import nltk
from nltk.tokenize import TreebankWordTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer

Tagger = Callable[[list[str]], list[tuple[str, str]]]

# Untrained Punkt: default abbreviation/collocation parameters, no model download.
_SENTENCES = PunktSentenceTokenizer()
_WORDS = TreebankWordTokenizer()
_NP_CHUNKER = nltk.RegexpParser("NP: {<JJ.*>*<NN.*>+}")


def split_sentences(text: str) -> list[str]:
    if not text or not text.strip():
        return []
    return [s for s in _SENTENCES.tokenize(text) if s.strip()]


def split_words(text: str) -> list[str]:
    words: list[str] = []
    for sentence in split_sentences(text):
        words.extend(_WORDS.tokenize(sentence))
    return words


def _default_tagger(tokens: list[str]) -> list[tuple[str, str]]:
    """nltk.pos_tag; no tags when the tagger model is not installed."""
    try:
        return nltk.pos_tag(tokens)
    except LookupError:
        return []


def _chunk_leaves(tagged: list[tuple[str, str]]) -> Iterable[str]:
    tree = _NP_CHUNKER.parse(tagged)
    for subtree in tree.subtrees(filter=lambda t: t.label() == "NP"):
        yield " ".join(word for word, _tag in subtree.leaves())


def noun_phrases(text: str, tagger: Tagger | None = None) -> list[str]:
    """
    Return noun phrases in document order (adjectives + nouns, e.g. 'binary heap').

    tagger maps a token list to (token, Penn-Treebank tag) pairs; defaults to
    nltk.pos_tag. An unavailable tagger yields an empty list.
    """
    tag = tagger or _default_tagger
    phrases: list[str] = []
    for sentence in split_sentences(text):
        tokens = _WORDS.tokenize(sentence)
        if not tokens:
            continue
        tagged = tag(tokens)
        if tagged:
            phrases.extend(_chunk_leaves(tagged))
    return phrases
