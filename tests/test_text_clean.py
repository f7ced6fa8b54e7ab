from paperlib.text_clean import (
    DEFAULT_SAFE_NAME,
    clean_pdf_text,
    split_paragraphs,
    title_from_filename,
    to_safe_name,
)


def test_clean_pdf_text():
    raw = "recur-\nsive search\r\n\n\n\n© 2020 ACM. All rights reserved.\nnext\x00 line"
    assert clean_pdf_text(raw) == "recursive search\n\nnext line"


def test_split_paragraphs():
    assert split_paragraphs("a\nb\n\nc") == ["a\nb", "c"]
    assert split_paragraphs("") == []


def test_title_from_filename():
    assert title_from_filename("papers/deep_residual-learning.pdf") == "deep residual learning"


def test_to_safe_name():
    assert to_safe_name("Attention Is All You Need!") == "attention_is_all_you_need"
    assert to_safe_name("A  -  B") == "a_-_b"
    assert to_safe_name(None) == DEFAULT_SAFE_NAME
    assert to_safe_name("!!!") == DEFAULT_SAFE_NAME
    assert len(to_safe_name("word " * 40)) == 50
