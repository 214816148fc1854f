from __future__ import annotations

from optimismo.text import expand, ngrams, normalize, tokenize, translate_gb


def test_normalize_lowercases_and_trims() -> None:
    assert normalize("  We WILL Succeed \n") == "we will succeed"


def test_normalize_stringifies_and_keeps_none() -> None:
    assert normalize(12345) == "12345"
    assert normalize(None) is None


def test_tokenize_keeps_contractions() -> None:
    assert tokenize("we can't wait, we won’t stop!") == ["we", "can't", "wait", "we", "won't", "stop"]


def test_tokenize_returns_none_without_words() -> None:
    assert tokenize("") is None
    assert tokenize("   ") is None
    assert tokenize("!!! ...") is None


def test_ngrams() -> None:
    tokens = ["we", "will", "grow"]
    assert ngrams(tokens, 2) == ["we will", "will grow"]
    assert ngrams(tokens, 3) == ["we will grow"]
    assert ngrams(tokens, 4) == []


def test_expand_orders_unigrams_then_ascending_spans() -> None:
    tokens = ["a", "b", "c"]
    assert expand(tokens, [3, 2]) == ["a", "b", "c", "a b", "b c", "a b c"]


def test_expand_skips_spans_longer_than_text() -> None:
    assert expand(["hope"], [2, 3]) == ["hope"]
    assert expand(["a", "b"], [2, 3]) == ["a", "b", "a b"]


def test_expand_without_spans() -> None:
    assert expand(["a", "b"], []) == ["a", "b"]


def test_translate_gb_whole_words_only() -> None:
    assert translate_gb("we will realise our favourite plans") == "we will realize our favorite plans"
    assert translate_gb("colourful") == "colourful"
