"""Tests for text tokenization and the stop-word filter."""

from messenger_stats.stop_words import STOP_WORDS
from messenger_stats.tokenizer import is_mention, split_tokens, tokenize


def test_lowercases_and_counts_repeats():
    """Tokens are lowercased; repeats are kept for counting."""
    assert tokenize("Hello world HELLO") == [("hello", False), ("world", False), ("hello", False)]


def test_contraction_stop_word_dropped():
    """A token equal to "it's" is a stop word."""
    assert "it's" in STOP_WORDS
    assert tokenize("It's fine") == [("fine", False)]


def test_mention_is_also_a_word():
    assert tokenize("@alice hi") == [("@alice", True), ("hi", False)]


def test_bare_at_sign_is_dropped():
    assert tokenize("@ hello") == [("hello", False)]
    assert not is_mention("@")


def test_single_characters_dropped():
    assert tokenize("x y zz") == [("zz", False)]


def test_url_noise_removed():
    """URL fragments split on ':' '/' '.' and the noise tokens are filtered."""
    words = [w for w, _ in tokenize("Visit https://www.example.com/page")]
    assert words == ["visit", "example", "page"]


def test_apostrophe_keeps_token_together():
    assert split_tokens("don't stop") == ["don't", "stop"]
    assert tokenize("don't stop") == [("stop", False)]


def test_underscore_and_punctuation_split():
    assert split_tokens("snake_case, yes!!") == ["snake", "case", "yes"]


def test_unicode_letters_kept():
    assert tokenize("Café naïve") == [("café", False), ("naïve", False)]


def test_empty_content():
    assert tokenize("") == []
    assert split_tokens(None) == []


def test_idempotent_under_relowercasing():
    content = "Hey @Bob, It's GREAT to see you at the Café!"
    once = tokenize(content)
    assert tokenize(content.lower()) == once
    assert tokenize(" ".join(w for w, _ in once)) == once
