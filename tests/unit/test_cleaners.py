"""Unit tests for token cleanup."""

from __future__ import annotations

from speechsplit.text.cleaners import TokenCleaner, clean_tokens


def test_clean_tokens_strips_and_drops_punctuation_only_tokens() -> None:
    """Whitespace/punctuation-only tokens should be removed and others trimmed."""

    tokens = ["  Hello ", ",", " ", "", "...", "?!", "—", "World\n", "\n", "（"]

    assert clean_tokens(tokens) == ["Hello", "World", "（"]


def test_clean_tokens_keeps_words_with_punctuation() -> None:
    """Tokens with any speakable character should survive with punctuation intact."""

    assert clean_tokens(["3.50", "a.", " (b) "]) == ["3.50", "a.", "(b)"]


def test_token_cleaner_uses_configured_punctuation_set() -> None:
    """Only the configured punctuation set counts as non-speakable."""

    cleaner = TokenCleaner(punctuation="#")

    assert cleaner.clean(["#", " ## ", "..."]) == ["..."]
    assert cleaner.is_speakable("...") is True
    assert cleaner.is_speakable("") is False
