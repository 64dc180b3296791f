"""Tests for the whitespace tokenizer."""

from __future__ import annotations

from doc_filer.tokenizer import tokenize


class TestTokenize:

    def test_splits_on_whitespace(self) -> None:
        assert tokenize("the cat sat") == ["the", "cat", "sat"]

    def test_runs_of_mixed_whitespace(self) -> None:
        assert tokenize("a \t\n b\r\n\nc") == ["a", "b", "c"]

    def test_keeps_punctuation(self) -> None:
        assert tokenize("Hello, world! (really)") == ["Hello,", "world!", "(really)"]

    def test_does_not_fold_case(self) -> None:
        assert tokenize("Meow MEOW") == ["Meow", "MEOW"]

    def test_empty_string(self) -> None:
        assert tokenize("") == []

    def test_whitespace_only(self) -> None:
        assert tokenize("   \n\t  ") == []

    def test_leading_and_trailing_whitespace(self) -> None:
        """Boundary whitespace must not produce empty tokens."""
        assert tokenize("  meow purr \n") == ["meow", "purr"]
