"""Whitespace tokenizer."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace.

    Case folding is left to the caller. Punctuation stays attached to the
    surrounding word. Leading or trailing whitespace does not produce empty
    tokens.
    """
    return [token for token in _WHITESPACE_RE.split(text) if token]
