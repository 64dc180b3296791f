"""Token frequency tables for documents and categories."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable
from typing import Optional

from .extraction import extract_text
from .models import Category, DocumentRef, Frequencies, freeze
from .tokenizer import tokenize

log = logging.getLogger(__name__)

Extractor = Callable[[DocumentRef], str]


def document_frequencies(text: str) -> Frequencies:
    """Count the lowercased tokens of a single document's text."""
    return freeze(Counter(tokenize(text.lower())))


def sum_frequencies(tables: Iterable[Optional[Frequencies]]) -> Frequencies:
    """Merge frequency tables by summing counts of shared tokens.

    ``None`` entries (categories without training data) contribute nothing.
    The inputs are never modified; a new read-only table is returned.
    """
    total: Counter[str] = Counter()
    for table in tables:
        if table is None:
            continue
        for token, count in table.items():
            total[token] += count
    return freeze(total)


def category_frequencies(
    category: Category,
    extract: Extractor = extract_text,
) -> Optional[Frequencies]:
    """Build the frequency table for a category's training documents.

    Returns ``None`` when the category has no training documents.

    Raises:
        ExtractionError: If any training document cannot be read.
    """
    if not category.training_documents:
        return None

    tables = []
    for document in category.training_documents:
        log.debug("Counting tokens in %s", document)
        tables.append(document_frequencies(extract(document)))
    return sum_frequencies(tables)
