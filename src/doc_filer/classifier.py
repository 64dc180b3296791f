"""Naive Bayes scoring of documents against trained categories.

Each category's score for a document is the log-likelihood

    sum(count * ln(probability(token)))

over the document's token counts. Log-likelihoods of real documents are
large negative numbers whose ``math.exp`` underflows to zero, so they are
brought back to linear scale with ``decimal`` arithmetic: the integer part
of the exponent is raised exactly as a power of *e* and only the small
fractional remainder goes through floating point. The linear scores are then
normalized to sum to one and truncated (not rounded) to four decimal places.
"""

from __future__ import annotations

import decimal
import math
from collections.abc import Callable
from decimal import ROUND_DOWN, Decimal
from pathlib import Path
from typing import Union

from .errors import InvalidModelError
from .extraction import extract_text
from .frequencies import document_frequencies
from .models import (
    Category,
    DocumentRef,
    Frequencies,
    RawScoreMap,
    ScoreMap,
    TrainingResult,
)
from .probability import probability

SCORE_DIGITS = 4

# Significant digits carried through exponentiation and normalization.
PRECISION = 50


def _context() -> decimal.Context:
    """Decimal context with enough exponent range for any log-likelihood."""
    return decimal.Context(
        prec=PRECISION,
        Emin=decimal.MIN_EMIN,
        Emax=decimal.MAX_EMAX,
    )


def _require_categories(result: TrainingResult) -> None:
    if not result.categories:
        raise InvalidModelError("Cannot classify against a model with no categories.")


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def log_likelihood(
    result: TrainingResult,
    category: Category,
    text_frequencies: Frequencies,
) -> float:
    """Sum of ``count * ln(p)`` over the document's tokens for one category."""
    count_categories = result.category_count
    return sum(
        count * math.log(probability(result.global_frequencies, count_categories, category, token))
        for token, count in text_frequencies.items()
    )


def precise_exp(exponent: float) -> Decimal:
    """Compute ``e ** exponent`` without floating-point underflow.

    The exponent is split into an integer part, raised as an exact decimal
    power of *e*, and a fractional remainder in ``(-1, 1)`` that is safe for
    ``math.exp``.
    """
    whole = int(exponent)
    remainder = exponent - whole
    with decimal.localcontext(_context()):
        e = Decimal(1).exp()
        return (e ** whole) * Decimal(math.exp(remainder))


def raw_scores(result: TrainingResult, text_frequencies: Frequencies) -> RawScoreMap:
    """Linear-scale, unnormalized score of every category, in category order.

    Raises:
        InvalidModelError: If the model has no categories.
    """
    _require_categories(result)
    return {
        category.name: precise_exp(log_likelihood(result, category, text_frequencies))
        for category in result.categories
    }


def truncate(value: Union[Decimal, float], digits: int = SCORE_DIGITS) -> float:
    """Truncate ``value`` toward zero to ``digits`` decimal places.

    >>> truncate(2.00005)
    2.0
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with decimal.localcontext(_context()):
        return float(value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_DOWN))


def relative_scores(raw: RawScoreMap, digits: int = SCORE_DIGITS) -> ScoreMap:
    """Normalize raw scores to sum to one, truncating each to ``digits`` places."""
    if not raw:
        return {}
    with decimal.localcontext(_context()):
        total = sum(raw.values(), Decimal(0))
        if total == 0:
            raise InvalidModelError("All category scores are zero; cannot normalize.")
        return {name: truncate(score / total, digits) for name, score in raw.items()}


def score_frequencies(result: TrainingResult, text_frequencies: Frequencies) -> ScoreMap:
    """Relative scores for a document given its token counts."""
    return relative_scores(raw_scores(result, text_frequencies))


def classify(
    result: TrainingResult,
    document: Union[DocumentRef, Path],
    extract: Callable[[DocumentRef], str] = extract_text,
) -> ScoreMap:
    """Score a document against every category of a trained model.

    Args:
        result: The trained model.
        document: Document to classify.
        extract: Text extraction function.

    Returns:
        Category name to relative score, in category order.

    Raises:
        InvalidModelError: If the model has no categories.
        ExtractionError: If the document text cannot be extracted.
    """
    _require_categories(result)
    text_frequencies = document_frequencies(extract(document))
    return score_frequencies(result, text_frequencies)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def select_best(scores: ScoreMap) -> str:
    """Name of the highest-scoring category.

    Ties go to the category that comes first in the score map, which is
    category-list order for maps built by this module.

    Raises:
        InvalidModelError: If ``scores`` is empty.
    """
    if not scores:
        raise InvalidModelError("Cannot select a category from an empty score map.")
    return max(scores, key=scores.get)  # type: ignore[arg-type]
