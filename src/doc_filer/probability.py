"""Laplace-smoothed token likelihoods."""

from __future__ import annotations

from fractions import Fraction

from .errors import InvalidModelError
from .models import Category, Frequencies


def probability(
    global_frequencies: Frequencies,
    category_count: int,
    category: Category,
    token: str,
) -> Fraction:
    """Smoothed likelihood that ``token`` belongs to ``category``.

    Computed as ``(category count + 1) / (global count + number of
    categories)``. Unseen tokens count as zero, so the result always lies in
    ``(0, 1]``. The values are per-token weights for a log-sum and do not
    form a distribution over tokens.

    Raises:
        InvalidModelError: If ``category_count`` is less than 1.
    """
    if category_count < 1:
        raise InvalidModelError(
            f"category_count must be at least 1, got {category_count}"
        )
    in_category = category.count(token)
    overall = global_frequencies.get(token, 0)
    return Fraction(in_category + 1, overall + category_count)
