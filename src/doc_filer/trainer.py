"""Partitioning and training of categories.

Each category's documents are shuffled and split in half: the first half
trains the category's frequency table, the second half is held out for
evaluation. The split is random unless a seed or ``random.Random`` is
supplied.
"""

from __future__ import annotations

import dataclasses
import logging
import random
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional

from .corpus import DEFAULT_EXTENSIONS, discover
from .extraction import extract_text
from .frequencies import Extractor, category_frequencies, sum_frequencies
from .models import Category, DocumentRef, Trained, TrainingResult

log = logging.getLogger(__name__)


def partition(
    documents: Sequence[DocumentRef],
    rng: random.Random,
) -> tuple[tuple[DocumentRef, ...], tuple[DocumentRef, ...]]:
    """Shuffle ``documents`` and split them into ``(training, test)`` halves.

    The training half has ``len(documents) // 2`` documents; an odd document
    out goes to the test half.
    """
    shuffled = list(documents)
    rng.shuffle(shuffled)
    midpoint = len(shuffled) // 2
    return tuple(shuffled[:midpoint]), tuple(shuffled[midpoint:])


def make_category(
    name: str,
    documents: Sequence[DocumentRef],
    rng: random.Random,
) -> Category:
    """Create an untrained category with its documents partitioned."""
    training, test = partition(documents, rng)
    return Category(name=name, training_documents=training, test_documents=test)


def train_category(category: Category, extract: Extractor = extract_text) -> Category:
    """Return a copy of ``category`` with its frequency table built.

    Training an already trained category rebuilds the table from its
    training documents rather than adding to it.
    """
    frequencies = category_frequencies(category, extract)
    if frequencies is None:
        log.info("Category '%s' has no training documents", category.name)
    else:
        log.info(
            "Trained '%s' on %d documents (%d distinct tokens)",
            category.name,
            len(category.training_documents),
            len(frequencies),
        )
    return dataclasses.replace(category, state=Trained(frequencies))


def build_result(categories: Iterable[Category]) -> TrainingResult:
    """Assemble a ``TrainingResult`` from already trained categories."""
    trained = tuple(categories)
    untrained = [c.name for c in trained if not c.is_trained]
    if untrained:
        raise ValueError(f"Categories have not been trained: {', '.join(untrained)}")
    global_frequencies = sum_frequencies(c.token_frequencies for c in trained)
    return TrainingResult(global_frequencies=global_frequencies, categories=trained)


def train(
    categories_with_documents: Iterable[tuple[str, Sequence[DocumentRef]]],
    extract: Extractor = extract_text,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> TrainingResult:
    """Partition and train every category, then build the global table.

    Args:
        categories_with_documents: ``(name, documents)`` pairs.
        extract: Text extraction function.
        rng: Random source for the train/test split.
        seed: Seed for a fresh random source; ignored when ``rng`` is given.

    Returns:
        The trained model.

    Raises:
        ExtractionError: If a training document cannot be read.
    """
    if rng is None:
        rng = random.Random(seed)

    categories = [
        make_category(name, documents, rng) for name, documents in categories_with_documents
    ]
    return build_result(train_category(c, extract) for c in categories)


def train_directory(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    extract: Extractor = extract_text,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> TrainingResult:
    """Discover categories under ``root`` and train on them."""
    return train(discover(Path(root), extensions), extract=extract, rng=rng, seed=seed)
