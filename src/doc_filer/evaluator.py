"""Accuracy of a trained model on each category's held-out documents."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .classifier import classify, select_best
from .corpus import true_category_of
from .extraction import extract_text
from .frequencies import Extractor
from .models import (
    Category,
    CategoryReport,
    DocumentRef,
    DocumentResult,
    EvaluationReport,
    TrainingResult,
)

log = logging.getLogger(__name__)


def test_document(
    result: TrainingResult,
    document: DocumentRef,
    extract: Extractor = extract_text,
) -> DocumentResult:
    """Classify one document and compare the prediction with its true category."""
    scores = classify(result, document, extract)
    predicted = select_best(scores)
    correct = predicted == true_category_of(document)
    log.debug("%s -> %s (%s)", document, predicted, "correct" if correct else "incorrect")
    return DocumentResult(document=document, predicted=predicted, scores=scores, correct=correct)


def test_category(
    result: TrainingResult,
    category: Category,
    extract: Extractor = extract_text,
) -> list[DocumentResult]:
    """Classify every held-out document of ``category``."""
    return [test_document(result, doc, extract) for doc in category.test_documents]


def summarize_category(category: Category, results: Sequence[DocumentResult]) -> CategoryReport:
    """Count correct predictions; accuracy is a percentage, 0 with no documents."""
    correct = sum(1 for r in results if r.correct)
    total = len(results)
    return CategoryReport(
        category=category.name,
        correct=correct,
        incorrect=total - correct,
        accuracy=100.0 * correct / total if total > 0 else 0.0,
    )


def test_all(result: TrainingResult, extract: Extractor = extract_text) -> list[CategoryReport]:
    """One report per category, in category order, including untested ones.

    Raises:
        ExtractionError: If a test document cannot be read.
    """
    reports = []
    for category in result.categories:
        report = summarize_category(category, test_category(result, category, extract))
        log.info(
            "%s: %d/%d correct (%.2f%%)",
            report.category,
            report.correct,
            report.total,
            report.accuracy,
        )
        reports.append(report)
    return reports


def evaluate(result: TrainingResult, extract: Extractor = extract_text) -> EvaluationReport:
    """Run ``test_all`` and wrap the reports with corpus-wide totals."""
    return EvaluationReport(categories=test_all(result, extract))
