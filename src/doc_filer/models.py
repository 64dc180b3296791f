"""Data models for document filing and evaluation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Union

Frequencies = Mapping[str, int]
"""Read-only mapping of token to occurrence count."""

ScoreMap = dict[str, float]
"""Category name to relative score, in category order."""

RawScoreMap = dict[str, Decimal]
"""Category name to unnormalized linear-scale score."""


def freeze(counts: Mapping[str, int]) -> Frequencies:
    """Copy ``counts`` into a read-only mapping."""
    return MappingProxyType(dict(counts))


EMPTY_FREQUENCIES: Frequencies = freeze({})


@dataclass(frozen=True)
class DocumentRef:
    """A document on disk together with the category it was filed under."""

    path: Path
    category: str

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return str(self.path)


# ---------------------------------------------------------------------------
# Training state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Untrained:
    """A category whose frequencies have not been built yet."""

    def __repr__(self) -> str:
        return "UNTRAINED"


UNTRAINED = Untrained()


@dataclass(frozen=True)
class Trained:
    """A category whose frequencies have been built.

    ``frequencies`` is ``None`` when the category had no training documents,
    which is distinct from having documents that share no tokens.
    """

    frequencies: Optional[Frequencies]


TrainingState = Union[Untrained, Trained]


@dataclass(frozen=True, eq=False)
class Category:
    """A classification label and its partitioned documents.

    Attributes:
        name: Category name (the directory path relative to the corpus root).
        training_documents: Documents the frequency model is built from.
        test_documents: Held-out documents used for evaluation.
        state: ``UNTRAINED`` or a ``Trained`` value.
    """

    name: str
    training_documents: tuple[DocumentRef, ...] = ()
    test_documents: tuple[DocumentRef, ...] = ()
    state: TrainingState = UNTRAINED

    def __post_init__(self) -> None:
        overlap = set(self.training_documents) & set(self.test_documents)
        if overlap:
            names = ", ".join(sorted(str(d) for d in overlap))
            raise ValueError(
                f"Category '{self.name}' has documents in both training and test sets: {names}"
            )

    @property
    def is_trained(self) -> bool:
        return isinstance(self.state, Trained)

    @property
    def token_frequencies(self) -> Optional[Frequencies]:
        """Trained frequencies, or ``None`` if untrained or trained on nothing."""
        if isinstance(self.state, Trained):
            return self.state.frequencies
        return None

    def count(self, token: str) -> int:
        """Occurrences of ``token`` in this category's training documents."""
        frequencies = self.token_frequencies
        if frequencies is None:
            return 0
        return frequencies.get(token, 0)


@dataclass(frozen=True, eq=False)
class TrainingResult:
    """The complete trained model shared by every classification call."""

    global_frequencies: Frequencies
    categories: tuple[Category, ...]

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    @property
    def category_count(self) -> int:
        return len(self.categories)

    def category(self, name: str) -> Category:
        """Look up a category by name.

        Raises:
            KeyError: If no category has that name.
        """
        for category in self.categories:
            if category.name == name:
                return category
        raise KeyError(f"Unknown category: {name}. Known: {self.category_names}")


# ---------------------------------------------------------------------------
# Evaluation results
# ---------------------------------------------------------------------------

@dataclass
class DocumentResult:
    """Outcome of classifying one held-out document."""

    document: DocumentRef
    predicted: str
    scores: ScoreMap
    correct: bool

    def to_dict(self) -> dict:
        return {
            "document": str(self.document.path),
            "category": self.document.category,
            "predicted": self.predicted,
            "correct": self.correct,
            "scores": self.scores,
        }


@dataclass
class CategoryReport:
    """Accuracy summary for one category's test documents."""

    category: str
    correct: int = 0
    incorrect: int = 0
    accuracy: float = 0.0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "accuracy": round(self.accuracy, 2),
        }


@dataclass
class EvaluationReport:
    """Per-category reports plus corpus-wide totals."""

    categories: list[CategoryReport] = field(default_factory=list)

    @property
    def correct(self) -> int:
        return sum(r.correct for r in self.categories)

    @property
    def incorrect(self) -> int:
        return sum(r.incorrect for r in self.categories)

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        """Overall accuracy in percent (0 when nothing was tested)."""
        if self.total == 0:
            return 0.0
        return 100.0 * self.correct / self.total

    def to_dict(self) -> dict:
        return {
            "categories": [r.to_dict() for r in self.categories],
            "correct": self.correct,
            "incorrect": self.incorrect,
            "accuracy": round(self.accuracy, 2),
        }

    def summary(self) -> str:
        """Human-readable summary table."""
        lines = [
            f"{'Category':<30} {'Correct':>8} {'Incorrect':>10} {'Accuracy':>9}",
            "-" * 60,
        ]
        for r in self.categories:
            lines.append(
                f"{r.category:<30} {r.correct:>8} {r.incorrect:>10} {r.accuracy:>8.2f}%"
            )
        lines.append("-" * 60)
        lines.append(
            f"{'Overall':<30} {self.correct:>8} {self.incorrect:>10} {self.accuracy:>8.2f}%"
        )
        return "\n".join(lines)
