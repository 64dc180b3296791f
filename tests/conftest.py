"""Shared test fixtures for doc-filer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from doc_filer.models import Category, DocumentRef, Trained, TrainingResult, freeze
from doc_filer.trainer import build_result

CAT_TEXT = "Meow meow purr. The cat sat on the mat and purred, meow!"
DOG_TEXT = "Woof woof bark. The dog barked at the mailman, woof bark bark."
BIRD_TEXT = "Tweet tweet chirp. The bird sang from the branch, chirp chirp."


class FakeExtractor:
    """Maps document paths to canned text and records every call."""

    def __init__(self, texts: dict[str, str]) -> None:
        self.texts = texts
        self.calls: list[str] = []

    def __call__(self, document) -> str:
        path = document.path if isinstance(document, DocumentRef) else Path(document)
        self.calls.append(path.name)
        return self.texts[path.name]


def make_docs(category: str, count: int) -> list[DocumentRef]:
    return [DocumentRef(Path(f"/corpus/{category}/{category}{i}.pdf"), category) for i in range(count)]


def trained_category(name: str, frequencies: dict[str, int] | None, test_docs=()) -> Category:
    return Category(name=name, test_documents=tuple(test_docs), state=Trained(
        freeze(frequencies) if frequencies is not None else None
    ))


@pytest.fixture
def cats_dogs_result() -> TrainingResult:
    """Two trained categories with disjoint vocabularies."""
    return build_result([
        trained_category("cats", {"meow": 10, "purr": 5}),
        trained_category("dogs", {"bark": 10, "woof": 5}),
    ])


@pytest.fixture
def animal_docs() -> dict[str, list[DocumentRef]]:
    return {
        "cats": make_docs("cats", 4),
        "dogs": make_docs("dogs", 4),
        "birds": make_docs("birds", 4),
    }


@pytest.fixture
def animal_extractor(animal_docs) -> FakeExtractor:
    texts = {"cats": CAT_TEXT, "dogs": DOG_TEXT, "birds": BIRD_TEXT}
    return FakeExtractor({
        doc.path.name: texts[name]
        for name, docs in animal_docs.items()
        for doc in docs
    })


@pytest.fixture
def text_corpus(tmp_path: Path) -> Path:
    """A directory tree of .txt documents, including a nested category."""
    root = tmp_path / "corpus"
    layout = {
        "cats": [CAT_TEXT] * 4,
        "dogs": [DOG_TEXT] * 4,
        "pets/birds": [BIRD_TEXT] * 2,
    }
    for name, texts in layout.items():
        directory = root / name
        directory.mkdir(parents=True)
        for i, text in enumerate(texts):
            (directory / f"doc{i}.txt").write_text(text, encoding="utf-8")
    (root / "cats" / "notes.csv").write_text("not,a,document", encoding="utf-8")
    (root / "empty").mkdir()
    return root
