"""Tests for category and document discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from doc_filer.corpus import (
    discover,
    is_eligible,
    list_categories,
    list_documents,
    true_category_of,
)
from doc_filer.models import DocumentRef


class TestListDocuments:

    def test_filters_by_extension(self, text_corpus: Path) -> None:
        docs = list_documents(text_corpus / "cats", "cats", [".txt"])
        assert [d.name for d in docs] == ["doc0.txt", "doc1.txt", "doc2.txt", "doc3.txt"]
        assert all(d.category == "cats" for d in docs)

    def test_not_recursive(self, text_corpus: Path) -> None:
        assert list_documents(text_corpus / "pets", "pets", [".txt"]) == []

    def test_extension_without_dot_and_case(self, tmp_path: Path) -> None:
        (tmp_path / "A.PDF").write_bytes(b"")
        (tmp_path / "b.txt").write_text("x")
        docs = list_documents(tmp_path, "here", ["pdf"])
        assert [d.name for d in docs] == ["A.PDF"]

    def test_directories_are_not_documents(self, tmp_path: Path) -> None:
        (tmp_path / "folder.pdf").mkdir()
        assert not is_eligible(tmp_path / "folder.pdf")
        assert list_documents(tmp_path, "here") == []


class TestListCategories:

    def test_finds_nested_categories(self, text_corpus: Path) -> None:
        found = list_categories(text_corpus, [".txt"])
        assert [name for name, _ in found] == ["cats", "dogs", "pets/birds"]
        assert found[2][1] == text_corpus / "pets" / "birds"

    def test_root_is_not_a_category(self, tmp_path: Path) -> None:
        (tmp_path / "loose.txt").write_text("x")
        assert list_categories(tmp_path, [".txt"]) == []

    def test_parent_with_documents_and_children(self, tmp_path: Path) -> None:
        for name in ("a", "a/b", "c"):
            (tmp_path / name).mkdir(parents=True, exist_ok=True)
            (tmp_path / name / "doc.pdf").write_bytes(b"")
        assert [n for n, _ in list_categories(tmp_path)] == ["a", "a/b", "c"]

    def test_default_extension_is_pdf(self, text_corpus: Path) -> None:
        assert list_categories(text_corpus) == []

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list_categories(tmp_path / "nope")

    def test_root_is_a_file(self, tmp_path: Path) -> None:
        file = tmp_path / "file.txt"
        file.write_text("x")
        with pytest.raises(NotADirectoryError):
            list_categories(file)


class TestDiscover:

    def test_documents_carry_category(self, text_corpus: Path) -> None:
        found = dict(discover(text_corpus, [".txt"]))
        assert len(found["pets/birds"]) == 2
        assert {true_category_of(d) for d in found["pets/birds"]} == {"pets/birds"}

    def test_true_category_of(self) -> None:
        assert true_category_of(DocumentRef(Path("/x/y/z.pdf"), "y")) == "y"
