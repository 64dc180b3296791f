"""Discovery of categories and documents in a directory tree.

Every directory below the corpus root that directly contains at least one
eligible document is a category. Its name is its path relative to the root,
so nested directories become names like ``reports/2023``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import DocumentRef

log = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".pdf",)


def _normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    return tuple(e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions)


def is_eligible(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Whether ``path`` is a regular file with one of ``extensions``."""
    return path.is_file() and path.suffix.lower() in _normalize_extensions(extensions)


def _eligible_files(directory: Path, extensions: Iterable[str]) -> list[Path]:
    exts = _normalize_extensions(extensions)
    return sorted(p for p in directory.iterdir() if is_eligible(p, exts))


def list_documents(
    directory: Path,
    category: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[DocumentRef]:
    """Eligible documents directly inside ``directory`` (not recursive).

    Args:
        directory: Directory to scan.
        category: Category name recorded on every returned reference.
        extensions: File suffixes to accept.
    """
    return [DocumentRef(path=p, category=category) for p in _eligible_files(directory, extensions)]


def _check_root(root: Path) -> None:
    if not root.exists():
        raise FileNotFoundError(f"Corpus root not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Corpus root is not a directory: {root}")


def list_categories(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[tuple[str, Path]]:
    """Find every directory below ``root`` holding at least one eligible document.

    The root itself is never a category. Parents are listed before their
    children and siblings in name order.

    Returns:
        List of ``(name, directory)`` pairs.

    Raises:
        FileNotFoundError: If ``root`` does not exist.
        NotADirectoryError: If ``root`` is not a directory.
    """
    root = Path(root)
    _check_root(root)
    exts = _normalize_extensions(extensions)

    found: list[tuple[str, Path]] = []
    pending = sorted((p for p in root.iterdir() if p.is_dir()), reverse=True)
    while pending:
        directory = pending.pop()
        if _eligible_files(directory, exts):
            found.append((directory.relative_to(root).as_posix(), directory))
        pending.extend(sorted((p for p in directory.iterdir() if p.is_dir()), reverse=True))

    log.info("Found %d categories under %s", len(found), root)
    return found


def discover(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[tuple[str, list[DocumentRef]]]:
    """List every category under ``root`` together with its documents."""
    return [
        (name, list_documents(directory, name, extensions))
        for name, directory in list_categories(root, extensions)
    ]


def true_category_of(document: DocumentRef) -> str:
    """The category a document was filed under."""
    return document.category
