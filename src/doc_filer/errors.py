"""Exception hierarchy for doc-filer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FilerError(Exception):
    """Base class for all doc-filer errors."""


class ExtractionError(FilerError):
    """Raised when text cannot be extracted from a document.

    Args:
        path: The document that failed.
        reason: Human-readable description of the failure.
    """

    def __init__(self, path: Optional[Path], reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f" from {path}" if path is not None else ""
        super().__init__(f"Cannot extract text{where}: {reason}")


class InvalidModelError(FilerError):
    """Raised when a training result cannot be used for classification."""


class ConfigError(FilerError):
    """Raised for malformed configuration values."""
