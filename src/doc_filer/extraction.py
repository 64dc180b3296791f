"""Plain-text extraction from document files.

Supports PDF, DOCX, TXT, and HTML documents. Every failure to read or parse
a document surfaces as ``ExtractionError`` from ``extract_text``.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .errors import ExtractionError
from .models import DocumentRef

log = logging.getLogger(__name__)


class DocumentParser(ABC):
    """Abstract base class for document parsers.

    All parsers implement ``parse``, which takes a file path and returns the
    document's plain text.
    """

    supported_extensions: tuple[str, ...] = ()

    def can_handle(self, path: Path) -> bool:
        """Check if this parser can handle the given file."""
        return path.suffix.lower() in self.supported_extensions

    @abstractmethod
    def parse(self, path: Path) -> str:
        """Extract plain text from a document file.

        Args:
            path: Path to the document file.

        Returns:
            The document's text.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file format is unsupported or corrupted.
        """
        ...

    def _validate_path(self, path: Path) -> None:
        """Validate that the file exists and has a supported extension."""
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not self.can_handle(path):
            raise ValueError(
                f"Unsupported file extension '{path.suffix}' for {self.__class__.__name__}. "
                f"Supported: {self.supported_extensions}"
            )


class TextParser(DocumentParser):
    """Parser for plain text files."""

    supported_extensions = (".txt", ".text", ".md")

    def parse(self, path: Path) -> str:
        self._validate_path(path)
        return path.read_text(encoding="utf-8", errors="replace")


class PDFParser(DocumentParser):
    """Parser for PDF documents using pdfplumber.

    Pages are joined with blank lines; pages without a text layer contribute
    nothing.
    """

    supported_extensions = (".pdf",)

    def parse(self, path: Path) -> str:
        self._validate_path(path)

        import pdfplumber

        with pdfplumber.open(str(path)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]

        return "\n\n".join(text for text in pages if text.strip())


class DOCXParser(DocumentParser):
    """Parser for Microsoft Word DOCX files using python-docx.

    Paragraph text is followed by table cell text.
    """

    supported_extensions = (".docx",)

    def parse(self, path: Path) -> str:
        self._validate_path(path)

        from docx import Document

        doc = Document(str(path))
        parts = [p.text for p in doc.paragraphs if p.text.strip()]

        for table in doc.tables:
            for row in table.rows:
                row_text = " ".join(cell.text.strip() for cell in row.cells if cell.text.strip())
                if row_text:
                    parts.append(row_text)

        return "\n\n".join(parts)


class HTMLParser(DocumentParser):
    """Parser for HTML documents.

    Strips tags and decodes entities using Python's built-in ``html.parser``.
    """

    supported_extensions = (".html", ".htm")

    def parse(self, path: Path) -> str:
        self._validate_path(path)
        raw_html = path.read_text(encoding="utf-8", errors="replace")
        return self._strip_html(raw_html)

    @staticmethod
    def _strip_html(html: str) -> str:
        """Remove HTML tags and decode entities to produce plain text."""
        import html as html_module
        from html.parser import HTMLParser as StdHTMLParser

        class _TextExtractor(StdHTMLParser):
            def __init__(self) -> None:
                super().__init__()
                self.parts: list[str] = []
                self._skip = False

            def handle_starttag(self, tag: str, attrs: list) -> None:
                if tag in ("script", "style", "head"):
                    self._skip = True

            def handle_endtag(self, tag: str) -> None:
                if tag in ("script", "style", "head"):
                    self._skip = False
                if tag in ("p", "div", "br", "h1", "h2", "h3", "h4", "h5", "h6", "li", "tr"):
                    self.parts.append("\n")

            def handle_data(self, data: str) -> None:
                if not self._skip:
                    self.parts.append(data)

        extractor = _TextExtractor()
        extractor.feed(html)
        text = html_module.unescape("".join(extractor.parts))
        return re.sub(r"\n{3,}", "\n\n", text)


_PARSERS: tuple[DocumentParser, ...] = (
    PDFParser(),
    DOCXParser(),
    TextParser(),
    HTMLParser(),
)


def supported_extensions() -> list[str]:
    """All file extensions some parser can handle, sorted."""
    return sorted({ext for p in _PARSERS for ext in p.supported_extensions})


def get_parser(path: Path) -> DocumentParser:
    """Get the appropriate parser for a file based on its extension.

    Raises:
        ValueError: If no parser supports the file extension.
    """
    for parser in _PARSERS:
        if parser.can_handle(path):
            return parser

    raise ValueError(
        f"No parser available for '{path.suffix}'. "
        f"Supported formats: {', '.join(supported_extensions())}"
    )


def extract_text(document: Union[DocumentRef, Path]) -> str:
    """Extract the plain text of a document.

    Args:
        document: A ``DocumentRef`` or a bare path.

    Returns:
        The document's text.

    Raises:
        ExtractionError: If the file is missing, unsupported, or unreadable.
    """
    path = document.path if isinstance(document, DocumentRef) else Path(document)
    log.debug("Extracting text from %s", path)
    try:
        return get_parser(path).parse(path)
    except ExtractionError:
        raise
    except Exception as exc:
        raise ExtractionError(path, str(exc) or exc.__class__.__name__) from exc
