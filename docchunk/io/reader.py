# docchunk/io/reader.py
"""
Document reader: turns a file into the single string the chunkers consume.

Supported formats:
- .txt, .md   read as UTF-8
- .pdf        page text via pypdf, pages joined with blank lines
- .docx       paragraph text via python-docx, one paragraph per line
"""

from __future__ import annotations

from pathlib import Path

import docx
from pypdf import PdfReader

from docchunk.exceptions import DocumentReadError
from docchunk.logging.logger import get_logger
from docchunk.logging.tags import IO

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".docx", ".pdf", ".md")


def is_supported(path: Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _read_pdf(path: Path) -> str:
    reader = PdfReader(path)
    text_parts = []
    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text_parts.append(page_text)

    return "\n\n".join(text_parts)


def _read_docx(path: Path) -> str:
    document = docx.Document(str(path))
    return "\n".join(p.text for p in document.paragraphs)


_READERS = {
    ".txt": _read_text,
    ".md": _read_text,
    ".pdf": _read_pdf,
    ".docx": _read_docx,
}


def read_document(path: Path) -> str:
    """
    Read a document as plain text.

    Raises:
        DocumentReadError: If the file is missing, unreadable or unsupported.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _READERS:
        raise DocumentReadError(
            f"File type {path.suffix or '(none)'} is not supported. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    if not path.is_file():
        raise DocumentReadError(f"Could not read {path}: file not found")

    try:
        text = _READERS[suffix](path)
    except Exception as e:
        raise DocumentReadError(f"Could not read {path}: {e}") from e

    logger.debug(f"{IO} Read {len(text)} characters from {path}")
    return text


__all__ = ["read_document", "is_supported", "SUPPORTED_EXTENSIONS"]
