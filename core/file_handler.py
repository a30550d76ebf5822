"""Load a document into the analysis buffer.

Supports .txt, .md (read verbatim) and .docx (paragraph text only).
"""

import logging
from pathlib import Path

from docx import Document

logger = logging.getLogger(__name__)

SUPPORTED_READ_EXTENSIONS = {".md", ".txt", ".docx"}


class FileHandlerError(Exception):
    """Raised when a file cannot be read or written."""


def read_file(path: Path) -> str:
    """Read a document and return its contents as plain text.

    Args:
        path: Path to the file to read.

    Returns:
        The document's text content.

    Raises:
        FileHandlerError: If the file is missing, unsupported or unreadable.
    """
    path = Path(path)
    if not path.exists():
        raise FileHandlerError(f"File not found: {path}")

    ext = path.suffix.lower()
    if ext in (".md", ".txt"):
        text = _read_text(path)
    elif ext == ".docx":
        text = _read_docx(path)
    else:
        raise FileHandlerError(
            f"Unsupported file type: '{ext}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_READ_EXTENSIONS))}"
        )
    logger.info("Loaded %d characters from %s", len(text), path)
    return text


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("%s is not UTF-8; reading as latin-1", path)
        return path.read_text(encoding="latin-1")


def _read_docx(path: Path) -> str:
    try:
        doc = Document(str(path))
    except Exception as exc:
        raise FileHandlerError(f"Cannot read .docx file: {exc}") from exc
    return "\n\n".join(p.text for p in doc.paragraphs if p.text.strip())
