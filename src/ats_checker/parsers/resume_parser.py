"""Turn an uploaded resume document into plain text for analysis."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt", ".md")
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


class FileValidationError(ValueError):
    """Raised when a resume file cannot be accepted for analysis."""


def validate_file(file_path: str | Path, max_bytes: int = DEFAULT_MAX_BYTES) -> Path:
    """Check existence, type and size before parsing."""
    path = Path(file_path)
    if not path.is_file():
        raise FileValidationError(f"File not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise FileValidationError(
            f"Invalid file type {path.suffix or '(none)'}. "
            f"Please upload one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    size = path.stat().st_size
    if size == 0:
        raise FileValidationError(f"File is empty: {path}")
    if size > max_bytes:
        raise FileValidationError(
            f"File size {format_file_size(size)} exceeds {format_file_size(max_bytes)} limit. "
            "Please choose a smaller file."
        )
    return path


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        extract = _parse_pdf
    elif suffix == ".docx":
        extract = _parse_docx
    elif suffix in (".txt", ".md"):
        extract = _read_text
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    try:
        text = extract(path)
    except ImportError:
        raise
    except Exception as e:
        logger.debug("Text extraction failed for %s", path, exc_info=True)
        raise ValueError(f"Failed to parse file {path.name}: {e}") from e
    return clean_text(text)


def clean_text(text: str) -> str:
    """Strip invisible unicode artifacts and collapse runs of whitespace.

    Bullet characters are left alone; they count towards the format grade.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"[ \t]{2,}", " ", text)
    lines = [line.rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def format_file_size(num_bytes: int) -> str:
    if num_bytes == 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{value:.1f}".rstrip("0").rstrip(".") + f" {units[i]}"


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    with fitz.open(str(path)) as doc:
        text = [page.get_text() for page in doc]
    logger.debug("Extracted %d PDF pages from %s", len(text), path.name)
    return "\n".join(text)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
