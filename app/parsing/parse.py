from __future__ import annotations

import logging
import re
import zlib
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import DecodedDocument

logger = logging.getLogger(__name__)

_PDF_STREAM_RE = re.compile(rb"stream\r?\n(.*?)\r?\nendstream", re.DOTALL)
_PDF_TEXT_RE = re.compile(rb"\(((?:\\.|[^\\)])*)\)\s*Tj|\[((?:\\.|[^\]\\])*)\]\s*TJ")
_PDF_ARRAY_STRING_RE = re.compile(rb"\(((?:\\.|[^\\)])*)\)")
_PDF_ESCAPE_RE = re.compile(rb"\\([nrtbf()\\])")
_PDF_ESCAPES = {b"n": b"\n", b"r": b"\r", b"t": b"\t", b"b": b"", b"f": b"", b"(": b"(", b")": b")", b"\\": b"\\"}


def _decode_txt(content: bytes) -> tuple[str, dict[str, str]]:
    if content.startswith((b"\xff\xfe", b"\xfe\xff")):
        return content.decode("utf-16", errors="replace"), {"encoding": "utf-16"}
    try:
        return content.decode("utf-8-sig"), {"encoding": "utf-8"}
    except UnicodeDecodeError:
        return content.decode("latin-1"), {"encoding": "latin-1"}


def _unescape_pdf_string(value: bytes) -> str:
    return _PDF_ESCAPE_RE.sub(lambda m: _PDF_ESCAPES[m.group(1)], value).decode("latin-1")


def scrape_pdf_text(content: bytes) -> str:
    """Pull text operands out of raw (optionally Flate-compressed) PDF streams."""
    chunks = [content]
    for match in _PDF_STREAM_RE.finditer(content):
        try:
            chunks.append(zlib.decompress(match.group(1)))
        except zlib.error:
            continue

    lines: list[str] = []
    for chunk in chunks:
        for match in _PDF_TEXT_RE.finditer(chunk):
            if match.group(1) is not None:
                parts = [match.group(1)]
            else:
                parts = _PDF_ARRAY_STRING_RE.findall(match.group(2))
            text = "".join(_unescape_pdf_string(part) for part in parts).strip()
            if text:
                lines.append(text)
    return "\n".join(lines)


def _decode_pdf(content: bytes) -> tuple[str, list[str], dict[str, int | str]]:
    warnings: list[str] = []
    details: dict[str, int | str] = {"parser": "pypdf"}
    text = ""
    try:
        reader = PdfReader(BytesIO(content))
        page_chunks: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                page_chunks.append(page_text)
        text = "\n".join(page_chunks)
        details["pages"] = len(reader.pages)
    except Exception as exc:
        warnings.append(f"PDF parsing failed: {exc}")

    if not text.strip():
        text = scrape_pdf_text(content)
        details["parser"] = "stream-scrape"
        if text:
            warnings.append("PDF text was recovered from raw content streams and may be incomplete.")
    return text, warnings, details


def _decode_docx(content: bytes) -> tuple[str, dict[str, int | str]]:
    document = Document(BytesIO(content))
    parts = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text and cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    details: dict[str, int | str] = {
        "parser": "python-docx",
        "paragraphs": len(document.paragraphs),
        "tables": len(document.tables),
    }
    return "\n".join(parts), details


def decode_document(*, filename: str, source_type: str, content: bytes) -> DecodedDocument:
    """Decode an uploaded résumé into plain text.

    Never raises for unreadable content; the failure is reported on the
    returned ``DecodedDocument`` instead.
    """
    warnings: list[str] = []
    details: dict[str, int | str] = {}
    text = ""
    error: str | None = None

    if source_type == "txt":
        text, details = _decode_txt(content)
    elif source_type == "pdf":
        text, warnings, details = _decode_pdf(content)
        if not text.strip():
            error = "pdf_no_text"
    elif source_type in {"docx", "doc"}:
        try:
            text, details = _decode_docx(content)
        except Exception as exc:
            logger.warning("resume_docx_decode_failed file=%s source_type=%s: %s", filename, source_type, exc)
            error = "legacy_doc_unsupported" if source_type == "doc" else "docx_unreadable"
    else:
        raise ValueError(f"Unsupported source type '{source_type}'.")

    if error is None and not text.strip():
        error = "empty_document"

    if error is not None:
        logger.info("resume_decode_failed file=%s source_type=%s error=%s", filename, source_type, error)
        return DecodedDocument(
            filename=filename,
            source_type=source_type,
            success=False,
            text="",
            error=error,
            warnings=warnings,
            details=details,
        )

    return DecodedDocument(
        filename=filename,
        source_type=source_type,
        success=True,
        text=text,
        warnings=warnings,
        details=details,
    )
