from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

RESUME_CONTENT_TYPES = {
    "text/plain": "txt",
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}
GENERIC_CONTENT_TYPES = {"", "application/octet-stream", "binary/octet-stream"}
RESUME_EXTENSIONS = set(RESUME_CONTENT_TYPES.values())

PDF_MAGIC = b"%PDF-"
OLE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


def extension_from_filename(filename: str) -> str:
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].strip().lower()[:20]


def resolve_resume_type(*, filename: str, content_type: str | None) -> str:
    """Map an upload to one of txt/pdf/doc/docx or raise ``ValueError``."""
    mime = (content_type or "").split(";")[0].strip().lower()
    ext = extension_from_filename(filename)

    if mime in RESUME_CONTENT_TYPES:
        return RESUME_CONTENT_TYPES[mime]
    if mime in GENERIC_CONTENT_TYPES and ext in RESUME_EXTENSIONS:
        return ext
    allowed = ", ".join(sorted(RESUME_CONTENT_TYPES))
    raise ValueError(f"Unsupported file type '{mime or ext or 'unknown'}'. Allowed: {allowed}.")


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
        return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)
    except Exception:
        return False


def is_probably_text_payload(content: bytes) -> bool:
    if not content:
        return True
    sample = content[:4096]
    if b"\x00" in sample and not sample.startswith((b"\xff\xfe", b"\xfe\xff")):
        return False
    printable = 0
    for byte in sample:
        if byte in (9, 10, 13) or byte >= 32:
            printable += 1
    return (printable / len(sample)) >= 0.75


def validate_upload_signature(*, source_type: str, content: bytes) -> None:
    if source_type == "pdf":
        if not content.startswith(PDF_MAGIC):
            raise ValueError("File signature does not match .pdf content.")
        return

    if source_type == "docx":
        if not _is_zip_payload(content) or not _zip_has_paths(content, ("word/",)):
            raise ValueError("File signature does not match .docx content.")
        return

    if source_type == "doc":
        if not content.startswith(OLE_MAGIC) and not _is_zip_payload(content):
            raise ValueError("File signature does not match .doc content.")
        return

    if source_type == "txt" and not is_probably_text_payload(content):
        raise ValueError("File signature does not match .txt text content.")
