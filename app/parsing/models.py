from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class DecodedDocument(BaseModel):
    """Outcome of turning uploaded bytes into plain text.

    ``success`` is False when no usable text came out of the file; ``text`` is
    then empty and ``error`` says why.
    """

    filename: str
    source_type: str
    success: bool
    text: str = ""
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "doc", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, doc, txt")
        return normalized
