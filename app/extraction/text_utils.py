from __future__ import annotations

import re
from dataclasses import dataclass

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_SECTION_RE = re.compile(
    r"^\s*(summary|objective|profile|experience|work experience|employment history|skills|education|"
    r"projects|certifications|achievements|awards|languages)\s*:?\s*$",
    re.IGNORECASE,
)
_EDGE_SEPARATORS = " \t,;:|-–—()"


@dataclass(frozen=True)
class ResumeText:
    """Raw résumé text plus its stripped, non-blank lines."""

    raw: str
    lines: tuple[str, ...]


def prepare_text(text: str | None) -> ResumeText:
    raw = text if isinstance(text, str) else ""
    # lone surrogates cannot be serialised; swap them for U+FFFD
    raw = raw.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    raw = raw.replace("\r\n", "\n").replace("\r", "\n").replace("\x00", " ")
    lines = tuple(normalize_line(line) for line in raw.split("\n"))
    return ResumeText(raw=raw, lines=tuple(line for line in lines if line))


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def strip_edges(value: str) -> str:
    return value.strip(_EDGE_SEPARATORS)


def is_section_heading(line: str) -> bool:
    stripped = normalize_line(line)
    if not stripped:
        return False
    return bool(_SECTION_RE.match(stripped))
