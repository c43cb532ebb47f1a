"""Independent extraction passes, one per résumé field.

Each pass takes a prepared ``ResumeText`` and returns the value for a single
field. Passes never raise on unmatched input: a miss yields the field's empty
default. Fields with several candidate patterns declare an ordered strategy
tuple and keep the first non-empty result.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from app.schemas.resume import (
    NAME_PLACEHOLDER,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)

from .patterns import (
    ACHIEVEMENT_KEYWORD_RE,
    CERTIFICATION_KEYWORD_RE,
    CITY_COUNTRY_RE,
    CITY_STATE_RE,
    DEGREE_RE,
    EDUCATION_KEYWORD_RE,
    EMAIL_RE,
    EMPTY_PARENS_RE,
    GITHUB_RE,
    INSTITUTION_RE,
    LABELED_LOCATION_RE,
    LANGUAGE_LINE_RE,
    LANGUAGE_WORD_RES,
    LINKEDIN_RE,
    LOOSE_NAME_RE,
    NAME_BOILERPLATE_RE,
    NAME_MAX_CHARS,
    NAME_MIN_CHARS,
    NAME_SCAN_LINES,
    ONGOING_RE,
    PHONE_RE,
    PROFESSION_RE,
    PROJECT_MANAGER_RE,
    PROJECT_PHRASE_CHARS_RE,
    PROJECT_RE,
    PUNCTUATION_RE,
    ROLE_SPLIT_RE,
    SENTENCE_END_RE,
    SKILL_SPLIT_RE,
    SKILLS_LABEL_RE,
    STRICT_NAME_RE,
    SUMMARY_LABEL_RE,
    THREE_DIGITS_RE,
    URL_RE,
    URL_TRAILING_CHARS,
    WORK_ARRANGEMENT_LABELS,
    WORK_ARRANGEMENT_RE,
    YEAR_RANGE_RE,
    YEAR_RE,
)
from .text_utils import (
    ResumeText,
    is_bullet_like,
    is_section_heading,
    normalize_line,
    strip_bullet_prefix,
    strip_edges,
)

T = TypeVar("T")


def first_non_empty(strategies: Sequence[Callable[[T], str]], value: T) -> str:
    for strategy in strategies:
        result = strategy(value)
        if result:
            return result
    return ""


def _first_year(line: str) -> str:
    match = YEAR_RE.search(line)
    return match.group(0) if match else ""


def _following_text(raw: str, offset: int) -> str:
    for line in raw[offset:].split("\n"):
        stripped = normalize_line(line)
        if stripped:
            return "" if is_section_heading(stripped) else stripped
    return ""


# --- name ---


def _name_candidates(resume: ResumeText) -> list[str]:
    candidates: list[str] = []
    for line in resume.lines[:NAME_SCAN_LINES]:
        if "@" in line or THREE_DIGITS_RE.search(line) or NAME_BOILERPLATE_RE.search(line):
            continue
        length = len(PUNCTUATION_RE.sub("", line).strip())
        if length < NAME_MIN_CHARS or length > NAME_MAX_CHARS:
            continue
        candidates.append(line)
    return candidates


def _strict_name(candidates: list[str]) -> str:
    return next((line for line in candidates if STRICT_NAME_RE.match(line)), "")


def _loose_name(candidates: list[str]) -> str:
    for line in candidates:
        if not LOOSE_NAME_RE.match(line):
            continue
        words = line.split()
        if all(word.islower() for word in words) or all(word.isupper() for word in words):
            continue
        return line
    return ""


def _capitalized_words_name(candidates: list[str]) -> str:
    for line in candidates:
        words = line.split()
        if 2 <= len(words) <= 4 and all(word[0].isupper() for word in words):
            return line
    return ""


NAME_STRATEGIES = (_strict_name, _loose_name, _capitalized_words_name)


def extract_name(resume: ResumeText) -> str:
    return first_non_empty(NAME_STRATEGIES, _name_candidates(resume)) or NAME_PLACEHOLDER


# --- contact ---


def extract_email(resume: ResumeText) -> str:
    match = EMAIL_RE.search(resume.raw)
    return match.group(0) if match else ""


def extract_phone(resume: ResumeText) -> str:
    match = PHONE_RE.search(resume.raw)
    return match.group(0).strip() if match else ""


def extract_linkedin(resume: ResumeText) -> str:
    match = LINKEDIN_RE.search(resume.raw)
    return f"https://linkedin.com/in/{match.group(1)}" if match else ""


def extract_github(resume: ResumeText) -> str:
    match = GITHUB_RE.search(resume.raw)
    return f"https://github.com/{match.group(1)}" if match else ""


def extract_website(resume: ResumeText) -> str:
    for match in URL_RE.finditer(resume.raw):
        url = match.group(0).rstrip(URL_TRAILING_CHARS)
        lowered = url.lower()
        if "linkedin.com" in lowered or "github.com" in lowered:
            continue
        return url
    return ""


# --- location ---


def _labeled_location(raw: str) -> str:
    match = LABELED_LOCATION_RE.search(raw)
    return strip_edges(normalize_line(match.group(1))) if match else ""


def _city_state(raw: str) -> str:
    match = CITY_STATE_RE.search(raw)
    return f"{match.group(1)}, {match.group(2)}" if match else ""


def _city_country(raw: str) -> str:
    match = CITY_COUNTRY_RE.search(raw)
    return f"{match.group(1)}, {match.group(2)}" if match else ""


LOCATION_STRATEGIES = (_labeled_location, _city_state, _city_country)


def extract_location(resume: ResumeText) -> str:
    return first_non_empty(LOCATION_STRATEGIES, resume.raw)


# --- headline fields ---


def extract_profession(resume: ResumeText) -> str:
    match = PROFESSION_RE.search(resume.raw)
    return normalize_line(match.group(0)) if match else ""


def extract_summary(resume: ResumeText) -> str:
    match = SUMMARY_LABEL_RE.search(resume.raw)
    if not match:
        return ""
    text = normalize_line(match.group(1)) or _following_text(resume.raw, match.end())
    return SENTENCE_END_RE.split(text, maxsplit=1)[0].strip()


def extract_skills(resume: ResumeText) -> list[str]:
    match = SKILLS_LABEL_RE.search(resume.raw)
    if not match:
        return []
    listing = normalize_line(match.group(1)) or _following_text(resume.raw, match.end())
    return [token.strip() for token in SKILL_SPLIT_RE.split(listing) if token.strip()]


def extract_work_arrangement(resume: ResumeText) -> str:
    match = WORK_ARRANGEMENT_RE.search(resume.raw)
    return WORK_ARRANGEMENT_LABELS[match.group(1).lower()] if match else ""


# --- line-gated sections ---


def is_experience_line(line: str) -> bool:
    if not YEAR_RE.search(line):
        return False
    return bool(ONGOING_RE.search(line) or YEAR_RANGE_RE.search(line))


def _experience_entry(line: str) -> ExperienceEntry | None:
    cleaned = strip_bullet_prefix(line)
    duration_match = YEAR_RANGE_RE.search(cleaned) or YEAR_RE.search(cleaned)
    if duration_match is None:
        return None
    remainder = f"{cleaned[:duration_match.start()]} {cleaned[duration_match.end():]}"
    remainder = strip_edges(normalize_line(EMPTY_PARENS_RE.sub(" ", remainder)))
    parts = [strip_edges(part) for part in ROLE_SPLIT_RE.split(remainder)]
    parts = [part for part in parts if part]
    if len(parts) < 2:
        return None
    return ExperienceEntry(title=parts[0], company=parts[1], duration=duration_match.group(0).strip())


def extract_experience(resume: ResumeText) -> list[ExperienceEntry]:
    entries: list[ExperienceEntry] = []
    current: ExperienceEntry | None = None
    for line in resume.lines:
        if is_experience_line(line):
            current = _experience_entry(line)
            if current is not None:
                entries.append(current)
            continue
        if current is not None and is_bullet_like(line):
            current.responsibilities.append(strip_bullet_prefix(line))
            continue
        current = None
    return entries


def extract_education(resume: ResumeText) -> list[EducationEntry]:
    entries: list[EducationEntry] = []
    for line in resume.lines:
        if not EDUCATION_KEYWORD_RE.search(line):
            continue
        degree = DEGREE_RE.search(line)
        institution = INSTITUTION_RE.search(line)
        entries.append(
            EducationEntry(
                degree=degree.group(0).strip() if degree else "",
                institution=institution.group(0).strip() if institution else "",
                year=_first_year(line),
            )
        )
    return entries


def extract_certifications(resume: ResumeText) -> list[CertificationEntry]:
    # issuer is never populated
    entries: list[CertificationEntry] = []
    for line in resume.lines:
        cleaned = strip_bullet_prefix(line)
        match = CERTIFICATION_KEYWORD_RE.search(cleaned)
        if not match:
            continue
        entries.append(
            CertificationEntry(
                name=strip_edges(cleaned[:match.start()]),
                issuer="",
                year=_first_year(cleaned),
            )
        )
    return entries


def extract_achievements(resume: ResumeText) -> list[str]:
    return [line for line in resume.lines if ACHIEVEMENT_KEYWORD_RE.search(line)]


def _project_phrase(line: str, start: int, end: int) -> str:
    # widen the keyword to its surrounding run of phrase characters
    before = PROJECT_PHRASE_CHARS_RE.match(line[:start][::-1]).group(0)[::-1]
    after = PROJECT_PHRASE_CHARS_RE.match(line, end).group(0)
    return strip_edges(normalize_line(f"{before}{line[start:end]}{after}"))


def extract_projects(resume: ResumeText) -> list[ProjectEntry]:
    entries: list[ProjectEntry] = []
    for line in resume.lines:
        match = PROJECT_RE.search(line)
        if not match or PROJECT_MANAGER_RE.search(line):
            continue
        name = _project_phrase(line, match.start(), match.end())
        if name:
            entries.append(ProjectEntry(name=name))
    return entries


def extract_languages(resume: ResumeText) -> list[str]:
    found: list[str] = []
    for line in resume.lines:
        if not LANGUAGE_LINE_RE.search(line):
            continue
        for language, pattern in LANGUAGE_WORD_RES:
            if pattern.search(line):
                found.append(language.capitalize())
    return found
