"""Consumer-specific views over the canonical ``ParsedResumeData``."""

from __future__ import annotations

import re

from app.schemas.resume import (
    CoverLetterFields,
    ExperienceEntry,
    ParsedResumeData,
    PreviewSection,
    ResumePreview,
)

from .patterns import ONGOING_RE, YEAR_RE

_STATED_YEARS_RE = re.compile(r"\b(\d{1,2})\+?\s*(?:years?|yrs?)\b", re.IGNORECASE)
_COVER_LETTER_SKILLS = 5
_COVER_LETTER_TOOLS = 3


def _join(values: list[str]) -> str:
    return ", ".join(value for value in values if value)


def _non_empty(values) -> list[str]:
    return [value for value in values if value]


def _unique(values: list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        ordered.append(value)
    return ordered


def _current_role(parsed: ParsedResumeData) -> ExperienceEntry | None:
    for entry in parsed.experience:
        if ONGOING_RE.search(entry.duration):
            return entry
    return parsed.experience[0] if parsed.experience else None


def years_of_experience(parsed: ParsedResumeData, reference_year: int) -> str:
    stated = _STATED_YEARS_RE.search(parsed.summary)
    if stated:
        return stated.group(1)

    starts: list[int] = []
    ends: list[int] = []
    for entry in parsed.experience:
        years = [int(year) for year in YEAR_RE.findall(entry.duration)]
        if not years:
            continue
        starts.append(min(years))
        ends.append(reference_year if ONGOING_RE.search(entry.duration) else max(years))
    if not starts:
        return ""
    return str(max(0, max(ends) - min(starts)))


def to_cover_letter_fields(parsed: ParsedResumeData, reference_year: int) -> CoverLetterFields:
    education = parsed.education[0] if parsed.education else None
    role = _current_role(parsed)
    duties = role.responsibilities if role else []
    skills = _unique(parsed.skills)
    tools = skills[_COVER_LETTER_SKILLS:_COVER_LETTER_SKILLS + _COVER_LETTER_TOOLS] or skills[:_COVER_LETTER_TOOLS]

    return CoverLetterFields(
        name=parsed.name,
        email=parsed.email,
        phone=parsed.phone,
        degree=education.degree if education else "",
        university=education.institution if education else "",
        profession=parsed.profession,
        years_experience=years_of_experience(parsed, reference_year),
        current_company=role.company if role else "",
        current_location=parsed.location,
        work_arrangement=parsed.work_arrangement,
        main_responsibility=duties[0] if duties else "",
        top_duty=duties[1] if len(duties) > 1 else (duties[0] if duties else ""),
        skills=_join(skills[:_COVER_LETTER_SKILLS]),
        certifications=_join([item.name for item in parsed.certifications]),
        tools=_join(tools),
    )


def _experience_items(parsed: ParsedResumeData) -> list[str]:
    items: list[str] = []
    for entry in parsed.experience:
        line = _join([entry.title, entry.company])
        if entry.duration:
            line = f"{line} ({entry.duration})"
        items.append(line)
        items.extend(f"- {duty}" for duty in entry.responsibilities)
    return items


def to_resume_preview(parsed: ParsedResumeData) -> ResumePreview:
    sections = [
        PreviewSection(title="Summary", items=[parsed.summary] if parsed.summary else []),
        PreviewSection(title="Experience", items=_experience_items(parsed)),
        PreviewSection(title="Skills", items=_unique(parsed.skills)),
        PreviewSection(
            title="Education",
            items=_non_empty(_join([item.degree, item.institution, item.year]) for item in parsed.education),
        ),
        PreviewSection(
            title="Certifications",
            items=_non_empty(_join([item.name, item.year]) for item in parsed.certifications),
        ),
        PreviewSection(title="Projects", items=[item.name for item in parsed.projects]),
        PreviewSection(title="Achievements", items=list(parsed.achievements)),
        PreviewSection(title="Languages", items=_unique(parsed.languages)),
    ]
    contact = [
        parsed.email,
        parsed.phone,
        parsed.location,
        parsed.linkedin,
        parsed.github,
        parsed.website,
    ]
    return ResumePreview(
        name=parsed.name,
        headline=parsed.profession,
        contact=[value for value in contact if value],
        sections=[
            PreviewSection(title=section.title, items=[item for item in section.items if item])
            for section in sections
            if any(section.items)
        ],
    )
