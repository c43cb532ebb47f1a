from __future__ import annotations

from typing import Any, Callable

from app.schemas.resume import ParsedResumeData

from .passes import (
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_email,
    extract_experience,
    extract_github,
    extract_languages,
    extract_linkedin,
    extract_location,
    extract_name,
    extract_phone,
    extract_profession,
    extract_projects,
    extract_skills,
    extract_summary,
    extract_website,
    extract_work_arrangement,
)
from .text_utils import ResumeText, prepare_text

FieldPass = Callable[[ResumeText], Any]

FIELD_PASSES: tuple[tuple[str, FieldPass], ...] = (
    ("name", extract_name),
    ("email", extract_email),
    ("phone", extract_phone),
    ("linkedin", extract_linkedin),
    ("github", extract_github),
    ("website", extract_website),
    ("location", extract_location),
    ("profession", extract_profession),
    ("summary", extract_summary),
    ("skills", extract_skills),
    ("experience", extract_experience),
    ("education", extract_education),
    ("certifications", extract_certifications),
    ("achievements", extract_achievements),
    ("projects", extract_projects),
    ("languages", extract_languages),
    ("work_arrangement", extract_work_arrangement),
)


def extract_resume(text: str) -> ParsedResumeData:
    """Turn raw résumé text into a fully populated ``ParsedResumeData``.

    The result depends only on ``text``. Unmatched fields keep their defaults.
    """
    resume = prepare_text(text)
    fields = {field: extract(resume) for field, extract in FIELD_PASSES}
    return ParsedResumeData(**fields)
