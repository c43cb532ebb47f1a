from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NAME_PLACEHOLDER = "Your Name"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExperienceEntry(CamelModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    responsibilities: list[str] = Field(default_factory=list)


class EducationEntry(CamelModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class CertificationEntry(CamelModel):
    name: str = ""
    issuer: str = ""
    year: str = ""


class ProjectEntry(CamelModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)


class ParsedResumeData(CamelModel):
    """Canonical record produced by the résumé field extractor.

    Every field has a default so a record built from text that matched
    nothing is still complete.
    """

    name: str = NAME_PLACEHOLDER
    email: str = ""
    phone: str = ""
    profession: str = ""
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    location: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    work_arrangement: str = ""


class CoverLetterFields(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    degree: str = ""
    university: str = ""
    profession: str = ""
    years_experience: str = ""
    current_company: str = ""
    current_location: str = ""
    work_arrangement: str = ""
    main_responsibility: str = ""
    top_duty: str = ""
    skills: str = ""
    certifications: str = ""
    tools: str = ""


class PreviewSection(CamelModel):
    title: str
    items: list[str] = Field(default_factory=list)


class ResumePreview(CamelModel):
    name: str = NAME_PLACEHOLDER
    headline: str = ""
    contact: list[str] = Field(default_factory=list)
    sections: list[PreviewSection] = Field(default_factory=list)


class ResumeTextRequest(CamelModel):
    resume_text: str = Field(default="", max_length=200000)


class ParseResumeResponse(CamelModel):
    resume_text: str
    parsed_data: ParsedResumeData
    success: bool
    message: str = ""
    warnings: list[str] = Field(default_factory=list)
