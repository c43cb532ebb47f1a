from __future__ import annotations

from typing import Literal

from pydantic import Field

from .resume import CamelModel, CoverLetterFields

CoverLetterMethod = Literal["resume", "manual"]
CoverLetterMode = Literal["template", "ai"]
RiskLevel = Literal["low", "medium", "high", "critical"]


class JobDetails(CamelModel):
    position: str = Field(default="", max_length=200)
    company: str = Field(default="", max_length=200)
    reason: str = Field(default="", max_length=1000)


class CoverLetterRequest(CamelModel):
    resume_text: str = Field(default="", max_length=200000)
    job_details: JobDetails = Field(default_factory=JobDetails)
    method: CoverLetterMethod = "resume"
    personal_data: CoverLetterFields = Field(default_factory=CoverLetterFields)


class CoverLetterResponse(CamelModel):
    cover_letter: str
    fields: CoverLetterFields
    mode: CoverLetterMode


class RiskAnalysisRequest(CamelModel):
    job_title: str = Field(default="", max_length=200)
    company_name: str = Field(default="", max_length=200)
    years_experience: str = Field(default="", max_length=50)
    current_skills: str = Field(default="", max_length=2000)
    industry: str = Field(default="", max_length=200)


class CompanyHealth(CamelModel):
    score: int = Field(ge=0, le=100)
    factors: list[str] = Field(default_factory=list)


class JobTitleRisk(CamelModel):
    score: int = Field(ge=0, le=100)
    trends: list[str] = Field(default_factory=list)


class RiskRecommendations(CamelModel):
    immediate: list[str] = Field(default_factory=list)
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)


class RiskAnalysis(CamelModel):
    risk_level: RiskLevel
    risk_score: int = Field(ge=0, le=100)
    summary: str
    company_health: CompanyHealth
    job_title_risk: JobTitleRisk
    recommendations: RiskRecommendations
    skill_gaps: list[str] = Field(default_factory=list)
    market_outlook: str = ""
