from __future__ import annotations

import logging

from pydantic import ValidationError

from app.schemas.career import RiskAnalysis, RiskAnalysisRequest
from app.services.career_llm import CareerLLMError, json_completion_required

logger = logging.getLogger(__name__)

RISK_SYSTEM_PROMPT = """You are an expert career advisor and layoff analyst.
Analyze the job security risk for the professional profile you are given and return only JSON:
{
  "riskLevel": "low|medium|high|critical",
  "riskScore": 0-100 (0 is highest risk, 100 is lowest risk),
  "summary": "2-3 sentence overview of their job security situation",
  "companyHealth": {"score": 0-100, "factors": ["3-4 factors affecting company stability"]},
  "jobTitleRisk": {"score": 0-100, "trends": ["3-4 market trends affecting this job title"]},
  "recommendations": {
    "immediate": ["3-4 actions for the next 2 weeks"],
    "shortTerm": ["3-4 actions for the next 1-6 months"],
    "longTerm": ["3-4 strategic actions for 6+ months"]
  },
  "skillGaps": ["3-5 skills that would improve job security"],
  "marketOutlook": "2-3 sentences about the market outlook for this role and industry"
}
Consider recent layoff patterns, demand for the role, company financial health, economic trends,
automation and AI impact, and evolving skill demand. Give specific, actionable advice."""


def _profile_prompt(payload: RiskAnalysisRequest) -> str:
    def _or_default(value: str) -> str:
        return value.strip() or "Not specified"

    return (
        "Profile:\n"
        f"- Job Title: {payload.job_title.strip()}\n"
        f"- Company: {payload.company_name.strip()}\n"
        f"- Years of Experience: {_or_default(payload.years_experience)}\n"
        f"- Current Skills: {_or_default(payload.current_skills)}\n"
        f"- Industry: {_or_default(payload.industry)}"
    )


def analyze_job_security_risk(payload: RiskAnalysisRequest) -> RiskAnalysis:
    if not payload.job_title.strip() or not payload.company_name.strip():
        raise ValueError("Job title and company name are required")

    raw = json_completion_required(
        system_prompt=RISK_SYSTEM_PROMPT,
        user_prompt=_profile_prompt(payload),
        max_output_tokens=2000,
        purpose="risk_analysis",
    )
    if isinstance(raw.get("riskLevel"), str):
        raw["riskLevel"] = raw["riskLevel"].strip().lower()

    try:
        return RiskAnalysis.model_validate(raw)
    except ValidationError as exc:
        logger.warning("risk_analysis_invalid_payload errors=%s", exc.error_count())
        raise CareerLLMError("AI analysis returned an unexpected format. Try again.", code="llm_invalid") from exc
