import asyncio

from fastapi import APIRouter, HTTPException, Request, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.schemas.career import CoverLetterRequest, CoverLetterResponse, RiskAnalysis, RiskAnalysisRequest
from app.services.career_llm import CareerLLMError
from app.services.cover_letter_service import generate_cover_letter
from app.services.risk_service import analyze_job_security_risk

router = APIRouter()


@router.post("/generate-cover-letter", response_model=CoverLetterResponse)
@rate_limit(settings.llm_rate_limit)
async def cover_letter(request: Request, payload: CoverLetterRequest):
    _ = request
    try:
        return await asyncio.to_thread(generate_cover_letter, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/risk-analysis", response_model=RiskAnalysis)
@rate_limit(settings.llm_rate_limit)
async def risk_analysis(request: Request, payload: RiskAnalysisRequest):
    _ = request
    try:
        return await asyncio.to_thread(analyze_job_security_risk, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CareerLLMError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
