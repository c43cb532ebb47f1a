import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.extraction import extract_resume, to_resume_preview
from app.parsing.models import DecodedDocument
from app.parsing.parse import decode_document
from app.parsing.upload_security import resolve_resume_type, validate_upload_signature
from app.schemas.resume import ParsedResumeData, ParseResumeResponse, ResumePreview, ResumeTextRequest

logger = logging.getLogger(__name__)

router = APIRouter()

DECODE_FAILURE_MESSAGES = {
    "pdf_no_text": (
        "We could not read any text from this PDF. It may be scanned or image-based; "
        "upload a .docx or .txt version, or paste the text instead."
    ),
    "docx_unreadable": "We could not read this Word document. Re-save it as .docx or upload a PDF instead.",
    "legacy_doc_unsupported": "Legacy .doc files cannot be read. Save the file as .docx or PDF and upload it again.",
    "empty_document": "The uploaded file does not contain any text.",
}
DEFAULT_FAILURE_MESSAGE = "We could not read this file. Try another format or paste the text instead."


async def _read_upload(file: UploadFile, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


def _parse_response(decoded: DecodedDocument) -> ParseResumeResponse:
    if not decoded.success:
        return ParseResumeResponse(
            resume_text="",
            parsed_data=ParsedResumeData(),
            success=False,
            message=DECODE_FAILURE_MESSAGES.get(decoded.error or "", DEFAULT_FAILURE_MESSAGE),
            warnings=decoded.warnings,
        )
    return ParseResumeResponse(
        resume_text=decoded.text,
        parsed_data=extract_resume(decoded.text),
        success=True,
        message="Resume processed and key information extracted.",
        warnings=decoded.warnings,
    )


def _require_text(payload: ResumeTextRequest) -> str:
    if not payload.resume_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Resume text is required.")
    return payload.resume_text


@router.post("/upload-resume", response_model=ParseResumeResponse)
@rate_limit(settings.upload_rate_limit)
async def upload_resume(request: Request, resume: UploadFile = File(...)):
    _ = request
    filename = resume.filename or "resume"
    try:
        source_type = resolve_resume_type(filename=filename, content_type=resume.content_type)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    content = await _read_upload(resume, settings.max_upload_bytes)
    try:
        validate_upload_signature(source_type=source_type, content=content)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    decoded = await asyncio.to_thread(decode_document, filename=filename, source_type=source_type, content=content)
    logger.info(
        "resume_upload_processed source_type=%s bytes=%s success=%s chars=%s",
        source_type,
        len(content),
        decoded.success,
        len(decoded.text),
    )
    return await asyncio.to_thread(_parse_response, decoded)


@router.post("/parse-resume-text", response_model=ParseResumeResponse)
@rate_limit()
async def parse_resume_text(request: Request, payload: ResumeTextRequest):
    _ = request
    text = _require_text(payload)
    return ParseResumeResponse(
        resume_text=text,
        parsed_data=await asyncio.to_thread(extract_resume, text),
        success=True,
        message="Resume processed and key information extracted.",
    )


@router.post("/resume-preview", response_model=ResumePreview)
@rate_limit()
async def resume_preview(request: Request, payload: ResumeTextRequest):
    _ = request
    parsed = await asyncio.to_thread(extract_resume, _require_text(payload))
    return to_resume_preview(parsed)
