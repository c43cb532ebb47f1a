from __future__ import annotations

import json
import logging
from datetime import date

from app.extraction import extract_resume, to_cover_letter_fields
from app.schemas.career import CoverLetterRequest, CoverLetterResponse, JobDetails
from app.schemas.resume import CoverLetterFields
from app.services.career_llm import json_completion, llm_enabled

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "name": "Your Name",
    "email": "Email",
    "phone": "Phone",
    "degree": "Degree",
    "university": "University",
    "profession": "Profession",
    "years_experience": "Years",
    "current_company": "Current Company",
    "current_location": "Location",
    "work_arrangement": "Work Arrangement",
    "main_responsibility": "Main Responsibility",
    "top_duty": "Top Duty",
    "skills": "Skills",
    "certifications": "Certifications",
    "tools": "Tools",
}

COVER_LETTER_TEMPLATE = """{name_upper}
COVER LETTER

{today}

To Whom It May Concern:

My name is {name}. I obtained a {degree} from {university}. I have been in {profession} for {years_experience} years. \
I plan to expand my knowledge in {profession} by gaining experience as {position} to support {reason}. \
I am qualified because I have experience in {skills}. Additionally, I am certified in {certifications}. \
With great enthusiasm, I apply for the {position} role at {company}.

I currently work {work_arrangement} for {current_company} in {current_location}. In this position, I {main_responsibility}. \
My responsibilities include {top_duty}. Organization and relationship building are vital in {profession}, \
and I stay efficient and build trust with colleagues by working with {tools}.

Based on my experience, I am a strong candidate for the {position} role at {company}. \
You can reach me at {phone} or {email}. Thank you for your consideration. I look forward to your response.

Respectfully,
{name}"""

COVER_LETTER_SYSTEM_PROMPT = (
    "You write concise, professional cover letters. Use only facts present in the candidate fields; "
    "never invent employers, degrees, certifications or numbers. Skip any field that is empty. "
    'Return JSON: {"cover_letter": "<plain text letter, 250-400 words>"}.'
)


def _merge_personal_data(fields: CoverLetterFields, personal: CoverLetterFields) -> CoverLetterFields:
    overrides = {key: value for key, value in personal.model_dump().items() if value.strip()}
    return fields.model_copy(update=overrides)


def resolve_fields(payload: CoverLetterRequest, *, reference_year: int) -> CoverLetterFields:
    if payload.method == "manual":
        fields = payload.personal_data
        if not fields.name.strip() or not fields.profession.strip():
            raise ValueError("Name and profession are required for a manual cover letter.")
        return fields

    if not payload.resume_text.strip():
        raise ValueError("Resume text is required to generate a cover letter from a resume.")
    parsed = extract_resume(payload.resume_text)
    return _merge_personal_data(to_cover_letter_fields(parsed, reference_year), payload.personal_data)


def _mid_sentence(value: str) -> str:
    # "Built APIs" reads as "built APIs" after "I"; acronyms are left alone
    if len(value) > 1 and value[0].isupper() and value[1].islower():
        return value[0].lower() + value[1:]
    return value


def render_cover_letter(fields: CoverLetterFields, job: JobDetails, *, today: date) -> str:
    raw = fields.model_dump()
    values = {key: (value.strip() or f"[{FIELD_LABELS[key]}]") for key, value in raw.items()}
    for key in ("work_arrangement", "main_responsibility", "top_duty"):
        if raw[key].strip():
            values[key] = _mid_sentence(values[key])
    return COVER_LETTER_TEMPLATE.format(
        name_upper=values["name"].upper(),
        today=today.strftime("%B %d, %Y"),
        position=job.position.strip(),
        company=job.company.strip(),
        reason=job.reason.strip() or "the team's goals",
        **values,
    )


def _llm_cover_letter(fields: CoverLetterFields, job: JobDetails) -> str | None:
    user_prompt = json.dumps(
        {
            "candidate": fields.model_dump(by_alias=True),
            "job": job.model_dump(by_alias=True),
        },
        ensure_ascii=False,
    )
    payload = json_completion(
        system_prompt=COVER_LETTER_SYSTEM_PROMPT,
        user_prompt=user_prompt,
        temperature=0.4,
        purpose="cover_letter",
    )
    letter = (payload or {}).get("cover_letter")
    if isinstance(letter, str) and letter.strip():
        return letter.strip()
    return None


def generate_cover_letter(payload: CoverLetterRequest, *, today: date | None = None) -> CoverLetterResponse:
    job = payload.job_details
    if not job.position.strip() or not job.company.strip():
        raise ValueError("Position and company are required.")

    current_day = today or date.today()
    fields = resolve_fields(payload, reference_year=current_day.year)

    if llm_enabled():
        letter = _llm_cover_letter(fields, job)
        if letter:
            return CoverLetterResponse(cover_letter=letter, fields=fields, mode="ai")
        logger.info("cover_letter_llm_fallback method=%s", payload.method)

    return CoverLetterResponse(
        cover_letter=render_cover_letter(fields, job, today=current_day),
        fields=fields,
        mode="template",
    )
