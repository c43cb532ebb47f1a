from .extractor import FIELD_PASSES, extract_resume
from .projections import to_cover_letter_fields, to_resume_preview, years_of_experience

__all__ = [
    "FIELD_PASSES",
    "extract_resume",
    "to_cover_letter_fields",
    "to_resume_preview",
    "years_of_experience",
]
