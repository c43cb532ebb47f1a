import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.extraction import (  # noqa: E402
    extract_resume,
    to_cover_letter_fields,
    to_resume_preview,
    years_of_experience,
)
from app.schemas.resume import ExperienceEntry, ParsedResumeData  # noqa: E402

JOHN_SMITH_RESUME = (
    "John Smith\n"
    "john.smith@example.com | +1 415 555 0100\n"
    "San Francisco, CA\n"
    "linkedin.com/in/johnsmith | github.com/jsmith\n"
    "Summary: Backend engineer with 6 years of experience building payment APIs. Enjoys mentoring.\n"
    "Skills: Python, FastAPI, PostgreSQL, Docker, AWS, Terraform, Redis\n"
    "Senior Backend Engineer at Stripe, Jan 2020 - Present\n"
    "- Designed payment reconciliation services\n"
    "- Mentored four junior engineers\n"
    "Software Engineer at Acme Corp, 2016 - 2019\n"
    "- Built internal reporting tools\n"
    "Master of Science in Computer Science, Stanford University, 2016\n"
    "Languages: English (native), Spanish (fluent)\n"
)


class CoverLetterProjectionTests(unittest.TestCase):
    def test_fields_come_from_canonical_record(self):
        fields = to_cover_letter_fields(extract_resume(JOHN_SMITH_RESUME), reference_year=2025)

        self.assertEqual(fields.name, "John Smith")
        self.assertEqual(fields.email, "john.smith@example.com")
        self.assertEqual(fields.phone, "+1 415 555 0100")
        self.assertEqual(fields.degree, "Master of Science")
        self.assertEqual(fields.university, "Stanford University")
        self.assertEqual(fields.profession, "Backend engineer")
        self.assertEqual(fields.years_experience, "6")
        self.assertEqual(fields.current_company, "Stripe")
        self.assertEqual(fields.current_location, "San Francisco, CA")
        self.assertEqual(fields.main_responsibility, "Designed payment reconciliation services")
        self.assertEqual(fields.top_duty, "Mentored four junior engineers")
        self.assertEqual(fields.skills, "Python, FastAPI, PostgreSQL, Docker, AWS")
        self.assertEqual(fields.tools, "Terraform, Redis")
        self.assertEqual(fields.certifications, "")

    def test_years_from_experience_span_when_not_stated(self):
        parsed = ParsedResumeData(
            experience=[
                ExperienceEntry(title="Engineer", company="Stripe", duration="Jan 2020 - Present"),
                ExperienceEntry(title="Engineer", company="Acme", duration="2016 - 2019"),
            ]
        )
        self.assertEqual(years_of_experience(parsed, 2025), "9")
        self.assertEqual(years_of_experience(ParsedResumeData(), 2025), "")

    def test_tools_reuse_skills_when_list_is_short(self):
        parsed = ParsedResumeData(skills=["Python", "python", "SQL"])
        fields = to_cover_letter_fields(parsed, reference_year=2025)
        self.assertEqual(fields.skills, "Python, SQL")
        self.assertEqual(fields.tools, "Python, SQL")
        self.assertEqual(fields.current_company, "")
        self.assertEqual(fields.main_responsibility, "")


class ResumePreviewProjectionTests(unittest.TestCase):
    def test_preview_sections_in_reading_order(self):
        preview = to_resume_preview(extract_resume(JOHN_SMITH_RESUME))

        self.assertEqual(preview.name, "John Smith")
        self.assertEqual(preview.headline, "Backend engineer")
        self.assertEqual(
            preview.contact,
            [
                "john.smith@example.com",
                "+1 415 555 0100",
                "San Francisco, CA",
                "https://linkedin.com/in/johnsmith",
                "https://github.com/jsmith",
            ],
        )
        self.assertEqual(
            [section.title for section in preview.sections],
            ["Summary", "Experience", "Skills", "Education", "Languages"],
        )

        experience = preview.sections[1].items
        self.assertEqual(experience[0], "Senior Backend Engineer, Stripe (Jan 2020 - Present)")
        self.assertEqual(experience[1], "- Designed payment reconciliation services")
        self.assertEqual(experience[3], "Software Engineer, Acme Corp (2016 - 2019)")
        self.assertEqual(preview.sections[3].items, ["Master of Science, Stanford University, 2016"])
        self.assertEqual(preview.sections[4].items, ["English", "Spanish"])

    def test_empty_record_has_no_sections(self):
        preview = to_resume_preview(ParsedResumeData())
        self.assertEqual(preview.name, "Your Name")
        self.assertEqual(preview.contact, [])
        self.assertEqual(preview.sections, [])

    def test_blank_certification_heading_adds_no_preview_item(self):
        preview = to_resume_preview(extract_resume("Certifications\nAWS Certified Developer (2022)"))
        self.assertEqual(preview.sections[0].title, "Certifications")
        self.assertEqual(preview.sections[0].items, ["AWS, 2022"])


if __name__ == "__main__":
    unittest.main()
