import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.extraction import FIELD_PASSES  # noqa: E402
from app.extraction.passes import (  # noqa: E402
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_github,
    extract_languages,
    extract_linkedin,
    extract_location,
    extract_profession,
    extract_projects,
    extract_skills,
    extract_summary,
    extract_website,
    extract_work_arrangement,
    first_non_empty,
    is_experience_line,
)
from app.extraction.text_utils import is_section_heading, prepare_text  # noqa: E402
from app.schemas.resume import ParsedResumeData  # noqa: E402


class StrategyOrderTests(unittest.TestCase):
    def test_first_non_empty_keeps_priority_order(self):
        strategies = (lambda _: "", lambda value: f"second:{value}", lambda value: f"third:{value}")
        self.assertEqual(first_non_empty(strategies, "x"), "second:x")
        self.assertEqual(first_non_empty((lambda _: "",), "x"), "")

    def test_field_passes_cover_every_record_field(self):
        names = [name for name, _ in FIELD_PASSES]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(set(names), set(ParsedResumeData.model_fields))


class LinkAndLocationPassTests(unittest.TestCase):
    def test_profile_links_are_canonicalised(self):
        resume = prepare_text("Find me at www.linkedin.com/in/jane-doe/ and github.com/janedoe")
        self.assertEqual(extract_linkedin(resume), "https://linkedin.com/in/jane-doe")
        self.assertEqual(extract_github(resume), "https://github.com/janedoe")

    def test_website_skips_profile_links(self):
        resume = prepare_text("Portfolio: https://janedoe.dev, https://github.com/janedoe")
        self.assertEqual(extract_website(resume), "https://janedoe.dev")
        self.assertEqual(extract_website(prepare_text("https://www.linkedin.com/in/jane")), "")

    def test_labeled_location_wins_over_patterns(self):
        resume = prepare_text("Location: Austin, TX | Remote\nPreviously Denver, CO")
        self.assertEqual(extract_location(resume), "Austin, TX")
        self.assertEqual(extract_work_arrangement(resume), "Remote")

    def test_city_state_and_city_country(self):
        self.assertEqual(extract_location(prepare_text("Jane Doe\nSan Francisco, CA")), "San Francisco, CA")
        self.assertEqual(extract_location(prepare_text("Based in Lahore, Pakistan")), "Lahore, Pakistan")
        self.assertEqual(extract_location(prepare_text("No place given")), "")


class HeadlinePassTests(unittest.TestCase):
    def test_profession_skips_articles(self):
        self.assertEqual(extract_profession(prepare_text("I am a developer")), "developer")
        self.assertEqual(extract_profession(prepare_text("Senior Data Analyst")), "Senior Data Analyst")

    def test_summary_reads_following_line_and_keeps_first_sentence(self):
        resume = prepare_text(
            "Professional Summary\n"
            "Data analyst who turns messy data into decisions. Loves SQL.\n"
            "Skills: SQL"
        )
        self.assertEqual(extract_summary(resume), "Data analyst who turns messy data into decisions.")

    def test_summary_stops_at_section_heading(self):
        self.assertEqual(extract_summary(prepare_text("Summary\nExperience\nAnalyst at X")), "")

    def test_hyphenated_word_is_not_a_summary_label(self):
        resume = prepare_text("Jane Doe\nObjective-C Developer\nSummary: Builds iOS apps. Ships fast.")
        self.assertEqual(extract_summary(resume), "Builds iOS apps.")
        self.assertEqual(extract_profession(resume), "Objective-C Developer")
        self.assertEqual(extract_summary(prepare_text("Summary - Led teams. Shipped.")), "Led teams.")

    def test_hyphenated_word_is_not_a_skills_label(self):
        self.assertEqual(extract_skills(prepare_text("Tools-based workflow automation")), [])

    def test_skills_on_line_after_heading(self):
        resume = prepare_text("SKILLS\nPython | SQL | Tableau")
        self.assertEqual(extract_skills(resume), ["Python", "SQL", "Tableau"])

    def test_work_arrangement_takes_first_mention(self):
        resume = prepare_text("Open to hybrid or onsite roles")
        self.assertEqual(extract_work_arrangement(resume), "Hybrid")
        self.assertEqual(extract_work_arrangement(prepare_text("Prefers onsite work")), "On-site")


class SectionPassTests(unittest.TestCase):
    def test_experience_line_gate(self):
        self.assertTrue(is_experience_line("Analyst, Initech, 2019 - 2021"))
        self.assertTrue(is_experience_line("Analyst at Initech since 2020 (current)"))
        self.assertFalse(is_experience_line("Analyst at Initech"))
        self.assertFalse(is_experience_line("Graduated 2018"))

    def test_education_with_abbreviated_degree(self):
        entries = extract_education(prepare_text("B.Sc. in Computer Science from Lahore University, 2015"))
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].degree, "B.Sc.")
        self.assertEqual(entries[0].institution, "Lahore University")
        self.assertEqual(entries[0].year, "2015")

    def test_certification_name_is_text_before_keyword(self):
        resume = prepare_text(
            "Certifications\n"
            "AWS Certified Developer (2022)\n"
            "Certified Kubernetes Administrator 2023"
        )
        entries = extract_certifications(resume)
        self.assertEqual(
            [(entry.name, entry.year) for entry in entries],
            [("", ""), ("AWS", "2022"), ("", "2023")],
        )
        self.assertTrue(all(entry.issuer == "" for entry in entries))

    def test_achievements_keep_every_matching_line(self):
        resume = prepare_text("Awards\nEmployee of the Year award, 2021\nShipped v2")
        self.assertEqual(extract_achievements(resume), ["Awards", "Employee of the Year award, 2021"])

    def test_projects_exclude_project_managers(self):
        resume = prepare_text("Projects\nCapstone Project: inventory tracker\nProject Manager at Initech")
        projects = extract_projects(resume)
        self.assertEqual([project.name for project in projects], ["Projects", "Capstone Project"])
        self.assertEqual(projects[1].description, "")
        self.assertEqual(projects[1].technologies, [])

    def test_project_phrase_on_long_line(self):
        line = "x" * 60000 + ", Billing Project & Ledger; more"
        projects = extract_projects(prepare_text(line))
        self.assertEqual([project.name for project in projects], ["Billing Project & Ledger"])

    def test_languages_follow_vocabulary_and_keep_duplicates(self):
        self.assertEqual(
            extract_languages(prepare_text("Languages: English, Urdu and Punjabi")),
            ["English", "Urdu", "Punjabi"],
        )
        self.assertEqual(
            extract_languages(prepare_text("Languages: English\nFluent in English")),
            ["English", "English"],
        )
        self.assertEqual(extract_languages(prepare_text("Worked with English clients")), [])

    def test_section_heading_detection(self):
        self.assertTrue(is_section_heading("Work Experience:"))
        self.assertTrue(is_section_heading("  SKILLS  "))
        self.assertFalse(is_section_heading("Skills: Python"))


if __name__ == "__main__":
    unittest.main()
