import os
import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests deterministic: no rate limiting, no LLM calls.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("LLM_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.main import app  # noqa: E402
from app.parsing.upload_security import OLE_MAGIC  # noqa: E402

JANE_DOE_RESUME = (
    "Jane Doe\n"
    "jane.doe@email.com | (555) 987-6543\n"
    "Senior Software Engineer\n"
    "Skills: JavaScript, React, Node.js\n"
    "Bachelor of Science, State University, 2018\n"
    "AWS Certified Solutions Architect, 2021\n"
)


class ResumeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_upload_txt_returns_parsed_fields(self):
        response = self.client.post(
            "/v1/upload-resume",
            files={"resume": ("resume.txt", JANE_DOE_RESUME.encode("utf-8"), "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertTrue(body["success"])
        self.assertEqual(body["resumeText"], JANE_DOE_RESUME)
        self.assertEqual(body["parsedData"]["name"], "Jane Doe")
        self.assertEqual(body["parsedData"]["skills"], ["JavaScript", "React", "Node.js"])
        self.assertEqual(body["parsedData"]["education"][0]["year"], "2018")
        self.assertEqual(body["parsedData"]["certifications"][0]["year"], "2021")
        self.assertEqual(body["warnings"], [])

    def test_upload_octet_stream_uses_extension(self):
        response = self.client.post(
            "/v1/upload-resume",
            files={"resume": ("resume.txt", b"John Smith\njohn@x.com", "application/octet-stream")},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["parsedData"]["email"], "john@x.com")

    def test_upload_rejects_unsupported_type(self):
        response = self.client.post(
            "/v1/upload-resume",
            files={"resume": ("resume.png", b"\x89PNG\r\n\x1a\n", "image/png")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Unsupported file type", response.json()["detail"])

    def test_upload_rejects_signature_mismatch(self):
        response = self.client.post(
            "/v1/upload-resume",
            files={"resume": ("resume.pdf", b"just some text", "application/pdf")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn(".pdf", response.json()["detail"])

    def test_upload_over_size_limit_is_rejected(self):
        with patch("app.api.v1.resume.settings", replace(settings, max_upload_bytes=16)):
            response = self.client.post(
                "/v1/upload-resume",
                files={"resume": ("resume.txt", JANE_DOE_RESUME.encode("utf-8"), "text/plain")},
            )
        self.assertEqual(response.status_code, 413)

    def test_undecodable_upload_is_a_soft_failure(self):
        response = self.client.post(
            "/v1/upload-resume",
            files={"resume": ("resume.doc", OLE_MAGIC + b"\x00" * 64, "application/msword")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertFalse(body["success"])
        self.assertEqual(body["resumeText"], "")
        self.assertIn("Legacy .doc", body["message"])
        self.assertEqual(body["parsedData"]["name"], "Your Name")
        self.assertEqual(body["parsedData"]["experience"], [])

    def test_parse_resume_text(self):
        response = self.client.post("/v1/parse-resume-text", json={"resumeText": JANE_DOE_RESUME})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["parsedData"]["email"], "jane.doe@email.com")
        self.assertIn("workArrangement", body["parsedData"])

    def test_parse_resume_text_handles_long_repetitive_text(self):
        response = self.client.post("/v1/parse-resume-text", json={"resumeText": "Aa " * 20000})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["success"])

    def test_parse_resume_text_requires_text(self):
        response = self.client.post("/v1/parse-resume-text", json={"resumeText": "   "})
        self.assertEqual(response.status_code, 400)

    def test_resume_preview(self):
        response = self.client.post("/v1/resume-preview", json={"resumeText": JANE_DOE_RESUME})
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["name"], "Jane Doe")
        self.assertEqual(body["headline"], "Senior Software Engineer")
        self.assertEqual(
            [section["title"] for section in body["sections"]],
            ["Skills", "Education", "Certifications"],
        )
        self.assertEqual(body["contact"], ["jane.doe@email.com", "(555) 987-6543"])


if __name__ == "__main__":
    unittest.main()
