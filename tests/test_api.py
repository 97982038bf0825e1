"""HTTP tests for the form generation API."""

from __future__ import annotations

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from backend.app.api.v1.endpoints import generate
from backend.app import main
from backend.app.main import app

API = "/api/v1"


class HealthTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def test_root_health(self) -> None:
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_api_health(self) -> None:
        response = self.client.get(f"{API}/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")


class ServerRunTests(unittest.TestCase):
    def test_run_serves_app_with_settings(self) -> None:
        with patch.object(main.uvicorn, "run") as uvicorn_run:
            main.run()

        uvicorn_run.assert_called_once_with(
            app,
            host=main.settings.HOST,
            port=main.settings.PORT,
            log_level=main.settings.LOG_LEVEL.lower()
        )


class GenerateEndpointTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def test_generate_from_text(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={
            "csv_text": "name,email\nAlice,a@x.com\nBob,b@y.org\n",
            "title": "Contacts"
        })

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["field_count"], 2)
        self.assertEqual(body["form"]["title"], "Contacts")
        self.assertEqual([f["type"] for f in body["form"]["fields"]], ["text", "email"])
        self.assertIsNotNone(body["preview"])

    def test_generate_from_text_with_override(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={
            "csv_text": "name,age\nAlice,30\nBob,25\n",
            "field_overrides": [{"column_index": 1, "field_type": "rating", "label": "Score"}]
        })

        self.assertEqual(response.status_code, 200)
        field = response.json()["form"]["fields"][1]
        self.assertEqual(field["type"], "rating")
        self.assertEqual(field["label"], "Score")
        self.assertEqual(field["confidence"], 1.0)
        self.assertEqual(field["properties"], {"rating_max": 5})

    def test_malformed_csv_is_unprocessable(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={"csv_text": 'a,b\n"open,1\n'})

        self.assertEqual(response.status_code, 422)
        self.assertIn("Malformed CSV", response.json()["detail"])

    def test_empty_csv_is_unprocessable(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={"csv_text": ""})

        self.assertEqual(response.status_code, 422)

    def test_unknown_strategy_is_rejected(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={
            "csv_text": "a\n1\n",
            "detection_strategy": "reckless"
        })

        self.assertEqual(response.status_code, 422)

    def test_unknown_override_type_is_rejected(self) -> None:
        response = self.client.post(f"{API}/generate/text", json={
            "csv_text": "a\n1\n",
            "field_overrides": [{"column_index": 0, "field_type": "bogus"}]
        })

        self.assertEqual(response.status_code, 422)

    def test_generate_from_upload(self) -> None:
        response = self.client.post(
            f"{API}/generate/",
            files={"file": ("answers.csv", b"subscribe;age\nYes;30\nNo;25\nYes;41\n", "text/csv")},
            data={"title": "Survey", "detection_strategy": "conservative"}
        )

        self.assertEqual(response.status_code, 200)
        fields = response.json()["form"]["fields"]
        self.assertEqual(fields[0]["type"], "yesno")
        self.assertEqual(fields[0]["options"], ["Yes", "No"])
        self.assertEqual(fields[1]["type"], "number")

    def test_upload_unescapes_doubled_quotes_after_sniffed_lines(self) -> None:
        plain_rows = b"".join(b"n%d,plain\n" % i for i in range(13))
        content = b"name,quote\n" + plain_rows + b'x,"He said ""hi"""\n'

        response = self.client.post(
            f"{API}/generate/",
            files={"file": ("quotes.csv", content, "text/csv")}
        )

        self.assertEqual(response.status_code, 200)
        quote_field = response.json()["form"]["fields"][1]
        self.assertEqual(quote_field["type"], "select")
        self.assertEqual(quote_field["options"], ["plain", 'He said "hi"'])

    def test_upload_with_bad_strategy_is_rejected(self) -> None:
        response = self.client.post(
            f"{API}/generate/",
            files={"file": ("a.csv", b"a\n1\n", "text/csv")},
            data={"detection_strategy": "reckless"}
        )

        self.assertEqual(response.status_code, 422)

    def test_non_csv_upload_is_rejected(self) -> None:
        response = self.client.post(
            f"{API}/generate/",
            files={"file": ("notes.txt", b"a\n1\n", "text/plain")}
        )

        self.assertEqual(response.status_code, 400)

    def test_oversize_upload_is_rejected(self) -> None:
        with patch.object(generate.settings, "MAX_UPLOAD_SIZE", 10):
            response = self.client.post(
                f"{API}/generate/",
                files={"file": ("big.csv", b"name\n" + b"x\n" * 20, "text/csv")}
            )

        self.assertEqual(response.status_code, 413)


class AnalyzeEndpointTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def test_analyze_upload(self) -> None:
        response = self.client.post(
            f"{API}/analyze/",
            files={"file": ("people.csv", b"name,age\nAlice,30\nBob,\n", "text/csv")}
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["total_rows"], 2)
        self.assertEqual(body["detections"][1]["field_type"], "number")
        self.assertAlmostEqual(body["quality"]["completeness"], 0.75)

    def test_analyze_empty_upload(self) -> None:
        response = self.client.post(
            f"{API}/analyze/",
            files={"file": ("empty.csv", b"", "text/csv")}
        )

        self.assertEqual(response.status_code, 422)


class TemplateEndpointTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def test_list_templates(self) -> None:
        response = self.client.get(f"{API}/templates/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["count"], 5)

    def test_template_detail(self) -> None:
        response = self.client.get(f"{API}/templates/survey")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Customer Satisfaction Survey")

    def test_template_csv_download(self) -> None:
        response = self.client.get(f"{API}/templates/contact/csv")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/csv"))
        self.assertIn("Contact_Information_Form_template.csv", response.headers["content-disposition"])
        self.assertTrue(response.text.startswith("name,email,phone"))

    def test_unknown_template_is_not_found(self) -> None:
        response = self.client.get(f"{API}/templates/missing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Template not found: missing")


if __name__ == "__main__":
    unittest.main()
