import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from profile_factory import jean_dupont_payload, strong_uk_payload  # noqa: E402

from cvaudit.core import rate_limit as rate_limit_module  # noqa: E402
from cvaudit.core import security  # noqa: E402
from cvaudit.main import app  # noqa: E402
from cvaudit.services.audit_service import AuditEngine  # noqa: E402


class AuditApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["countries"], 19)
        self.assertEqual(body["detectors"], 8)
        self.assertEqual(body["defaultCountry"], security.settings.default_country)

    def test_countries(self):
        response = self.client.get("/v1/countries")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(len(body), 19)
        france = next(item for item in body if item["code"] == "FR")
        self.assertEqual(france["paperSize"], "A4")
        self.assertEqual(france["maxPages"], 2)
        self.assertTrue(france["photoAllowed"])

    def test_audit_contract_shape(self):
        response = self.client.post(
            "/v1/audit",
            json={"profile": jean_dupont_payload(), "targetCountry": "FR"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 0)
        self.assertEqual(body["grade"], "F")
        self.assertEqual(body["readinessLevel"], "needs_work")
        self.assertEqual(body["targetCountry"], "FR")
        self.assertEqual(body["estimatedAtsScore"], 100)
        self.assertEqual(body["totalIssues"], 8)
        self.assertEqual(body["categoryBreakdown"]["contact"], 4)
        self.assertIn("scorePenalty", body["criticalErrors"][0])
        self.assertIsNone(body["report"])
        self.assertIsNone(body["highlights"])

    def test_audit_with_report(self):
        response = self.client.post(
            "/v1/audit",
            json={"profile": strong_uk_payload(), "targetCountry": "UK", "includeReport": True},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 100)
        self.assertTrue(body["report"].startswith("# 🎯 CV audit for Jane\n"))
        self.assertEqual(body["highlights"], {})

    def test_default_country_is_france(self):
        response = self.client.post("/v1/audit", json={"profile": strong_uk_payload()})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["targetCountry"], "FR")

    def test_unknown_country_is_rejected(self):
        response = self.client.post(
            "/v1/audit",
            json={"profile": jean_dupont_payload(), "targetCountry": "ZZ"},
        )
        self.assertEqual(response.status_code, 422)
        self.assertIn("ZZ", response.json()["detail"])

        response = self.client.post(
            "/v1/audit/quick-check",
            json={"profile": jean_dupont_payload(), "country": "ZZ"},
        )
        self.assertEqual(response.status_code, 422)

    def test_quick_check(self):
        response = self.client.post(
            "/v1/audit/quick-check",
            json={"profile": jean_dupont_payload(), "country": "FR"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"score": 52, "criticalCount": 2, "topIssue": "Invalid e-mail format"},
        )

    def test_api_key_required_when_configured(self):
        guarded = replace(security.settings, api_key="secret")
        with patch.object(security, "settings", guarded):
            response = self.client.post("/v1/audit", json={"profile": jean_dupont_payload()})
            self.assertEqual(response.status_code, 401)

            response = self.client.post(
                "/v1/audit",
                json={"profile": jean_dupont_payload()},
                headers={"X-API-Key": "secret"},
            )
            self.assertEqual(response.status_code, 200)

    def test_rate_limit_is_a_no_op_when_disabled(self):
        async def handler():
            return None

        disabled = replace(rate_limit_module.settings, rate_limit_enabled=False)
        with patch.object(rate_limit_module, "settings", disabled):
            self.assertIs(rate_limit_module.rate_limit("1/minute")(handler), handler)

    def test_lifespan_builds_engine(self):
        with TestClient(app) as client:
            self.assertIsInstance(client.app.state.engine, AuditEngine)
            response = client.post("/v1/audit/quick-check", json={"profile": strong_uk_payload(), "country": "UK"})
            self.assertEqual(response.json()["score"], 100)


if __name__ == "__main__":
    unittest.main()
