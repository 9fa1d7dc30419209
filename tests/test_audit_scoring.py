import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from profile_factory import FIXED_NOW, fixed_engine, jean_dupont, strong_uk_payload, strong_uk_profile  # noqa: E402

from cvaudit.rules import UnknownCountryError  # noqa: E402
from cvaudit.schemas.audit import Issue  # noqa: E402
from cvaudit.schemas.profile import CVProfile  # noqa: E402
from cvaudit.services.audit_service import (  # noqa: E402
    ScoringSettings,
    analyze,
    completeness_cap,
    completeness_ratio,
    compute_ats_score,
    compute_score,
    critical_multiplier,
    determine_readiness,
    score_to_grade,
)

SCORING = ScoringSettings()


def _critical(index: int, penalty: int = 5) -> Issue:
    return Issue(id=f"c-{index}", category="critical", type="content", message="x", score_penalty=penalty)


def _issue(index: int, issue_type: str, penalty: int) -> Issue:
    return Issue(id=f"i-{index}", category="warning", type=issue_type, message="x", score_penalty=penalty)


class ScoringRuleTests(unittest.TestCase):
    def test_completeness_caps(self):
        self.assertEqual(completeness_cap(1.0, SCORING), 100)
        self.assertEqual(completeness_cap(5 / 6, SCORING), 80)
        self.assertEqual(completeness_cap(4 / 6, SCORING), 50)
        self.assertEqual(completeness_cap(3 / 6, SCORING), 50)
        self.assertEqual(completeness_cap(2 / 6, SCORING), 25)
        self.assertEqual(completeness_cap(0.0, SCORING), 25)

    def test_empty_profile_is_capped(self):
        profile = CVProfile()
        self.assertEqual(completeness_ratio(profile, SCORING), 0.0)
        audit = fixed_engine().analyze(profile, "FR")
        self.assertLessEqual(audit.score, 25)

    def test_critical_multiplier_floor(self):
        self.assertEqual(critical_multiplier(0, SCORING), 1.0)
        self.assertAlmostEqual(critical_multiplier(1, SCORING), 0.85)
        for count in range(5, 12):
            multiplier = critical_multiplier(count, SCORING)
            self.assertEqual(multiplier, 0.3)
            self.assertLessEqual(multiplier, 1.0)

    def test_monotonic_in_critical_issues(self):
        issues = [_critical(0)]
        previous = compute_score(100, issues, 1, SCORING)
        for index in range(1, 8):
            issues.append(_critical(index, penalty=0))
            score = compute_score(100, issues, len(issues), SCORING)
            self.assertLessEqual(score, previous)
            previous = score

    def test_ats_estimate_counts_ats_and_typography_only(self):
        issues = [_issue(0, "ats", 5), _issue(1, "typography", 3), _issue(2, "content", 25)]
        self.assertEqual(compute_ats_score(issues, SCORING), 88)

    def test_ats_estimate_is_clamped(self):
        issues = [_issue(0, "ats", 70), _issue(1, "typography", 70)]
        self.assertEqual(compute_ats_score(issues, SCORING), 0)

    def test_grades(self):
        self.assertEqual(score_to_grade(95, SCORING), "A+")
        self.assertEqual(score_to_grade(94.9, SCORING), "A")
        self.assertEqual(score_to_grade(85, SCORING), "A")
        self.assertEqual(score_to_grade(75, SCORING), "B")
        self.assertEqual(score_to_grade(60, SCORING), "C")
        self.assertEqual(score_to_grade(40, SCORING), "D")
        self.assertEqual(score_to_grade(39.9, SCORING), "F")

    def test_readiness(self):
        self.assertEqual(determine_readiness(95, 4, SCORING), "not_ready")
        self.assertEqual(determine_readiness(95, 1, SCORING), "needs_work")
        self.assertEqual(determine_readiness(49, 0, SCORING), "needs_work")
        self.assertEqual(determine_readiness(69, 0, SCORING), "almost_ready")
        self.assertEqual(determine_readiness(89, 0, SCORING), "ready")
        self.assertEqual(determine_readiness(90, 0, SCORING), "excellent")


class AuditEngineTests(unittest.TestCase):
    def setUp(self):
        self.engine = fixed_engine()

    def test_jean_dupont(self):
        audit = self.engine.analyze(jean_dupont(), "FR")
        ids = {issue.id for issue in audit.all_issues()}
        self.assertTrue(
            {
                "contact-no-title",
                "contact-invalid-email",
                "content-short-summary",
                "contact-no-phone",
                "contact-no-linkedin",
            }
            <= ids
        )
        self.assertEqual(audit.score, 0)
        self.assertEqual(audit.grade, "F")
        self.assertEqual(len(audit.critical_errors), 2)
        self.assertEqual(audit.readiness_level, "needs_work")
        self.assertEqual(audit.estimated_ats_score, 100)
        self.assertEqual(audit.total_issues, 8)

    def test_strong_profile(self):
        audit = self.engine.analyze(strong_uk_profile(), "uk")
        penalised = [issue.id for issue in audit.all_issues() if issue.score_penalty > 0]
        self.assertEqual(penalised, [])
        self.assertEqual(audit.score, 100)
        self.assertEqual(audit.grade, "A+")
        self.assertEqual(audit.readiness_level, "excellent")
        self.assertEqual(audit.target_country, "UK")
        self.assertEqual(audit.timestamp, FIXED_NOW)

    def test_info_penalties_lower_the_score(self):
        payload = strong_uk_payload()
        payload["experiences"][1]["tasks"].append("Was asked to lead the rebrand.")
        audit = self.engine.analyze(CVProfile.model_validate(payload), "UK")
        self.assertEqual([issue.id for issue in audit.info if issue.score_penalty > 0], ["lang-passive-voice"])
        self.assertEqual(audit.score, 98)
        self.assertEqual(audit.grade, "A+")

    def test_unlisted_real_skills_are_not_penalised(self):
        payload = strong_uk_payload()
        payload["skills"].extend(["Terraform", "Golang", "Flutter", "Blender"])
        audit = self.engine.analyze(CVProfile.model_validate(payload), "UK")
        self.assertEqual(audit.score, 100)

    def test_wrong_language_market(self):
        audit = self.engine.analyze(strong_uk_profile(), "FR")
        self.assertIn("lang-wrong-country", [issue.id for issue in audit.critical_errors])
        self.assertLess(audit.score, 100)

    def test_partition_bounds_and_determinism(self):
        for profile in (CVProfile(), jean_dupont(), strong_uk_profile()):
            for country in ("FR", "US", "JP", "DE"):
                with self.subTest(country=country, profile=profile.personal.first_name):
                    first = self.engine.analyze(profile, country)
                    second = self.engine.analyze(profile, country)
                    self.assertEqual(first, second)
                    self.assertTrue(0 <= first.score <= 100)
                    self.assertTrue(0 <= first.estimated_ats_score <= 100)

                    lists = (first.critical_errors, first.warnings, first.improvements, first.info)
                    self.assertEqual(sum(len(items) for items in lists), first.total_issues)
                    for category, items in zip(("critical", "warning", "improvement", "info"), lists):
                        self.assertTrue(all(issue.category == category for issue in items))

                    breakdown = first.category_breakdown.model_dump()
                    self.assertEqual(sum(breakdown.values()), first.total_issues)

    def test_unknown_country(self):
        with self.assertRaises(UnknownCountryError):
            self.engine.analyze(strong_uk_profile(), "ZZ")
        with self.assertRaises(UnknownCountryError):
            self.engine.quick_check(strong_uk_profile(), "ZZ")

    def test_quick_check(self):
        result = self.engine.quick_check(jean_dupont(), "FR")
        self.assertEqual(result.score, 52)
        self.assertEqual(result.critical_count, 2)
        self.assertEqual(result.top_issue, "Invalid e-mail format")

        result = self.engine.quick_check(strong_uk_profile(), "UK")
        self.assertEqual(result.score, 100)
        self.assertIsNone(result.top_issue)

    def test_module_level_analyze(self):
        audit = analyze(jean_dupont(), "FR", engine=self.engine)
        self.assertEqual(audit.timestamp, FIXED_NOW)

    def test_logs_one_line_per_audit(self):
        with self.assertLogs("cvaudit.services.audit_service", level="INFO") as logs:
            self.engine.analyze(jean_dupont(), "FR")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("cv_audit_complete country=FR score=0", logs.output[0])


if __name__ == "__main__":
    unittest.main()
