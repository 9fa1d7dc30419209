import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvaudit.features.language_identifier import (  # noqa: E402
    accepted_languages,
    analyze_text_language,
    detect_language_issues,
)
from cvaudit.schemas.profile import CVProfile  # noqa: E402

FRENCH_TEXT = "Je suis responsable des projets avec une équipe pour les clients dans notre entreprise"
ENGLISH_TEXT = "I led the team and achieved growth with our clients for this company over ten years of experience"
MIXED_TEXT = "je nous vous avec pour dans the and with for of team"


def _profile(summary: str) -> CVProfile:
    return CVProfile(summary=summary)


class LanguageAnalysisTests(unittest.TestCase):
    def test_french_text(self):
        analysis = analyze_text_language(FRENCH_TEXT)
        self.assertEqual(analysis.main_language, "fr")
        self.assertFalse(analysis.is_mixed)
        self.assertGreater(analysis.french_score, analysis.english_score)
        self.assertGreater(analysis.confidence, 80)

    def test_english_text(self):
        analysis = analyze_text_language(ENGLISH_TEXT)
        self.assertEqual(analysis.main_language, "en")

    def test_mixed_text_prefers_french_on_tie(self):
        analysis = analyze_text_language(MIXED_TEXT)
        self.assertEqual(analysis.french_score, 6)
        self.assertEqual(analysis.english_score, 6)
        self.assertEqual(analysis.main_language, "fr")
        self.assertTrue(analysis.is_mixed)

    def test_short_text_is_unknown(self):
        analysis = analyze_text_language("Python SQL")
        self.assertEqual(analysis.main_language, "unknown")
        self.assertEqual(analysis.confidence, 0.0)
        self.assertFalse(analysis.is_mixed)

    def test_accepted_languages(self):
        self.assertIn("de", accepted_languages("ch"))
        self.assertEqual(accepted_languages("FR"), ("fr",))
        self.assertEqual(accepted_languages("ZZ"), ("en", "fr"))


class LanguageIssueTests(unittest.TestCase):
    def test_mixed_language_issue(self):
        issues = detect_language_issues(_profile(MIXED_TEXT))
        mixed = [issue for issue in issues if issue.id == "lang-mixed"]
        self.assertEqual(len(mixed), 1)
        self.assertEqual(mixed[0].category, "critical")
        self.assertEqual(mixed[0].score_penalty, 25)

    def test_wrong_language_for_country(self):
        issues = detect_language_issues(_profile(ENGLISH_TEXT), "FR")
        self.assertIn("lang-wrong-country", [issue.id for issue in issues])

        issues = detect_language_issues(_profile(ENGLISH_TEXT), "DE")
        self.assertNotIn("lang-wrong-country", [issue.id for issue in issues])

    def test_unidentified_long_text(self):
        text = (
            "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
            "tempor incididunt ut labore et dolore magna aliqua"
        )
        issues = detect_language_issues(_profile(text))
        self.assertIn("lang-unknown", [issue.id for issue in issues])

    def test_french_typo(self):
        issues = detect_language_issues(_profile("Je suis un développeur professionel"))
        typo = [issue for issue in issues if issue.id == "lang-typo-professionnel"]
        self.assertEqual(len(typo), 1)
        self.assertEqual(typo[0].score_penalty, 4)

    def test_passive_voice(self):
        issues = detect_language_issues(_profile("I was asked to lead the launch"))
        self.assertIn("lang-passive-voice", [issue.id for issue in issues])


if __name__ == "__main__":
    unittest.main()
