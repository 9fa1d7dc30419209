import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvaudit.core.config import scoring  # noqa: E402
from cvaudit.core.config.scoring import get_scoring_config, get_scoring_value  # noqa: E402
from cvaudit.services.audit_service import ScoringSettings  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("grades.a_plus"), 95)
        self.assertEqual(get_scoring_value("critical_multiplier.floor"), 0.3)
        self.assertEqual(get_scoring_value("ats.issue_types"), ["ats", "typography"])

    def test_missing_paths_use_default(self):
        self.assertEqual(get_scoring_value("grades.z", 7), 7)
        self.assertEqual(get_scoring_value("grades.a_plus.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_missing_file_raises_runtime_error(self):
        missing = PROJECT_ROOT / "tests" / "no-such-scoring.yaml"
        with patch.object(scoring, "_SCORING_CONFIG_PATH", missing), patch.object(scoring, "_SCORING_CONFIG_CACHE", None):
            with self.assertRaisesRegex(RuntimeError, "no-such-scoring.yaml"):
                get_scoring_config()

    def test_non_mapping_yaml_raises_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with patch.object(scoring, "_SCORING_CONFIG_PATH", path), patch.object(scoring, "_SCORING_CONFIG_CACHE", None):
                with self.assertRaisesRegex(RuntimeError, "top-level mapping"):
                    get_scoring_config()

    def test_shipped_values_match_defaults(self):
        self.assertEqual(ScoringSettings.from_config(), ScoringSettings())


if __name__ == "__main__":
    unittest.main()
