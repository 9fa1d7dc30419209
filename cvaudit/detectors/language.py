from __future__ import annotations

from cvaudit.features.language_identifier import detect_language_issues
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext


def detect_language_quality_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    return detect_language_issues(profile, context.country_code)
