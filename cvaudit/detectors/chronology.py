from __future__ import annotations

import re

from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile, Experience

from .base import DetectionContext

EARLIEST_GRADUATION_YEAR = 1950
MAX_YEARS_AHEAD = 5

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_year(value: str) -> int | None:
    match = _LEADING_INT_RE.match(value or "")
    if match is None:
        return None
    return int(match.group(1))


def _has_dates(experience: Experience) -> bool:
    start = experience.date_range.start if experience.date_range else ""
    return bool(start or experience.dates)


def detect_chronology_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues: list[Issue] = []

    if len(profile.experiences) >= 2 and any(not _has_dates(experience) for experience in profile.experiences):
        issues.append(
            Issue(
                id="chrono-missing-dates",
                category="warning",
                type="chronology",
                message="Some experiences have no dates",
                suggestion="Add dates to every experience",
                score_penalty=5,
            )
        )

    latest_year = context.reference_year + MAX_YEARS_AHEAD
    for index, education in enumerate(profile.educations):
        year = _leading_year(education.year)
        # Unparseable or zero years are left alone.
        if not year:
            continue
        if year < EARLIEST_GRADUATION_YEAR or year > latest_year:
            issues.append(
                Issue(
                    id=f"chrono-edu-year-{index}",
                    category="critical",
                    type="chronology",
                    message=f"Suspicious graduation year: {education.year}",
                    field=f"educations.{index}.year",
                    suggestion="Check the year",
                    score_penalty=10,
                )
            )

    return issues
