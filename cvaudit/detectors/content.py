from __future__ import annotations

import re

from cvaudit.features.profile_text import experience_text
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext

MIN_SUMMARY_CHARS = 50
MAX_SUMMARY_CHARS = 500
MIN_SKILLS = 5
MAX_SKILLS = 20
MIN_TASKS_PER_EXPERIENCE = 2

_METRIC_RE = re.compile(
    r"\d+%|\$\d+|€\d+|\d+ millions?|\d+k|\d+ équipe|\d+ personnes|\d+ projets?",
    re.IGNORECASE,
)
WEAK_VERBS = (
    "fait",
    "travaillé",
    "aidé",
    "participé",
    "responsable de",
    "en charge de",
)


def detect_content_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues: list[Issue] = []

    summary = profile.summary
    if len(summary) < MIN_SUMMARY_CHARS:
        issues.append(
            Issue(
                id="content-short-summary",
                category="critical",
                type="content",
                message="Professional summary missing or too short",
                field="summary",
                suggestion="Write a summary of 3 to 5 sentences",
                score_penalty=10,
            )
        )
    elif len(summary) > MAX_SUMMARY_CHARS:
        issues.append(
            Issue(
                id="content-long-summary",
                category="warning",
                type="content",
                message="Professional summary is too long",
                field="summary",
                suggestion="Keep it to 3 to 5 sentences",
                score_penalty=5,
            )
        )

    descriptions = experience_text(profile)
    if profile.experiences and not _METRIC_RE.search(descriptions):
        issues.append(
            Issue(
                id="content-no-metrics",
                category="critical",
                type="content",
                message="No quantified achievements",
                suggestion='Add figures: "+25% sales", "team of 5 people"',
                score_penalty=15,
            )
        )

    lowered = descriptions.lower()
    if any(verb in lowered for verb in WEAK_VERBS):
        issues.append(
            Issue(
                id="content-weak-verbs",
                category="warning",
                type="content",
                message="Weak action verbs detected",
                suggestion='Replace "responsable de" with a strong verb such as "Piloté" or "Led"',
                score_penalty=5,
            )
        )

    skills_count = len(profile.skills)
    if skills_count < MIN_SKILLS:
        issues.append(
            Issue(
                id="content-few-skills",
                category="warning",
                type="content",
                message=f"Only {skills_count} skills listed",
                field="skills.0",
                suggestion="List at least 8 to 12 skills",
                score_penalty=5,
            )
        )
    elif skills_count > MAX_SKILLS:
        issues.append(
            Issue(
                id="content-many-skills",
                category="warning",
                type="content",
                message="Too many skills listed",
                field="skills.0",
                suggestion="Keep 12 to 15 skills at most",
                score_penalty=3,
            )
        )

    for index, experience in enumerate(profile.experiences):
        if len(experience.tasks) < MIN_TASKS_PER_EXPERIENCE:
            issues.append(
                Issue(
                    id=f"content-short-exp-{index}",
                    category="warning",
                    type="content",
                    message=f'Experience "{experience.role}" has too little detail',
                    field=f"experiences.{index}.role",
                    suggestion="Describe 3 to 5 concrete achievements",
                    score_penalty=5,
                )
            )

    return issues
