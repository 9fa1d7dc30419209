from __future__ import annotations

from cvaudit.features.profile_text import extract_all_text
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext, find_decorative_glyph, has_tabular_layout


def detect_ats_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues: list[Issue] = []
    all_text = extract_all_text(profile)

    glyph = find_decorative_glyph(all_text)
    if glyph is not None:
        issues.append(
            Issue(
                id="ats-special-char",
                category="warning",
                type="ats",
                message=f'Special character "{glyph}" can break ATS parsing',
                suggestion="Use standard hyphens (-) or bullets",
                score_penalty=3,
            )
        )

    if has_tabular_layout(all_text):
        issues.append(
            Issue(
                id="ats-table-detected",
                category="warning",
                type="ats",
                message="Tabular layout detected",
                suggestion="ATS parsers struggle with tables",
                score_penalty=5,
            )
        )

    issues.append(
        Issue(
            id="ats-tip-headers",
            category="info",
            type="ats",
            message="Reminder: avoid page headers and footers",
            suggestion="ATS parsers often ignore content placed in headers",
            score_penalty=0,
        )
    )

    return issues
