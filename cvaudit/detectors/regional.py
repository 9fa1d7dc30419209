from __future__ import annotations

from cvaudit.features.profile_text import estimate_page_count
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext


def detect_regional_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues: list[Issue] = []
    rules = context.country
    personal = profile.personal

    if not rules.photo.allowed and personal.photo_url:
        issues.append(
            Issue(
                id="region-photo-forbidden",
                category="critical",
                type="regional",
                message=f"Photos must not be included for {rules.name}",
                field="personal.photoUrl",
                suggestion="Remove your photo",
                score_penalty=20,
            )
        )
    elif rules.photo.required and not personal.photo_url:
        issues.append(
            Issue(
                id="region-photo-required",
                category="critical",
                type="regional",
                message=f"A photo is required for {rules.name}",
                field="personal.photoUrl",
                suggestion="Add a professional photo",
                score_penalty=15,
            )
        )

    if rules.personal_info.birth_date == "forbidden" and personal.birth_date:
        issues.append(
            Issue(
                id="region-birthdate-forbidden",
                category="critical",
                type="regional",
                message=f"Date of birth must not be included for {rules.name}",
                field="personal.birthDate",
                suggestion="Remove your date of birth",
                score_penalty=15,
            )
        )

    if rules.personal_info.nationality == "forbidden" and personal.nationality:
        issues.append(
            Issue(
                id="region-nationality-forbidden",
                category="warning",
                type="regional",
                message=f"Nationality is discouraged for {rules.name}",
                field="personal.nationality",
                suggestion="Remove your nationality",
                score_penalty=8,
            )
        )

    estimated_pages = estimate_page_count(profile)
    max_pages = rules.format.max_pages
    if estimated_pages > max_pages:
        issues.append(
            Issue(
                id="region-too-many-pages",
                category="critical",
                type="regional",
                message=f"CV too long: about {estimated_pages} pages (max {max_pages})",
                suggestion=f"Cut it down to {max_pages} page(s)",
                score_penalty=10,
            )
        )

    if rules.features.signature:
        issues.append(
            Issue(
                id="region-signature-recommended",
                category="info",
                type="regional",
                message=f"A signature is recommended for {rules.name}",
                suggestion="Add your handwritten signature",
                score_penalty=0,
            )
        )

    return issues
