from __future__ import annotations

import re

from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext

UNPROFESSIONAL_EMAIL_PATTERNS = (
    re.compile(r"sexy|hot|love|baby|princess|killer|dragon|devil|cute|sweet", re.IGNORECASE),
    re.compile(r"69|420|666|xxx", re.IGNORECASE),
)
EMAIL_FORMAT_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def detect_contact_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues: list[Issue] = []
    personal = profile.personal
    contact = personal.contact

    email = contact.email
    if not email:
        issues.append(
            Issue(
                id="contact-no-email",
                category="critical",
                type="contact",
                message="E-mail address missing",
                field="personal.contact.email",
                suggestion="An e-mail address is mandatory",
                score_penalty=20,
            )
        )
    else:
        if any(pattern.search(email) for pattern in UNPROFESSIONAL_EMAIL_PATTERNS):
            issues.append(
                Issue(
                    id="contact-unpro-email",
                    category="critical",
                    type="contact",
                    message="Unprofessional e-mail address",
                    field="personal.contact.email",
                    suggestion="Create an address such as firstname.lastname@gmail.com",
                    score_penalty=15,
                )
            )
        if not EMAIL_FORMAT_RE.match(email):
            issues.append(
                Issue(
                    id="contact-invalid-email",
                    category="critical",
                    type="contact",
                    message="Invalid e-mail format",
                    field="personal.contact.email",
                    suggestion="Check the address format",
                    score_penalty=15,
                )
            )

    if not contact.phone:
        issues.append(
            Issue(
                id="contact-no-phone",
                category="warning",
                type="contact",
                message="Phone number missing",
                field="personal.contact.phone",
                suggestion="Add a number with the country code",
                score_penalty=5,
            )
        )

    if not contact.linkedin:
        issues.append(
            Issue(
                id="contact-no-linkedin",
                category="warning",
                type="contact",
                message="LinkedIn profile missing",
                field="personal.contact.linkedin",
                suggestion="Most recruiters check LinkedIn before calling",
                score_penalty=5,
            )
        )

    if not personal.first_name or not personal.last_name:
        issues.append(
            Issue(
                id="contact-no-name",
                category="critical",
                type="contact",
                message="First or last name missing",
                field="personal.firstName" if not personal.first_name else "personal.lastName",
                suggestion="Your full name is mandatory",
                score_penalty=25,
            )
        )

    if not personal.title:
        issues.append(
            Issue(
                id="contact-no-title",
                category="warning",
                type="contact",
                message="Professional title missing",
                field="personal.title",
                suggestion='Add a title such as "Senior Developer"',
                score_penalty=8,
            )
        )

    return issues
