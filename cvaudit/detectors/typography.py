from __future__ import annotations

import logging
import re

from cvaudit.features.gibberish import is_gibberish, is_gibberish_email
from cvaudit.features.profile_text import extract_all_text
from cvaudit.features.vocabulary import is_valid_language, is_valid_skill
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext, find_decorative_glyph, has_tabular_layout, locate_field

logger = logging.getLogger(__name__)

_DOUBLE_SPACE_RE = re.compile(r"  +")
_SPACE_BEFORE_PUNCT_RE = re.compile(r" [,.]")
_NO_SPACE_AFTER_PUNCT_RE = re.compile(r"[,.][A-Za-zÀ-ÿ]")
_EXCESSIVE_PUNCT_RE = re.compile(r"[!?]{2,}|\.{4,}")
_ALL_CAPS_WORD_RE = re.compile(r"\b[A-Z]{4,}\b")
_ALL_CAPS_LINE_RE = re.compile(r"\b[A-Z]{4,}\b.*\b[A-Z]{4,}\b.*\b[A-Z]{4,}\b")
_INVALID_NAME_CHARS_RE = re.compile(r"[0-9!@#$%^&*()+=\[\]{}|\\:\";<>?,./]")


def _preview(value: str, limit: int) -> str:
    return f"{value[:limit]}..."


def _scan_gibberish(profile: CVProfile) -> list[Issue]:
    issues: list[Issue] = []
    personal = profile.personal

    # Names are only checked for digits/symbols: real names often look unusual.
    for value, field, label in (
        (personal.title, "personal.title", "Title"),
        (profile.summary, "summary", "Summary"),
    ):
        if value and is_gibberish(value):
            issues.append(
                Issue(
                    id=f"gibberish-{field}",
                    category="critical",
                    type="content",
                    message=f"{label} contains random or invalid text",
                    field=field,
                    suggestion="Enter valid professional text",
                    score_penalty=25,
                )
            )

    for value, key, label in (
        (personal.first_name, "firstName", "First name"),
        (personal.last_name, "lastName", "Last name"),
    ):
        if value and _INVALID_NAME_CHARS_RE.search(value):
            issues.append(
                Issue(
                    id=f"name-invalid-chars-{key}",
                    category="critical",
                    type="content",
                    message=f"{label} contains invalid characters",
                    field=f"personal.{key}",
                    suggestion="Names must not contain digits or symbols",
                    score_penalty=15,
                )
            )

    email = personal.contact.email
    if email and is_gibberish_email(email):
        issues.append(
            Issue(
                id="gibberish-email",
                category="critical",
                type="contact",
                message="E-mail address looks invalid or random",
                field="personal.contact.email",
                suggestion="Use a valid address such as firstname.lastname@gmail.com",
                score_penalty=20,
            )
        )

    for index, skill in enumerate(profile.skills):
        gibberish = is_gibberish(skill)
        valid = is_valid_skill(skill)
        if gibberish or not valid:
            logger.debug("cv_audit_skill_flagged index=%s gibberish=%s valid=%s", index, gibberish, valid)
            issues.append(
                Issue(
                    id=f"gibberish-skill-{index}",
                    category="warning",
                    type="content",
                    message=f'Skill "{_preview(skill, 15)}" is not recognised',
                    field=f"skills.{index}",
                    suggestion="Enter a real skill",
                    score_penalty=5,
                )
            )

    for index, language in enumerate(profile.languages):
        if language.name and not is_valid_language(language.name):
            issues.append(
                Issue(
                    id=f"gibberish-lang-{index}",
                    category="critical",
                    type="content",
                    message=f'Language "{language.name}" is not a known language',
                    field=f"languages.{index}.name",
                    suggestion="Enter a real language (French, English, ...)",
                    score_penalty=15,
                )
            )

    for index, experience in enumerate(profile.experiences):
        if experience.role and is_gibberish(experience.role):
            issues.append(
                Issue(
                    id=f"gibberish-exp-{index}-role",
                    category="critical",
                    type="content",
                    message=f'Job title "{_preview(experience.role, 20)}" looks invalid',
                    field=f"experiences.{index}.role",
                    suggestion="Enter a real job title",
                    score_penalty=15,
                )
            )
        if experience.company and is_gibberish(experience.company):
            issues.append(
                Issue(
                    id=f"gibberish-exp-{index}-company",
                    category="critical",
                    type="content",
                    message=f'Company "{_preview(experience.company, 20)}" looks invalid',
                    field=f"experiences.{index}.company",
                    suggestion="Enter a real company name",
                    score_penalty=10,
                )
            )

    for index, education in enumerate(profile.educations):
        if education.school and is_gibberish(education.school):
            issues.append(
                Issue(
                    id=f"gibberish-edu-{index}-school",
                    category="critical",
                    type="content",
                    message=f'School "{_preview(education.school, 20)}" looks invalid',
                    field=f"educations.{index}.school",
                    suggestion="Enter a real institution name",
                    score_penalty=10,
                )
            )
        if education.degree and is_gibberish(education.degree):
            issues.append(
                Issue(
                    id=f"gibberish-edu-{index}-degree",
                    category="critical",
                    type="content",
                    message=f'Degree "{_preview(education.degree, 20)}" looks invalid',
                    field=f"educations.{index}.degree",
                    suggestion="Enter a real degree",
                    score_penalty=10,
                )
            )

    return issues


def detect_typography_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    issues = _scan_gibberish(profile)
    all_text = extract_all_text(profile)

    glyph = find_decorative_glyph(all_text)
    if glyph is not None:
        issues.append(
            Issue(
                id="typo-special-char",
                category="warning",
                type="typography",
                message=f'Decorative character "{glyph}" found',
                field=locate_field(profile, lambda value: glyph in value),
                suggestion="Use plain hyphens (-) or standard bullets",
                score_penalty=3,
            )
        )

    if has_tabular_layout(all_text):
        issues.append(
            Issue(
                id="typo-table-layout",
                category="warning",
                type="typography",
                message="Tabular layout characters found",
                field=locate_field(profile, has_tabular_layout),
                suggestion="Replace tabs and pipes with plain sentences or lists",
                score_penalty=5,
            )
        )

    if _DOUBLE_SPACE_RE.search(all_text):
        issues.append(
            Issue(
                id="typo-double-space",
                category="warning",
                type="typography",
                message="Double spaces detected",
                field=locate_field(profile, lambda value: bool(_DOUBLE_SPACE_RE.search(value)), "summary"),
                suggestion="Replace double spaces with single spaces",
                score_penalty=3,
            )
        )

    if _SPACE_BEFORE_PUNCT_RE.search(all_text):
        issues.append(
            Issue(
                id="typo-space-before-punct",
                category="warning",
                type="typography",
                message="Space before punctuation",
                field=locate_field(profile, lambda value: bool(_SPACE_BEFORE_PUNCT_RE.search(value)), "summary"),
                suggestion="Remove the space before commas and full stops",
                score_penalty=2,
            )
        )

    if _NO_SPACE_AFTER_PUNCT_RE.search(all_text):
        issues.append(
            Issue(
                id="typo-no-space-after-punct",
                category="warning",
                type="typography",
                message="Missing space after punctuation",
                field=locate_field(profile, lambda value: bool(_NO_SPACE_AFTER_PUNCT_RE.search(value)), "summary"),
                suggestion="Add a space after every comma and full stop",
                score_penalty=2,
            )
        )

    if _EXCESSIVE_PUNCT_RE.search(all_text):
        issues.append(
            Issue(
                id="typo-multiple-punct",
                category="critical",
                type="typography",
                message="Excessive punctuation",
                field=locate_field(profile, lambda value: bool(_EXCESSIVE_PUNCT_RE.search(value)), "summary"),
                suggestion="A single punctuation mark is enough",
                score_penalty=5,
            )
        )

    if _ALL_CAPS_LINE_RE.search(all_text):
        issues.append(
            Issue(
                id="typo-all-caps",
                category="warning",
                type="typography",
                message="Too much text in CAPITALS",
                field=locate_field(profile, lambda value: bool(_ALL_CAPS_WORD_RE.search(value)), "summary"),
                suggestion="Avoid writing words in capitals",
                score_penalty=4,
            )
        )

    issues.append(
        Issue(
            id="typo-tip-fonts",
            category="info",
            type="typography",
            message="Reminder: stick to one or two standard fonts",
            suggestion="Arial, Calibri or Helvetica are read reliably by every ATS",
            score_penalty=0,
        )
    )

    return issues
