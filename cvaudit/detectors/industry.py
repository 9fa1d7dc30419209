from __future__ import annotations

import re

from cvaudit.features.industry_classifier import classify_industry
from cvaudit.features.profile_text import extract_all_text
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

from .base import DetectionContext

TECH_KEYWORDS = ("javascript", "python", "java", "react", "node", "aws", "docker", "kubernetes", "sql", "git")
CODE_HOSTS = ("github", "gitlab", "bitbucket")

_DEVELOPER_TITLE_RE = re.compile(r"developer|engineer|programmer", re.IGNORECASE)
_FINANCE_METRIC_RE = re.compile(r"\$\d+|\d+\s*(million|billion|M|B|k)|roi|irr|\d+%", re.IGNORECASE)
_SALES_METRIC_RE = re.compile(r"quota|\$\d+|€\d+|\d+%|target|objectif|revenue", re.IGNORECASE)


def _tech_issues(profile: CVProfile) -> list[Issue]:
    issues: list[Issue] = []
    website = profile.personal.contact.website.lower()
    has_code_host = any(host in website for host in CODE_HOSTS)
    if not has_code_host and _DEVELOPER_TITLE_RE.search(profile.personal.title):
        issues.append(
            Issue(
                id="industry-tech-no-github",
                category="warning",
                type="industry",
                message="Code hosting profile (GitHub) missing",
                field="personal.contact.website",
                suggestion="A GitHub profile is expected for developers",
                score_penalty=8,
            )
        )

    skills = [skill.lower() for skill in profile.skills]
    has_stack = any(keyword in skill for keyword in TECH_KEYWORDS for skill in skills)
    if not has_stack:
        issues.append(
            Issue(
                id="industry-tech-no-stack",
                category="warning",
                type="industry",
                message="Technical stack not visible",
                field="skills.0",
                suggestion="List your languages, frameworks and tools",
                score_penalty=10,
            )
        )
    return issues


def _finance_issues(text: str) -> list[Issue]:
    if _FINANCE_METRIC_RE.search(text):
        return []
    return [
        Issue(
            id="industry-finance-no-numbers",
            category="warning",
            type="industry",
            message="Few financial metrics",
            suggestion='Finance expects figures: "$5M", "ROI 23%"',
            score_penalty=8,
        )
    ]


def _creative_issues(profile: CVProfile) -> list[Issue]:
    if profile.personal.contact.website:
        return []
    return [
        Issue(
            id="industry-creative-no-portfolio",
            category="critical",
            type="industry",
            message="Portfolio missing",
            field="personal.contact.website",
            suggestion="A portfolio link is mandatory for creative roles",
            score_penalty=20,
        )
    ]


def _sales_issues(text: str) -> list[Issue]:
    if _SALES_METRIC_RE.search(text):
        return []
    return [
        Issue(
            id="industry-sales-no-metrics",
            category="critical",
            type="industry",
            message="No quantified sales performance",
            suggestion='Sales is about numbers: "Exceeded quota by 120%"',
            score_penalty=15,
        )
    ]


def detect_industry_issues(profile: CVProfile, context: DetectionContext) -> list[Issue]:
    all_text = extract_all_text(profile).lower()
    industry = classify_industry(profile.personal.title.lower(), all_text)

    if industry == "tech":
        return _tech_issues(profile)
    if industry == "finance":
        return _finance_issues(all_text)
    if industry == "creative":
        return _creative_issues(profile)
    if industry == "sales":
        return _sales_issues(all_text)
    return []
