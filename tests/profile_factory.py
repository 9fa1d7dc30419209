"""Profiles shared by the audit test suites."""

import sys
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvaudit.rules import get_default_country_table  # noqa: E402
from cvaudit.schemas.profile import CVProfile  # noqa: E402
from cvaudit.services.audit_service import AuditEngine  # noqa: E402

FIXED_NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def fixed_engine() -> AuditEngine:
    return AuditEngine(country_table=get_default_country_table(), clock=lambda: FIXED_NOW)


def jean_dupont_payload() -> dict:
    return {
        "personal": {
            "firstName": "Jean",
            "lastName": "Dupont",
            "title": "",
            "contact": {"email": "jean@x"},
        },
        "summary": "",
        "experiences": [],
        "skills": [],
    }


def jean_dupont() -> CVProfile:
    return CVProfile.model_validate(jean_dupont_payload())


def strong_uk_payload() -> dict:
    return {
        "id": "cv-jane",
        "personal": {
            "firstName": "Jane",
            "lastName": "Smith",
            "title": "Marketing Manager",
            "contact": {
                "email": "jane.smith@gmail.com",
                "phone": "+44 20 7946 0958",
                "linkedin": "linkedin.com/in/janesmith",
                "website": "janesmith.co.uk",
            },
        },
        "summary": (
            "Marketing manager with eight years of experience leading brand campaigns "
            "for retail clients across the UK and Europe."
        ),
        "experiences": [
            {
                "id": "exp-1",
                "role": "Marketing Manager",
                "company": "Acme Retail Group",
                "dateRange": {"start": "2019-01", "isCurrent": True},
                "tasks": [
                    "Led a team of 6 people across three countries.",
                    "Grew online sales by 35% in two years.",
                    "Achieved a 20% increase in customer retention with the loyalty programme.",
                ],
            },
            {
                "id": "exp-2",
                "role": "Marketing Coordinator",
                "company": "Blue Harbor Foods",
                "dateRange": {"start": "2016-03", "end": "2018-12"},
                "tasks": [
                    "Planned 12 seasonal campaigns for the company.",
                    "Cut agency costs by 15% and improved reporting for management.",
                ],
            },
        ],
        "educations": [
            {"id": "edu-1", "degree": "Master of Marketing", "school": "University of Leeds", "year": "2015"},
        ],
        "skills": [
            "Marketing",
            "SEO",
            "Google Analytics",
            "Project Management",
            "Communication",
            "Leadership",
            "CRM",
        ],
        "languages": [
            {"name": "English", "level": "Native"},
            {"name": "French", "level": "B2"},
        ],
    }


def strong_uk_profile() -> CVProfile:
    return CVProfile.model_validate(strong_uk_payload())
