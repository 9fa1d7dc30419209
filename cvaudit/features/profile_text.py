from __future__ import annotations

import math

from cvaudit.schemas.profile import CVProfile

_CHARS_PER_PAGE = 2500
_SECTIONS_PER_PAGE = 6


def profile_text_fields(profile: CVProfile) -> list[tuple[str, str]]:
    """Non-empty free-text fields as ``(field_path, value)`` in reading order.

    Paths use the editor's camelCase nesting (``experiences.0.tasks.1``) so the
    debug overlay can resolve them against the rendered document.
    """
    personal = profile.personal
    fields: list[tuple[str, str]] = [
        ("personal.firstName", personal.first_name),
        ("personal.lastName", personal.last_name),
        ("personal.title", personal.title),
        ("summary", profile.summary),
    ]
    for index, experience in enumerate(profile.experiences):
        fields.append((f"experiences.{index}.role", experience.role))
        fields.append((f"experiences.{index}.company", experience.company))
        fields.extend(
            (f"experiences.{index}.tasks.{task_index}", task)
            for task_index, task in enumerate(experience.tasks)
        )
    for index, education in enumerate(profile.educations):
        fields.append((f"educations.{index}.degree", education.degree))
        fields.append((f"educations.{index}.school", education.school))
        fields.append((f"educations.{index}.description", education.description))
    fields.extend((f"skills.{index}", skill) for index, skill in enumerate(profile.skills))
    return [(path, value) for path, value in fields if value]


def extract_all_text(profile: CVProfile) -> str:
    return " ".join(value for _, value in profile_text_fields(profile))


def experience_text(profile: CVProfile) -> str:
    return " ".join(" ".join(experience.tasks) for experience in profile.experiences)


def estimate_page_count(profile: CVProfile) -> int:
    char_pages = len(extract_all_text(profile)) / _CHARS_PER_PAGE
    section_pages = (len(profile.experiences) + len(profile.educations)) / _SECTIONS_PER_PAGE
    return math.ceil(max(char_pages, section_pages, 1))
