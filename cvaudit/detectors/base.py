from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from cvaudit.features.profile_text import profile_text_fields
from cvaudit.rules import CountryRule
from cvaudit.schemas.audit import Issue
from cvaudit.schemas.profile import CVProfile

# Glyphs that ATS parsers commonly drop or garble. Scan order decides which one is reported.
DECORATIVE_GLYPHS = ("→", "★", "☆", "♦", "♠", "❤", "✓", "✗", "⬥", "▪️", "◆", "○", "●")
TABULAR_LAYOUT_RE = re.compile(r"\t{2,}|\|")


@dataclass(frozen=True, slots=True)
class DetectionContext:
    country_code: str
    country: CountryRule
    reference_year: int


Detector = Callable[[CVProfile, DetectionContext], list[Issue]]


def find_decorative_glyph(text: str) -> str | None:
    for glyph in DECORATIVE_GLYPHS:
        if glyph in text:
            return glyph
    return None


def has_tabular_layout(text: str) -> bool:
    return bool(TABULAR_LAYOUT_RE.search(text or ""))


def locate_field(profile: CVProfile, predicate: Callable[[str], bool], default: str | None = None) -> str | None:
    """Path of the first free-text field satisfying ``predicate``."""
    for path, value in profile_text_fields(profile):
        if predicate(value):
            return path
    return default
