from __future__ import annotations

import re
from typing import Literal

Industry = Literal["tech", "finance", "creative", "sales", "general"]

# Evaluated in order; the first category whose pattern hits the title or the text wins.
_INDUSTRY_PATTERNS: tuple[tuple[Industry, re.Pattern[str]], ...] = (
    (
        "tech",
        re.compile(
            r"developer|engineer|devops|software|data|cloud|architect|programmer|cto|tech lead"
            r"|full.?stack|frontend|backend",
            re.IGNORECASE,
        ),
    ),
    (
        "finance",
        re.compile(r"banker|trader|analyst|accountant|auditor|finance|portfolio|investment|cfo", re.IGNORECASE),
    ),
    (
        "creative",
        re.compile(r"designer|creative|artist|photographer|ux|ui|graphic|video|content|copywriter", re.IGNORECASE),
    ),
    (
        "sales",
        re.compile(r"sales|business development|account|commercial|revenue|client", re.IGNORECASE),
    ),
)


def classify_industry(title: str, text: str) -> Industry:
    title = title or ""
    text = text or ""
    for industry, pattern in _INDUSTRY_PATTERNS:
        if pattern.search(title) or pattern.search(text):
            return industry
    return "general"
