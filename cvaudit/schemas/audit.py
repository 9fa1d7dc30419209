from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

IssueCategory = Literal["critical", "warning", "improvement", "info"]
IssueType = Literal[
    "typography",
    "content",
    "regional",
    "chronology",
    "contact",
    "ats",
    "industry",
    "language",
]
Grade = Literal["A+", "A", "B", "C", "D", "F"]
ReadinessLevel = Literal["not_ready", "needs_work", "almost_ready", "ready", "excellent"]
DetectedLanguage = Literal["fr", "en", "de", "it", "es", "unknown"]

ISSUE_CATEGORIES: tuple[IssueCategory, ...] = ("critical", "warning", "improvement", "info")
ISSUE_TYPES: tuple[IssueType, ...] = (
    "typography",
    "content",
    "regional",
    "chronology",
    "contact",
    "ats",
    "industry",
    "language",
)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Issue(_FrozenModel):
    id: str
    category: IssueCategory
    type: IssueType
    message: str
    field: str | None = None
    suggestion: str | None = None
    score_penalty: int = Field(default=0, ge=0)


class CategoryBreakdown(_FrozenModel):
    typography: int = 0
    content: int = 0
    regional: int = 0
    chronology: int = 0
    contact: int = 0
    ats: int = 0
    industry: int = 0
    language: int = 0

    @classmethod
    def from_issues(cls, issues: list[Issue]) -> CategoryBreakdown:
        counts = {issue_type: 0 for issue_type in ISSUE_TYPES}
        for issue in issues:
            counts[issue.type] += 1
        return cls(**counts)


class Audit(_FrozenModel):
    score: int = Field(ge=0, le=100)
    grade: Grade
    critical_errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()
    improvements: tuple[Issue, ...] = ()
    info: tuple[Issue, ...] = ()
    total_issues: int = Field(ge=0)
    category_breakdown: CategoryBreakdown
    timestamp: datetime
    target_country: str
    estimated_ats_score: int = Field(ge=0, le=100)
    readiness_level: ReadinessLevel

    def all_issues(self) -> list[Issue]:
        return [*self.critical_errors, *self.warnings, *self.improvements, *self.info]


class QuickCheckResult(_FrozenModel):
    score: int = Field(ge=0, le=100)
    critical_count: int = Field(ge=0)
    top_issue: str | None = None


class LanguageAnalysis(_FrozenModel):
    main_language: DetectedLanguage = "unknown"
    confidence: float = Field(default=0.0, ge=0.0, le=100.0)
    french_score: int = 0
    english_score: int = 0
    german_score: int = 0
    is_mixed: bool = False


class FieldHighlight(_FrozenModel):
    field: str
    severity: IssueCategory
    issues: tuple[Issue, ...] = ()
