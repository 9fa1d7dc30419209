from .audit import (
    ISSUE_CATEGORIES,
    ISSUE_TYPES,
    Audit,
    CategoryBreakdown,
    DetectedLanguage,
    FieldHighlight,
    Grade,
    Issue,
    IssueCategory,
    IssueType,
    LanguageAnalysis,
    QuickCheckResult,
    ReadinessLevel,
)
from .profile import ContactInfo, CVProfile, DateRange, Education, Experience, LanguageEntry, PersonalInfo

__all__ = [
    "ISSUE_CATEGORIES",
    "ISSUE_TYPES",
    "Audit",
    "CategoryBreakdown",
    "DetectedLanguage",
    "FieldHighlight",
    "Grade",
    "Issue",
    "IssueCategory",
    "IssueType",
    "LanguageAnalysis",
    "QuickCheckResult",
    "ReadinessLevel",
    "ContactInfo",
    "CVProfile",
    "DateRange",
    "Education",
    "Experience",
    "LanguageEntry",
    "PersonalInfo",
]
