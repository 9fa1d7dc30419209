from .gibberish import is_gibberish, is_gibberish_email, normalize_text
from .industry_classifier import Industry, classify_industry
from .language_identifier import (
    accepted_languages,
    analyze_text_language,
    detect_cv_language,
    detect_language_issues,
)
from .profile_text import estimate_page_count, experience_text, extract_all_text, profile_text_fields
from .vocabulary import is_valid_language, is_valid_skill

__all__ = [
    "Industry",
    "accepted_languages",
    "analyze_text_language",
    "classify_industry",
    "detect_cv_language",
    "detect_language_issues",
    "estimate_page_count",
    "experience_text",
    "extract_all_text",
    "is_gibberish",
    "is_gibberish_email",
    "is_valid_language",
    "is_valid_skill",
    "normalize_text",
    "profile_text_fields",
]
