from .ats import detect_ats_issues
from .base import DetectionContext, Detector, find_decorative_glyph, has_tabular_layout
from .chronology import detect_chronology_issues
from .contact import detect_contact_issues
from .content import detect_content_issues
from .industry import detect_industry_issues
from .language import detect_language_quality_issues
from .regional import detect_regional_issues
from .typography import detect_typography_issues

# Audit order; issue lists and report sections follow it.
DEFAULT_DETECTORS: tuple[Detector, ...] = (
    detect_typography_issues,
    detect_content_issues,
    detect_regional_issues,
    detect_chronology_issues,
    detect_contact_issues,
    detect_ats_issues,
    detect_industry_issues,
    detect_language_quality_issues,
)

# Cheap subset used for live feedback while the user types.
QUICK_CHECK_DETECTORS: tuple[Detector, ...] = (
    detect_contact_issues,
    detect_regional_issues,
    detect_content_issues,
)

__all__ = [
    "DEFAULT_DETECTORS",
    "QUICK_CHECK_DETECTORS",
    "DetectionContext",
    "Detector",
    "detect_ats_issues",
    "detect_chronology_issues",
    "detect_contact_issues",
    "detect_content_issues",
    "detect_industry_issues",
    "detect_language_quality_issues",
    "detect_regional_issues",
    "detect_typography_issues",
    "find_decorative_glyph",
    "has_tabular_layout",
]
