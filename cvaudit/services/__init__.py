from .audit_service import (
    AuditEngine,
    ScoringSettings,
    analyze,
    build_default_engine,
    get_default_engine,
    quick_check,
)
from .coach_report import generate_coach_report
from .highlights import build_field_highlights

__all__ = [
    "AuditEngine",
    "ScoringSettings",
    "analyze",
    "build_default_engine",
    "build_field_highlights",
    "generate_coach_report",
    "get_default_engine",
    "quick_check",
]
