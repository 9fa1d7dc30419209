from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable

from cvaudit.core.config.scoring import get_scoring_value
from cvaudit.detectors import DEFAULT_DETECTORS, QUICK_CHECK_DETECTORS, DetectionContext, Detector
from cvaudit.rules import CountryRuleTable, get_default_country_table
from cvaudit.schemas.audit import (
    Audit,
    CategoryBreakdown,
    Grade,
    Issue,
    QuickCheckResult,
    ReadinessLevel,
)
from cvaudit.schemas.profile import CVProfile

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class ScoringSettings:
    cap_full: int = 100
    cap_high_ratio: float = 0.7
    cap_high: int = 80
    cap_medium_ratio: float = 0.5
    cap_medium: int = 50
    cap_low: int = 25
    min_summary_chars: int = 30
    min_skills: int = 3
    critical_step: float = 0.15
    critical_floor: float = 0.3
    ats_penalty_factor: float = 1.5
    ats_issue_types: tuple[str, ...] = ("ats", "typography")
    grade_a_plus: float = 95
    grade_a: float = 85
    grade_b: float = 75
    grade_c: float = 60
    grade_d: float = 40
    max_critical_before_not_ready: int = 3
    needs_work_below: float = 50
    almost_ready_below: float = 70
    ready_below: float = 90

    @classmethod
    def from_config(cls) -> ScoringSettings:
        defaults = cls()
        return cls(
            cap_full=int(get_scoring_value("completeness.caps.full", defaults.cap_full)),
            cap_high_ratio=float(get_scoring_value("completeness.caps.high_ratio", defaults.cap_high_ratio)),
            cap_high=int(get_scoring_value("completeness.caps.high", defaults.cap_high)),
            cap_medium_ratio=float(get_scoring_value("completeness.caps.medium_ratio", defaults.cap_medium_ratio)),
            cap_medium=int(get_scoring_value("completeness.caps.medium", defaults.cap_medium)),
            cap_low=int(get_scoring_value("completeness.caps.low", defaults.cap_low)),
            min_summary_chars=int(get_scoring_value("completeness.min_summary_chars", defaults.min_summary_chars)),
            min_skills=int(get_scoring_value("completeness.min_skills", defaults.min_skills)),
            critical_step=float(get_scoring_value("critical_multiplier.step", defaults.critical_step)),
            critical_floor=float(get_scoring_value("critical_multiplier.floor", defaults.critical_floor)),
            ats_penalty_factor=float(get_scoring_value("ats.penalty_factor", defaults.ats_penalty_factor)),
            ats_issue_types=tuple(get_scoring_value("ats.issue_types", list(defaults.ats_issue_types))),
            grade_a_plus=float(get_scoring_value("grades.a_plus", defaults.grade_a_plus)),
            grade_a=float(get_scoring_value("grades.a", defaults.grade_a)),
            grade_b=float(get_scoring_value("grades.b", defaults.grade_b)),
            grade_c=float(get_scoring_value("grades.c", defaults.grade_c)),
            grade_d=float(get_scoring_value("grades.d", defaults.grade_d)),
            max_critical_before_not_ready=int(
                get_scoring_value("readiness.max_critical_before_not_ready", defaults.max_critical_before_not_ready)
            ),
            needs_work_below=float(get_scoring_value("readiness.needs_work_below", defaults.needs_work_below)),
            almost_ready_below=float(get_scoring_value("readiness.almost_ready_below", defaults.almost_ready_below)),
            ready_below=float(get_scoring_value("readiness.ready_below", defaults.ready_below)),
        )


def completeness_ratio(profile: CVProfile, scoring: ScoringSettings) -> float:
    personal = profile.personal
    checks = (
        bool(personal.first_name and personal.last_name),
        bool(personal.title),
        bool(personal.contact.email),
        len(profile.summary) >= scoring.min_summary_chars,
        len(profile.experiences) > 0,
        len(profile.skills) >= scoring.min_skills,
    )
    return sum(checks) / len(checks)


def completeness_cap(ratio: float, scoring: ScoringSettings) -> int:
    if ratio >= 1:
        return scoring.cap_full
    if ratio >= scoring.cap_high_ratio:
        return scoring.cap_high
    if ratio >= scoring.cap_medium_ratio:
        return scoring.cap_medium
    return scoring.cap_low


def critical_multiplier(critical_count: int, scoring: ScoringSettings) -> float:
    if critical_count <= 0:
        return 1.0
    return max(scoring.critical_floor, 1 - critical_count * scoring.critical_step)


def compute_score(max_score: float, issues: list[Issue], critical_count: int, scoring: ScoringSettings) -> float:
    """Unrounded overall score: cap, minus every penalty, times the critical multiplier."""
    score = max_score - sum(issue.score_penalty for issue in issues)
    if critical_count > 0:
        score *= critical_multiplier(critical_count, scoring)
    return _clamp(score)


def compute_ats_score(issues: list[Issue], scoring: ScoringSettings) -> float:
    penalty = sum(
        issue.score_penalty * scoring.ats_penalty_factor
        for issue in issues
        if issue.type in scoring.ats_issue_types
    )
    return _clamp(100 - penalty)


def score_to_grade(score: float, scoring: ScoringSettings) -> Grade:
    if score >= scoring.grade_a_plus:
        return "A+"
    if score >= scoring.grade_a:
        return "A"
    if score >= scoring.grade_b:
        return "B"
    if score >= scoring.grade_c:
        return "C"
    if score >= scoring.grade_d:
        return "D"
    return "F"


def determine_readiness(score: float, critical_count: int, scoring: ScoringSettings) -> ReadinessLevel:
    if critical_count > scoring.max_critical_before_not_ready:
        return "not_ready"
    if critical_count > 0 or score < scoring.needs_work_below:
        return "needs_work"
    if score < scoring.almost_ready_below:
        return "almost_ready"
    if score < scoring.ready_below:
        return "ready"
    return "excellent"


@dataclass(slots=True)
class AuditEngine:
    """Runs the detectors in order and folds their issues into an Audit.

    Holds only read-only state, so one instance can serve concurrent requests.
    """

    country_table: CountryRuleTable
    detectors: tuple[Detector, ...] = DEFAULT_DETECTORS
    quick_detectors: tuple[Detector, ...] = QUICK_CHECK_DETECTORS
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    clock: Clock = _utc_now
    log_issue_ids: bool = False

    def build_context(self, country: str) -> DetectionContext:
        rule = self.country_table.get(country)
        return DetectionContext(
            country_code=rule.code,
            country=rule,
            reference_year=self.clock().year,
        )

    def collect_issues(self, profile: CVProfile, context: DetectionContext) -> list[Issue]:
        issues: list[Issue] = []
        for detector in self.detectors:
            issues.extend(detector(profile, context))
        return issues

    def analyze(self, profile: CVProfile, target_country: str = "FR") -> Audit:
        started = time.perf_counter()
        context = self.build_context(target_country)
        issues = self.collect_issues(profile, context)

        critical = tuple(issue for issue in issues if issue.category == "critical")
        warnings = tuple(issue for issue in issues if issue.category == "warning")
        improvements = tuple(issue for issue in issues if issue.category == "improvement")
        info = tuple(issue for issue in issues if issue.category == "info")

        max_score = completeness_cap(completeness_ratio(profile, self.scoring), self.scoring)
        score = compute_score(max_score, issues, len(critical), self.scoring)
        ats_score = compute_ats_score(issues, self.scoring)

        audit = Audit(
            score=_round_half_up(score),
            grade=score_to_grade(score, self.scoring),
            critical_errors=critical,
            warnings=warnings,
            improvements=improvements,
            info=info,
            total_issues=len(issues),
            category_breakdown=CategoryBreakdown.from_issues(issues),
            timestamp=self.clock(),
            target_country=context.country_code,
            estimated_ats_score=_round_half_up(ats_score),
            readiness_level=determine_readiness(score, len(critical), self.scoring),
        )

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "cv_audit_complete country=%s score=%s ats=%s issues=%s critical=%s elapsed_ms=%.2f",
            audit.target_country,
            audit.score,
            audit.estimated_ats_score,
            audit.total_issues,
            len(critical),
            elapsed_ms,
        )
        if self.log_issue_ids:
            logger.debug("cv_audit_issue_ids ids=%s", [issue.id for issue in issues])
        return audit

    def quick_check(self, profile: CVProfile, country: str = "FR") -> QuickCheckResult:
        """Score a profile from a cheap subset of detectors.

        No completeness cap and no critical multiplier: the result only tracks
        raw penalties so live feedback moves as the user edits.
        """
        context = self.build_context(country)
        issues: list[Issue] = []
        for detector in self.quick_detectors:
            issues.extend(detector(profile, context))

        critical = [issue for issue in issues if issue.category == "critical"]
        score = 100 - sum(issue.score_penalty for issue in issues)
        return QuickCheckResult(
            score=_round_half_up(_clamp(score)),
            critical_count=len(critical),
            top_issue=critical[0].message if critical else None,
        )


def build_default_engine(*, log_issue_ids: bool = False) -> AuditEngine:
    return AuditEngine(
        country_table=get_default_country_table(),
        scoring=ScoringSettings.from_config(),
        log_issue_ids=log_issue_ids,
    )


@lru_cache(maxsize=1)
def get_default_engine() -> AuditEngine:
    return build_default_engine()


def analyze(profile: CVProfile, target_country: str = "FR", *, engine: AuditEngine | None = None) -> Audit:
    return (engine or get_default_engine()).analyze(profile, target_country)


def quick_check(profile: CVProfile, country: str = "FR", *, engine: AuditEngine | None = None) -> QuickCheckResult:
    return (engine or get_default_engine()).quick_check(profile, country)
