from __future__ import annotations

from cvaudit.rules import CountryRuleTable, get_default_country_table
from cvaudit.schemas.audit import ISSUE_TYPES, Audit, Issue, ReadinessLevel

READINESS_LABELS: dict[ReadinessLevel, str] = {
    "not_ready": "🔴 Not ready to send",
    "needs_work": "🟠 Needs work",
    "almost_ready": "🟡 Almost ready",
    "ready": "🟢 Ready to send",
    "excellent": "🌟 Excellent",
}

CATEGORY_LABELS: dict[str, str] = {
    "typography": "📝 Typography",
    "content": "📄 Content",
    "regional": "🌍 Regional fit",
    "chronology": "📅 Chronology",
    "contact": "📇 Contact",
    "ats": "🤖 ATS compatibility",
    "industry": "🏢 Industry",
    "language": "🗣️ Language",
}


def _category_status(count: int) -> str:
    if count == 0:
        return "✅"
    if count <= 2:
        return "⚠️"
    return "❌"


def _critical_block(issue: Issue) -> list[str]:
    lines = [f"### ❌ {issue.message}"]
    if issue.field:
        lines.append(f"📍 Field: `{issue.field}`")
    if issue.suggestion:
        lines.append(f"💡 **Fix:** {issue.suggestion}")
    lines.append(f"⚠️ Impact: -{issue.score_penalty} points")
    lines.append("")
    return lines


def _warning_bullet(issue: Issue) -> str:
    line = f"- **{issue.message}**"
    if issue.suggestion:
        line += f" → {issue.suggestion}"
    return f"{line} (-{issue.score_penalty} pts)"


def _plain_bullet(issue: Issue) -> str:
    if issue.suggestion:
        return f"- {issue.message}: {issue.suggestion}"
    return f"- {issue.message}"


def generate_coach_report(
    audit: Audit,
    user_name: str = "there",
    *,
    country_table: CountryRuleTable | None = None,
) -> str:
    """Render an audit as a markdown coaching report.

    The output depends only on the audit (the footer uses ``audit.timestamp``),
    so rendering the same audit twice yields identical text.
    """
    table = country_table or get_default_country_table()
    country = table.country_name(audit.target_country)
    name = user_name.strip() or "there"

    lines: list[str] = [
        f"# 🎯 CV audit for {name}",
        "",
        f"**Overall score: {audit.score}/100** (grade {audit.grade})",
        f"**Estimated ATS score: {audit.estimated_ats_score}/100**",
        f"**Target market: {country} ({audit.target_country})**",
        "",
        f"**Status: {READINESS_LABELS[audit.readiness_level]}**",
        "",
        "---",
        "",
        "## 📊 Summary",
        "",
        "| Category | Issues |",
        "|----------|--------|",
        f"| 🔴 Critical errors | {len(audit.critical_errors)} |",
        f"| 🟠 Warnings | {len(audit.warnings)} |",
        f"| 🔵 Improvements | {len(audit.improvements)} |",
        f"| ℹ️ Tips | {len(audit.info)} |",
        "",
    ]

    if audit.critical_errors:
        lines += ["## 🚨 Critical errors (fix these first)", ""]
        for issue in audit.critical_errors:
            lines += _critical_block(issue)

    if audit.warnings:
        lines += ["## ⚠️ Warnings", ""]
        lines += [_warning_bullet(issue) for issue in audit.warnings]
        lines.append("")

    if audit.improvements:
        lines += ["## 💡 Suggested improvements", ""]
        lines += [_plain_bullet(issue) for issue in audit.improvements]
        lines.append("")

    if audit.info:
        lines += ["## ℹ️ Tips", ""]
        lines += [_plain_bullet(issue) for issue in audit.info]
        lines.append("")

    breakdown = audit.category_breakdown
    lines += ["## 📈 Breakdown by category", ""]
    for issue_type in ISSUE_TYPES:
        count = getattr(breakdown, issue_type)
        suffix = "issue" if count == 1 else "issues"
        lines.append(f"{CATEGORY_LABELS[issue_type]}: {_category_status(count)} ({count} {suffix})")

    lines += [
        "",
        "---",
        f"*Report generated on {audit.timestamp.isoformat()}*",
    ]
    return "\n".join(lines) + "\n"
