from __future__ import annotations

from cvaudit.schemas.audit import ISSUE_CATEGORIES, Audit, FieldHighlight, Issue

_SEVERITY_RANK = {category: rank for rank, category in enumerate(ISSUE_CATEGORIES)}


def build_field_highlights(audit: Audit) -> dict[str, FieldHighlight]:
    """Group an audit's issues by the profile field they point at.

    Fields keep the order in which they first appear in the audit; issues
    without a field are left out.
    """
    grouped: dict[str, list[Issue]] = {}
    for issue in audit.all_issues():
        if not issue.field:
            continue
        grouped.setdefault(issue.field, []).append(issue)

    return {
        field: FieldHighlight(
            field=field,
            severity=min((issue.category for issue in issues), key=_SEVERITY_RANK.__getitem__),
            issues=tuple(issues),
        )
        for field, issues in grouped.items()
    }
