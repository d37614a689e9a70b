"""Centralized issue ordering and filtering for display and queries."""

from collections.abc import Iterable

from lintbase.core.models import Issue, Severity

PRIORITY_ORDER = {
    "error": 0,
    "warning": 1,
    "info": 2,
}

SEVERITY_MAPPINGS = {
    "err": "error",
    "errors": "error",
    "warn": "warning",
    "warnings": "warning",
    "infos": "info",
    "note": "info",
}


def normalize_severity(severity_value) -> str:
    """Normalize a Severity, its value, or a common alias to 'error'|'warning'|'info'."""
    if isinstance(severity_value, Severity):
        return severity_value.value

    severity_str = str(severity_value).lower().strip()
    if severity_str in PRIORITY_ORDER:
        return severity_str
    return SEVERITY_MAPPINGS.get(severity_str, "info")


def get_sort_key(issue: Issue) -> tuple[int, str, str]:
    """Severity rank first, then collection name ignoring case."""
    return (
        PRIORITY_ORDER[normalize_severity(issue.severity)],
        issue.collection.casefold(),
        issue.collection,
    )


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Sort issues errors -> warnings -> infos, then by collection (stable)."""
    return sorted(issues, key=get_sort_key)


def filter_issues(
    issues: Iterable[Issue],
    severity: str | None = None,
    collection: str | None = None,
    rule_prefix: str | None = None,
) -> list[Issue]:
    """Keep issues matching every given criterion. None means 'any'."""
    wanted = normalize_severity(severity) if severity else None
    result = []
    for issue in issues:
        if wanted and normalize_severity(issue.severity) != wanted:
            continue
        if collection and issue.collection != collection:
            continue
        if rule_prefix and not issue.rule.startswith(rule_prefix):
            continue
        result.append(issue)
    return result


def count_by_severity(issues: Iterable[Issue]) -> dict[str, int]:
    counts = dict.fromkeys(PRIORITY_ORDER, 0)
    for issue in issues:
        counts[normalize_severity(issue.severity)] += 1
    return counts
