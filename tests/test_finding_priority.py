"""Tests for issue ordering and filtering."""

import pytest

from lintbase.core.models import Issue, Severity
from lintbase.utils.finding_priority import (
    count_by_severity,
    filter_issues,
    normalize_severity,
    sort_issues,
)


def _issue(severity, collection, rule="schema/sparse-field"):
    return Issue(severity=severity, collection=collection, rule=rule, message=f"{rule} on {collection}")


@pytest.fixture
def issues():
    return [
        _issue(Severity.INFO, "a", "cost/collection-at-limit"),
        _issue(Severity.WARNING, "c", "schema/sparse-field"),
        _issue(Severity.ERROR, "b", "security/field-contains-secret"),
        _issue(Severity.WARNING, "a", "perf/excessive-nesting"),
        _issue(Severity.ERROR, "a", "security/sensitive-collection"),
    ]


class TestNormalizeSeverity:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (Severity.ERROR, "error"),
            ("warning", "warning"),
            ("WARN", "warning"),
            (" err ", "error"),
            ("note", "info"),
            ("unknown", "info"),
        ],
    )
    def test_aliases(self, raw, expected):
        assert normalize_severity(raw) == expected


class TestSortIssues:
    def test_severity_then_collection(self, issues):
        ordered = sort_issues(issues)

        assert [(i.severity, i.collection) for i in ordered] == [
            ("error", "a"),
            ("error", "b"),
            ("warning", "a"),
            ("warning", "c"),
            ("info", "a"),
        ]

    def test_collection_order_ignores_case(self):
        upper = _issue(Severity.ERROR, "Users")
        lower = _issue(Severity.ERROR, "apple")

        assert [i.collection for i in sort_issues([upper, lower])] == ["apple", "Users"]

    def test_stable_within_same_key(self):
        first = _issue(Severity.ERROR, "a", "schema/field-type-mismatch")
        second = _issue(Severity.ERROR, "a", "security/field-contains-secret")

        assert sort_issues([first, second]) == [first, second]

    def test_input_not_modified(self, issues):
        snapshot = list(issues)
        sort_issues(issues)

        assert issues == snapshot


class TestFilterIssues:
    def test_no_criteria_keeps_everything(self, issues):
        assert filter_issues(issues) == issues

    def test_by_severity(self, issues):
        assert {i.rule for i in filter_issues(issues, severity="error")} == {
            "security/field-contains-secret",
            "security/sensitive-collection",
        }

    def test_by_collection(self, issues):
        assert len(filter_issues(issues, collection="a")) == 3

    def test_by_rule_prefix(self, issues):
        assert [i.collection for i in filter_issues(issues, rule_prefix="security/")] == ["b", "a"]

    def test_criteria_combine(self, issues):
        matched = filter_issues(issues, severity="warning", collection="a", rule_prefix="perf/")

        assert [i.rule for i in matched] == ["perf/excessive-nesting"]


def test_count_by_severity(issues):
    assert count_by_severity(issues) == {"error": 2, "warning": 2, "info": 1}
    assert count_by_severity([]) == {"error": 0, "warning": 0, "info": 0}
