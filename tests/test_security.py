"""Tests for the security analyzer.

Field-name matching must be word-boundary anchored; the regressions below
are real collection shapes that used to produce false positives.
"""

import pytest

from lintbase.analyzers import security
from lintbase.analyzers.security import SENSITIVE_FIELDS
from lintbase.core.models import Severity, TypeTag

S = TypeTag.STRING


def _rules(issues, rule):
    return [i for i in issues if i.rule == rule]


class TestSensitiveFields:
    def test_business_name_in_leads_is_not_a_secret(self, make_doc, make_scan, options):
        result = make_scan([make_doc("l1", "Leads", {"businessName": S})])

        issues = _rules(security.analyze(result, options), "security/field-contains-secret")

        assert issues == []

    def test_password_field_yields_one_error(self, make_doc, make_scan, options):
        """Three documents with the same field still produce a single issue."""
        result = make_scan(
            [make_doc(f"l{i}", "Leads", {"password": S, "email": S}) for i in range(3)]
        )

        issues = _rules(security.analyze(result, options), "security/field-contains-secret")

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR
        assert '"password"' in issues[0].message

    @pytest.mark.parametrize(
        "name",
        ["businessName", "streetName", "addressLocation", "pinCode", "tokenizer", "passwordHint"],
    )
    def test_substrings_do_not_match(self, name):
        assert not SENSITIVE_FIELDS.matches(name)

    @pytest.mark.parametrize(
        "name",
        ["password", "PASSWORD", "passwd", "secret", "api_key", "apiKey", "api-key",
         "private_key", "token", "ssn", "credit_card", "cvv", "pin", "card_pin", "user.pin"],
    )
    def test_sensitive_names_match(self, name):
        assert SENSITIVE_FIELDS.matches(name)

    @pytest.mark.parametrize("name", ["épin", "àpassword", "ñtoken"])
    def test_non_ascii_letters_are_word_boundaries(self, name):
        assert SENSITIVE_FIELDS.matches(name)

    def test_fields_reported_in_first_seen_order(self, make_doc, make_scan, options):
        result = make_scan(
            [
                make_doc("u1", "profiles", {"token": S}),
                make_doc("u2", "profiles", {"ssn": S, "token": S}),
            ]
        )

        issues = _rules(security.analyze(result, options), "security/field-contains-secret")

        assert len(issues) == 2
        assert '"token"' in issues[0].message
        assert '"ssn"' in issues[1].message


class TestCollectionNames:
    def test_sensitive_collection_names_matched_pattern(self, make_doc, make_scan, options):
        result = make_scan([make_doc("p1", "customerPayments")])

        issues = _rules(security.analyze(result, options), "security/sensitive-collection")

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR
        assert "payment" in issues[0].message

    def test_bank_is_prefix_anchored(self, make_doc, make_scan, options):
        assert _rules(
            security.analyze(make_scan([make_doc("b1", "bankAccounts")]), options),
            "security/sensitive-collection",
        )
        assert not _rules(
            security.analyze(make_scan([make_doc("b1", "riverbank")]), options),
            "security/sensitive-collection",
        )

    @pytest.mark.parametrize(
        "name",
        ["console", "logs", "log", "debugEvents", "testUsers", "tempData", "requestPost", "devSeed"],
    )
    def test_debug_collections(self, make_doc, make_scan, options, name):
        issues = _rules(
            security.analyze(make_scan([make_doc("d1", name)]), options),
            "security/debug-data-in-production",
        )

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR

    def test_name_checks_are_independent(self, make_doc, make_scan, options):
        """testTokens is both debug data and a sensitive collection."""
        issues = security.analyze(make_scan([make_doc("t1", "testTokens")]), options)

        rules = [i.rule for i in issues]
        assert "security/sensitive-collection" in rules
        assert "security/debug-data-in-production" in rules

    def test_ordinary_collection_is_clean(self, make_doc, make_scan, options):
        result = make_scan([make_doc(f"o{i}", "orders", {"total": TypeTag.NUMBER}) for i in range(5)])

        assert security.analyze(result, options) == []


class TestStubAuthCollection:
    def test_few_tiny_user_docs_warn(self, make_doc, make_scan, options):
        result = make_scan(
            [make_doc("u1", "Users", size_bytes=20), make_doc("u2", "Users", size_bytes=30)]
        )

        issues = _rules(security.analyze(result, options), "security/stub-auth-collection")

        assert len(issues) == 1
        assert issues[0].severity == Severity.WARNING
        assert "2 docs, avg 25 bytes" in issues[0].message

    def test_three_documents_is_enough(self, make_doc, make_scan, options):
        result = make_scan([make_doc(f"u{i}", "users", size_bytes=10) for i in range(3)])

        assert _rules(security.analyze(result, options), "security/stub-auth-collection") == []

    def test_larger_documents_are_not_stubs(self, make_doc, make_scan, options):
        result = make_scan([make_doc("m1", "members", size_bytes=50)])

        assert _rules(security.analyze(result, options), "security/stub-auth-collection") == []

    def test_name_must_match_exactly(self, make_doc, make_scan, options):
        result = make_scan([make_doc("u1", "userSettings", size_bytes=10)])

        assert _rules(security.analyze(result, options), "security/stub-auth-collection") == []
