"""Security analyzer: name-based heuristics for sensitive and leftover data.

Rules:
  security/sensitive-collection      - collection name suggests PII / financial data (error)
  security/debug-data-in-production  - collection name suggests debug / test data (error)
  security/stub-auth-collection      - auth-like collection with few, tiny docs (warning)
  security/field-contains-secret     - field name suggests a stored secret (error)
"""

import re

from lintbase.analyzers.base import PatternTable
from lintbase.core.aggregate import AnalysisOptions, group_by_collection
from lintbase.core.models import Issue, ScanResult, Severity
from lintbase.utils.logging import logger

SENSITIVE_COLLECTIONS = PatternTable.compile(
    "security/sensitive-collection",
    [
        r"^bank",
        r"credit",
        r"payment",
        r"invoice",
        r"billing",
        r"ssn",
        r"passport",
        r"secret",
        r"password",
        r"private",
        r"token",
        r"api.?key",
        r"credential",
        r"account.?info",
    ],
)

DEBUG_COLLECTIONS = PatternTable.compile(
    "security/debug-data-in-production",
    [
        r"^console",
        r"^logs?$",
        r"^debug",
        r"^test",
        r"^temp",
        r"^request(get|post|put|delete|patch)$",
        r"payload",
        r"webhook\s*log",
        r"^dev",
    ],
)

# Anchored on ASCII word boundaries: "businessName" must not hit ssn, "pinCode" must not hit
# pin, while accented letters still count as separators ("épin" hits pin).
SENSITIVE_FIELDS = PatternTable.compile(
    "security/field-contains-secret",
    [
        r"\bpassword\b",
        r"\bpasswd\b",
        r"\bsecret\b",
        r"\bapi[_-]?key\b",
        r"\bprivate[_-]?key\b",
        r"\btoken\b",
        r"\bssn\b",
        r"\bcredit[_-]?card\b",
        r"\bcvv\b",
        r"\b(card[_-]?)?pin\b",
    ],
    flags=re.ASCII,
)

AUTH_COLLECTION_NAMES = re.compile(r"^(users?|accounts?|membres?|members?)$", re.IGNORECASE)
STUB_AUTH_MAX_DOCS = 3
STUB_AUTH_MAX_AVG_BYTES = 50


def analyze(result: ScanResult, options: AnalysisOptions) -> list[Issue]:
    """Match collection and field names against the fixed pattern tables."""
    issues: list[Issue] = []

    for col, stats in group_by_collection(result).items():
        matched = SENSITIVE_COLLECTIONS.first_match(col)
        if matched:
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule=SENSITIVE_COLLECTIONS.rule,
                    message=(
                        f'Collection "{col}" appears to store sensitive data '
                        f"(matched pattern: {matched.pattern})."
                    ),
                    suggestion=(
                        "Verify that database access rules restrict reads to authenticated "
                        "users only. Consider encrypting sensitive fields at the application "
                        "layer before writing them."
                    ),
                )
            )

        matched = DEBUG_COLLECTIONS.first_match(col)
        if matched:
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule=DEBUG_COLLECTIONS.rule,
                    message=(
                        f'Collection "{col}" looks like debug or test data left in production '
                        f"(matched pattern: {matched.pattern})."
                    ),
                    suggestion=(
                        "Delete or archive this collection. Debug data may expose internal "
                        "request/response payloads and accumulates unbounded write costs."
                    ),
                )
            )

        if (
            AUTH_COLLECTION_NAMES.match(col)
            and stats.count < STUB_AUTH_MAX_DOCS
            and stats.avg_bytes < STUB_AUTH_MAX_AVG_BYTES
        ):
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    collection=col,
                    rule="security/stub-auth-collection",
                    message=(
                        f'"{col}" looks like an auth/user collection but contains very few, '
                        f"tiny documents ({stats.count} docs, avg {stats.avg_bytes} bytes). "
                        "It may be a stub or orphaned."
                    ),
                    suggestion=(
                        "Confirm whether user data is stored here or in your auth provider. "
                        "Orphaned collections make access-rule coverage confusing."
                    ),
                )
            )

        if stats.count == 0:
            continue

        field_names: dict[str, None] = {}
        for doc in stats.docs:
            field_names.update(dict.fromkeys(doc.fields))

        for name in field_names:
            if SENSITIVE_FIELDS.matches(name):
                issues.append(
                    Issue(
                        severity=Severity.ERROR,
                        collection=col,
                        rule=SENSITIVE_FIELDS.rule,
                        message=(
                            f'Field "{name}" in "{col}" has a name that suggests it stores a '
                            "secret or PII value."
                        ),
                        suggestion=(
                            "Never store raw passwords, tokens or PII. Hash passwords, keep "
                            "credentials in your auth provider, and encrypt PII before storage."
                        ),
                    )
                )

    logger.debug("security analyzer emitted {n} issue(s)", n=len(issues))
    return issues
