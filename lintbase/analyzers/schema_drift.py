"""Schema consistency analyzer.

Rules:
  schema/empty-collection     - nothing sampled, schema cannot be analyzed (info)
  schema/field-type-mismatch  - one field holds more than one type (error)
  schema/sparse-field         - field present in < 60% (warning) or < 80% (info) of docs
  schema/high-field-variance  - per-document field counts vary widely (warning)
"""

from lintbase.core.aggregate import AnalysisOptions, group_by_collection, round_half_up
from lintbase.core.models import Issue, ScanResult, Severity
from lintbase.utils.logging import logger

SPARSE_WARN_PRESENCE = 0.6
SPARSE_INFO_PRESENCE = 0.8
MIN_FIELD_VARIANCE = 3


def analyze(result: ScanResult, options: AnalysisOptions) -> list[Issue]:
    """Check field types, presence and shape variance per collection."""
    issues: list[Issue] = []

    for col, stats in group_by_collection(result).items():
        if stats.count == 0:
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    collection=col,
                    rule="schema/empty-collection",
                    message=f'No documents were sampled from "{col}" - schema cannot be analyzed.',
                    suggestion=(
                        "Ensure the collection contains data, or check that the credentials "
                        "used for the scan are allowed to read it."
                    ),
                )
            )
            continue

        # dicts double as insertion-ordered sets
        field_types: dict[str, dict[str, None]] = {}
        field_counts: dict[str, int] = {}
        fields_per_doc: list[int] = []

        for doc in stats.docs:
            for name, field_value in doc.fields.items():
                tag = getattr(field_value.type, "value", field_value.type)
                field_types.setdefault(name, {})[tag] = None
                field_counts[name] = field_counts.get(name, 0) + 1
            fields_per_doc.append(len(doc.fields))

        for name, types in field_types.items():
            if len(types) > 1:
                issues.append(
                    Issue(
                        severity=Severity.ERROR,
                        collection=col,
                        rule="schema/field-type-mismatch",
                        message=(
                            f'Field "{name}" in "{col}" has {len(types)} different types: '
                            f"[{', '.join(types)}]."
                        ),
                        suggestion=(
                            "Normalize this field to a single type. Schema drift makes queries "
                            "unreliable and is hard to fix at scale."
                        ),
                    )
                )

        for name, count in field_counts.items():
            presence = count / stats.count
            percent = round_half_up(presence * 100)
            if presence < SPARSE_WARN_PRESENCE:
                issues.append(
                    Issue(
                        severity=Severity.WARNING,
                        collection=col,
                        rule="schema/sparse-field",
                        message=(
                            f'Field "{name}" in "{col}" is present in only '
                            f"{count}/{stats.count} documents ({percent}%)."
                        ),
                        suggestion=(
                            "Add a default value or mark the field as optional in your "
                            "application model to prevent runtime null errors."
                        ),
                    )
                )
            elif presence < SPARSE_INFO_PRESENCE:
                issues.append(
                    Issue(
                        severity=Severity.INFO,
                        collection=col,
                        rule="schema/sparse-field",
                        message=(
                            f'Field "{name}" in "{col}" is present in '
                            f"{count}/{stats.count} documents ({percent}%)."
                        ),
                        suggestion=(
                            "Track optional fields explicitly in your data model to avoid "
                            "unexpected missing-field reads."
                        ),
                    )
                )

        if len(fields_per_doc) > 1:
            low, high = min(fields_per_doc), max(fields_per_doc)
            if high > 0 and high - low > max(MIN_FIELD_VARIANCE, low * 0.5):
                issues.append(
                    Issue(
                        severity=Severity.WARNING,
                        collection=col,
                        rule="schema/high-field-variance",
                        message=(
                            f'Documents in "{col}" have between {low} and {high} fields - '
                            "high structural variance."
                        ),
                        suggestion=(
                            "High field variance is a sign of schema drift over time. Consider "
                            "a migration or a schema validation layer."
                        ),
                    )
                )

    logger.debug("schema analyzer emitted {n} issue(s)", n=len(issues))
    return issues
