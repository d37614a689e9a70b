"""Performance analyzer: document shapes that hurt query latency or hit platform limits.

Rules:
  perf/excessive-nesting       - depth > 5 (error), depth > 3 (warning)
  perf/document-too-large      - single doc > 500 KB (error), > 50 KB (warning)
  perf/avg-document-large      - collection average > 100 KB (warning)
  perf/sampling-limit-reached  - sample came back exactly at the limit (info)
"""

from lintbase.analyzers.base import cap_affected
from lintbase.core.aggregate import AnalysisOptions, group_by_collection, round_half_up
from lintbase.core.models import Issue, ScanResult, Severity
from lintbase.utils.logging import logger

MAX_RECOMMENDED_DEPTH = 5
WARN_DEPTH = 3
ERROR_SIZE_BYTES = 500 * 1024
WARN_SIZE_BYTES = 50 * 1024
WARN_AVG_BYTES = 100 * 1024


def analyze(result: ScanResult, options: AnalysisOptions) -> list[Issue]:
    """Check nesting depth, document sizes and sample saturation."""
    issues: list[Issue] = []

    for col, stats in group_by_collection(result).items():
        if stats.count == 0:
            continue

        if stats.max_depth > MAX_RECOMMENDED_DEPTH:
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule="perf/excessive-nesting",
                    message=(
                        f'"{col}" contains documents nested {stats.max_depth} levels deep '
                        f"(recommended max: {MAX_RECOMMENDED_DEPTH})."
                    ),
                    affected_documents=cap_affected(
                        d for d in stats.docs if d.depth > MAX_RECOMMENDED_DEPTH
                    ),
                    suggestion=(
                        "Flatten deeply nested objects into separate sub-collections or "
                        "top-level fields. Nested fields are expensive to index and filter on."
                    ),
                )
            )
        elif stats.max_depth > WARN_DEPTH:
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    collection=col,
                    rule="perf/excessive-nesting",
                    message=(
                        f'"{col}" documents reach a nesting depth of {stats.max_depth}. '
                        f"Consider keeping nesting <= {WARN_DEPTH} for optimal query performance."
                    ),
                    affected_documents=cap_affected(d for d in stats.docs if d.depth > WARN_DEPTH),
                    suggestion=(
                        "Deep nesting makes composite indexes necessary and increases document "
                        "read cost. Prefer flat structures where possible."
                    ),
                )
            )

        oversized = [d for d in stats.docs if d.size_bytes > ERROR_SIZE_BYTES]
        large = [d for d in stats.docs if WARN_SIZE_BYTES < d.size_bytes <= ERROR_SIZE_BYTES]

        if oversized:
            largest = max(d.size_bytes for d in oversized)
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule="perf/document-too-large",
                    message=(
                        f'{len(oversized)} document(s) in "{col}" exceed 500 KB '
                        f"(hard limit: 1 MB). Largest: {round_half_up(largest / 1024)} KB."
                    ),
                    affected_documents=cap_affected(oversized),
                    suggestion=(
                        "Split large documents into smaller ones or move blob/array data to "
                        "object storage."
                    ),
                )
            )

        if large:
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    collection=col,
                    rule="perf/document-too-large",
                    message=f'{len(large)} document(s) in "{col}" are between 50 KB and 500 KB.',
                    affected_documents=cap_affected(large),
                    suggestion=(
                        "Large documents increase read latency and bandwidth cost. Consider "
                        "splitting or archiving old data."
                    ),
                )
            )

        if stats.avg_bytes > WARN_AVG_BYTES:
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    collection=col,
                    rule="perf/avg-document-large",
                    message=(
                        f'"{col}" has an average document size of '
                        f"{round_half_up(stats.avg_bytes / 1024)} KB."
                    ),
                    suggestion=(
                        "High average document size drives up read bandwidth costs. Consider "
                        "pagination, partial reads, or moving large fields to a sub-collection."
                    ),
                )
            )

        if stats.count == options.limit:
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    collection=col,
                    rule="perf/sampling-limit-reached",
                    message=(
                        f'"{col}" returned exactly {options.limit} documents - the sampling '
                        "limit. This collection likely has more data that was not analyzed."
                    ),
                    suggestion=(
                        f'Run with a higher --limit (e.g. --limit {options.limit * 5}) for a more '
                        f'complete picture of "{col}".'
                    ),
                )
            )

    logger.debug("performance analyzer emitted {n} issue(s)", n=len(issues))
    return issues
