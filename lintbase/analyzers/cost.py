"""Cost analyzer: patterns that drive unnecessary read/write/storage spend.

Rules:
  cost/large-avg-document     - average doc > 5 KB (warning), > 50 KB (error)
  cost/logging-sink           - collection name looks like an unbounded log (error)
  cost/redundant-collections  - collections with matching size/depth fingerprints (warning)
  cost/collection-at-limit    - sample came back exactly at the limit (info)
"""

from lintbase.analyzers.base import PatternTable
from lintbase.core.aggregate import AnalysisOptions, group_by_collection
from lintbase.core.models import CollectionStats, Issue, ScanResult, Severity
from lintbase.utils.logging import logger

ERROR_AVG_BYTES = 50 * 1024
WARN_AVG_BYTES = 5 * 1024
REDUNDANT_BYTE_TOLERANCE = 0.15

LOG_SINKS = PatternTable.compile(
    "cost/logging-sink",
    [
        r"^console",
        r"^logs?$",
        r"^audit",
        r"^events?$",
        r"^request(get|post|put|delete|patch)$",
        r"payload",
        r"^traces?$",
        r"^webhook",
        r"^analytics",
    ],
)


def is_redundant_pair(anchor: CollectionStats, other: CollectionStats) -> bool:
    """Same max depth and average size within tolerance of the anchor's."""
    if anchor.avg_bytes <= 0:
        return False
    byte_ratio = abs(anchor.avg_bytes - other.avg_bytes) / anchor.avg_bytes
    return byte_ratio <= REDUNDANT_BYTE_TOLERANCE and anchor.max_depth == other.max_depth


def find_redundant_groups(stats_by_collection: dict[str, CollectionStats]) -> list[list[str]]:
    """Greedy single-pass grouping anchored on the first member of each group.

    Later collections are compared to the anchor only, never to other members,
    so A~B and B~C does not pull C in when A and C differ by more than the
    tolerance.
    """
    candidates = [(col, s) for col, s in stats_by_collection.items() if s.count > 0]
    grouped: set[str] = set()
    groups: list[list[str]] = []

    for i, (anchor_col, anchor) in enumerate(candidates):
        if anchor_col in grouped:
            continue
        group = [anchor_col]
        for other_col, other in candidates[i + 1 :]:
            if other_col not in grouped and is_redundant_pair(anchor, other):
                group.append(other_col)
                grouped.add(other_col)
        if len(group) > 1:
            grouped.update(group)
            groups.append(group)

    return groups


def analyze(result: ScanResult, options: AnalysisOptions) -> list[Issue]:
    """Check average sizes, sink-like names, redundancy and sample saturation."""
    issues: list[Issue] = []
    stats_by_collection = group_by_collection(result)

    for col, stats in stats_by_collection.items():
        if stats.count == 0:
            continue
        avg_kb = stats.avg_bytes / 1024
        if stats.avg_bytes > ERROR_AVG_BYTES:
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule="cost/large-avg-document",
                    message=(
                        f'"{col}" has an average document size of {avg_kb:.1f} KB. '
                        "At scale this will significantly increase read bandwidth costs."
                    ),
                    suggestion=(
                        "Move large blob fields (arrays, embedded maps, base64 strings) to object "
                        "storage or a separate sub-collection, and use partial reads to avoid "
                        "transferring unused fields."
                    ),
                )
            )
        elif stats.avg_bytes > WARN_AVG_BYTES:
            issues.append(
                Issue(
                    severity=Severity.WARNING,
                    collection=col,
                    rule="cost/large-avg-document",
                    message=f'"{col}" average document size is {avg_kb:.1f} KB.',
                    suggestion=(
                        "Consider splitting large documents or using sub-collections for "
                        "frequently-updated sub-objects."
                    ),
                )
            )

    # The name alone is the signal, so empty collections are included.
    for col in stats_by_collection:
        if LOG_SINKS.matches(col):
            issues.append(
                Issue(
                    severity=Severity.ERROR,
                    collection=col,
                    rule=LOG_SINKS.rule,
                    message=(
                        f'"{col}" appears to be used as a logging or event sink. Every document '
                        "write is billed, so unbounded logging here will compound costs."
                    ),
                    suggestion=(
                        "Use a dedicated logging or analytics service instead. If the data must "
                        "stay here, add a TTL policy or scheduled cleanup for old documents."
                    ),
                )
            )

    for group in find_redundant_groups(stats_by_collection):
        members = ", ".join(f'"{c}"' for c in group)
        issues.append(
            Issue(
                severity=Severity.WARNING,
                collection=group[0],
                rule="cost/redundant-collections",
                message=(
                    f"Collections [{members}] have near-identical average document sizes and "
                    "nesting depth - they likely store the same schema."
                ),
                suggestion=(
                    'Merge redundant collections into one, using a "type" or "method" field to '
                    "tell records apart. This cuts index count and simplifies access rules."
                ),
            )
        )

    for col, stats in stats_by_collection.items():
        if stats.count == options.limit:
            issues.append(
                Issue(
                    severity=Severity.INFO,
                    collection=col,
                    rule="cost/collection-at-limit",
                    message=(
                        f'"{col}" hit the {options.limit}-document sampling cap - actual size '
                        "is unknown."
                    ),
                    suggestion=(
                        "If this collection grows unbounded, archive or delete old documents on a "
                        f"schedule. Run with --limit {options.limit * 5} for a fuller cost picture."
                    ),
                )
            )

    logger.debug("cost analyzer emitted {n} issue(s)", n=len(issues))
    return issues
