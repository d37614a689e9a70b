"""Group sampled documents by collection and compute per-collection stats."""

import math
from dataclasses import dataclass

from lintbase.core.models import CollectionStats, ScanResult


@dataclass(frozen=True)
class AnalysisOptions:
    """Options forwarded from the caller to every analyzer.

    limit is the per-collection sampling cap the connector used. Analyzers
    only compare against it; they never truncate anything themselves.
    """

    limit: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def group_by_collection(result: ScanResult) -> dict[str, CollectionStats]:
    """Aggregate a scan result into an ordered map of collection -> stats.

    Every name in result.collections gets an entry, even with zero sampled
    documents. Documents whose collection was not announced get an entry
    created on the fly. Ordering is result.collections first, then any
    collection discovered only through documents. The input is not mutated.
    """
    stats_by_collection: dict[str, CollectionStats] = {
        name: CollectionStats() for name in result.collections
    }

    for doc in result.documents:
        stats = stats_by_collection.get(doc.collection)
        if stats is None:
            stats = stats_by_collection[doc.collection] = CollectionStats()

        stats.docs.append(doc)
        stats.count += 1
        stats.total_bytes += doc.size_bytes
        stats.max_depth = max(stats.max_depth, doc.depth)

    for stats in stats_by_collection.values():
        stats.avg_bytes = round_half_up(stats.total_bytes / stats.count) if stats.count else 0

    return stats_by_collection
