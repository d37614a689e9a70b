"""Analysis core: normalized documents, aggregation and the report model."""

from lintbase.core.aggregate import AnalysisOptions, group_by_collection
from lintbase.core.models import (
    CollectionStats,
    FieldValue,
    Issue,
    NormalizedDocument,
    Report,
    ReportSummary,
    ScanResult,
    Severity,
    TypeTag,
)

__all__ = [
    "AnalysisOptions",
    "CollectionStats",
    "FieldValue",
    "Issue",
    "NormalizedDocument",
    "Report",
    "ReportSummary",
    "ScanResult",
    "Severity",
    "TypeTag",
    "group_by_collection",
]
