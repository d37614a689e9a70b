"""Fixed analyzer catalog.

Each analyzer is a pure function (ScanResult, AnalysisOptions) -> list[Issue].
The catalog order is the concatenation order of issues in a report.
"""

from lintbase.analyzers import cost, performance, schema_drift, security
from lintbase.analyzers.base import AnalyzerFunction, AnalyzerKind

ANALYZERS: tuple[tuple[AnalyzerKind, AnalyzerFunction], ...] = (
    (AnalyzerKind.SCHEMA, schema_drift.analyze),
    (AnalyzerKind.PERFORMANCE, performance.analyze),
    (AnalyzerKind.SECURITY, security.analyze),
    (AnalyzerKind.COST, cost.analyze),
)

__all__ = ["ANALYZERS", "AnalyzerFunction", "AnalyzerKind"]
