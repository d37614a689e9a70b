"""Shared contracts for the fixed analyzer catalog."""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from lintbase.core.aggregate import AnalysisOptions
from lintbase.core.models import Issue, NormalizedDocument, ScanResult

# Upper bound on document ids attached to a single issue.
MAX_AFFECTED_DOCUMENTS = 5


class AnalyzerKind(str, Enum):
    """The four analyzers. Values are the rule-id namespaces they emit."""

    SCHEMA = "schema"
    PERFORMANCE = "perf"
    SECURITY = "security"
    COST = "cost"


AnalyzerFunction = Callable[[ScanResult, AnalysisOptions], list[Issue]]


@dataclass(frozen=True)
class PatternTable:
    """Ordered, case-insensitive name patterns bound to one rule id."""

    rule: str
    patterns: tuple[re.Pattern, ...]

    @classmethod
    def compile(cls, rule: str, expressions: Iterable[str], flags: int = 0) -> "PatternTable":
        return cls(rule, tuple(re.compile(expr, re.IGNORECASE | flags) for expr in expressions))

    def first_match(self, name: str) -> re.Pattern | None:
        """Return the first pattern that matches anywhere in name."""
        for pattern in self.patterns:
            if pattern.search(name):
                return pattern
        return None

    def matches(self, name: str) -> bool:
        return self.first_match(name) is not None


def cap_affected(docs: Iterable[NormalizedDocument]) -> tuple[str, ...]:
    """Ids of the first MAX_AFFECTED_DOCUMENTS documents, in sample order."""
    ids = []
    for doc in docs:
        if len(ids) == MAX_AFFECTED_DOCUMENTS:
            break
        ids.append(doc.id)
    return tuple(ids)
