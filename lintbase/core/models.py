"""Data model shared by connectors, analyzers and reporters.

Connector-side shapes (documents, scan results, per-collection stats) are plain
dataclasses. Everything that crosses the process boundary (issues and the
report) is a frozen pydantic model serialized with camelCase keys, because the
dashboard and CI consumers key off those names.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TypeTag(str, Enum):
    """Closed set of field type labels inferred by connectors."""

    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "array"
    TIMESTAMP = "timestamp"
    REFERENCE = "reference"
    MAP = "map"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class Severity(str, Enum):
    """Issue severity. Ranked error > warning > info."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class FieldValue:
    """A top-level field value together with its inferred type tag."""

    value: Any
    type: TypeTag


@dataclass(frozen=True)
class NormalizedDocument:
    """One sampled record, already normalized by a connector."""

    id: str
    collection: str
    fields: dict[str, FieldValue] = field(default_factory=dict)
    depth: int = 1
    size_bytes: int = 0


@dataclass(frozen=True)
class ScanResult:
    """Output of one sampling pass over a database."""

    connector: str
    collections: tuple[str, ...]
    documents: tuple[NormalizedDocument, ...]
    scanned_at: datetime

    def __post_init__(self):
        object.__setattr__(self, "collections", tuple(self.collections))
        object.__setattr__(self, "documents", tuple(self.documents))

    @property
    def document_count(self) -> int:
        return len(self.documents)


@dataclass
class CollectionStats:
    """Per-collection aggregate computed by group_by_collection."""

    docs: list[NormalizedDocument] = field(default_factory=list)
    count: int = 0
    total_bytes: int = 0
    avg_bytes: int = 0
    max_depth: int = 0


class WireModel(BaseModel):
    """Base for immutable models exchanged with reporters and the dashboard."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict using wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Issue(WireModel):
    """A single finding emitted by an analyzer."""

    severity: Severity
    collection: str
    rule: str
    message: str
    affected_documents: tuple[str, ...] | None = None
    suggestion: str | None = None


class ReportSummary(WireModel):
    total_collections: int = Field(ge=0)
    total_documents: int = Field(ge=0)
    errors: int = Field(ge=0)
    warnings: int = Field(ge=0)
    infos: int = Field(ge=0)
    risk_score: int = Field(ge=0, le=100)


class Report(WireModel):
    """Top-level scan outcome handed to presentation and persistence."""

    summary: ReportSummary
    issues: tuple[Issue, ...]
    scanned_at: datetime

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
