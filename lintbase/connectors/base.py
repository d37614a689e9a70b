"""Connector contract and the normalization helpers every connector shares.

Analyzers stay database-agnostic because connectors only hand them
NormalizedDocument / ScanResult shapes.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from lintbase.core.models import FieldValue, NormalizedDocument, ScanResult, TypeTag
from lintbase.exceptions import ConnectorError
from lintbase.utils.logging import logger


class _Undefined:
    """Marker for a field that exists but holds no value."""

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def infer_type(value: Any) -> TypeTag:
    """Classify a raw field value into exactly one TypeTag."""
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, (datetime, date)):
        return TypeTag.TIMESTAMP
    if callable(getattr(value, "to_datetime", None)):
        return TypeTag.TIMESTAMP
    if hasattr(value, "path") and hasattr(value, "id"):
        return TypeTag.REFERENCE
    if isinstance(value, Mapping):
        return TypeTag.MAP
    # bool is an int subclass, so it has to be checked first
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    return TypeTag.MAP


def calculate_depth(data: Mapping, current: int = 1) -> int:
    """Maximum nesting depth of a document's value tree.

    A document without nested maps has depth 1. Each non-empty map inside a
    map adds one level. Arrays and empty maps do not add depth.
    """
    depth = current
    for value in data.values():
        if isinstance(value, Mapping) and value:
            depth = max(depth, calculate_depth(value, current + 1))
    return depth


def estimate_size_bytes(data: Mapping) -> int:
    """Approximate serialized size: UTF-8 length of compact JSON."""
    try:
        encoded = json.dumps(data, default=str, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.debug("size estimate failed: {err}", err=str(e))
        return 0
    return len(encoded.encode("utf-8"))


def map_document(doc_id: Any, collection: str, data: Mapping) -> NormalizedDocument:
    """Normalize one raw document into the shape analyzers consume."""
    fields = {key: FieldValue(value=value, type=infer_type(value)) for key, value in data.items()}
    return NormalizedDocument(
        id=str(doc_id),
        collection=collection,
        fields=fields,
        depth=calculate_depth(data),
        size_bytes=estimate_size_bytes(data),
    )


class BaseConnector(ABC):
    """Base class for all database connectors.

    Subclasses implement connect / get_collections / sample_documents;
    scan() orchestrates them into a ScanResult.
    """

    name: str = "base"

    @abstractmethod
    def connect(self) -> None:
        """Establish a connection. Raise ConnectorError with a hint on failure."""

    @abstractmethod
    def get_collections(self) -> list[str]:
        """Return the top-level collection names."""

    @abstractmethod
    def sample_documents(self, collection: str, limit: int) -> list[NormalizedDocument]:
        """Sample at most `limit` documents. Never read more than `limit`."""

    def select_collections(self, collections: list[str] | None = None) -> list[str]:
        """Discover collections and apply an optional allow-list.

        Discovery order is preserved. Raises ConnectorError if the allow-list
        matches nothing.
        """
        available = self.get_collections()
        if not collections:
            return available

        wanted = set(collections)
        selected = [c for c in available if c in wanted]
        if not selected:
            raise ConnectorError(
                f"None of the specified collections [{', '.join(collections)}] exist in this database.",
                hint=f"Available collections: {', '.join(available) or '(none)'}",
            )
        return selected

    def sample(self, collections: list[str], limit: int) -> ScanResult:
        """Sample every collection in order and wrap the result."""
        documents: list[NormalizedDocument] = []
        for collection in collections:
            sampled = self.sample_documents(collection, limit)
            logger.debug(
                "sampled {n} document(s) from {col}", n=len(sampled), col=collection
            )
            documents.extend(sampled)

        return ScanResult(
            connector=self.name,
            collections=tuple(collections),
            documents=tuple(documents),
            scanned_at=datetime.now(timezone.utc),
        )

    def scan(self, limit: int, collections: list[str] | None = None) -> ScanResult:
        """Connect, discover, filter and sample in one call."""
        self.connect()
        selected = self.select_collections(collections)
        logger.info(
            "{connector}: scanning {n} collection(s), limit {limit}",
            connector=self.name,
            n=len(selected),
            limit=limit,
        )
        return self.sample(selected, limit)
