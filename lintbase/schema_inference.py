"""Infer the observed schema of each sampled collection.

Gives callers (humans or agents) the real field names, types and presence
rates instead of guessing them.
"""

from dataclasses import dataclass, field

from lintbase.core.aggregate import group_by_collection, round_half_up
from lintbase.core.models import NormalizedDocument, ScanResult

STABLE_PRESENCE = 0.8
SPARSE_PRESENCE = 0.6


@dataclass
class FieldSchema:
    name: str
    types: list[str]
    presence_rate: float
    stable: bool
    note: str | None = None


@dataclass
class CollectionSchema:
    name: str
    sampled_documents: int
    fields: list[FieldSchema] = field(default_factory=list)


def infer_collection_schema(collection: str, docs: list[NormalizedDocument]) -> CollectionSchema:
    """Build the field list for one collection.

    Fields come back stable-first, then by presence rate descending; ties keep
    first-seen order.
    """
    field_types: dict[str, dict[str, None]] = {}
    field_counts: dict[str, int] = {}
    total = len(docs)

    for doc in docs:
        for name, field_value in doc.fields.items():
            tag = getattr(field_value.type, "value", field_value.type)
            field_types.setdefault(name, {})[tag] = None
            field_counts[name] = field_counts.get(name, 0) + 1

    fields = []
    for name, types in field_types.items():
        presence = field_counts[name] / total if total else 0.0
        type_list = list(types)
        percent = round_half_up(presence * 100)

        note = None
        if len(type_list) > 1:
            note = f"Type mismatch: field holds {' | '.join(type_list)} - schema drift detected."
        elif presence < SPARSE_PRESENCE:
            note = f"Sparse field: only present in {percent}% of documents."
        elif presence < STABLE_PRESENCE:
            note = f"Inconsistent field: present in {percent}% of documents - mark as optional."

        fields.append(
            FieldSchema(
                name=name,
                types=type_list,
                presence_rate=presence,
                stable=presence >= STABLE_PRESENCE and len(type_list) == 1,
                note=note,
            )
        )

    fields.sort(key=lambda f: (not f.stable, -f.presence_rate))
    return CollectionSchema(name=collection, sampled_documents=total, fields=fields)


def infer_schema(result: ScanResult) -> list[CollectionSchema]:
    """Schema for every collection in the scan, in aggregation order."""
    return [
        infer_collection_schema(name, stats.docs)
        for name, stats in group_by_collection(result).items()
    ]


def schema_report(result: ScanResult) -> dict:
    """JSON-ready schema report with camelCase keys."""

    def _field(f: FieldSchema) -> dict:
        data = {
            "name": f.name,
            "types": f.types,
            "presenceRate": round(f.presence_rate, 4),
            "stable": f.stable,
        }
        if f.note:
            data["note"] = f.note
        return data

    return {
        "collections": [
            {
                "name": c.name,
                "sampledDocuments": c.sampled_documents,
                "fields": [_field(f) for f in c.fields],
            }
            for c in infer_schema(result)
        ],
        "scannedAt": result.scanned_at.isoformat(),
    }


__all__ = ["CollectionSchema", "FieldSchema", "infer_collection_schema", "infer_schema", "schema_report"]
