"""Pytest configuration and fixtures."""

import json
from datetime import datetime, timezone

import pytest

from lintbase.core.aggregate import AnalysisOptions
from lintbase.core.models import FieldValue, NormalizedDocument, ScanResult, TypeTag

SCANNED_AT = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def _make_doc(doc_id, collection, fields=None, depth=1, size_bytes=100):
    """Document factory. `fields` maps field name -> TypeTag."""
    return NormalizedDocument(
        id=doc_id,
        collection=collection,
        fields={name: FieldValue(value=None, type=tag) for name, tag in (fields or {}).items()},
        depth=depth,
        size_bytes=size_bytes,
    )


def _make_scan(documents, collections=None):
    """ScanResult factory. Collections default to the documents' own, in order."""
    if collections is None:
        collections = list(dict.fromkeys(d.collection for d in documents))
    return ScanResult(
        connector="test",
        collections=collections,
        documents=documents,
        scanned_at=SCANNED_AT,
    )


@pytest.fixture
def make_doc():
    return _make_doc


@pytest.fixture
def make_scan():
    return _make_scan


@pytest.fixture
def options():
    """Default analysis options (limit 100)."""
    return AnalysisOptions(limit=100)


@pytest.fixture
def uniform_collection(make_doc):
    """Build `count` identical documents for one collection."""

    def build(collection, count, size_bytes=100, depth=1, fields=None):
        return [
            make_doc(f"{collection}-{i}", collection, fields=fields, depth=depth, size_bytes=size_bytes)
            for i in range(count)
        ]

    return build


@pytest.fixture
def export_file(tmp_path):
    """A small offline export covering several rules."""
    data = {
        "collections": {
            "users": [
                {"id": "u1", "name": "Ada", "email": "ada@example.com", "password": "hunter2"},
                {"id": "u2", "name": "Grace", "email": "grace@example.com", "password": "x"},
                {"id": "u3", "name": "Linus", "email": 42, "password": "y"},
            ],
            "orders": [
                {"id": "o1", "total": 10.5, "items": [1, 2]},
                {"id": "o2", "total": 3, "items": []},
            ],
            "empty": [],
        }
    }
    path = tmp_path / "export.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def clean_export_file(tmp_path):
    """An export that produces no error-severity issues."""
    data = {
        "orders": [
            {"id": f"o{i}", "total": i, "currency": "EUR", "placedAt": "2025-01-01"}
            for i in range(5)
        ]
    }
    path = tmp_path / "clean.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
