"""Tests for inferred collection schemas."""

from lintbase.core.models import TypeTag
from lintbase.schema_inference import infer_collection_schema, infer_schema, schema_report

S = TypeTag.STRING
N = TypeTag.NUMBER


class TestInferCollectionSchema:
    def test_stable_fields_first_then_presence(self, make_doc):
        docs = [
            make_doc("d1", "users", {"nickname": S, "name": S, "age": N}),
            make_doc("d2", "users", {"name": S, "age": S}),
            make_doc("d3", "users", {"name": S, "age": N}),
            make_doc("d4", "users", {"name": S, "age": N}),
            make_doc("d5", "users", {"name": S, "age": N, "nickname": S}),
        ]

        schema = infer_collection_schema("users", docs)

        assert schema.sampled_documents == 5
        assert [f.name for f in schema.fields] == ["name", "age", "nickname"]

        name, age, nickname = schema.fields
        assert name.stable and name.note is None
        assert name.presence_rate == 1.0

        assert not age.stable
        assert age.types == ["number", "string"]
        assert "Type mismatch" in age.note

        assert not nickname.stable
        assert nickname.presence_rate == 0.4
        assert nickname.note == "Sparse field: only present in 40% of documents."

    def test_inconsistent_field_note(self, make_doc):
        docs = [make_doc(f"d{i}", "c", {"a": S, "b": S} if i < 7 else {"a": S}) for i in range(10)]

        b = next(f for f in infer_collection_schema("c", docs).fields if f.name == "b")

        assert not b.stable
        assert "70%" in b.note
        assert "optional" in b.note

    def test_empty_collection(self):
        schema = infer_collection_schema("ghost", [])

        assert schema.sampled_documents == 0
        assert schema.fields == []


class TestSchemaReport:
    def test_every_collection_reported(self, make_doc, make_scan):
        result = make_scan([make_doc("d1", "users", {"name": S})], collections=["users", "empty"])

        assert [c.name for c in infer_schema(result)] == ["users", "empty"]

    def test_json_shape(self, make_doc, make_scan):
        result = make_scan(
            [
                make_doc("d1", "users", {"name": S, "bio": S}),
                make_doc("d2", "users", {"name": S}),
                make_doc("d3", "users", {"name": S}),
            ]
        )

        report = schema_report(result)

        assert set(report) == {"collections", "scannedAt"}
        assert report["scannedAt"] == result.scanned_at.isoformat()

        users = report["collections"][0]
        assert users["name"] == "users"
        assert users["sampledDocuments"] == 3
        assert users["fields"][0] == {
            "name": "name",
            "types": ["string"],
            "presenceRate": 1.0,
            "stable": True,
        }
        assert users["fields"][1]["presenceRate"] == 0.3333
        assert "note" in users["fields"][1]
