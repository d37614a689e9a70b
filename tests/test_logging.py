"""Tests for the JSON log line format."""

import json

from lintbase.utils.logging import REQUEST_ID, logger, record_to_json


def test_record_to_json_carries_message_and_context():
    lines = []
    handler_id = logger.add(lambda m: lines.append(record_to_json(m.record)), level="DEBUG")
    try:
        logger.bind(collection="users", stats={"count": 2}).info("sampled {n} document(s)", n=2)
    finally:
        logger.remove(handler_id)

    entry = json.loads(lines[0])
    assert entry["level"] == "INFO"
    assert entry["msg"] == "sampled 2 document(s)"
    assert entry["collection"] == "users"
    assert entry["stats"] == "{'count': 2}"
    assert entry["request_id"] == REQUEST_ID
    assert "error" not in entry


def test_record_to_json_includes_exception():
    lines = []
    handler_id = logger.add(lambda m: lines.append(record_to_json(m.record)), level="DEBUG")
    try:
        try:
            raise ValueError("bad export")
        except ValueError:
            logger.exception("scan failed")
    finally:
        logger.remove(handler_id)

    assert json.loads(lines[0])["error"] == "ValueError: bad export"
