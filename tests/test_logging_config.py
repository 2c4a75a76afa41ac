"""Tests for the JSON log formatter."""

import json
import logging

from invoicing.logging_config import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "invoicing.services.queries", logging.ERROR, __file__, 1, "Database Error in %s", ("x",), None
    )
    record.__dict__.update(extra)
    return record


def test_json_fields() -> None:
    payload = json.loads(JSONFormatter().format(_record(operation="fetch_revenue")))

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "invoicing.services.queries"
    assert payload["message"] == "Database Error in x"
    assert payload["operation"] == "fetch_revenue"
    assert "timestamp" in payload


def test_absent_extras_are_omitted() -> None:
    payload = json.loads(JSONFormatter().format(_record()))
    assert "operation" not in payload
    assert "path" not in payload
