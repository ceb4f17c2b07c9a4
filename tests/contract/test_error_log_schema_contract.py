from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

import bizimport.logging
from bizimport.models.error_record import ErrorRecord
from bizimport.models.import_outcome import DiagnosticKind, RowDiagnostic

"""Error log line contract: every JSON line matches error_log_schema.json."""

SCHEMA_PATH = Path(bizimport.logging.__file__).with_name("error_log_schema.json")


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "trabajadores.csv",
        "entity": "worker",
        "row": 3,
        "error_type": "INVALID_VALUE",
        "message": "invalid role 'gerente'",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "trabajadores.csv",
        "entity": "worker",
        "row": 3,
        "error_type": "INVALID_VALUE",
        "message": "invalid role 'gerente'",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


@pytest.mark.parametrize("kind", list(DiagnosticKind))
def test_generated_lines_match_schema(schema, kind):
    rec = ErrorRecord.from_diagnostic("c.csv", "client", RowDiagnostic(1, kind, "reason"))
    jsonschema.validate(json.loads(rec.to_json_line()), schema)


def test_file_level_line_matches_schema(schema):
    rec = ErrorRecord.create("c.csv", "client", -1, "FILE_READ_ERROR", "cannot read")
    jsonschema.validate(json.loads(rec.to_json_line()), schema)
