from __future__ import annotations

import json

from bizimport.models.error_record import FILE_LEVEL_ROW, ErrorRecord
from bizimport.models.import_outcome import DiagnosticKind, RowDiagnostic

"""Unit tests for the ErrorRecord model."""

KEYS = {"timestamp", "file", "entity", "row", "error_type", "message"}


def test_error_record_file_level_row():
    """row=-1 marks a file-level failure."""
    rec = ErrorRecord.create(
        file="clientes.csv",
        entity="client",
        row=FILE_LEVEL_ROW,
        error_type="FILE_READ_ERROR",
        message="cannot read 'clientes.csv'",
    )

    assert rec.row == -1
    data = json.loads(rec.to_json_line())
    assert data["row"] == -1
    assert data["entity"] == "client"
    assert data["timestamp"].endswith("Z")
    assert set(data) == KEYS


def test_error_record_from_diagnostic():
    diag = RowDiagnostic(3, DiagnosticKind.INVALID_VALUE, "invalid role 'gerente'")
    rec = ErrorRecord.from_diagnostic("trabajadores.csv", "worker", diag)

    assert rec.row == 3
    assert rec.error_type == "INVALID_VALUE"
    assert rec.message == "invalid role 'gerente'"


def test_error_record_keeps_non_ascii():
    rec = ErrorRecord.create("año.csv", "client", 1, "MISSING_FIELDS", "falta teléfono")
    assert "año.csv" in rec.to_json_line()
    assert "teléfono" in rec.to_json_line()
