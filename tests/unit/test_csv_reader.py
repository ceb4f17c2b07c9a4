from __future__ import annotations

from pathlib import Path

import pytest

from bizimport.csv.reader import CsvReadError, read_csv_columns, read_csv_rows


def test_read_rows_success(write_csv):
    path = write_csv("clientes.csv", ["nombre;dni;telefono", "Ana;123;999", "Bob;456;"])
    rows = read_csv_rows(path)
    assert [r.row_number for r in rows] == [1, 2]
    assert rows[0].values == {"nombre": "Ana", "dni": "123", "telefono": "999"}
    assert rows[1].values["telefono"] == ""


def test_read_rows_keeps_text_as_is(write_csv):
    # No NA conversion, no numeric coercion
    path = write_csv("c.csv", ["nombre;dni", "NA;00123"])
    rows = read_csv_rows(path)
    assert rows[0].values == {"nombre": "NA", "dni": "00123"}


def test_read_rows_trims_headers_and_cells(write_csv):
    path = write_csv("c.csv", [" Nombre ; DNI ", "  Ana  ;  1 "])
    rows = read_csv_rows(path)
    assert rows[0].values == {"Nombre": "Ana", "DNI": "1"}


@pytest.mark.parametrize("encoding", ["utf-8-sig", "utf-8"])
def test_read_rows_strips_bom_from_header(write_csv, encoding):
    path = write_csv("c.csv", ["nombre;dni", "Ana;1"], bom=True)
    rows = read_csv_rows(path, encoding=encoding)
    assert list(rows[0].values) == ["nombre", "dni"]


def test_read_rows_skips_blank_lines_only(write_csv):
    path = write_csv("c.csv", ["nombre;dni", "Ana;1", "", ";", "Bob;2"])
    rows = read_csv_rows(path)
    assert [r.values["nombre"] for r in rows] == ["Ana", "", "Bob"]
    assert [r.row_number for r in rows] == [1, 2, 3]
    assert rows[1].values == {"nombre": "", "dni": ""}


def test_read_rows_trailing_separator_keeps_columns(write_csv):
    path = write_csv("clientes.csv", ["nombre;dni;telefono", "Ana;1;999;", "Bob;2;;"])
    rows = read_csv_rows(path)
    assert [r.values for r in rows] == [
        {"nombre": "Ana", "dni": "1", "telefono": "999"},
        {"nombre": "Bob", "dni": "2", "telefono": ""},
    ]
    assert read_csv_columns(path) == ["nombre", "dni", "telefono"]


def test_read_rows_short_row_padded_with_empty(write_csv):
    path = write_csv("c.csv", ["nombre;dni;email", "Ana;1"])
    rows = read_csv_rows(path)
    assert rows[0].values == {"nombre": "Ana", "dni": "1", "email": ""}


def test_read_rows_custom_delimiter(write_csv):
    path = write_csv("c.csv", ["nombre,dni", "Ana,1"])
    rows = read_csv_rows(path, delimiter=",")
    assert rows[0].values == {"nombre": "Ana", "dni": "1"}


def test_header_only_file_has_no_rows(write_csv):
    path = write_csv("c.csv", ["nombre;dni"])
    assert read_csv_rows(path) == []


def test_empty_file_has_no_rows(temp_workdir: Path):
    path = temp_workdir / "data" / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert read_csv_rows(path) == []
    assert read_csv_columns(path) == []


def test_missing_file_raises(temp_workdir: Path):
    with pytest.raises(CsvReadError, match="cannot read"):
        read_csv_rows(temp_workdir / "data" / "nope.csv")


def test_malformed_file_raises(write_csv):
    path = write_csv("c.csv", ["nombre;dni", "Ana;1", "Bob;2;extra;cells"])
    with pytest.raises(CsvReadError, match="malformed"):
        read_csv_rows(path)


def test_undecodable_file_raises(temp_workdir: Path):
    path = temp_workdir / "data" / "latin.csv"
    path.write_bytes("nombre;dni\nJosé;1\n".encode("latin-1"))
    with pytest.raises(CsvReadError, match="cannot decode"):
        read_csv_rows(path)
    rows = read_csv_rows(path, encoding="latin-1")
    assert rows[0].values["nombre"] == "José"


def test_read_columns(write_csv):
    path = write_csv("c.csv", ["nombre ; dni;email", "Ana;1;a@x.pe"], bom=True)
    assert read_csv_columns(path) == ["nombre", "dni", "email"]
