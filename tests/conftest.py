# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from bizimport.logging.init import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    # setup_logging binds its handler to the sys.stdout of the test that ran it
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
file_mappings:
  trabajadores.csv:
    entity: worker
  clientes.csv:
    entity: client
  productos.csv:
    entity: product
delimiter: ";"
encoding: utf-8-sig
log_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_csv(temp_workdir: Path) -> Callable[..., Path]:
    """Write ';'-separated lines into data/<name> and return the path."""
    def _write(name: str, lines: list[str], *, bom: bool = False, directory: Path | None = None) -> Path:
        target = (directory or temp_workdir / "data") / name
        text = "\n".join(lines) + "\n"
        target.write_text(("\ufeff" if bom else "") + text, encoding="utf-8")
        return target
    return _write


@pytest.fixture()
def worker_csv(write_csv) -> Path:
    return write_csv(
        "trabajadores.csv",
        [
            "nombres;dni;puesto;tipo de letra;color de fondo;color de boton",
            "Ana;123;jefe;Arial;#FFFFFF;#000000",
            ";456;trabajador;;;",
            "Bob;789;gerente;;;",
        ],
    )
