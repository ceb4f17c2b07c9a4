from __future__ import annotations

import time

from bizimport.services.orchestrator import import_entity_file

"""Performance smoke test: a generated product file imports quickly.

Lenient bound so CI stays stable; catches accidental quadratic behavior in the
reader or the per-row loop.
"""

ROWS = 20_000


def test_perf_product_import(tmp_path):
    lines = ["nombre;precio"] + [f"Producto {i};{i % 97 + 1},25" for i in range(ROWS)]
    path = tmp_path / "productos.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    start = time.perf_counter()
    outcome = import_entity_file(path, "product")
    elapsed = time.perf_counter() - start

    assert outcome.imported == ROWS
    assert outcome.diagnostics == []
    assert elapsed < 10.0, f"import too slow: {elapsed:.3f}s"
    throughput = ROWS / elapsed
    assert throughput > 2_000
