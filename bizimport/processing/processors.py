from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from ..models.import_outcome import DiagnosticKind
from ..models.records import WORKER_ROLES, Client, DomainRecord, Product, Worker
from ..models.row_data import Row
from .fields import get_optional_value, get_value, missing_fields

"""Row processors: one free function per entity tag.

A processor maps a Row to exactly one domain record or returns a Rejection.
Rejections are expected outcomes (blank required field, unknown role, bad
price); anything a processor raises is handled by the orchestrator as a row
error.

Recognized headers (case-insensitive):
- worker:  nombres|nombre, dni, puesto, tipo de letra, color de fondo, color de boton
- client:  nombre, dni, telefono, email
- product: nombre, precio
"""

__all__ = [
    "Rejection",
    "RowProcessor",
    "UnknownEntityError",
    "process_worker",
    "process_client",
    "process_product",
    "PROCESSORS",
    "get_processor",
]


class UnknownEntityError(Exception):
    """Raised when no row processor is registered for an entity tag."""


@dataclass(frozen=True)
class Rejection:
    kind: DiagnosticKind  # MISSING_FIELDS or INVALID_VALUE
    reason: str

    @staticmethod
    def missing(fields: list[str]) -> Rejection:
        return Rejection(DiagnosticKind.MISSING_FIELDS, f"missing required fields: {', '.join(fields)}")

    @staticmethod
    def invalid(reason: str) -> Rejection:
        return Rejection(DiagnosticKind.INVALID_VALUE, reason)


RowProcessor = Callable[[Row], Union[DomainRecord, Rejection]]


def process_worker(row: Row) -> Worker | Rejection:
    name = get_value(row, "nombres", "nombre")
    national_id = get_value(row, "dni")
    role = get_value(row, "puesto")

    missing = missing_fields(nombres=name, dni=national_id, puesto=role)
    if missing:
        return Rejection.missing(missing)

    if role.upper() not in WORKER_ROLES:
        return Rejection.invalid(f"invalid role '{role}' (expected one of {', '.join(WORKER_ROLES)})")

    return Worker(
        name=name,
        national_id=national_id,
        role=role.upper(),
        font=get_optional_value(row, "tipo de letra"),
        background_color=get_optional_value(row, "color de fondo"),
        button_color=get_optional_value(row, "color de boton"),
    )


def process_client(row: Row) -> Client | Rejection:
    name = get_value(row, "nombre")
    national_id = get_value(row, "dni")

    missing = missing_fields(nombre=name, dni=national_id)
    if missing:
        return Rejection.missing(missing)

    return Client(
        name=name,
        national_id=national_id,
        phone=get_optional_value(row, "telefono"),
        email=get_optional_value(row, "email"),
    )


def _parse_price(text: str) -> float | None:
    # float() also takes digit separators such as "1_000"
    if "_" in text:
        return None
    # Spreadsheets in the target locale write "12,50"
    if "," in text and "." not in text:
        text = text.replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def process_product(row: Row) -> Product | Rejection:
    name = get_value(row, "nombre")
    price_text = get_value(row, "precio")

    missing = missing_fields(nombre=name, precio=price_text)
    if missing:
        return Rejection.missing(missing)

    price = _parse_price(price_text)
    if price is None:
        return Rejection.invalid(f"invalid price '{price_text}'")
    if price <= 0:
        return Rejection.invalid(f"price must be greater than 0, got '{price_text}'")

    return Product(name=name, price=price)


PROCESSORS: dict[str, RowProcessor] = {
    "worker": process_worker,
    "client": process_client,
    "product": process_product,
}


def get_processor(entity: str) -> RowProcessor:
    try:
        return PROCESSORS[entity.strip().lower()]
    except KeyError:
        raise UnknownEntityError(
            f"unknown entity '{entity}' (expected one of {', '.join(sorted(PROCESSORS))})"
        ) from None
