from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Union

"""Domain records produced by the import pipeline.

Each record is a validated value object ready to be handed to the persistence
layer. A record that has not been stored yet carries ``id=None``; storage assigns
the real identifier and returns a new record through ``with_id``.
"""

__all__ = [
    "WORKER_ROLES",
    "Worker",
    "Client",
    "Product",
    "DomainRecord",
]

# Permitted worker roles, stored uppercase
WORKER_ROLES: tuple[str, ...] = ("JEFE", "SUPERVISOR", "TRABAJADOR")


class _RecordMixin:
    def with_id(self, new_id: int):
        """Return a copy of this record carrying the storage identifier."""
        return replace(self, id=new_id)  # type: ignore[type-var]

    @property
    def is_persisted(self) -> bool:
        return getattr(self, "id") is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Worker(_RecordMixin):
    """Worker account with its personalized UI theme descriptors."""
    name: str
    national_id: str
    role: str  # One of WORKER_ROLES
    font: str | None = None
    background_color: str | None = None
    button_color: str | None = None
    id: int | None = None


@dataclass(frozen=True)
class Client(_RecordMixin):
    name: str
    national_id: str
    phone: str | None = None
    email: str | None = None
    id: int | None = None

    @staticmethod
    def table_header() -> tuple[str, ...]:
        return ("ID", "Nombre", "Telefono", "Email")

    def table_row(self) -> tuple[Any, ...]:
        return (self.id, self.name, self.phone, self.email)


@dataclass(frozen=True)
class Product(_RecordMixin):
    name: str
    price: float
    active: bool = True  # Imported products are on sale
    id: int | None = None

    @staticmethod
    def table_header() -> tuple[str, ...]:
        return ("ID", "Nombre", "Precio", "Vigente")

    def table_row(self) -> tuple[Any, ...]:
        return (self.id, self.name, self.price, self.active)


DomainRecord = Union[Worker, Client, Product]
