from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .records import DomainRecord

"""Import outcome models.

ImportOutcome is built once per import invocation: the accepted records in file
order plus one RowDiagnostic for every row that did not make it.
"""

__all__ = [
    "DiagnosticKind",
    "RowDiagnostic",
    "ImportOutcome",
]


class DiagnosticKind(Enum):
    """Why a row was left out of the output.

    - MISSING_FIELDS: a required field was empty or absent
    - INVALID_VALUE: a field failed its categorical/numeric check
    - ROW_ERROR: the row processor raised an unexpected exception
    """
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_VALUE = "INVALID_VALUE"
    ROW_ERROR = "ROW_ERROR"


@dataclass(frozen=True)
class RowDiagnostic:
    row_number: int  # 1-based data row position
    kind: DiagnosticKind
    reason: str


@dataclass
class ImportOutcome:
    """Records and diagnostics of one import run over a single source."""
    records: list[DomainRecord] = field(default_factory=list)
    diagnostics: list[RowDiagnostic] = field(default_factory=list)
    total_rows: int = 0

    @property
    def imported(self) -> int:
        return len(self.records)

    @property
    def skipped_missing(self) -> int:
        return self._count(DiagnosticKind.MISSING_FIELDS)

    @property
    def skipped_invalid(self) -> int:
        return self._count(DiagnosticKind.INVALID_VALUE)

    @property
    def row_errors(self) -> int:
        return self._count(DiagnosticKind.ROW_ERROR)

    @property
    def skipped(self) -> int:
        """Rows rejected by validation (row errors not included)."""
        return self.skipped_missing + self.skipped_invalid

    @property
    def no_data(self) -> bool:
        return self.total_rows == 0

    def _count(self, kind: DiagnosticKind) -> int:
        return sum(1 for d in self.diagnostics if d.kind is kind)
