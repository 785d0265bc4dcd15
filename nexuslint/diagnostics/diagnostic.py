"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nexuslint.diagnostics.codes import DiagnosticSpec, Severity
from nexuslint.text import Position, TextRange

if TYPE_CHECKING:
    from nexuslint.text import PositionIndex


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner and the validator."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> Diagnostic:
        """Build a diagnostic from its spec, optionally replacing the stock message."""
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def locate(self, index: PositionIndex) -> LocatedDiagnostic:
        return LocatedDiagnostic(
            start=index.offset_to_position(self.range.start.value),
            end=index.offset_to_position(self.range.end.value),
            message=self.message,
            severity=self.severity,
            code=self.code,
        )


@dataclass(frozen=True, slots=True)
class LocatedDiagnostic:
    """Host-facing diagnostic: line/column range, message and severity."""

    start: Position
    end: Position
    message: str
    severity: Severity
    code: str

    @property
    def range(self) -> tuple[Position, Position]:
        return (self.start, self.end)
