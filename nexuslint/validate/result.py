"""Validation result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from nexuslint.diagnostics import Diagnostic, LocatedDiagnostic, has_errors
from nexuslint.header import DeclaredMetadata
from nexuslint.matrix import MatrixParseResult
from nexuslint.scanner import BalanceReport


@dataclass(frozen=True, slots=True)
class ValidationStats:
    """Declared and observed counts, for logging and reporting."""

    declared_ntax: int | None
    declared_nchar: int | None
    taxa_count: int
    max_sequence_length: int


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Everything one validation pass produced for one text snapshot."""

    diagnostics: tuple[Diagnostic, ...]
    located: tuple[LocatedDiagnostic, ...]
    stats: ValidationStats
    header: DeclaredMetadata
    matrix: MatrixParseResult
    balance: BalanceReport | None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
