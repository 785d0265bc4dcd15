"""Diagnostics."""

from nexuslint.diagnostics.codes import (
    MATRIX_NCHAR_MISMATCH,
    MATRIX_NTAX_MISMATCH,
    MATRIX_ROW_LENGTH_MISMATCH,
    SCAN_UNCLOSED_COMMENT,
    SCAN_UNCLOSED_QUOTE,
    SCAN_UNEXPECTED_CLOSING_BRACKET,
    DiagnosticSpec,
    Severity,
)
from nexuslint.diagnostics.diagnostic import Diagnostic, LocatedDiagnostic
from nexuslint.diagnostics.report import collect_diagnostics, count_by_severity, has_errors

__all__ = [
    "MATRIX_NCHAR_MISMATCH",
    "MATRIX_NTAX_MISMATCH",
    "MATRIX_ROW_LENGTH_MISMATCH",
    "SCAN_UNCLOSED_COMMENT",
    "SCAN_UNCLOSED_QUOTE",
    "SCAN_UNEXPECTED_CLOSING_BRACKET",
    "Diagnostic",
    "DiagnosticSpec",
    "LocatedDiagnostic",
    "Severity",
    "collect_diagnostics",
    "count_by_severity",
    "has_errors",
]
