"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCAN_UNEXPECTED_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNEXPECTED_CLOSING_BRACKET",
    message="Unexpected closing bracket `]` with no matching `[`.",
    hint="Remove the stray `]` or add the missing `[` that opens the comment.",
    severity="error",
    category="scanner",
)

SCAN_UNCLOSED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNCLOSED_COMMENT",
    message="Unclosed comment: `[` is never closed.",
    hint="Close the comment with `]`. Everything after it is treated as comment text.",
    severity="error",
    category="scanner",
)

SCAN_UNCLOSED_QUOTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNCLOSED_QUOTE",
    message="Unclosed quote: a `'` label is still open at the end of the document. It may hide other bracket errors.",
    hint="Close the label with `'`. Write `''` for a literal quote inside a label.",
    severity="warning",
    category="scanner",
)

MATRIX_NTAX_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATRIX_NTAX_MISMATCH",
    message="NTAX does not match the number of taxa in MATRIX.",
    severity="error",
    category="matrix",
)

MATRIX_NCHAR_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATRIX_NCHAR_MISMATCH",
    message="NCHAR does not match the longest sequence in MATRIX.",
    severity="error",
    category="matrix",
)

MATRIX_ROW_LENGTH_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MATRIX_ROW_LENGTH_MISMATCH",
    message="Taxon sequence length does not match NCHAR.",
    hint="Interleaved rows for the same taxon are concatenated before the length is checked.",
    severity="warning",
    category="matrix",
)
