"""Live validation of NEXUS phylogenetic data files."""

from nexuslint.diagnostics import Diagnostic, LocatedDiagnostic, Severity
from nexuslint.exceptions import NexusFileError, NexusLintError
from nexuslint.header import Declaration, DeclaredMetadata, extract_header
from nexuslint.host import DiagnosticCollection, TextDocument, validate_document
from nexuslint.io import load_nexus_text
from nexuslint.matrix import MatrixModel, Sequence, Taxon, parse_matrix
from nexuslint.scanner import BalanceReport, scan_balance, strip_comments
from nexuslint.text import LineIndex, Position, PositionIndex, TextRange
from nexuslint.validate import (
    RowAnchor,
    ValidationOptions,
    ValidationResult,
    ValidationStats,
    validate_text,
)

__all__ = [
    "BalanceReport",
    "Declaration",
    "DeclaredMetadata",
    "Diagnostic",
    "DiagnosticCollection",
    "LineIndex",
    "LocatedDiagnostic",
    "MatrixModel",
    "NexusFileError",
    "NexusLintError",
    "Position",
    "PositionIndex",
    "RowAnchor",
    "Sequence",
    "Severity",
    "Taxon",
    "TextDocument",
    "TextRange",
    "ValidationOptions",
    "ValidationResult",
    "ValidationStats",
    "extract_header",
    "load_nexus_text",
    "parse_matrix",
    "scan_balance",
    "strip_comments",
    "validate_document",
    "validate_text",
]
