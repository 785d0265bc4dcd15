"""Validation pass: bracket balance, declared counts and the MATRIX block."""

from __future__ import annotations

import logging

from nexuslint.diagnostics import (
    MATRIX_NCHAR_MISMATCH,
    MATRIX_NTAX_MISMATCH,
    MATRIX_ROW_LENGTH_MISMATCH,
    Diagnostic,
    collect_diagnostics,
)
from nexuslint.header import DeclaredMetadata, extract_header
from nexuslint.matrix import MatrixModel, parse_matrix
from nexuslint.scanner import scan_balance
from nexuslint.text import LineIndex, PositionIndex
from nexuslint.validate.options import RowAnchor, ValidationOptions
from nexuslint.validate.result import ValidationResult, ValidationStats

logger = logging.getLogger(__name__)


def validate_text(
    text: str,
    index: PositionIndex | None = None,
    *,
    options: ValidationOptions | None = None,
) -> ValidationResult:
    """Validate one NEXUS text snapshot.

    Pure: nothing is kept between calls, so the returned diagnostics fully
    replace whatever a previous pass produced for the same document.
    """
    resolved_options = options if options is not None else ValidationOptions()
    resolved_index = index if index is not None else LineIndex(text)

    balance = scan_balance(text) if resolved_options.check_balance else None
    header = extract_header(text)
    matrix = parse_matrix(text)

    # without a MATRIX block there is nothing to count against
    diagnostics = collect_diagnostics(
        balance.diagnostics() if balance is not None else (),
        check_counts(header, matrix.model, resolved_options) if matrix.found_block else (),
    )
    stats = ValidationStats(
        declared_ntax=header.declared_ntax,
        declared_nchar=header.declared_nchar,
        taxa_count=matrix.model.taxa_count,
        max_sequence_length=matrix.model.max_sequence_length,
    )
    logger.debug(
        "Validated %d chars: NTAX=%s NCHAR=%s taxa=%d max_length=%d diagnostics=%d",
        len(text),
        stats.declared_ntax,
        stats.declared_nchar,
        stats.taxa_count,
        stats.max_sequence_length,
        len(diagnostics),
    )

    return ValidationResult(
        diagnostics=tuple(diagnostics),
        located=tuple(diagnostic.locate(resolved_index) for diagnostic in diagnostics),
        stats=stats,
        header=header,
        matrix=matrix,
        balance=balance,
    )


def check_counts(
    header: DeclaredMetadata,
    model: MatrixModel,
    options: ValidationOptions,
) -> list[Diagnostic]:
    """Cross-check declared NTAX/NCHAR against the parsed matrix.

    A missing declaration skips its checks.
    """
    diagnostics: list[Diagnostic] = []

    if options.check_taxa_count and header.ntax is not None and header.ntax.value != model.taxa_count:
        diagnostics.append(
            Diagnostic.from_spec(
                MATRIX_NTAX_MISMATCH,
                header.ntax.range,
                message=(
                    f"Mismatch: NTAX is set to {header.ntax.value}, "
                    f"but MATRIX contains {model.taxa_count} taxa."
                ),
            )
        )

    if header.nchar is None:
        return diagnostics

    declared_nchar = header.nchar.value
    if options.check_char_count and declared_nchar != model.max_sequence_length:
        diagnostics.append(
            Diagnostic.from_spec(
                MATRIX_NCHAR_MISMATCH,
                header.nchar.range,
                message=(
                    f"Mismatch: NCHAR is set to {declared_nchar}, "
                    f"but the longest sequence in MATRIX has {model.max_sequence_length} characters."
                ),
            )
        )

    if options.check_row_lengths:
        for taxon in model:
            length = len(taxon.sequence)
            if length == declared_nchar:
                continue
            anchor = taxon.first_range if options.row_anchor == RowAnchor.FIRST else taxon.latest_range
            diagnostics.append(
                Diagnostic.from_spec(
                    MATRIX_ROW_LENGTH_MISMATCH,
                    anchor,
                    message=f"Taxon '{taxon.name}' has {length} characters, but NCHAR is set to {declared_nchar}.",
                )
            )

    return diagnostics
