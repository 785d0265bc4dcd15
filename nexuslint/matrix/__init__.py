"""MATRIX block model and parser."""

from nexuslint.matrix.model import MatrixModel, Sequence, Taxon
from nexuslint.matrix.parser import (
    MATRIX_BLOCK_PATTERN,
    ROW_PATTERN,
    MatrixParseResult,
    MatrixRow,
    decode_label,
    parse_matrix,
)

__all__ = [
    "MATRIX_BLOCK_PATTERN",
    "ROW_PATTERN",
    "MatrixModel",
    "MatrixParseResult",
    "MatrixRow",
    "Sequence",
    "Taxon",
    "decode_label",
    "parse_matrix",
]
