"""Validation pass over a NEXUS document."""

from nexuslint.validate.options import RowAnchor, ValidationOptions
from nexuslint.validate.result import ValidationResult, ValidationStats
from nexuslint.validate.validator import check_counts, validate_text

__all__ = [
    "RowAnchor",
    "ValidationOptions",
    "ValidationResult",
    "ValidationStats",
    "check_counts",
    "validate_text",
]
