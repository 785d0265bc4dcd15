"""Validation switches."""

from dataclasses import dataclass
from enum import StrEnum


class RowAnchor(StrEnum):
    """Which row of an interleaved taxon a row-length warning points at."""

    FIRST = "first"
    LATEST = "latest"


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Feature flags selecting which cross-checks a validation pass runs."""

    check_balance: bool = True
    check_taxa_count: bool = True
    check_char_count: bool = True
    check_row_lengths: bool = True
    row_anchor: RowAnchor = RowAnchor.LATEST
