"""Parser for the MATRIX block of a NEXUS document."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from nexuslint.matrix.model import MatrixModel, Sequence
from nexuslint.text import TextRange

logger = logging.getLogger(__name__)

MATRIX_BLOCK_PATTERN: Final[re.Pattern[str]] = re.compile(r"\bMATRIX\b(.*?);", re.IGNORECASE | re.DOTALL)

# name is a quoted label (with '' escapes) or a run of non-whitespace
ROW_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*('(?:[^']|'')*'|\S+)\s+(.+)$")

# same breaks as LineIndex; form feeds and Unicode separators stay inside a row
LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([^\r\n]*)(?:\r\n|\r|\n|\Z)")


@dataclass(frozen=True, slots=True)
class MatrixRow:
    """One accepted data row of the MATRIX block."""

    name: str
    raw_sequence: str
    range: TextRange
    name_range: TextRange
    block_line: int  # zero-based line within the MATRIX body


@dataclass(frozen=True, slots=True)
class MatrixParseResult:
    model: MatrixModel
    block_range: TextRange | None
    rows: tuple[MatrixRow, ...] = ()

    @property
    def found_block(self) -> bool:
        return self.block_range is not None


def decode_label(token: str) -> str:
    """Decode a taxon label token; quoted labels lose their quotes and `''` becomes `'`."""
    if len(token) >= 2 and token.startswith("'") and token.endswith("'"):
        return token[1:-1].replace("''", "'")
    return token


def parse_matrix(text: str) -> MatrixParseResult:
    """Parse the first MATRIX block of `text` into a matrix model.

    Lines that do not look like `<name> <sequence>` are skipped without a
    diagnostic; half-typed rows surface later as count or length mismatches.
    """
    model = MatrixModel()
    match = MATRIX_BLOCK_PATTERN.search(text)
    if match is None:
        logger.debug("No MATRIX block found")
        return MatrixParseResult(model=model, block_range=None)

    rows: list[MatrixRow] = []
    body_start, body_end = match.span(1)
    for number, line_match in enumerate(LINE_PATTERN.finditer(text, body_start, body_end)):
        row = _parse_row(line_match.group(1), line_match.start(1), number)
        if row is None:
            continue
        rows.append(row)
        model.add(row.name, Sequence.from_raw(row.raw_sequence), row.range)

    block_range = TextRange.from_offsets(match.start(), match.end())
    logger.debug(
        "MATRIX block %s: %d rows, %d taxa",
        block_range.as_tuple(),
        len(rows),
        model.taxa_count,
    )
    return MatrixParseResult(model=model, block_range=block_range, rows=tuple(rows))


def _parse_row(line: str, line_start: int, line_number: int) -> MatrixRow | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("[") or stripped == ";":
        return None

    row_match = ROW_PATTERN.match(stripped)
    if row_match is None:
        return None

    row_start = line_start + len(line) - len(line.lstrip())
    return MatrixRow(
        name=decode_label(row_match.group(1)),
        raw_sequence=row_match.group(2),
        range=TextRange.from_offsets(row_start, row_start + len(stripped)),
        name_range=TextRange.from_offsets(row_start + row_match.start(1), row_start + row_match.end(1)),
        block_line=line_number,
    )
