"""Declared NTAX / NCHAR counts from the document header."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from nexuslint.text import TextRange

NTAX_PATTERN: Final[re.Pattern[str]] = re.compile(r"\bNTAX\s*=\s*(\d+)", re.IGNORECASE)
NCHAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\bNCHAR\s*=\s*(\d+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Declaration:
    """A declared count and the `KEYWORD=value` text it came from."""

    value: int
    range: TextRange


@dataclass(frozen=True, slots=True)
class DeclaredMetadata:
    ntax: Declaration | None = None
    nchar: Declaration | None = None

    @property
    def declared_ntax(self) -> int | None:
        return self.ntax.value if self.ntax is not None else None

    @property
    def declared_nchar(self) -> int | None:
        return self.nchar.value if self.nchar is not None else None


def extract_header(text: str) -> DeclaredMetadata:
    """Find the first NTAX and NCHAR declarations. Missing ones are `None`."""
    return DeclaredMetadata(
        ntax=_find_declaration(NTAX_PATTERN, text),
        nchar=_find_declaration(NCHAR_PATTERN, text),
    )


def _find_declaration(pattern: re.Pattern[str], text: str) -> Declaration | None:
    match = pattern.search(text)
    if match is None:
        return None
    return Declaration(
        value=int(match.group(1)),
        range=TextRange.from_offsets(match.start(), match.end()),
    )
