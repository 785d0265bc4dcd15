"""Taxon/sequence model assembled from a MATRIX block."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from nexuslint.scanner import strip_comments
from nexuslint.text import TextRange


class Sequence:
    """Cleaned character data for one taxon.

    Holds no comment text, quote delimiters or whitespace. Only ever grows.
    """

    __slots__ = ("_chars",)

    def __init__(self, chars: str = "") -> None:
        self._chars: list[str] = list(chars)

    @staticmethod
    def from_raw(raw: str) -> Sequence:
        """Build a sequence from raw row text, stripping comments and whitespace."""
        return Sequence(strip_comments(raw))

    def append(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        if char.isspace():
            return
        self._chars.append(char)

    def extend(self, other: Sequence) -> None:
        self._chars.extend(other._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self._chars == other._chars

    def __repr__(self) -> str:
        return f"Sequence({str(self)!r})"


@dataclass(slots=True)
class Taxon:
    """A named taxon with its assembled sequence and the rows that declared it."""

    name: str
    sequence: Sequence
    row_ranges: list[TextRange] = field(default_factory=list)

    @property
    def first_range(self) -> TextRange:
        return self.row_ranges[0]

    @property
    def latest_range(self) -> TextRange:
        return self.row_ranges[-1]

    def extend(self, sequence: Sequence, row_range: TextRange) -> None:
        """Continue the sequence with another interleaved row group."""
        self.sequence.extend(sequence)
        self.row_ranges.append(row_range)


class MatrixModel:
    """Taxa keyed by name, in first-seen order."""

    def __init__(self) -> None:
        self._taxa: dict[str, Taxon] = {}

    def add(self, name: str, sequence: Sequence, row_range: TextRange) -> Taxon:
        existing = self._taxa.get(name)
        if existing is not None:
            existing.extend(sequence, row_range)
            return existing
        taxon = Taxon(name=name, sequence=sequence, row_ranges=[row_range])
        self._taxa[name] = taxon
        return taxon

    def get(self, name: str) -> Taxon | None:
        return self._taxa.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._taxa

    def __iter__(self) -> Iterator[Taxon]:
        return iter(self._taxa.values())

    def __len__(self) -> int:
        return len(self._taxa)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._taxa)

    @property
    def taxa_count(self) -> int:
        return len(self._taxa)

    @property
    def max_sequence_length(self) -> int:
        return max((len(taxon.sequence) for taxon in self._taxa.values()), default=0)
