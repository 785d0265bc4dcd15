"""Host-side bookkeeping: which diagnostics are published for which document.

The validator is a pure function of the text. Hosts that react to
document edits or focus changes keep one `DiagnosticCollection` and call
`validate_document` on each event; every call replaces the document's
previous diagnostics wholesale.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from nexuslint.diagnostics import LocatedDiagnostic
from nexuslint.text import PositionIndex
from nexuslint.validate import ValidationOptions, ValidationResult, validate_text

NEXUS_LANGUAGE_ID = "nexus"


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Snapshot of an open document as the host sees it."""

    uri: str
    text: str
    language_id: str = NEXUS_LANGUAGE_ID

    @property
    def is_nexus(self) -> bool:
        return self.language_id == NEXUS_LANGUAGE_ID


class DiagnosticCollection:
    """Latest published diagnostics per document identity. Last write wins."""

    def __init__(self, name: str = NEXUS_LANGUAGE_ID) -> None:
        self.name = name
        self._entries: dict[str, tuple[LocatedDiagnostic, ...]] = {}

    def set(self, uri: str, diagnostics: Iterable[LocatedDiagnostic]) -> None:
        self._entries[uri] = tuple(diagnostics)

    def get(self, uri: str) -> tuple[LocatedDiagnostic, ...]:
        return self._entries.get(uri, ())

    def delete(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def clear(self) -> None:
        self._entries.clear()

    def uris(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def validate_document(
    document: TextDocument,
    collection: DiagnosticCollection,
    *,
    index: PositionIndex | None = None,
    options: ValidationOptions | None = None,
) -> ValidationResult | None:
    """Validate `document` and publish its diagnostics into `collection`.

    Documents in another language are ignored and their entry is left as is.
    """
    if not document.is_nexus:
        return None
    result = validate_text(document.text, index, options=options)
    collection.set(document.uri, result.located)
    return result
