"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from nexuslint.diagnostics.codes import Severity
from nexuslint.diagnostics.diagnostic import Diagnostic, LocatedDiagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic | LocatedDiagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic | LocatedDiagnostic]) -> dict[Severity, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {"error": counts["error"], "warning": counts["warning"]}
