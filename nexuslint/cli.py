"""
nexuslint command-line interface

Validates NEXUS files and prints one line per diagnostic::

    data/primates.nex:12:5: error: Mismatch: NTAX is set to 5, but MATRIX contains 4 taxa. [MATRIX_NTAX_MISMATCH]

Usage
-----
::

    nexuslint data/primates.nex
    nexuslint data/ --stats
    nexuslint data/*.nex --strict --anchor first

Exit status is 0 when no errors were found, 1 when errors were found (or
warnings, with ``--strict``) and 2 when an input could not be read.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from nexuslint.diagnostics import LocatedDiagnostic, count_by_severity
from nexuslint.exceptions import NexusFileError
from nexuslint.io import collect_nexus_files, load_nexus_text
from nexuslint.validate import RowAnchor, ValidationOptions, ValidationResult, validate_text

logger = logging.getLogger("nexuslint.cli")

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_UNREADABLE = 2


def format_diagnostic(path: str, diagnostic: LocatedDiagnostic) -> str:
    """Render a diagnostic as `path:line:col: severity: message [code]` (1-based)."""
    return (
        f"{path}:{diagnostic.start.line + 1}:{diagnostic.start.column + 1}: "
        f"{diagnostic.severity}: {diagnostic.message} [{diagnostic.code}]"
    )


def format_stats(path: str, result: ValidationResult) -> str:
    stats = result.stats
    declared_ntax = stats.declared_ntax if stats.declared_ntax is not None else "-"
    declared_nchar = stats.declared_nchar if stats.declared_nchar is not None else "-"
    return (
        f"{path}: NTAX={declared_ntax} NCHAR={declared_nchar} "
        f"taxa={stats.taxa_count} max_length={stats.max_sequence_length}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexuslint",
        description="Check NEXUS files for unbalanced comments/quotes and NTAX/NCHAR mismatches",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="NEXUS files, or directories to search for .nex/.nexus/.nxs files",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print declared and observed counts for every file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 on warnings as well as errors",
    )
    parser.add_argument(
        "--no-row-check",
        action="store_true",
        help="Skip per-taxon sequence length warnings",
    )
    parser.add_argument(
        "--anchor",
        type=RowAnchor,
        choices=list(RowAnchor),
        default=RowAnchor.LATEST,
        help="Row an interleaved taxon's length warning points at (default: latest)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar shown when checking several files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")

    options = ValidationOptions(
        check_row_lengths=not args.no_row_check,
        row_anchor=args.anchor,
    )

    files: list[Path] = []
    for path in args.paths:
        found = collect_nexus_files(path) if path.exists() else [path]
        if not found:
            logger.warning("No NEXUS files found under %s", path)
        files.extend(found)

    unreadable = 0
    errors = 0
    warnings = 0
    show_progress = not args.no_progress and len(files) > 1
    for file_path in tqdm(files, desc="nexuslint", unit="file", disable=not show_progress):
        display = str(file_path).replace("\\", "/")
        try:
            text = load_nexus_text(file_path)
        except NexusFileError as exc:
            logger.error("Cannot read %s", exc)
            unreadable += 1
            continue

        result = validate_text(text, options=options)
        for diagnostic in result.located:
            tqdm.write(format_diagnostic(display, diagnostic))
        if args.stats:
            tqdm.write(format_stats(display, result))

        counts = count_by_severity(result.located)
        errors += counts["error"]
        warnings += counts["warning"]

    logger.info("%d file(s): %d error(s), %d warning(s)", len(files), errors, warnings)

    if unreadable:
        return EXIT_UNREADABLE
    if errors or (args.strict and warnings):
        return EXIT_DIAGNOSTICS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
