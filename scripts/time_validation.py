#!/usr/bin/env python3
"""Per-stage timings for NEXUS validation over a directory of files.

Each stage of a validation pass (bracket balance, header extraction, MATRIX
parsing, the full `validate_text` call) is timed on its own so a slowdown can
be pinned to the stage that caused it.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
import time

from tqdm import tqdm

from nexuslint.header import extract_header
from nexuslint.io import collect_nexus_files, load_nexus_text
from nexuslint.matrix import parse_matrix
from nexuslint.scanner import scan_balance
from nexuslint.validate import validate_text

STAGES: dict[str, Callable[[str], object]] = {
    "scan_balance": scan_balance,
    "extract_header": extract_header,
    "parse_matrix": parse_matrix,
    "validate_text": validate_text,
}


@dataclass(slots=True)
class StageTiming:
    name: str
    seconds: list[float] = field(default_factory=list)

    @property
    def best(self) -> float:
        return min(self.seconds)

    def share_of(self, total: float) -> float:
        return self.best / total * 100 if total else 0.0


def _time_stage(stage: Callable[[str], object], texts: list[str]) -> float:
    start = time.perf_counter()
    for text in texts:
        stage(text)
    return time.perf_counter() - start


def _corpus_summary(texts: list[str]) -> str:
    taxa = 0
    diagnostics = 0
    blocks = 0
    for text in texts:
        result = validate_text(text)
        taxa += result.stats.taxa_count
        diagnostics += len(result.diagnostics)
        blocks += result.matrix.found_block
    return (
        f"files={len(texts)} chars={sum(len(text) for text in texts)} "
        f"matrix_blocks={blocks} taxa={taxa} diagnostics={diagnostics}"
    )


def _print_report(timings: list[StageTiming], total_chars: int) -> None:
    full_pass = next(timing for timing in timings if timing.name == "validate_text").best
    width = max(len(timing.name) for timing in timings)
    print(f"{'stage':<{width}}  {'best':>9}  {'worst':>9}  {'Mchar/s':>8}  {'% of pass':>9}")
    for timing in timings:
        rate = total_chars / timing.best / 1_000_000 if timing.best else float("inf")
        print(
            f"{timing.name:<{width}}  {timing.best:>8.4f}s  {max(timing.seconds):>8.4f}s  "
            f"{rate:>8.2f}  {timing.share_of(full_pass):>8.1f}%"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time each NEXUS validation stage")
    parser.add_argument("root", type=Path, help="Directory containing .nex/.nexus/.nxs files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs per stage")
    parser.add_argument(
        "--stage",
        action="append",
        choices=sorted(STAGES),
        help="Only time this stage (repeatable; validate_text is always timed)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    args = parser.parse_args(argv)

    files = collect_nexus_files(args.root)
    if not files:
        raise SystemExit(f"No NEXUS files found under {args.root}")

    # loaded once so disk access stays out of the timings
    texts = [load_nexus_text(path) for path in files]
    total_chars = sum(len(text) for text in texts)

    selected = [name for name in STAGES if not args.stage or name in args.stage or name == "validate_text"]
    timings = [StageTiming(name) for name in selected]
    runs = max(args.runs, 1)

    with tqdm(total=len(timings) * runs, desc="timing", unit="run", disable=args.no_progress) as progress:
        for timing in timings:
            stage = STAGES[timing.name]
            # one untimed pass so regex compilation and caches are warm
            _time_stage(stage, texts)
            for _ in range(runs):
                timing.seconds.append(_time_stage(stage, texts))
                progress.update()

    print(_corpus_summary(texts))
    _print_report(timings, total_chars)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
