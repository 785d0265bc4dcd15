"""Loading NEXUS documents from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from nexuslint.exceptions import NexusFileError

logger = logging.getLogger(__name__)

NEXUS_SUFFIXES = (".nex", ".nexus", ".nxs")


def load_nexus_text(path: str | Path) -> str:
    """Read a NEXUS file as UTF-8, dropping a leading byte-order mark."""
    file_path = Path(path)
    try:
        decoded = file_path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise NexusFileError(str(file_path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise NexusFileError(str(file_path), f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    if decoded.startswith("\ufeff"):
        logger.debug("Stripped BOM from %s", file_path)
        decoded = decoded[1:]
    return decoded


def collect_nexus_files(root: str | Path) -> list[Path]:
    """All NEXUS files under `root`, sorted."""
    root_path = Path(root)
    if root_path.is_file():
        return [root_path]
    return sorted(path for path in root_path.rglob("*") if path.is_file() and path.suffix.lower() in NEXUS_SUFFIXES)
