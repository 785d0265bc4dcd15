"""
Exception hierarchy for nexuslint

Problems inside a document are never raised; they come back as
diagnostics. Exceptions are reserved for failures around the document,
such as a file that cannot be read.

::

    NexusLintError
    └── NexusFileError      # unreadable or undecodable input file
"""

from __future__ import annotations


class NexusLintError(Exception):
    """Base exception for all nexuslint errors."""


class NexusFileError(NexusLintError):
    """Raised when a NEXUS file cannot be read or decoded as UTF-8.

    Parameters
    ----------
    path : str
        The file that failed to load.
    reason : str
        Human-readable description of the failure.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
