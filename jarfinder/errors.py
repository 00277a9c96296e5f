"""Exceptions raised while walking search roots and reading archives."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class JarFinderError(Exception):
    """Base class for every error raised by jarfinder."""


class InvalidArgument(JarFinderError, ValueError):
    """A required argument was missing (for example a ``None`` search root)."""


class InvalidPathKind(JarFinderError, ValueError):
    """A search root is neither an archive file nor a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"'{path}' is neither an archive nor a directory")


class ArchiveError(JarFinderError):
    """A single archive could not be inspected."""

    action = "read"

    def __init__(self, archive: Path, cause: Optional[BaseException] = None) -> None:
        self.archive = archive
        self.cause = cause
        message = f"Failed to {self.action} archive {archive}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ArchiveOpenFailure(ArchiveError):
    action = "open"


class ArchiveReadFailure(ArchiveError):
    action = "read"
