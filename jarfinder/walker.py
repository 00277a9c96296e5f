"""Depth-first traversal of a search root, scanning every archive found."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .errors import InvalidArgument, InvalidPathKind
from .models import Match, Query
from .scanner import ArchiveScanner

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_SUFFIXES = (".jar",)


class TreeWalker:
    """Walk a file or directory tree and feed archives to an :class:`ArchiveScanner`.

    Children are visited in the order the filesystem lists them, and a
    subdirectory is fully walked before its later siblings. Directory
    symlinks are followed; there is no cycle detection.
    """

    def __init__(
        self,
        scanner: Optional[ArchiveScanner] = None,
        archive_suffixes: Sequence[str] = DEFAULT_ARCHIVE_SUFFIXES,
    ) -> None:
        self.scanner = scanner or ArchiveScanner()
        self.archive_suffixes = tuple(archive_suffixes)

    def is_archive(self, path: Path) -> bool:
        return path.name.endswith(self.archive_suffixes)

    def iter_archives(self, root: Optional[Path]) -> Iterator[Path]:
        """Yield every archive under *root* in discovery order."""
        if root is None:
            raise InvalidArgument("Can't search a null root")
        root = Path(root)

        if root.is_file() and self.is_archive(root):
            yield root
            return
        if not root.is_dir():
            raise InvalidPathKind(root)

        # One listing iterator per open directory; the top one is being read.
        stack: List[Iterator[Path]] = [iter(self._list_dir(root))]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            elif child.is_dir():
                stack.append(iter(self._list_dir(child)))
            elif child.is_file() and self.is_archive(child):
                yield child

    def walk(self, root: Optional[Path], query: Query) -> List[Match]:
        """Scan every archive under *root* and return their matches in order."""
        matches: List[Match] = []
        for archive in self.iter_archives(root):
            logger.debug("Scanning %s", archive)
            matches.extend(self.scanner.scan(archive, query))
        return matches

    @staticmethod
    def _list_dir(directory: Path) -> List[Path]:
        try:
            return list(directory.iterdir())
        except OSError as exc:
            logger.warning("Cannot list directory %s: %s", directory, exc)
            return []
