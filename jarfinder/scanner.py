"""Archive scanner: inspect one archive's entry index for a query.

Archives are ZIP containers (``.jar`` by convention). Only entry names are
examined; entry contents are never read.

Matching runs in two phases:

- **Exact** - look up the compiled path, then (only if that misses) the
  source path, directly in the entry index.
- **Bare name** - for unqualified queries, enumerate every entry and keep
  those ending in ``/<compiled path>`` or ``/<source path>``. This phase
  runs even when the exact phase already matched.

A broken archive never aborts a search: open and read failures are logged
and the archive contributes no matches.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List

from .errors import ArchiveError, ArchiveOpenFailure, ArchiveReadFailure
from .models import Match, MatchKind, Query, entry_to_class_name

logger = logging.getLogger(__name__)


class ArchiveScanner:
    """Find compiled or source forms of a class inside a single archive."""

    def scan(self, archive: Path, query: Query) -> List[Match]:
        try:
            if archive.stat().st_size == 0:
                logger.debug("Skipping empty archive %s", archive)
                return []
            archive_name = str(archive.resolve())
            zf = self._open(archive)
        except ArchiveError as exc:
            logger.warning("%s", exc)
            return []
        except OSError as exc:
            logger.warning("%s", ArchiveOpenFailure(archive, exc))
            return []

        try:
            return self._match_entries(zf, archive, archive_name, query)
        except ArchiveError as exc:
            logger.warning("%s", exc)
            return []
        finally:
            zf.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _open(archive: Path) -> zipfile.ZipFile:
        try:
            return zipfile.ZipFile(archive)
        except (zipfile.BadZipFile, OSError, ValueError) as exc:
            raise ArchiveOpenFailure(archive, exc) from exc

    def _match_entries(
        self,
        zf: zipfile.ZipFile,
        archive: Path,
        archive_name: str,
        query: Query,
    ) -> List[Match]:
        try:
            names = zf.namelist()
        except (zipfile.BadZipFile, OSError, RuntimeError) as exc:
            raise ArchiveReadFailure(archive, exc) from exc

        matches: List[Match] = []
        index = set(names)

        if query.compiled_path in index:
            matches.append(Match(archive_name, query.class_name, MatchKind.COMPILED))
        elif query.source_path in index:
            matches.append(Match(archive_name, query.class_name, MatchKind.SOURCE))

        if query.is_bare:
            compiled_tail = "/" + query.compiled_path
            source_tail = "/" + query.source_path
            for name in names:
                if name.endswith(compiled_tail):
                    matches.append(Match(archive_name, entry_to_class_name(name), MatchKind.COMPILED))
                elif name.endswith(source_tail):
                    matches.append(Match(archive_name, entry_to_class_name(name), MatchKind.SOURCE))

        return matches
