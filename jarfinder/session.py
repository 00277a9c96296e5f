"""Search sessions: one query evaluated lazily against one search root."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .config import FinderConfig
from .models import Match, Query
from .scanner import ArchiveScanner
from .walker import TreeWalker

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SearchState(Enum):
    NOT_SEARCHED = "not_searched"
    SEARCHING = "searching"
    COMPLETED = "completed"


class SearchSession:
    """Caches the matches of one query under one root until refreshed.

    The first read of :attr:`matches` or :meth:`match_count` runs the walk
    synchronously. :meth:`refresh` discards the cached matches and walks the
    tree again from scratch. Sessions are not thread-safe.
    """

    def __init__(self, query: Query, root: Optional[PathLike], walker: Optional[TreeWalker] = None) -> None:
        self.query = query
        self.root = root
        self.walker = walker or TreeWalker()
        self.state = SearchState.NOT_SEARCHED
        self._matches: List[Match] = []

    def search(self) -> Tuple[Match, ...]:
        """Run the walk unless it has already completed."""
        if self.state is SearchState.NOT_SEARCHED:
            self.state = SearchState.SEARCHING
            self._matches = []
            root = Path(self.root) if self.root is not None else None
            completed = False
            try:
                self._matches = self.walker.walk(root, self.query)
                completed = True
            finally:
                # An interrupted walk must be redone on the next read.
                self.state = SearchState.COMPLETED if completed else SearchState.NOT_SEARCHED
            logger.info(
                "Search for '%s' under %s found %d match(es)",
                self.query.class_name, self.root, len(self._matches),
            )
        return tuple(self._matches)

    def refresh(self) -> Tuple[Match, ...]:
        self.state = SearchState.NOT_SEARCHED
        self._matches = []
        return self.search()

    @property
    def matches(self) -> Tuple[Match, ...]:
        return self.search()

    def match_count(self) -> int:
        return len(self.search())


class JarFinder:
    """Entry point tying the query builder, walker and scanner together."""

    def __init__(self, config: Optional[FinderConfig] = None):
        self.config = config or FinderConfig()
        self.walker = TreeWalker(ArchiveScanner(), self.config.archive_suffixes)

    def session(self, class_name: str, root: Optional[PathLike]) -> SearchSession:
        return SearchSession(Query.from_class_name(class_name), root, self.walker)

    def sessions(self, class_name: str, roots: Sequence[PathLike]) -> List[SearchSession]:
        """One independent, not-yet-run session per root, sharing a single query."""
        query = Query.from_class_name(class_name)
        return [SearchSession(query, root, self.walker) for root in roots]

    def search(self, class_name: str, roots: Sequence[PathLike]) -> List[Match]:
        """Search every root in order and return all matches.

        Raises:
            InvalidPathKind: If a root is neither an archive nor a directory.
        """
        matches: List[Match] = []
        for session in self.sessions(class_name, roots):
            matches.extend(session.search())
        return matches
