"""JarFinder: locate which archives on disk provide a given class."""

__version__ = "1.0.0"

from .models import Match, MatchKind, Query
from .session import JarFinder, SearchSession, SearchState

__all__ = [
    "JarFinder",
    "Match",
    "MatchKind",
    "Query",
    "SearchSession",
    "SearchState",
    "__version__",
]
