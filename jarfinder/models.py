"""Value types shared by the query builder, scanner, walker and session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CLASS_SUFFIX = ".class"
SOURCE_SUFFIX = ".java"


class MatchKind(str, Enum):
    COMPILED = "compiled"
    SOURCE = "source"


@dataclass(frozen=True)
class Query:
    """A class name plus the two entry paths it may live under inside an archive."""

    class_name: str
    compiled_path: str
    source_path: str
    is_bare: bool

    @classmethod
    def from_class_name(cls, class_name: str) -> "Query":
        """Build a query from a dotted name such as ``com.foo.Bar``.

        The transformation is purely textual: every ``.`` becomes ``/`` and
        ``.class`` is appended; the source path swaps that suffix for
        ``.java``. A name without any ``.`` is bare and is matched in every
        package of an archive.
        """
        compiled_path = class_name.replace(".", "/") + CLASS_SUFFIX
        source_path = compiled_path[: -len(CLASS_SUFFIX)] + SOURCE_SUFFIX
        return cls(
            class_name=class_name,
            compiled_path=compiled_path,
            source_path=source_path,
            is_bare="." not in class_name,
        )


@dataclass(frozen=True)
class Match:
    archive_path: str
    class_name: str
    kind: MatchKind


def entry_to_class_name(entry_name: str) -> str:
    """Turn an archive entry path like ``a/b/X.class`` into ``a.b.X``."""
    class_name = entry_name.replace("/", ".")
    if class_name.startswith("."):
        class_name = class_name[1:]
    class_name = class_name.removesuffix(CLASS_SUFFIX)
    return class_name.removesuffix(SOURCE_SUFFIX)
