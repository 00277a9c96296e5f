"""Pytest configuration and fixtures for JarFinder tests."""

import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Generator, Iterable

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def make_jar() -> Callable[[Path, Iterable[str]], Path]:
    """Return a factory that writes a real jar with the given entry names."""

    def _make(path: Path, entries: Iterable[str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w") as zf:
            for name in entries:
                zf.writestr(name, b"" if name.endswith("/") else b"\xca\xfe\xba\xbe")
        return path

    return _make


@pytest.fixture
def sample_tree(temp_dir: Path, make_jar) -> Path:
    """A small directory tree with jars, a non-jar file, and a nested jar.

    Layout::

        root/
          lib/core.jar        com/foo/Bar.class, com/foo/Baz.java
          lib/notes.txt
          sub/deeper/util.jar org/util/Bar.class, Bar.class
    """
    root = temp_dir / "root"
    make_jar(root / "lib" / "core.jar", ["META-INF/MANIFEST.MF", "com/foo/Bar.class", "com/foo/Baz.java"])
    (root / "lib" / "notes.txt").write_text("not an archive")
    make_jar(root / "sub" / "deeper" / "util.jar", ["org/util/Bar.class", "Bar.class"])
    return root
