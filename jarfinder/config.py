"""Configuration for JarFinder, loaded from a TOML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import toml

from .walker import DEFAULT_ARCHIVE_SUFFIXES

logger = logging.getLogger(__name__)

BASE_DIR = Path(os.environ.get("JARFINDER_HOME", str(Path.home() / ".jarfinder"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class FinderConfig:
    archive_suffixes: Tuple[str, ...] = DEFAULT_ARCHIVE_SUFFIXES
    log_level: str = DEFAULT_LOG_LEVEL


def load_full_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the entire TOML config (all sections).

    Returns an empty dict when the file is missing or cannot be parsed.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, exc)
        return {}


def load_config(path: Optional[Path] = None) -> FinderConfig:
    """Build a :class:`FinderConfig` from the ``[search]`` and ``[logging]`` sections.

    Args:
        path: Config file to read. Defaults to ``CONFIG_FILE``.

    Returns:
        The parsed configuration, with defaults for anything missing or
        malformed.
    """
    full = load_full_config(path)
    search = full.get("search", {})
    logging_section = full.get("logging", {})

    suffixes = search.get("archive_suffixes", DEFAULT_ARCHIVE_SUFFIXES) if isinstance(search, dict) else None
    if (
        not isinstance(suffixes, (list, tuple))
        or not suffixes
        or not all(isinstance(s, str) and s for s in suffixes)
    ):
        logger.warning("Invalid archive_suffixes in config; using %s", DEFAULT_ARCHIVE_SUFFIXES)
        suffixes = DEFAULT_ARCHIVE_SUFFIXES

    level = logging_section.get("level", DEFAULT_LOG_LEVEL) if isinstance(logging_section, dict) else None
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        logger.warning("Invalid logging level %r in config; using %s", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL

    return FinderConfig(archive_suffixes=tuple(suffixes), log_level=level.upper())


def save_config(config: FinderConfig, path: Optional[Path] = None) -> bool:
    """Write *config* to TOML, preserving unrelated sections already in the file.

    Returns:
        True if saved successfully, False otherwise.
    """
    config_path = path or CONFIG_FILE
    full = load_full_config(config_path)
    full["search"] = {"archive_suffixes": list(config.archive_suffixes)}
    full["logging"] = {"level": config.log_level}
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(full, f)
        return True
    except OSError as exc:
        logger.warning("Could not write config file %s: %s", config_path, exc)
        return False
