"""Tests for TOML configuration loading."""

from pathlib import Path

import toml

from jarfinder.config import FinderConfig, load_config, save_config


def test_missing_file_gives_defaults(temp_dir: Path):
    config = load_config(temp_dir / "absent.toml")

    assert config == FinderConfig()
    assert config.archive_suffixes == (".jar",)
    assert config.log_level == "WARNING"


def test_loads_search_and_logging_sections(temp_dir: Path):
    path = temp_dir / "config.toml"
    path.write_text('[search]\narchive_suffixes = [".jar", ".war"]\n\n[logging]\nlevel = "debug"\n')

    config = load_config(path)

    assert config.archive_suffixes == (".jar", ".war")
    assert config.log_level == "DEBUG"


def test_malformed_file_falls_back_to_defaults(temp_dir: Path, caplog):
    path = temp_dir / "config.toml"
    path.write_text("[search\narchive_suffixes = ")

    assert load_config(path) == FinderConfig()
    assert any("config" in r.getMessage() for r in caplog.records)


def test_invalid_values_fall_back(temp_dir: Path):
    path = temp_dir / "config.toml"
    path.write_text('[search]\narchive_suffixes = "jar"\n\n[logging]\nlevel = "LOUD"\n')

    assert load_config(path) == FinderConfig()


def test_save_preserves_other_sections(temp_dir: Path):
    path = temp_dir / "nested" / "config.toml"
    path.parent.mkdir()
    path.write_text('[extra]\nkeep = true\n')

    assert save_config(FinderConfig(archive_suffixes=(".jar", ".ear"), log_level="INFO"), path)

    data = toml.load(path)
    assert data["extra"] == {"keep": True}
    assert load_config(path) == FinderConfig(archive_suffixes=(".jar", ".ear"), log_level="INFO")
