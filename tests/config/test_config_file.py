"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from resume_screener.config_file import load_screener_config_file
from resume_screener.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)
from tests.fakes import InMemoryFileSystem

CONFIG_PATH = Path("config/screener.toml")


def _write(fs: InMemoryFileSystem, path: Path, content: str) -> None:
    fs.write_text(content, path)


def test_load_screener_config_file_parses_valid_toml() -> None:
    fs = InMemoryFileSystem()
    _write(
        fs,
        CONFIG_PATH,
        """
schema_version = 1

[screener]
profile_path = " config/profiles.json "
profile_name = "senior"
max_workers = 4
min_total_score = 70
output_dir = "reports"
""".strip(),
    )

    parsed = load_screener_config_file(path=CONFIG_PATH, fs=fs)

    assert parsed.profile_path == "config/profiles.json"
    assert parsed.profile_name == "senior"
    assert parsed.max_workers == 4
    assert parsed.min_total_score == 70.0
    assert parsed.output_dir == "reports"


def test_missing_keys_stay_unset() -> None:
    fs = InMemoryFileSystem()
    _write(fs, CONFIG_PATH, "schema_version = 1\n[screener]\nprofile_name = \"junior\"")

    parsed = load_screener_config_file(path=CONFIG_PATH, fs=fs)

    assert parsed.profile_name == "junior"
    assert parsed.profile_path is None
    assert parsed.max_workers is None
    assert parsed.min_total_score is None


def test_load_screener_config_file_fails_when_file_missing() -> None:
    with pytest.raises(ConfigFileNotFoundError):
        load_screener_config_file(path=Path("missing.toml"), fs=InMemoryFileSystem())


def test_load_screener_config_file_fails_for_invalid_toml() -> None:
    fs = InMemoryFileSystem()
    _write(fs, CONFIG_PATH, "schema_version = 1\n[screener\nprofile_name = 'x'")

    with pytest.raises(ConfigFileParseError):
        load_screener_config_file(path=CONFIG_PATH, fs=fs)


def test_load_screener_config_file_fails_when_section_missing() -> None:
    fs = InMemoryFileSystem()
    _write(fs, CONFIG_PATH, "schema_version = 1")

    with pytest.raises(ConfigFileValidationError) as exc_info:
        load_screener_config_file(path=CONFIG_PATH, fs=fs)

    assert "screener" in str(exc_info.value)


@pytest.mark.parametrize(
    ("body", "field"),
    [
        ("schema_version = 2\n[screener]\nmax_workers = 2", "schema_version"),
        ("schema_version = 1\n[screener]\nunexpected = 'value'", "unexpected"),
        ("schema_version = 1\n[screener]\nmax_workers = 0", "max_workers"),
        ("schema_version = 1\n[screener]\nmin_total_score = 101", "min_total_score"),
        ("schema_version = 1\n[screener]\nprofile_name = '  '", "profile_name"),
    ],
)
def test_invalid_values_name_the_offending_field(body: str, field: str) -> None:
    fs = InMemoryFileSystem()
    _write(fs, CONFIG_PATH, body)

    with pytest.raises(ConfigFileValidationError) as exc_info:
        load_screener_config_file(path=CONFIG_PATH, fs=fs)

    assert field in str(exc_info.value)
