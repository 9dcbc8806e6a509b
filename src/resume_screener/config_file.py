"""Typed parsing and validation for screener config files.

Usage example:
    schema_version = 1

    [screener]
    profile_name = "senior"
    max_workers = 4
    min_total_score = 70
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ScreenerConfigFile:
    """Validated screener config values loaded from a TOML file."""

    profile_path: str | None = None
    profile_name: str | None = None
    max_workers: int | None = None
    min_total_score: float | None = None
    output_dir: str | None = None


class _ScreenerSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    profile_path: str | None = None
    profile_name: str | None = None
    max_workers: int | None = None
    min_total_score: float | None = None
    output_dir: str | None = None

    @field_validator("profile_path", "profile_name", "output_dir")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("max_workers")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator("min_total_score")
    @classmethod
    def _validate_score_range(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value < 0.0 or value > 100.0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    screener: _ScreenerSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_screener_config_file(*, path: Path, fs: FileSystem) -> ScreenerConfigFile:
    """Load and validate a screener TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.screener
    return ScreenerConfigFile(
        profile_path=section.profile_path,
        profile_name=section.profile_name,
        max_workers=section.max_workers,
        min_total_score=section.min_total_score,
        output_dir=section.output_dir,
    )
