"""Centralised, injectable configuration for the resume screener."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import ScreenerConfigFile

DEFAULT_MIN_TOTAL_SCORE = 55.0
DEFAULT_OUTPUT_DIR = "data/processed"


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class ScoreRangeEnvVarError(ValueError):
    """Raised when an environment variable must be a score between 0 and 100."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a number between 0 and 100.")


@dataclass(frozen=True)
class ScreenerConfig:
    """Immutable configuration object for screening runs.

    Load from environment with `ScreenerConfig.from_env()` or construct directly for testing.
    """

    # Scoring profile catalogue; empty path means the built-in catalogue
    profile_path: str = ""
    profile_name: str = ""

    # Batch scoring
    max_workers: int = 1
    min_total_score: float = DEFAULT_MIN_TOTAL_SCORE

    output_dir: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            ScreenerConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            profile_path=os.getenv("SCORING_PROFILE_PATH", "").strip(),
            profile_name=os.getenv("SCORING_PROFILE", "").strip(),
            max_workers=_parse_positive_int(
                os.getenv("SCORING_MAX_WORKERS", "1"), env_name="SCORING_MAX_WORKERS"
            ),
            min_total_score=_parse_score(
                os.getenv("SHORTLIST_MIN_SCORE", str(DEFAULT_MIN_TOTAL_SCORE)),
                env_name="SHORTLIST_MIN_SCORE",
            ),
            output_dir=os.getenv("OUTPUT_DIR", DEFAULT_OUTPUT_DIR).strip() or DEFAULT_OUTPUT_DIR,
        )

    def with_overrides(
        self,
        *,
        profile_path: str | None = None,
        profile_name: str | None = None,
        max_workers: int | None = None,
        min_total_score: float | None = None,
        output_dir: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            profile_path=self.profile_path if profile_path is None else profile_path.strip(),
            profile_name=self.profile_name if profile_name is None else profile_name.strip(),
            max_workers=self.max_workers if max_workers is None else max_workers,
            min_total_score=self.min_total_score if min_total_score is None else min_total_score,
            output_dir=self.output_dir if output_dir is None else output_dir.strip(),
        )

    def with_file_overrides(self, file_config: ScreenerConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            profile_path=self.profile_path
            if file_config.profile_path is None
            else file_config.profile_path,
            profile_name=self.profile_name
            if file_config.profile_name is None
            else file_config.profile_name,
            max_workers=self.max_workers
            if file_config.max_workers is None
            else file_config.max_workers,
            min_total_score=self.min_total_score
            if file_config.min_total_score is None
            else file_config.min_total_score,
            output_dir=self.output_dir
            if file_config.output_dir is None
            else file_config.output_dir,
        )


def _parse_positive_int(value: str, *, env_name: str) -> int:
    """Parse a positive integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_score(value: str, *, env_name: str) -> float:
    """Parse a 0-100 score from an environment variable."""
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise ScoreRangeEnvVarError(env_name) from exc
    if parsed < 0.0 or parsed > 100.0:
        raise ScoreRangeEnvVarError(env_name)
    return parsed
