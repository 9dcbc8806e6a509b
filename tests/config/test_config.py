"""Tests for ScreenerConfig behaviour."""

import pytest

import resume_screener.config as config_module
from resume_screener.config import (
    PositiveIntegerEnvVarError,
    ScoreRangeEnvVarError,
    ScreenerConfig,
)


def _patch_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_defaults() -> None:
    config = ScreenerConfig()

    assert config.profile_path == ""
    assert config.profile_name == ""
    assert config.max_workers == 1
    assert config.min_total_score == 55.0
    assert config.output_dir == "data/processed"


def test_from_env_reads_screener_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(
        monkeypatch,
        {
            "SCORING_PROFILE_PATH": " config/profiles.json ",
            "SCORING_PROFILE": "senior",
            "SCORING_MAX_WORKERS": "4",
            "SHORTLIST_MIN_SCORE": "70",
            "OUTPUT_DIR": "reports",
        },
    )

    config = ScreenerConfig.from_env()

    assert config.profile_path == "config/profiles.json"
    assert config.profile_name == "senior"
    assert config.max_workers == 4
    assert config.min_total_score == 70.0
    assert config.output_dir == "reports"


def test_from_env_uses_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {})

    assert ScreenerConfig.from_env() == ScreenerConfig()


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_from_env_rejects_invalid_worker_count(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    _patch_env(monkeypatch, {"SCORING_MAX_WORKERS": value})

    with pytest.raises(PositiveIntegerEnvVarError, match="SCORING_MAX_WORKERS"):
        ScreenerConfig.from_env()


@pytest.mark.parametrize("value", ["-1", "100.5", "high"])
def test_from_env_rejects_invalid_min_score(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    _patch_env(monkeypatch, {"SHORTLIST_MIN_SCORE": value})

    with pytest.raises(ScoreRangeEnvVarError, match="SHORTLIST_MIN_SCORE"):
        ScreenerConfig.from_env()


def test_with_overrides_preserves_fields() -> None:
    base = ScreenerConfig(
        profile_path="config/profiles.json",
        profile_name="senior",
        max_workers=2,
        min_total_score=60.0,
        output_dir="reports",
    )

    updated = base.with_overrides(profile_name=" junior ", min_total_score=40.0)

    assert updated.profile_name == "junior"
    assert updated.min_total_score == 40.0
    assert updated.profile_path == base.profile_path
    assert updated.max_workers == base.max_workers
    assert updated.output_dir == base.output_dir
    assert base.profile_name == "senior"
