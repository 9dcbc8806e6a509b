"""Tests for batch screening outputs."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from resume_screener.application.screening import run_scoring, run_screening
from resume_screener.config import ScreenerConfig
from resume_screener.exceptions import ScreenerConfigMissingError, ScoringProfileSelectionError
from resume_screener.schemas import RANKING_OUTPUT_COLUMNS
from tests.fakes import InMemoryFileSystem
from tests.support.candidates import write_candidate_file
from tests.support.scoring_profiles import write_scoring_profile_catalog_fixture

CANDIDATES_PATH = Path("data/candidates.json")
OUT_DIR = Path("out")


def _fs_with_candidates() -> InMemoryFileSystem:
    fs = InMemoryFileSystem()
    write_candidate_file(fs=fs, path=CANDIDATES_PATH)
    return fs


def test_run_screening_writes_all_outputs() -> None:
    fs = _fs_with_candidates()

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(), fs=fs)

    assert outs == {
        "results": OUT_DIR / "score_results.json",
        "rankings": OUT_DIR / "rankings.csv",
        "shortlist": OUT_DIR / "shortlist.csv",
        "statistics": OUT_DIR / "statistics.json",
    }
    for path in outs.values():
        assert fs.exists(path)


def test_rankings_are_ordered_and_complete() -> None:
    fs = _fs_with_candidates()

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(), fs=fs)

    rankings = fs.read_csv(outs["rankings"])
    assert list(rankings.columns) == list(RANKING_OUTPUT_COLUMNS)
    assert rankings["rank"].tolist() == [1, 2]
    assert rankings["candidate_id"].tolist() == ["jane@example.com", "Sam Lee"]
    assert rankings["profile_id"].tolist() == ["default", "default"]
    totals = rankings["total_score"].tolist()
    assert totals[0] > totals[1]


def test_results_payload_carries_rank_and_timestamp() -> None:
    fs = _fs_with_candidates()

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(), fs=fs)

    payload = fs.read_json(outs["results"])
    assert payload["profile_id"] == "default"
    results = payload["results"]
    assert isinstance(results, list)
    assert [entry["rank"] for entry in results] == [1, 2]
    assert isinstance(results[0]["scored_at"], str)
    assert results[0]["scored_by"] == "automated-pass1"


@pytest.mark.parametrize(("min_score", "expected_rows"), [(0.0, 2), (100.0, 0)])
def test_shortlist_applies_minimum_total_score(min_score: float, expected_rows: int) -> None:
    fs = _fs_with_candidates()
    config = ScreenerConfig(min_total_score=min_score)

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=config, fs=fs)

    shortlist = fs.read_csv(outs["shortlist"])
    assert len(shortlist) == expected_rows


def test_shortlist_is_rankings_at_or_above_threshold() -> None:
    fs = _fs_with_candidates()
    config = ScreenerConfig(min_total_score=30.0)

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=config, fs=fs)

    rankings = fs.read_csv(outs["rankings"])
    shortlist = fs.read_csv(outs["shortlist"])
    expected = rankings[rankings["total_score"] >= 30.0]
    pd.testing.assert_frame_equal(shortlist, expected)


def test_statistics_summarise_the_batch() -> None:
    fs = _fs_with_candidates()

    outs = run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(), fs=fs)

    stats = fs.read_json(outs["statistics"])
    assert stats["total_scored"] == 2
    assert stats["most_used_profile"] == "default"
    distribution = stats["verdict_distribution"]
    assert isinstance(distribution, dict)
    assert sum(distribution.values()) == 2


def test_output_dir_defaults_to_config() -> None:
    fs = _fs_with_candidates()
    config = ScreenerConfig(output_dir="reports")

    outs = run_screening(CANDIDATES_PATH, config=config, fs=fs)

    assert outs["rankings"] == Path("reports/rankings.csv")


def test_threaded_screening_matches_sequential() -> None:
    sequential_fs = _fs_with_candidates()
    threaded_fs = _fs_with_candidates()

    sequential = run_screening(
        CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(), fs=sequential_fs
    )
    threaded = run_screening(
        CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(max_workers=4), fs=threaded_fs
    )

    pd.testing.assert_frame_equal(
        sequential_fs.read_csv(sequential["rankings"]),
        threaded_fs.read_csv(threaded["rankings"]),
    )


def test_profile_selection_uses_configured_catalogue() -> None:
    fs = _fs_with_candidates()
    profiles_path = Path("config/profiles.json")
    write_scoring_profile_catalog_fixture(fs=fs, path=profiles_path)
    config = ScreenerConfig(profile_path=str(profiles_path), profile_name="backend")

    results = run_scoring(CANDIDATES_PATH, config=config, fs=fs)

    assert [result.profile_id for result in results] == ["backend", "backend"]
    assert [result.candidate_id for result in results] == ["jane@example.com", "Sam Lee"]


def test_unknown_profile_fails_before_scoring() -> None:
    fs = _fs_with_candidates()

    with pytest.raises(ScoringProfileSelectionError):
        run_screening(
            CANDIDATES_PATH, out_dir=OUT_DIR, config=ScreenerConfig(profile_name="staff"), fs=fs
        )

    assert not fs.exists(OUT_DIR / "rankings.csv")


def test_config_is_required() -> None:
    with pytest.raises(ScreenerConfigMissingError):
        run_screening(CANDIDATES_PATH, out_dir=OUT_DIR, config=None, fs=InMemoryFileSystem())

    with pytest.raises(ScreenerConfigMissingError):
        run_scoring(CANDIDATES_PATH, config=None, fs=InMemoryFileSystem())
