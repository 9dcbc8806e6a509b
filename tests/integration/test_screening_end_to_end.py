"""End-to-end screening against the local filesystem."""

import json
from pathlib import Path

import pandas as pd

from resume_screener.application.screening import run_screening
from resume_screener.config import ScreenerConfig
from resume_screener.infrastructure import LocalFileSystem
from tests.support.candidates import write_candidate_file
from tests.support.scoring_profiles import write_scoring_profile_catalog_fixture


def test_run_screening_with_local_files(tmp_path: Path) -> None:
    fs = LocalFileSystem()
    candidates_path = tmp_path / "candidates.json"
    profiles_path = tmp_path / "profiles.json"
    write_candidate_file(fs=fs, path=candidates_path)
    write_scoring_profile_catalog_fixture(fs=fs, path=profiles_path)
    config = ScreenerConfig(profile_path=str(profiles_path), min_total_score=0.0)

    outs = run_screening(candidates_path, out_dir=tmp_path / "out", config=config, fs=fs)

    rankings = pd.read_csv(outs["rankings"])
    assert rankings["rank"].tolist() == [1, 2]
    assert rankings["profile_id"].tolist() == ["frontend", "frontend"]
    shortlist = pd.read_csv(outs["shortlist"])
    assert len(shortlist) == 2
    statistics = json.loads(fs.read_text(outs["statistics"]))
    assert statistics["total_scored"] == 2
    assert statistics["most_used_profile"] == "frontend"
    results = json.loads(fs.read_text(outs["results"]))
    assert results["profile_id"] == "frontend"
