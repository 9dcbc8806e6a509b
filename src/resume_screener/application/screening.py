"""Batch screening: score, rank and shortlist a file of candidates.

Outputs:
- score_results.json: ranked ScoreResult payloads
- rankings.csv: one row per candidate, best first
- shortlist.csv: rankings at or above the configured minimum total score
- statistics.json: batch summary (averages, verdict distribution)
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..config import ScreenerConfig
from ..domain.ranking import RankedCandidate, rank_candidates, summarise_scores
from ..domain.scoring import ScoreResult, score_resume
from ..domain.scoring_profiles import ScoringProfile
from ..exceptions import ScreenerConfigMissingError
from ..infrastructure import LocalFileSystem
from ..observability import get_logger
from ..protocols import FileSystem
from ..schemas import (
    RANKING_OUTPUT_COLUMNS,
    SHORTLIST_REQUIRED_COLUMNS,
    validate_columns,
)
from .candidates import load_candidate_records
from .scoring_profiles import load_configured_catalog, resolve_scoring_profile


def load_configured_profile(config: ScreenerConfig, fs: FileSystem) -> ScoringProfile:
    """Resolve the profile named by config from its catalogue."""
    catalog = load_configured_catalog(profile_path=config.profile_path, fs=fs)
    return resolve_scoring_profile(catalog, config.profile_name or None)


def ranking_rows(ranked: list[RankedCandidate]) -> pd.DataFrame:
    rows = []
    for entry in ranked:
        result = entry.score
        row: dict[str, object] = {
            "rank": entry.rank,
            "candidate_id": result.candidate_id,
            "name": entry.candidate.name,
            "resume_file_name": result.resume_file_name or "",
            "profile_id": result.profile_id,
            "total_score": result.total_score,
            "weighted_score": result.weighted_score,
            "company_caliber": result.company_caliber,
            "caliber_multiplier": result.caliber_multiplier,
            "verdict": result.verdict,
            "verdict_label": result.verdict_label,
            "verdict_action": result.verdict_action,
        }
        for category, category_score in result.breakdown.items():
            row[f"{category}_percentage"] = round(category_score.percentage, 1)
        row["strengths"] = " | ".join(result.strengths)
        row["concerns"] = " | ".join(result.concerns)
        rows.append(row)
    return pd.DataFrame(rows, columns=list(RANKING_OUTPUT_COLUMNS))


def run_scoring(
    candidates_path: str | Path,
    config: ScreenerConfig | None = None,
    fs: FileSystem | None = None,
) -> list[ScoreResult]:
    """Score every candidate in a file, in file order."""
    if config is None:
        raise ScreenerConfigMissingError()

    fs = fs or LocalFileSystem()
    logger = get_logger("resume_screener.scoring")
    profile = load_configured_profile(config, fs)
    candidates = load_candidate_records(path=Path(candidates_path), fs=fs)
    logger.info("Scoring %s candidates with profile %s", len(candidates), profile.id)
    return [score_resume(candidate, profile) for candidate in candidates]


def run_screening(
    candidates_path: str | Path,
    out_dir: str | Path | None = None,
    config: ScreenerConfig | None = None,
    fs: FileSystem | None = None,
) -> dict[str, Path]:
    """Rank a candidate file and write the screening outputs.

    Args:
        candidates_path: Path to a JSON candidate file.
        out_dir: Directory for output files; defaults to ``config.output_dir``.
        config: Screener configuration (required; load at entry point).
        fs: Optional filesystem for testing.

    Returns:
        Dict with paths to results, rankings, shortlist, and statistics files.
    """
    if config is None:
        raise ScreenerConfigMissingError()

    fs = fs or LocalFileSystem()
    logger = get_logger("resume_screener.screening")
    out_path = Path(out_dir) if out_dir is not None else Path(config.output_dir)
    fs.mkdir(out_path, parents=True)

    profile = load_configured_profile(config, fs)
    candidates = load_candidate_records(path=Path(candidates_path), fs=fs)
    logger.info(
        "Screening: %s candidates with profile %s (workers=%s)",
        len(candidates),
        profile.id,
        config.max_workers,
    )

    ranked = rank_candidates(candidates, profile, max_workers=config.max_workers)
    results = [entry.score for entry in ranked]

    results_path = out_path / "score_results.json"
    fs.write_json(
        {
            "profile_id": profile.id,
            "results": [{"rank": entry.rank, **entry.score.to_dict()} for entry in ranked],
        },
        results_path,
    )
    logger.info("Results: %s", results_path)

    df = ranking_rows(ranked)
    validate_columns(list(df.columns), frozenset(RANKING_OUTPUT_COLUMNS), "Rankings output")
    rankings_path = out_path / "rankings.csv"
    fs.write_csv(df, rankings_path)
    logger.info("Rankings: %s", rankings_path)

    validate_columns(list(df.columns), SHORTLIST_REQUIRED_COLUMNS, "Shortlist input")
    shortlist = df[df["total_score"].astype(float) >= config.min_total_score].copy()
    shortlist_path = out_path / "shortlist.csv"
    fs.write_csv(shortlist, shortlist_path)
    logger.info("Shortlist: %s (%s candidates)", shortlist_path, len(shortlist))

    statistics_path = out_path / "statistics.json"
    fs.write_json(summarise_scores(results).to_dict(), statistics_path)
    logger.info("Statistics: %s", statistics_path)

    return {
        "results": results_path,
        "rankings": rankings_path,
        "shortlist": shortlist_path,
        "statistics": statistics_path,
    }
