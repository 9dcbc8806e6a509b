"""Schema definitions for screening outputs.

These define the expected columns of the tabular artefacts, enabling validation
and clear documentation of data contracts.
"""

from __future__ import annotations

from .domain.scoring_profiles import CATEGORIES

# Ranked candidates (rankings.csv and shortlist.csv)
RANKING_OUTPUT_COLUMNS = (
    "rank",
    "candidate_id",
    "name",
    "resume_file_name",
    "profile_id",
    "total_score",
    "weighted_score",
    "company_caliber",
    "caliber_multiplier",
    "verdict",
    "verdict_label",
    "verdict_action",
    *(f"{category}_percentage" for category in CATEGORIES),
    "strengths",  # pipe-separated
    "concerns",  # pipe-separated
)

# Columns the shortlist filter reads
SHORTLIST_REQUIRED_COLUMNS = frozenset(["rank", "candidate_id", "total_score", "verdict"])


def validate_columns(df_columns: list[str], required: frozenset[str], stage_name: str) -> None:
    """Validate that DataFrame has required columns.

    Args:
        df_columns: List of column names from DataFrame.
        required: Set of required column names.
        stage_name: Name of stage for error messages.

    Raises:
        ValueError: If required columns are missing.
    """
    missing = required - set(df_columns)
    if missing:
        raise ValueError(f"{stage_name}: Missing required columns: {sorted(missing)}")
