"""Batch scoring, ranking and summary statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from .candidates import CandidateRecord
from .rules import round_score
from .scoring import VERDICTS, ScoreResult, Verdict, score_resume
from .scoring_profiles import CATEGORIES, Category, ScoringProfile


@dataclass(frozen=True)
class RankedCandidate:
    """A scored candidate with its 1-based position."""

    candidate: CandidateRecord
    score: ScoreResult
    rank: int


@dataclass(frozen=True)
class ScoringStatistics:
    """Aggregate view over a batch of results."""

    total_scored: int
    average_score: float
    verdict_distribution: Mapping[Verdict, int]
    average_category_percentages: Mapping[Category, float]
    most_used_profile: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_scored": self.total_scored,
            "average_score": self.average_score,
            "verdict_distribution": dict(self.verdict_distribution),
            "average_category_percentages": dict(self.average_category_percentages),
            "most_used_profile": self.most_used_profile,
        }


def score_candidates(
    candidates: Sequence[CandidateRecord],
    profile: ScoringProfile,
    *,
    max_workers: int = 1,
    scored_at: datetime | None = None,
) -> list[ScoreResult]:
    """Score candidates independently; results keep the input order.

    Scoring is pure, so ``max_workers > 1`` fans out over a thread pool with
    no coordination beyond collecting results.
    """
    if max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(
                executor.map(
                    lambda candidate: score_resume(candidate, profile, scored_at=scored_at),
                    candidates,
                )
            )
    return [score_resume(candidate, profile, scored_at=scored_at) for candidate in candidates]


def rank_candidates(
    candidates: Sequence[CandidateRecord],
    profile: ScoringProfile,
    *,
    max_workers: int = 1,
    scored_at: datetime | None = None,
) -> list[RankedCandidate]:
    """Score and order candidates by total score, highest first.

    Ties keep input order and still get distinct consecutive ranks.
    """
    results = score_candidates(candidates, profile, max_workers=max_workers, scored_at=scored_at)
    ordered = sorted(results, key=lambda result: result.total_score, reverse=True)
    return [
        RankedCandidate(candidate=result.candidate, score=result, rank=index + 1)
        for index, result in enumerate(ordered)
    ]


def summarise_scores(results: Sequence[ScoreResult]) -> ScoringStatistics:
    distribution: dict[Verdict, int] = dict.fromkeys(VERDICTS, 0)
    for result in results:
        distribution[result.verdict] += 1

    if not results:
        return ScoringStatistics(
            total_scored=0,
            average_score=0.0,
            verdict_distribution=MappingProxyType(distribution),
            average_category_percentages=MappingProxyType(dict.fromkeys(CATEGORIES, 0.0)),
            most_used_profile=None,
        )

    count = len(results)
    category_totals: dict[Category, float] = dict.fromkeys(CATEGORIES, 0.0)
    for result in results:
        for category, category_score in result.breakdown.items():
            category_totals[category] += category_score.percentage

    profiles = Counter(result.profile_id for result in results)
    return ScoringStatistics(
        total_scored=count,
        average_score=round_score(sum(result.total_score for result in results) / count),
        verdict_distribution=MappingProxyType(distribution),
        average_category_percentages=MappingProxyType(
            {category: round_score(total / count) for category, total in category_totals.items()}
        ),
        most_used_profile=profiles.most_common(1)[0][0],
    )
