"""Aggregate category scores into a weighted total, verdict and summary.

Usage example:
    from resume_screener.domain.candidates import CandidateRecord
    from resume_screener.domain.default_profiles import DEFAULT_PROFILE
    from resume_screener.domain.scoring import score_resume

    record = CandidateRecord(name="Jane Doe", raw_text="React, TypeScript, Jest")
    result = score_resume(record, DEFAULT_PROFILE)
    assert 0.0 <= result.total_score <= 100.0
    assert result.verdict in {"exceptional", "strong", "potential", "marginal", "pass"}
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from .candidates import CandidateRecord
from .category_scoring import (
    CategoryScore,
    match_company_tier,
    score_experience,
    score_foundation,
    score_impact,
    score_portfolio,
    score_technical,
)
from .rules import round_score
from .scoring_profiles import Category, CompanyTiers, ScoringProfile, VerdictThresholds

Verdict = Literal["exceptional", "strong", "potential", "marginal", "pass"]

VERDICTS: tuple[Verdict, ...] = ("exceptional", "strong", "potential", "marginal", "pass")

SCORED_BY = "automated-pass1"
MAX_TOTAL_SCORE = 100.0
MAX_SUMMARY_ITEMS = 5

COMPANY_CALIBER_MULTIPLIERS = {
    "faang": 1.15,
    "unicorn": 1.10,
    "tier-equivalent": 1.10,
    "established": 1.05,
}
DEFAULT_CALIBER_MULTIPLIER = 1.0
DEFAULT_CALIBER = "startup"
TIER_CALIBERS = {"tier1": "faang", "tier2": "unicorn", "tier3": "established"}
TOP_TIER_CALIBERS = frozenset({"faang", "unicorn", "tier-equivalent"})

LEADERSHIP_RULE = "Leadership Signals"
# 4 of the built-in rule's 6 points
LEADERSHIP_STRENGTH_SHARE = 4 / 6
TESTING_RULE = "Testing"


@dataclass(frozen=True)
class VerdictDetails:
    """Display metadata for a verdict."""

    label: str
    action: str
    emoji: str


VERDICT_DETAILS: dict[Verdict, VerdictDetails] = {
    "exceptional": VerdictDetails("Exceptional Candidate", "Fast-track to onsite", "🟢"),
    "strong": VerdictDetails("Strong Candidate", "Phone screen", "🟡"),
    "potential": VerdictDetails("Potential Candidate", "Review portfolio first", "🟠"),
    "marginal": VerdictDetails("Marginal Candidate", "Pass unless niche match", "🔴"),
    "pass": VerdictDetails("Pass", "Decline", "⚫"),
}


@dataclass(frozen=True)
class CategoryBreakdown:
    """The five category scores of one result."""

    technical: CategoryScore
    experience: CategoryScore
    impact: CategoryScore
    portfolio: CategoryScore
    foundation: CategoryScore

    def items(self) -> tuple[tuple[Category, CategoryScore], ...]:
        return (
            ("technical", self.technical),
            ("experience", self.experience),
            ("impact", self.impact),
            ("portfolio", self.portfolio),
            ("foundation", self.foundation),
        )


@dataclass(frozen=True)
class ScoreResult:
    """Terminal scoring artefact for one candidate under one profile."""

    candidate_id: str
    resume_file_name: str | None
    total_score: float
    weighted_score: float
    company_caliber: str
    caliber_multiplier: float
    verdict: Verdict
    verdict_label: str
    verdict_action: str
    verdict_emoji: str
    breakdown: CategoryBreakdown
    strengths: tuple[str, ...]
    concerns: tuple[str, ...]
    candidate: CandidateRecord
    profile_id: str
    scored_at: datetime
    scored_by: str = SCORED_BY

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; ``scored_at`` becomes ISO-8601."""
        payload = asdict(self)
        payload["scored_at"] = self.scored_at.isoformat()
        return payload


def determine_verdict(total_score: float, thresholds: VerdictThresholds) -> Verdict:
    if total_score >= thresholds.exceptional:
        return "exceptional"
    if total_score >= thresholds.strong:
        return "strong"
    if total_score >= thresholds.potential:
        return "potential"
    if total_score >= thresholds.marginal:
        return "marginal"
    return "pass"


def resolve_company_caliber(candidate: CandidateRecord, tiers: CompanyTiers) -> str:
    """Return the candidate's caliber label.

    An explicit ``company_tier`` wins; otherwise the label is derived from the
    first profile tier matched by the candidate's employers.
    """
    explicit = (candidate.company_tier or "").strip().lower()
    if explicit:
        return explicit
    match = match_company_tier(candidate.companies, tiers)
    if match is None:
        return DEFAULT_CALIBER
    return TIER_CALIBERS.get(match.tier, DEFAULT_CALIBER)


def caliber_multiplier(caliber: str) -> float:
    return COMPANY_CALIBER_MULTIPLIERS.get(caliber, DEFAULT_CALIBER_MULTIPLIER)


def weighted_total(breakdown: CategoryBreakdown, profile: ScoringProfile) -> float:
    """Sum each category's percentage times its profile weight."""
    return sum(
        category_score.percentage * profile.weights.for_category(category)
        for category, category_score in breakdown.items()
    )


def score_resume(
    candidate: CandidateRecord,
    profile: ScoringProfile,
    *,
    scored_at: datetime | None = None,
) -> ScoreResult:
    """Score one candidate against one profile.

    Pure apart from the timestamp; pass ``scored_at`` for reproducible output.
    """
    text = candidate.raw_text.lower()
    breakdown = CategoryBreakdown(
        technical=score_technical(text, profile),
        experience=score_experience(candidate, text, profile),
        impact=score_impact(candidate, text, profile),
        portfolio=score_portfolio(candidate, profile),
        foundation=score_foundation(text, profile),
    )

    weighted = weighted_total(breakdown, profile)
    caliber = resolve_company_caliber(candidate, profile.company_tiers)
    multiplier = caliber_multiplier(caliber)
    total_score = round_score(min(MAX_TOTAL_SCORE, weighted * multiplier))

    verdict = determine_verdict(total_score, profile.thresholds)
    details = VERDICT_DETAILS[verdict]

    return ScoreResult(
        candidate_id=candidate.candidate_id,
        resume_file_name=candidate.file_name,
        total_score=total_score,
        weighted_score=round_score(weighted),
        company_caliber=caliber,
        caliber_multiplier=multiplier,
        verdict=verdict,
        verdict_label=details.label,
        verdict_action=details.action,
        verdict_emoji=details.emoji,
        breakdown=breakdown,
        strengths=generate_strengths(candidate, breakdown, caliber),
        concerns=generate_concerns(candidate, text, breakdown),
        candidate=candidate,
        profile_id=profile.id,
        scored_at=scored_at or datetime.now(UTC),
    )


def generate_strengths(
    candidate: CandidateRecord, breakdown: CategoryBreakdown, caliber: str
) -> tuple[str, ...]:
    """Summarise positives in check order, at most five."""
    strengths: list[str] = []

    if breakdown.technical.percentage >= 70:
        ranked = sorted(
            breakdown.technical.subcategories, key=lambda item: item.score, reverse=True
        )
        top = [item.name for item in ranked[:2] if item.score > 0]
        if top:
            strengths.append(f"Strong technical skills: {', '.join(top)}")

    years = candidate.total_years_experience
    if years >= 5:
        strengths.append(f"{years:g}+ years of experience")

    if caliber in TOP_TIER_CALIBERS:
        strengths.append("Experience at top-tier companies")

    if len(candidate.metrics) >= 3:
        strengths.append(f"{len(candidate.metrics)} quantified achievements")

    if candidate.links.github and candidate.links.portfolio:
        strengths.append("Active GitHub and portfolio presence")
    elif candidate.links.github:
        strengths.append("Active GitHub profile")

    leadership = breakdown.impact.subcategory(LEADERSHIP_RULE)
    if (
        leadership is not None
        and leadership.score / leadership.max_score >= LEADERSHIP_STRENGTH_SHARE
    ):
        strengths.append("Demonstrated leadership experience")

    return tuple(strengths[:MAX_SUMMARY_ITEMS])


def generate_concerns(
    candidate: CandidateRecord, text: str, breakdown: CategoryBreakdown
) -> tuple[str, ...]:
    """Summarise gaps in check order, at most five."""
    concerns: list[str] = []

    if breakdown.technical.percentage < 50:
        concerns.append("Technical skills below expectations")

    if candidate.total_years_experience < 3:
        concerns.append("Limited professional experience")

    if not candidate.metrics:
        concerns.append("No quantified achievements or metrics")

    if not candidate.links.github and not candidate.links.portfolio:
        concerns.append("No GitHub or portfolio links provided")

    if "typescript" not in text:
        concerns.append("No TypeScript experience mentioned")

    testing = breakdown.technical.subcategory(TESTING_RULE)
    if testing is not None and testing.percentage < 50:
        concerns.append("Limited testing experience")

    return tuple(concerns[:MAX_SUMMARY_ITEMS])
