"""Category scorers: apply a profile's rule list for each of the five categories.

Most rules go through the generic keyword evaluator. A few rule names are
scored from structured candidate fields instead:

- Experience: "Years of Experience" (banded on total years) and
  "Company Caliber" (employer names against the profile's company tiers).
- Impact: "Quantified Metrics" (banded on the number of extracted metrics).
- Portfolio: link rules award full points when the link is present; any
  other portfolio rule counts live-project indicator keywords.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .candidates import CandidateRecord
from .keyword_matching import extract_matched_keywords
from .rules import SubcategoryScore, round_score, score_rule, subcategory
from .scoring_profiles import Category, CompanyTiers, ScoringProfile, ScoringRule

YEARS_OF_EXPERIENCE_RULE = "Years of Experience"
COMPANY_CALIBER_RULE = "Company Caliber"
QUANTIFIED_METRICS_RULE = "Quantified Metrics"
GITHUB_RULE = "GitHub Presence"
PORTFOLIO_WEBSITE_RULE = "Portfolio Website"
LINKEDIN_RULE = "LinkedIn"

CATEGORY_NAMES: dict[Category, str] = {
    "technical": "Technical Skills",
    "experience": "Experience",
    "impact": "Impact",
    "portfolio": "Portfolio",
    "foundation": "Foundation",
}

# (minimum years, points, reasoning template), checked top-down
YEARS_BANDS: tuple[tuple[float, float, str], ...] = (
    (7.0, 15.0, "{years}+ years (senior level)"),
    (5.0, 13.0, "{years} years (mid-senior level)"),
    (3.0, 10.0, "{years} years (mid level)"),
    (1.0, 6.0, "{years} years (junior-mid level)"),
)
ENTRY_LEVEL_POINTS = 3.0

COMPANY_TIER_POINTS = {"tier1": 10.0, "tier2": 8.0, "tier3": 6.0, "tier4": 4.0}
UNKNOWN_COMPANY_POINTS = 2.0

# (minimum metric count, points, quality label)
METRIC_BANDS: tuple[tuple[int, float, str], ...] = (
    (4, 8.0, "excellent"),
    (2, 6.0, "good"),
    (1, 4.0, "fair"),
)
NO_METRICS_POINTS = 2.0
METRICS_PREVIEW = 5

LIVE_PROJECT_POINTS_PER_INDICATOR = 1.5


@dataclass(frozen=True)
class CategoryScore:
    """Score for one category, with one entry per rule."""

    category_name: str
    score: float
    max_score: float
    percentage: float
    subcategories: tuple[SubcategoryScore, ...]

    def subcategory(self, name: str) -> SubcategoryScore | None:
        for item in self.subcategories:
            if item.name == name:
                return item
        return None


@dataclass(frozen=True)
class TierMatch:
    """First company-tier hit among a candidate's employers."""

    tier: str
    company: str


def _years_label(years: float) -> str:
    return f"{years:g}"


def score_years_of_experience(years: float, rule: ScoringRule) -> SubcategoryScore:
    """Step-function score on total years; bands are not interpolated."""
    label = _years_label(years)
    for minimum, points, template in YEARS_BANDS:
        if years >= minimum:
            return subcategory(rule, points, [label], template.format(years=label))
    return subcategory(rule, ENTRY_LEVEL_POINTS, [label], f"{label} years (entry level)")


def match_company_tier(companies: tuple[str, ...], tiers: CompanyTiers) -> TierMatch | None:
    """Return the highest tier matched by any employer.

    Tiers are scanned from tier1 down; within a tier, employers are checked in
    order and a tier entry matches when it is a substring of the lower-cased
    company name.
    """
    lowered = [company.lower() for company in companies]
    for tier, entries in tiers.ordered():
        needles = [entry.lower() for entry in entries if entry.strip()]
        for company in lowered:
            if any(needle in company for needle in needles):
                return TierMatch(tier=tier, company=company)
    return None


def score_company_caliber(
    candidate: CandidateRecord, tiers: CompanyTiers, rule: ScoringRule
) -> SubcategoryScore:
    match = match_company_tier(candidate.companies, tiers)
    if match is None:
        fallback = [company.lower() for company in candidate.companies[:2]]
        return subcategory(rule, UNKNOWN_COMPANY_POINTS, fallback, "No recognized companies found")
    return subcategory(
        rule,
        COMPANY_TIER_POINTS[match.tier],
        [match.company],
        f"Worked at {match.tier.upper()} company",
    )


def score_quantified_metrics(candidate: CandidateRecord, rule: ScoringRule) -> SubcategoryScore:
    count = len(candidate.metrics)
    matched = [metric.text for metric in candidate.metrics[:METRICS_PREVIEW]]
    for minimum, points, quality in METRIC_BANDS:
        if count >= minimum:
            noun = "metric" if count == 1 else "metrics"
            return subcategory(rule, points, matched, f"{count} quantified {noun} ({quality})")
    return subcategory(rule, NO_METRICS_POINTS, matched, "No quantified metrics found")


def score_portfolio_rule(candidate: CandidateRecord, rule: ScoringRule) -> SubcategoryScore:
    links = {
        GITHUB_RULE: (candidate.links.github, "GitHub profile found"),
        PORTFOLIO_WEBSITE_RULE: (candidate.links.portfolio, "Portfolio website found"),
        LINKEDIN_RULE: (candidate.links.linkedin, "LinkedIn profile found"),
    }
    if rule.name in links:
        link, reasoning = links[rule.name]
        if link:
            return subcategory(rule, rule.max_points, [link], reasoning)
        return subcategory(rule, 0.0, [], "Not found")

    found = extract_matched_keywords(candidate.raw_text, rule.keywords)
    if not found:
        return subcategory(rule, 0.0, [], "Not found")
    return subcategory(
        rule,
        len(found) * LIVE_PROJECT_POINTS_PER_INDICATOR,
        found,
        f"Found {len(found)} project indicator(s)",
    )


RuleScorer = Callable[[ScoringRule], SubcategoryScore]


def _category_score(
    category: Category,
    rules: tuple[ScoringRule, ...],
    scorer: RuleScorer,
) -> CategoryScore:
    subcategories = tuple(scorer(rule) for rule in rules)
    max_score = sum(rule.max_points for rule in rules)
    score = min(sum(item.score for item in subcategories), max_score)
    return CategoryScore(
        category_name=CATEGORY_NAMES[category],
        score=round_score(score),
        max_score=max_score,
        percentage=round_score(score) / max_score * 100,
        subcategories=subcategories,
    )


def score_technical(text: str, profile: ScoringProfile) -> CategoryScore:
    return _category_score(
        "technical", profile.technical_rules, lambda rule: score_rule(text, rule)
    )


def score_experience(
    candidate: CandidateRecord, text: str, profile: ScoringProfile
) -> CategoryScore:
    def scorer(rule: ScoringRule) -> SubcategoryScore:
        if rule.name == YEARS_OF_EXPERIENCE_RULE:
            return score_years_of_experience(candidate.total_years_experience, rule)
        if rule.name == COMPANY_CALIBER_RULE:
            return score_company_caliber(candidate, profile.company_tiers, rule)
        return score_rule(text, rule)

    return _category_score("experience", profile.experience_rules, scorer)


def score_impact(candidate: CandidateRecord, text: str, profile: ScoringProfile) -> CategoryScore:
    def scorer(rule: ScoringRule) -> SubcategoryScore:
        if rule.name == QUANTIFIED_METRICS_RULE:
            return score_quantified_metrics(candidate, rule)
        return score_rule(text, rule)

    return _category_score("impact", profile.impact_rules, scorer)


def score_portfolio(candidate: CandidateRecord, profile: ScoringProfile) -> CategoryScore:
    return _category_score(
        "portfolio", profile.portfolio_rules, lambda rule: score_portfolio_rule(candidate, rule)
    )


def score_foundation(text: str, profile: ScoringProfile) -> CategoryScore:
    return _category_score(
        "foundation", profile.foundation_rules, lambda rule: score_rule(text, rule)
    )
