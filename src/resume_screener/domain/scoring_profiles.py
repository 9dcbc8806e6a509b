"""Domain model for configurable resume scoring profiles.

A profile is plain data: category weights, an ordered rule list per category,
company tier dictionaries and verdict thresholds. Profiles are immutable and
validated on construction; editing one (``with_weights`` and friends) returns
a new, revalidated profile and leaves the original untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Self

from ..exceptions import ScoringProfileValidationError
from .metric_patterns import is_metric_pattern

Category = Literal["technical", "experience", "impact", "portfolio", "foundation"]

CATEGORIES: tuple[Category, ...] = ("technical", "experience", "impact", "portfolio", "foundation")

WEIGHT_SUM_TOLERANCE = 0.01


@dataclass(frozen=True)
class KeywordPoints:
    """A keyword worth a fixed number of points (negative for penalties)."""

    keyword: str
    points: float


@dataclass(frozen=True)
class ScoringRule:
    """One scoring criterion within a category."""

    name: str
    max_points: float
    description: str = ""
    keywords: tuple[str, ...] = ()
    required_all: tuple[str, ...] = ()
    required_any: tuple[str, ...] = ()
    bonus_keywords: tuple[KeywordPoints, ...] = ()
    penalty_keywords: tuple[KeywordPoints, ...] = ()
    patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryWeights:
    """Relative importance of each category; the five weights sum to 1.0."""

    technical: float
    experience: float
    impact: float
    portfolio: float
    foundation: float

    @property
    def total(self) -> float:
        return self.technical + self.experience + self.impact + self.portfolio + self.foundation

    def for_category(self, category: Category) -> float:
        return float(getattr(self, category))


@dataclass(frozen=True)
class CompanyTiers:
    """Company-name substrings by prestige, tier1 highest."""

    tier1: tuple[str, ...] = ()
    tier2: tuple[str, ...] = ()
    tier3: tuple[str, ...] = ()
    tier4: tuple[str, ...] = ()

    def ordered(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        return (
            ("tier1", self.tier1),
            ("tier2", self.tier2),
            ("tier3", self.tier3),
            ("tier4", self.tier4),
        )


@dataclass(frozen=True)
class VerdictThresholds:
    """Minimum total score for each verdict, strictly descending."""

    exceptional: float
    strong: float
    potential: float
    marginal: float


@dataclass(frozen=True)
class ScoringProfile:
    """A complete rubric for one role."""

    id: str
    name: str
    weights: CategoryWeights
    technical_rules: tuple[ScoringRule, ...]
    experience_rules: tuple[ScoringRule, ...]
    impact_rules: tuple[ScoringRule, ...]
    portfolio_rules: tuple[ScoringRule, ...]
    foundation_rules: tuple[ScoringRule, ...]
    company_tiers: CompanyTiers
    thresholds: VerdictThresholds
    description: str = ""
    role_type: str = ""
    required_keywords: tuple[str, ...] = ()
    bonus_keywords: tuple[str, ...] = ()
    penalty_keywords: tuple[str, ...] = ()
    is_default: bool = False

    def __post_init__(self) -> None:
        validate_scoring_profile(self)

    def rules_for(self, category: Category) -> tuple[ScoringRule, ...]:
        return tuple(getattr(self, f"{category}_rules"))

    def max_points_for(self, category: Category) -> float:
        return sum(rule.max_points for rule in self.rules_for(category))

    def with_weights(self, weights: CategoryWeights) -> Self:
        return replace(self, weights=weights)

    def with_rules(self, category: Category, rules: tuple[ScoringRule, ...]) -> Self:
        if category not in CATEGORIES:
            raise ScoringProfileValidationError(self.id, f"unknown category '{category}'")
        return replace(self, **{f"{category}_rules": tuple(rules)})

    def with_thresholds(self, thresholds: VerdictThresholds) -> Self:
        return replace(self, thresholds=thresholds)

    def with_company_tiers(self, company_tiers: CompanyTiers) -> Self:
        return replace(self, company_tiers=company_tiers)


def validate_scoring_profile(profile: ScoringProfile) -> None:
    """Check the invariants every scoring run relies on.

    Raises:
        ScoringProfileValidationError: On the first broken invariant.
    """
    source = profile.id or "<unnamed>"
    if not profile.id.strip() or not profile.name.strip():
        raise ScoringProfileValidationError(source, "id and name must be non-empty")

    for category in CATEGORIES:
        weight = profile.weights.for_category(category)
        if weight < 0.0 or weight > 1.0:
            raise ScoringProfileValidationError(
                source, f"weights.{category} must be between 0 and 1, got {weight}"
            )
    if abs(profile.weights.total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ScoringProfileValidationError(
            source, f"weights must sum to 1.0, got {profile.weights.total:.3f}"
        )

    thresholds = profile.thresholds
    ordered = (thresholds.exceptional, thresholds.strong, thresholds.potential, thresholds.marginal)
    if thresholds.marginal <= 0.0 or any(a <= b for a, b in zip(ordered, ordered[1:])):
        raise ScoringProfileValidationError(
            source,
            "thresholds must satisfy exceptional > strong > potential > marginal > 0",
        )

    for category in CATEGORIES:
        rules = profile.rules_for(category)
        if not rules:
            raise ScoringProfileValidationError(source, f"{category} has no rules")
        names = [rule.name for rule in rules]
        if len(set(names)) != len(names):
            raise ScoringProfileValidationError(source, f"{category} has duplicate rule names")
        for rule in rules:
            _validate_rule(source, category, rule)


def _validate_rule(source: str, category: Category, rule: ScoringRule) -> None:
    location = f"{category}.{rule.name}"
    if not rule.name.strip():
        raise ScoringProfileValidationError(source, f"{category} has a rule without a name")
    if rule.max_points <= 0.0:
        raise ScoringProfileValidationError(source, f"{location}: max_points must be positive")
    if any(bonus.points < 0.0 for bonus in rule.bonus_keywords):
        raise ScoringProfileValidationError(
            source, f"{location}: bonus keyword points must not be negative"
        )
    if any(penalty.points > 0.0 for penalty in rule.penalty_keywords):
        raise ScoringProfileValidationError(
            source, f"{location}: penalty keyword points must not be positive"
        )
    unknown = [pattern for pattern in rule.patterns if not is_metric_pattern(pattern)]
    if unknown:
        raise ScoringProfileValidationError(
            source, f"{location}: unknown patterns {', '.join(unknown)}"
        )


@dataclass(frozen=True)
class ScoringProfileCatalog:
    """Named scoring profiles bundled in a single schema version."""

    schema_version: int
    default_profile: str
    profiles: tuple[ScoringProfile, ...]


@dataclass(frozen=True)
class ProfileKeywordSummary:
    """Keyword dictionaries used to preview what a profile looks for."""

    required: tuple[str, ...]
    bonus: tuple[str, ...]
    penalty: tuple[str, ...]


def summarise_profile_keywords(profile: ScoringProfile) -> ProfileKeywordSummary:
    """Collect preview keywords: the profile dictionaries plus rule-level signals."""
    required: list[str] = list(profile.required_keywords)
    bonus: list[str] = list(profile.bonus_keywords)
    penalty: list[str] = list(profile.penalty_keywords)
    for category in CATEGORIES:
        for rule in profile.rules_for(category):
            required.extend(rule.required_all)
            required.extend(rule.required_any)
            bonus.extend(item.keyword for item in rule.bonus_keywords)
            penalty.extend(item.keyword for item in rule.penalty_keywords)
    return ProfileKeywordSummary(
        required=_dedupe(required),
        bonus=_dedupe(bonus),
        penalty=_dedupe(penalty),
    )


def _dedupe(values: list[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value.lower(), None)
    return tuple(seen)
