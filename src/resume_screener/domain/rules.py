"""Generic keyword rule evaluation.

Usage example:
    from resume_screener.domain.rules import score_rule
    from resume_screener.domain.scoring_profiles import ScoringRule

    rule = ScoringRule(name="Version Control", max_points=2, required_any=("git",))
    result = score_rule("git, github actions", rule)
    assert result.score == 0.6
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .keyword_matching import (
    KeywordMatch,
    extract_matched_keywords,
    has_all_keywords,
    has_any_keyword,
    match_keywords,
)
from .scoring_profiles import ScoringRule

REQUIRED_ALL_SHARE = 0.5
REQUIRED_ANY_SHARE = 0.3
KEYWORD_SHARE_CAP = 0.4
REASONING_PREVIEW = 3


@dataclass(frozen=True)
class SubcategoryScore:
    """Score for one rule, with the evidence behind it."""

    name: str
    score: float
    max_score: float
    percentage: float
    matched: tuple[str, ...]
    reasoning: str
    keyword_matches: tuple[KeywordMatch, ...] = ()


def round_score(value: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def clamp(value: float, upper: float) -> float:
    return max(0.0, min(value, upper))


def subcategory(
    rule: ScoringRule,
    raw_score: float,
    matched: list[str],
    reasoning: str,
    keyword_matches: list[KeywordMatch] | None = None,
) -> SubcategoryScore:
    """Build a rule result, clamping the score to ``[0, rule.max_points]``."""
    score = clamp(raw_score, rule.max_points)
    return SubcategoryScore(
        name=rule.name,
        score=round_score(score),
        max_score=rule.max_points,
        percentage=score / rule.max_points * 100,
        matched=tuple(matched),
        reasoning=reasoning,
        keyword_matches=tuple(keyword_matches or ()),
    )


def score_rule(text: str, rule: ScoringRule) -> SubcategoryScore:
    """Score one rule against resume text.

    Contributions are computed independently, summed, then clamped:
    all ``required_all`` present adds half the rule's points, any
    ``required_any`` present adds 30%, ordinary keywords add a proportional
    share capped at 40%, and bonus/penalty keywords add their fixed points.
    """
    score = 0.0
    matched: list[str] = []
    keyword_matches: list[KeywordMatch] = []

    if rule.required_all and has_all_keywords(text, rule.required_all):
        score += rule.max_points * REQUIRED_ALL_SHARE
        matched.extend(rule.required_all)

    if rule.required_any and has_any_keyword(text, rule.required_any):
        score += rule.max_points * REQUIRED_ANY_SHARE
        matched.extend(extract_matched_keywords(text, rule.required_any))

    if rule.keywords:
        found = extract_matched_keywords(text, rule.keywords)
        if found:
            per_keyword = rule.max_points / len(rule.keywords)
            score += min(rule.max_points * KEYWORD_SHARE_CAP, len(found) * per_keyword)
            matched.extend(found)
            keyword_matches = match_keywords(text, found)

    text_lower = text.lower()
    for bonus in rule.bonus_keywords:
        if bonus.keyword.lower() in text_lower:
            score += bonus.points
            matched.append(bonus.keyword)

    for penalty in rule.penalty_keywords:
        if penalty.keyword.lower() in text_lower:
            score += penalty.points
            matched.append(f"-{penalty.keyword}")

    clamped = clamp(score, rule.max_points)
    return subcategory(
        rule,
        clamped,
        matched,
        describe_matches(rule, matched, clamped),
        keyword_matches,
    )


def describe_matches(rule: ScoringRule, matched: list[str], score: float) -> str:
    """Summarise a rule result as "<level>: a, b, c +N more"."""
    if not matched:
        return f"No {rule.name.lower()} found"

    percentage = score / rule.max_points * 100
    if percentage >= 80:
        level = "Excellent"
    elif percentage >= 60:
        level = "Good"
    elif percentage >= 40:
        level = "Fair"
    else:
        level = "Basic"

    preview = ", ".join(matched[:REASONING_PREVIEW])
    extra = len(matched) - REASONING_PREVIEW
    suffix = f" +{extra} more" if extra > 0 else ""
    return f"{level}: {preview}{suffix}"
