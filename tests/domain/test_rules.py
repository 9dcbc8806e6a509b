"""Tests for generic rule evaluation."""

import pytest

from resume_screener.domain.default_profiles import DEFAULT_PROFILE
from resume_screener.domain.rules import describe_matches, round_score, score_rule
from resume_screener.domain.scoring_profiles import CATEGORIES, KeywordPoints, ScoringRule


def test_required_all_awards_half_the_points() -> None:
    rule = ScoringRule(name="Stack", max_points=10, required_all=("react", "typescript"))

    result = score_rule("react with typescript", rule)

    assert result.score == 5.0
    assert result.matched == ("react", "typescript")
    assert result.reasoning == "Fair: react, typescript"


def test_required_all_awards_nothing_when_one_is_missing() -> None:
    rule = ScoringRule(name="Stack", max_points=10, required_all=("react", "typescript"))

    result = score_rule("react only", rule)

    assert result.score == 0.0
    assert result.reasoning == "No stack found"


def test_required_any_awards_thirty_percent_and_lists_hits() -> None:
    rule = ScoringRule(
        name="Version Control", max_points=2, required_any=("git", "github", "gitlab")
    )

    result = score_rule("git, github actions", rule)

    assert result.score == 0.6
    assert result.matched == ("git", "github")
    assert result.reasoning == "Basic: git, github"


def test_keyword_share_is_proportional() -> None:
    rule = ScoringRule(
        name="Languages",
        max_points=8,
        keywords=("javascript", "typescript", "es6", "es2015", "async", "await"),
    )

    result = score_rule("javascript and typescript", rule)

    assert result.score == 2.7
    assert result.percentage == pytest.approx(2 * 8 / 6 / 8 * 100)


def test_keyword_share_is_capped_at_forty_percent() -> None:
    rule = ScoringRule(
        name="Languages",
        max_points=8,
        keywords=("javascript", "typescript", "es6", "es2015", "async", "await"),
    )

    result = score_rule("javascript typescript es6 es2015 async await", rule)

    assert result.score == 3.2


def test_keyword_matches_record_occurrences() -> None:
    rule = ScoringRule(name="Testing", max_points=4, keywords=("jest", "cypress"))

    result = score_rule("jest unit tests\njest snapshots", rule)

    assert [(m.keyword, m.occurrences, m.line_numbers) for m in result.keyword_matches] == [
        ("jest", 2, (1, 2))
    ]


def test_bonus_points_are_added_and_total_is_clamped() -> None:
    rule = ScoringRule(
        name="Core Framework",
        max_points=7,
        required_any=("react",),
        bonus_keywords=(
            KeywordPoints("hooks", 3),
            KeywordPoints("typescript", 3),
            KeywordPoints("context", 3),
        ),
    )

    partial = score_rule("react hooks", rule)
    full = score_rule("react hooks typescript context", rule)

    assert partial.score == 5.1
    assert full.score == 7.0
    assert full.percentage == 100.0
    assert full.reasoning == "Excellent: react, hooks, typescript +1 more"


def test_penalties_never_take_a_rule_below_zero() -> None:
    rule = ScoringRule(
        name="Seniority Level",
        max_points=5,
        bonus_keywords=(KeywordPoints("senior", 2),),
        penalty_keywords=(KeywordPoints("junior", -2),),
    )

    junior = score_rule("junior developer", rule)
    mixed = score_rule("senior mentor of junior developers", rule)

    assert junior.score == 0.0
    assert junior.matched == ("-junior",)
    assert junior.reasoning == "Basic: -junior"
    assert mixed.score == 0.0
    assert mixed.matched == ("senior", "-junior")


def test_reasoning_levels_follow_percentage_bands() -> None:
    rule = ScoringRule(name="Testing", max_points=10)

    assert describe_matches(rule, ["jest"], 8.0).startswith("Excellent")
    assert describe_matches(rule, ["jest"], 6.0).startswith("Good")
    assert describe_matches(rule, ["jest"], 4.0).startswith("Fair")
    assert describe_matches(rule, ["jest"], 3.9).startswith("Basic")
    assert describe_matches(rule, [], 0.0) == "No testing found"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "jquery backbone junior",
        "react hooks typescript context rsc server components tailwind css-in-js grid flexbox",
        "accessibility a11y wcag graphql redux zustand jotai monorepo turborepo",
    ],
)
def test_every_built_in_rule_stays_within_bounds(text: str) -> None:
    for category in CATEGORIES:
        for rule in DEFAULT_PROFILE.rules_for(category):
            result = score_rule(text, rule)
            assert 0.0 <= result.score <= rule.max_points
            assert 0.0 <= result.percentage <= 100.0


def test_round_score_rounds_half_up_to_one_decimal() -> None:
    assert round_score(2.25) == 2.3
    assert round_score(2.24) == 2.2
    assert round_score(0.0) == 0.0
