"""Built-in front-end engineering rubrics.

The three profiles share one rule set and differ only in category weights:
``default`` balances the categories, ``senior`` leans on experience and
impact, ``junior`` on technical breadth and portfolio.
"""

from __future__ import annotations

from .scoring_profiles import (
    CategoryWeights,
    CompanyTiers,
    KeywordPoints,
    ScoringProfile,
    ScoringProfileCatalog,
    ScoringRule,
    VerdictThresholds,
)

CATALOG_SCHEMA_VERSION = 1
DEFAULT_PROFILE_NAME = "default"


def _points(*pairs: tuple[str, float]) -> tuple[KeywordPoints, ...]:
    return tuple(KeywordPoints(keyword=keyword, points=points) for keyword, points in pairs)


TECHNICAL_RULES = (
    ScoringRule(
        name="Core Framework",
        description="React/Vue/Angular expertise with modern patterns",
        max_points=7,
        required_any=("react", "vue", "angular"),
        bonus_keywords=_points(
            ("hooks", 1),
            ("typescript", 1),
            ("context", 0.5),
            ("rsc", 0.5),
            ("server components", 0.5),
        ),
    ),
    ScoringRule(
        name="JavaScript/TypeScript",
        description="Modern JavaScript and TypeScript proficiency",
        max_points=8,
        keywords=("javascript", "typescript", "es6", "es2015", "async", "await"),
        bonus_keywords=_points(
            ("generics", 2),
            ("utility types", 1),
            ("strict mode", 1),
            ("es6+", 1),
            ("async/await", 1),
        ),
        penalty_keywords=_points(("no typescript", -2)),
    ),
    ScoringRule(
        name="CSS/Styling",
        description="Modern CSS, frameworks, and responsive design",
        max_points=5,
        keywords=("css", "tailwind", "styled-components", "emotion", "sass", "scss", "less"),
        bonus_keywords=_points(
            ("tailwind", 2),
            ("css-in-js", 1),
            ("responsive", 1),
            ("grid", 0.5),
            ("flexbox", 0.5),
            ("animations", 0.5),
        ),
    ),
    ScoringRule(
        name="Testing",
        description="Unit, integration, and E2E testing experience",
        max_points=4,
        keywords=(
            "test",
            "testing",
            "jest",
            "vitest",
            "cypress",
            "playwright",
            "react testing library",
        ),
        bonus_keywords=_points(
            ("jest", 1.5),
            ("cypress", 1.5),
            ("playwright", 1.5),
            ("vitest", 1.5),
            ("react testing library", 1),
            ("e2e", 1),
        ),
    ),
    ScoringRule(
        name="Build Tools & CI/CD",
        description="Modern build tools and deployment pipelines",
        max_points=3,
        keywords=(
            "webpack",
            "vite",
            "turbopack",
            "rollup",
            "esbuild",
            "ci/cd",
            "github actions",
            "gitlab ci",
        ),
        bonus_keywords=_points(("vite", 1), ("github actions", 1), ("ci/cd", 1)),
    ),
    ScoringRule(
        name="Version Control",
        description="Git and collaboration workflows",
        max_points=2,
        required_any=("git", "github", "gitlab"),
        bonus_keywords=_points(("pull request", 0.5), ("code review", 0.5), ("branching", 0.5)),
    ),
    ScoringRule(
        name="Performance",
        description="Web performance optimization expertise",
        max_points=1,
        keywords=("performance", "core web vitals", "lighthouse", "lazy loading", "code splitting"),
    ),
    ScoringRule(
        name="Bonus Skills",
        description="Advanced topics that boost score",
        max_points=5,
        bonus_keywords=_points(
            ("accessibility", 2),
            ("a11y", 2),
            ("wcag", 2),
            ("graphql", 1),
            ("redux", 1),
            ("zustand", 1),
            ("jotai", 1),
            ("monorepo", 1),
            ("turborepo", 1),
        ),
        penalty_keywords=_points(("jquery", -3), ("backbone", -2)),
    ),
)

EXPERIENCE_RULES = (
    ScoringRule(
        name="Years of Experience",
        description="Total years in front-end development",
        max_points=15,
    ),
    ScoringRule(
        name="Seniority Level",
        description="Role level and progression",
        max_points=5,
        bonus_keywords=_points(("senior", 2), ("lead", 3), ("staff", 3), ("principal", 4)),
        penalty_keywords=_points(("junior", -2)),
    ),
    ScoringRule(
        name="Company Caliber",
        description="Quality of companies worked at",
        max_points=5,
    ),
)

IMPACT_RULES = (
    ScoringRule(
        name="Quantified Metrics",
        description="Measurable achievements with numbers",
        max_points=8,
        patterns=("percentage", "multiplier", "count", "currency"),
    ),
    ScoringRule(
        name="Leadership Signals",
        description="Team leadership and mentoring",
        max_points=6,
        keywords=("led", "lead", "mentored", "managed", "architected", "designed"),
        bonus_keywords=_points(("led team", 3), ("mentored", 2), ("architected", 2)),
    ),
    ScoringRule(
        name="Innovation",
        description="Built tools, libraries, or solved novel problems",
        max_points=6,
        keywords=("built", "created", "developed", "tool", "library", "framework", "optimized"),
        bonus_keywords=_points(
            ("built tool", 3),
            ("built library", 3),
            ("component library", 2),
            ("design system", 2),
        ),
    ),
)

PORTFOLIO_RULES = (
    ScoringRule(name="GitHub Presence", description="GitHub profile with activity", max_points=5),
    ScoringRule(
        name="Portfolio Website", description="Personal portfolio or website", max_points=5
    ),
    ScoringRule(name="LinkedIn", description="LinkedIn profile", max_points=2),
    ScoringRule(
        name="Live Projects",
        description="Deployed applications or demos",
        max_points=3,
        keywords=("deployed", "live", "production", "demo"),
    ),
)

FOUNDATION_RULES = (
    ScoringRule(
        name="Education",
        description="Formal education background",
        max_points=2,
        keywords=(
            "bs",
            "ms",
            "bachelor",
            "master",
            "computer science",
            "bootcamp",
            "self-taught",
        ),
        bonus_keywords=_points(
            ("computer science", 2), ("software engineering", 2), ("bootcamp", 1)
        ),
    ),
    ScoringRule(
        name="Continuous Learning",
        description="Recent courses, certifications, or conferences",
        max_points=3,
        keywords=("certification", "course", "conference", "speaker", "talk", "blog"),
        bonus_keywords=_points(
            ("2024", 1.5), ("2023", 1), ("certification", 1), ("speaker", 1.5)
        ),
    ),
)

COMPANY_TIERS = CompanyTiers(
    tier1=(
        "google", "meta", "facebook", "apple", "amazon", "netflix", "microsoft",
        "stripe", "airbnb", "uber", "lyft", "doordash", "coinbase", "square",
        "salesforce", "oracle", "adobe", "intuit", "paypal", "tesla",
    ),
    tier2=(
        "shopify", "spotify", "slack", "atlassian", "dropbox", "github",
        "gitlab", "twilio", "okta", "datadog", "mongodb", "elastic",
        "reddit", "pinterest", "snap", "twitter", "linkedin",
    ),
    tier3=(
        "walmart", "target", "nike", "adidas", "starbucks", "chipotle",
        "marriott", "hilton", "delta", "southwest", "fedex", "ups",
        "bank of america", "wells fargo", "chase", "capital one",
    ),
    tier4=(
        "accenture", "deloitte", "pwc", "ey", "cognizant", "infosys",
        "thoughtworks", "pivotal", "ideo", "frog",
    ),
)  # fmt: skip

THRESHOLDS = VerdictThresholds(exceptional=85, strong=70, potential=55, marginal=40)


def _front_end_profile(
    profile_id: str,
    name: str,
    description: str,
    weights: CategoryWeights,
    *,
    is_default: bool = False,
) -> ScoringProfile:
    return ScoringProfile(
        id=profile_id,
        name=name,
        description=description,
        role_type="Front-End Developer",
        weights=weights,
        technical_rules=TECHNICAL_RULES,
        experience_rules=EXPERIENCE_RULES,
        impact_rules=IMPACT_RULES,
        portfolio_rules=PORTFOLIO_RULES,
        foundation_rules=FOUNDATION_RULES,
        company_tiers=COMPANY_TIERS,
        thresholds=THRESHOLDS,
        required_keywords=("react", "vue", "angular", "javascript"),
        bonus_keywords=("typescript", "testing", "accessibility", "performance"),
        penalty_keywords=("jquery", "backbone"),
        is_default=is_default,
    )


DEFAULT_PROFILE = _front_end_profile(
    "default",
    "Front-End Developer",
    "Balanced rubric for front-end engineers on a React/TypeScript stack",
    CategoryWeights(technical=0.35, experience=0.25, impact=0.20, portfolio=0.15, foundation=0.05),
    is_default=True,
)

SENIOR_PROFILE = _front_end_profile(
    "senior",
    "Front-End Developer (Senior)",
    "Weights experience and impact for senior and lead hires",
    CategoryWeights(technical=0.25, experience=0.30, impact=0.30, portfolio=0.10, foundation=0.05),
)

JUNIOR_PROFILE = _front_end_profile(
    "junior",
    "Front-End Developer (Junior)",
    "Weights technical breadth and portfolio for early-career hires",
    CategoryWeights(technical=0.40, experience=0.10, impact=0.15, portfolio=0.25, foundation=0.10),
)

BUILT_IN_CATALOG = ScoringProfileCatalog(
    schema_version=CATALOG_SCHEMA_VERSION,
    default_profile=DEFAULT_PROFILE_NAME,
    profiles=(DEFAULT_PROFILE, SENIOR_PROFILE, JUNIOR_PROFILE),
)
