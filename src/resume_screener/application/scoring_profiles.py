"""Loading, strict validation and export for scoring profile catalogues.

Usage example:
    from pathlib import Path

    from resume_screener.application.scoring_profiles import (
        load_scoring_profile_catalog,
        resolve_scoring_profile,
    )
    from resume_screener.infrastructure import LocalFileSystem

    catalog = load_scoring_profile_catalog(path=Path("profiles.json"), fs=LocalFileSystem())
    profile = resolve_scoring_profile(catalog, "senior")
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from ..domain.default_profiles import BUILT_IN_CATALOG
from ..domain.metric_patterns import MetricPattern
from ..domain.scoring_profiles import (
    CategoryWeights,
    CompanyTiers,
    KeywordPoints,
    ScoringProfile,
    ScoringProfileCatalog,
    ScoringRule,
    VerdictThresholds,
)
from ..exceptions import (
    ScoringProfileFileNotFoundError,
    ScoringProfileSelectionError,
    ScoringProfileValidationError,
)
from ..protocols import FileSystem

_SCHEMA_VERSION = 1


class _KeywordPointsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    keyword: str
    points: float

    @field_validator("keyword")
    @classmethod
    def _validate_keyword(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text


class _ScoringRuleModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    max_points: float
    description: str = ""
    keywords: tuple[str, ...] = ()
    required_all: tuple[str, ...] = ()
    required_any: tuple[str, ...] = ()
    bonus_keywords: tuple[_KeywordPointsModel, ...] = ()
    penalty_keywords: tuple[_KeywordPointsModel, ...] = ()
    patterns: tuple[MetricPattern, ...] = ()

    @field_validator("keywords", "required_all", "required_any")
    @classmethod
    def _validate_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not keyword.strip() for keyword in value):
            raise ValueError
        return tuple(keyword.strip() for keyword in value)


class _CategoryWeightsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    technical: float
    experience: float
    impact: float
    portfolio: float
    foundation: float


class _CompanyTiersModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tier1: tuple[str, ...] = ()
    tier2: tuple[str, ...] = ()
    tier3: tuple[str, ...] = ()
    tier4: tuple[str, ...] = ()


class _VerdictThresholdsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    exceptional: float
    strong: float
    potential: float
    marginal: float


class _ScoringProfileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str = ""
    role_type: str = ""
    weights: _CategoryWeightsModel
    technical_rules: tuple[_ScoringRuleModel, ...]
    experience_rules: tuple[_ScoringRuleModel, ...]
    impact_rules: tuple[_ScoringRuleModel, ...]
    portfolio_rules: tuple[_ScoringRuleModel, ...]
    foundation_rules: tuple[_ScoringRuleModel, ...]
    company_tiers: _CompanyTiersModel
    thresholds: _VerdictThresholdsModel
    required_keywords: tuple[str, ...] = ()
    bonus_keywords: tuple[str, ...] = ()
    penalty_keywords: tuple[str, ...] = ()
    is_default: bool = False

    @field_validator("id", "name")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text


class _ScoringProfileCatalogModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    default_profile: str
    profiles: tuple[_ScoringProfileModel, ...]

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @field_validator("default_profile")
    @classmethod
    def _validate_default_profile(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @model_validator(mode="after")
    def _validate_profiles(self) -> _ScoringProfileCatalogModel:
        if not self.profiles:
            raise ValueError
        ids = [profile.id for profile in self.profiles]
        if len(set(ids)) != len(ids):
            raise ValueError
        if self.default_profile not in set(ids):
            raise ValueError
        return self


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _to_keyword_points(models: tuple[_KeywordPointsModel, ...]) -> tuple[KeywordPoints, ...]:
    return tuple(KeywordPoints(keyword=model.keyword, points=model.points) for model in models)


def _to_domain_rules(models: tuple[_ScoringRuleModel, ...]) -> tuple[ScoringRule, ...]:
    return tuple(
        ScoringRule(
            name=model.name,
            max_points=model.max_points,
            description=model.description,
            keywords=model.keywords,
            required_all=model.required_all,
            required_any=model.required_any,
            bonus_keywords=_to_keyword_points(model.bonus_keywords),
            penalty_keywords=_to_keyword_points(model.penalty_keywords),
            patterns=model.patterns,
        )
        for model in models
    )


def _to_domain_profile(model: _ScoringProfileModel) -> ScoringProfile:
    return ScoringProfile(
        id=model.id,
        name=model.name,
        description=model.description,
        role_type=model.role_type,
        weights=CategoryWeights(
            technical=model.weights.technical,
            experience=model.weights.experience,
            impact=model.weights.impact,
            portfolio=model.weights.portfolio,
            foundation=model.weights.foundation,
        ),
        technical_rules=_to_domain_rules(model.technical_rules),
        experience_rules=_to_domain_rules(model.experience_rules),
        impact_rules=_to_domain_rules(model.impact_rules),
        portfolio_rules=_to_domain_rules(model.portfolio_rules),
        foundation_rules=_to_domain_rules(model.foundation_rules),
        company_tiers=CompanyTiers(
            tier1=model.company_tiers.tier1,
            tier2=model.company_tiers.tier2,
            tier3=model.company_tiers.tier3,
            tier4=model.company_tiers.tier4,
        ),
        thresholds=VerdictThresholds(
            exceptional=model.thresholds.exceptional,
            strong=model.thresholds.strong,
            potential=model.thresholds.potential,
            marginal=model.thresholds.marginal,
        ),
        required_keywords=model.required_keywords,
        bonus_keywords=model.bonus_keywords,
        penalty_keywords=model.penalty_keywords,
        is_default=model.is_default,
    )


def parse_scoring_profile_catalog(payload: str, *, source: str) -> ScoringProfileCatalog:
    """Validate a JSON catalogue payload and build domain profiles."""
    try:
        model = _ScoringProfileCatalogModel.model_validate_json(payload)
    except ValidationError as exc:
        raise ScoringProfileValidationError(source, _format_validation_error(exc)) from exc

    profiles: list[ScoringProfile] = []
    for index, profile_model in enumerate(model.profiles):
        try:
            profiles.append(_to_domain_profile(profile_model))
        except ScoringProfileValidationError as exc:
            raise ScoringProfileValidationError(
                source, f"profiles.{index} ({profile_model.id}): {exc.reason}"
            ) from exc

    return ScoringProfileCatalog(
        schema_version=model.schema_version,
        default_profile=model.default_profile,
        profiles=tuple(profiles),
    )


def load_scoring_profile_catalog(*, path: Path, fs: FileSystem) -> ScoringProfileCatalog:
    """Load and validate a scoring profile catalogue from JSON."""
    if not fs.exists(path):
        raise ScoringProfileFileNotFoundError(str(path))
    return parse_scoring_profile_catalog(fs.read_text(path), source=str(path))


def load_configured_catalog(*, profile_path: str, fs: FileSystem) -> ScoringProfileCatalog:
    """Return the catalogue at ``profile_path``, or the built-in one when unset."""
    if not profile_path:
        return BUILT_IN_CATALOG
    return load_scoring_profile_catalog(path=Path(profile_path), fs=fs)


def resolve_scoring_profile(
    catalog: ScoringProfileCatalog,
    profile_name: str | None = None,
) -> ScoringProfile:
    """Resolve one profile by id, defaulting to the catalogue default profile."""
    target = (profile_name or catalog.default_profile).strip()
    if not target:
        target = catalog.default_profile

    for profile in catalog.profiles:
        if profile.id == target:
            return profile

    available = tuple(sorted(profile.id for profile in catalog.profiles))
    raise ScoringProfileSelectionError(target, available)


def scoring_profile_catalog_to_payload(catalog: ScoringProfileCatalog) -> dict[str, Any]:
    """Return the JSON-ready form of a catalogue, loadable by this module."""
    model = _ScoringProfileCatalogModel.model_validate(asdict(catalog))
    return model.model_dump(mode="json")


def write_scoring_profile_catalog(
    catalog: ScoringProfileCatalog, *, path: Path, fs: FileSystem
) -> None:
    payload = scoring_profile_catalog_to_payload(catalog)
    fs.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", path)
