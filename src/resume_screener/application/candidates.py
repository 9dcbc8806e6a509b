"""Loading and validation for candidate record files.

A candidate file is a JSON object with a ``candidates`` list. Each entry is
either a parsed resume record (``raw_text``, ``experience``, ``links``...) or a
flat candidate summary (``frameworks``, ``languages``, ``level``...).

Usage example:
    {
      "candidates": [
        {"name": "Jane Doe", "raw_text": "Senior engineer...", "total_years_experience": 6},
        {"name": "Sam Lee", "frameworks": ["React"], "years_of_experience": 2, "github": true}
      ]
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.candidate_summary import CandidateSummary
from ..domain.candidates import (
    CandidateLinks,
    CandidateRecord,
    EducationEntry,
    ExperienceEntry,
    MetricMatch,
)
from ..exceptions import CandidateFileNotFoundError, CandidateValidationError
from ..protocols import FileSystem


class _ExperienceEntryModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    company: str
    role: str = ""
    duration: str = ""


class _CandidateLinksModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    github: str | None = None
    portfolio: str | None = None
    linkedin: str | None = None


class _MetricMatchModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    value: float | None = None
    unit: str = ""
    context: str = ""


class _EducationEntryModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    degree: str
    institution: str = ""
    field_of_study: str = ""


def _non_negative(value: float) -> float:
    if value < 0.0:
        raise ValueError("must not be negative")
    return value


class _CandidateRecordModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = ""
    email: str | None = None
    file_name: str | None = None
    raw_text: str = ""
    experience: tuple[_ExperienceEntryModel, ...] = ()
    total_years_experience: float = 0.0
    links: _CandidateLinksModel = _CandidateLinksModel()
    metrics: tuple[_MetricMatchModel, ...] = ()
    skills: tuple[str, ...] = ()
    education: tuple[_EducationEntryModel, ...] = ()
    certifications: tuple[str, ...] = ()
    company_tier: str | None = None

    @field_validator("total_years_experience")
    @classmethod
    def _validate_years(cls, value: float) -> float:
        return _non_negative(value)

    def to_domain(self) -> CandidateRecord:
        return CandidateRecord(
            name=self.name,
            email=self.email,
            file_name=self.file_name,
            raw_text=self.raw_text,
            experience=tuple(
                ExperienceEntry(company=entry.company, role=entry.role, duration=entry.duration)
                for entry in self.experience
            ),
            total_years_experience=self.total_years_experience,
            links=CandidateLinks(
                github=self.links.github,
                portfolio=self.links.portfolio,
                linkedin=self.links.linkedin,
            ),
            metrics=tuple(
                MetricMatch(
                    text=metric.text, value=metric.value, unit=metric.unit, context=metric.context
                )
                for metric in self.metrics
            ),
            skills=self.skills,
            education=tuple(
                EducationEntry(
                    degree=entry.degree,
                    institution=entry.institution,
                    field_of_study=entry.field_of_study,
                )
                for entry in self.education
            ),
            certifications=self.certifications,
            company_tier=self.company_tier,
        )


class _CandidateSummaryModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = ""
    email: str | None = None
    frameworks: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    years_of_experience: float = 0.0
    level: str = ""
    achievements: tuple[str, ...] = ()
    metrics: tuple[str, ...] = ()
    projects: tuple[str, ...] = ()
    github: bool | str = False
    portfolio: str | None = None
    linkedin: str | None = None
    live_projects: bool = False
    education: str = ""
    certifications: tuple[str, ...] = ()
    company_tier: str | None = None
    companies: tuple[str, ...] = ()

    @field_validator("years_of_experience")
    @classmethod
    def _validate_years(cls, value: float) -> float:
        return _non_negative(value)

    def to_domain(self) -> CandidateRecord:
        return CandidateSummary(**self.model_dump()).to_candidate_record()


_CandidateEntry = Annotated[
    _CandidateRecordModel | _CandidateSummaryModel, Field(union_mode="left_to_right")
]


class _CandidateFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    candidates: tuple[_CandidateEntry, ...]


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def parse_candidate_records(payload: str, *, source: str) -> tuple[CandidateRecord, ...]:
    """Validate a candidate file payload and build domain records."""
    try:
        model = _CandidateFileModel.model_validate_json(payload)
    except ValidationError as exc:
        raise CandidateValidationError(source, _format_validation_error(exc)) from exc
    return tuple(entry.to_domain() for entry in model.candidates)


def load_candidate_records(*, path: Path, fs: FileSystem) -> tuple[CandidateRecord, ...]:
    """Load and validate candidate records from JSON."""
    if not fs.exists(path):
        raise CandidateFileNotFoundError(str(path))
    return parse_candidate_records(fs.read_text(path), source=str(path))
