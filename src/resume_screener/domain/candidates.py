"""Candidate records consumed by the scoring engine.

Records are produced by an upstream resume parser. Every optional field has an
explicit default here, so scoring code never has to guess at missing values.

Usage example:
    from resume_screener.domain.candidates import CandidateLinks, CandidateRecord

    record = CandidateRecord(
        name="Jane Doe",
        raw_text="Senior engineer. React, TypeScript.",
        total_years_experience=6,
        links=CandidateLinks(github="https://github.com/janedoe"),
    )
    assert record.candidate_id == "Jane Doe"
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExperienceEntry:
    """One employment entry."""

    company: str
    role: str = ""
    duration: str = ""


@dataclass(frozen=True)
class CandidateLinks:
    """Profile links extracted from the resume."""

    github: str | None = None
    portfolio: str | None = None
    linkedin: str | None = None


@dataclass(frozen=True)
class MetricMatch:
    """A quantified achievement such as "45%" or "$2M"."""

    text: str
    value: float | None = None
    unit: str = ""
    context: str = ""


@dataclass(frozen=True)
class EducationEntry:
    """One education entry."""

    degree: str
    institution: str = ""
    field_of_study: str = ""


@dataclass(frozen=True)
class CandidateRecord:
    """Read-only view over a parsed resume."""

    name: str = ""
    email: str | None = None
    file_name: str | None = None
    raw_text: str = ""
    experience: tuple[ExperienceEntry, ...] = ()
    total_years_experience: float = 0.0
    links: CandidateLinks = field(default_factory=CandidateLinks)
    metrics: tuple[MetricMatch, ...] = ()
    skills: tuple[str, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    certifications: tuple[str, ...] = ()
    company_tier: str | None = None

    @property
    def candidate_id(self) -> str:
        """Stable identifier: email, then name, then file name."""
        return self.email or self.name or self.file_name or "unknown"

    @property
    def companies(self) -> tuple[str, ...]:
        return tuple(entry.company for entry in self.experience if entry.company)
