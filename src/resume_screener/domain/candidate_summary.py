"""Flat candidate summaries and their conversion to scoring records.

Some callers (screening spreadsheets, quick comparisons) describe a candidate
as a handful of lists and flags rather than a parsed resume. A summary is
rendered into a plain-text resume so that every profile rule sees the same
evidence a parsed resume would give it.

Usage example:
    from resume_screener.domain.candidate_summary import CandidateSummary

    summary = CandidateSummary(
        name="Sam Lee",
        frameworks=("React",),
        languages=("TypeScript",),
        years_of_experience=4,
        level="senior",
        github=True,
    )
    record = summary.to_candidate_record()
    assert "Senior Software Engineer" in record.raw_text
    assert record.links.github is not None
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .candidates import (
    CandidateLinks,
    CandidateRecord,
    EducationEntry,
    ExperienceEntry,
    MetricMatch,
)
from .metric_patterns import extract_metrics

DEFAULT_ROLE = "Software Engineer"
GITHUB_BASE_URL = "https://github.com/"
LIVE_PROJECTS_LINE = "Projects deployed live to production"

LEVEL_TITLES = {
    "intern": "Intern",
    "junior": "Junior",
    "mid": "",
    "senior": "Senior",
    "lead": "Lead",
    "staff": "Staff",
    "principal": "Principal",
}


@dataclass(frozen=True)
class CandidateSummary:
    """Flat description of a candidate."""

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

    @property
    def title(self) -> str:
        level = self.level.strip().lower()
        prefix = LEVEL_TITLES.get(level, level.title())
        return f"{prefix} {DEFAULT_ROLE}" if prefix else DEFAULT_ROLE

    def render_resume_text(self) -> str:
        """Render the summary as resume lines.

        Only the candidate's own values are written, never section headings.
        """
        lines = [self.title]
        if self.name:
            lines.insert(0, self.name)
        _append_list(lines, self.frameworks)
        _append_list(lines, self.languages)
        _append_list(lines, self.tools)
        for company in self.companies:
            lines.append(f"{self.title}, {company}")
        _append_bullets(lines, self.achievements)
        _append_bullets(lines, self.metrics)
        _append_bullets(lines, self.projects)
        if self.live_projects:
            lines.append(LIVE_PROJECTS_LINE)
        if self.education:
            lines.append(self.education)
        _append_list(lines, self.certifications)
        links = self.links()
        lines.extend(url for url in (links.github, links.portfolio, links.linkedin) if url)
        return "\n".join(lines)

    def links(self) -> CandidateLinks:
        if isinstance(self.github, str):
            github = self.github.strip() or None
        elif self.github:
            github = f"{GITHUB_BASE_URL}{_handle(self.name)}"
        else:
            github = None
        return CandidateLinks(github=github, portfolio=self.portfolio, linkedin=self.linkedin)

    def to_candidate_record(self) -> CandidateRecord:
        return CandidateRecord(
            name=self.name,
            email=self.email,
            raw_text=self.render_resume_text(),
            experience=tuple(
                ExperienceEntry(company=company, role=self.title) for company in self.companies
            ),
            total_years_experience=float(self.years_of_experience),
            links=self.links(),
            metrics=tuple(_metric(text) for text in self.metrics),
            skills=(*self.frameworks, *self.languages, *self.tools),
            education=(EducationEntry(degree=self.education),) if self.education else (),
            certifications=self.certifications,
            company_tier=self.company_tier,
        )


def _append_list(lines: list[str], values: tuple[str, ...]) -> None:
    if values:
        lines.append(", ".join(values))


def _append_bullets(lines: list[str], values: tuple[str, ...]) -> None:
    lines.extend(f"- {value}" for value in values)


def _handle(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "candidate"


def _metric(text: str) -> MetricMatch:
    """Use the first recognised metric in ``text``, else keep it as a vague claim."""
    found = extract_metrics(text)
    if found:
        return found[0]
    return MetricMatch(text=text, context=text)
