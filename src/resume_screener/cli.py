"""CLI for the resume screener.

Commands:
- score: Score every candidate in a file and print a summary
- rank: Rank a candidate file and write results, rankings, shortlist and statistics
- profiles: List the scoring profiles in a catalogue
- export-profiles: Write the built-in profile catalogue as JSON
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.markup import escape

from . import __version__
from .application.scoring_profiles import load_configured_catalog, write_scoring_profile_catalog
from .application.screening import run_scoring, run_screening
from .config import ScreenerConfig
from .config_file import load_screener_config_file
from .domain.default_profiles import BUILT_IN_CATALOG
from .domain.scoring_profiles import CATEGORIES, summarise_profile_keywords
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: ScreenerConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: ScreenerConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: ScreenerConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the resume-screener entry point.")


DEFAULT_CANDIDATES_IN = Path("data/candidates.json")
DEFAULT_PROFILES_OUT = Path("scoring_profiles.json")

ProfileOption = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Scoring profile id (default: catalogue default)"),
]
ProfilesFileOption = Annotated[
    str | None,
    typer.Option(
        "--profiles-file",
        help="Path to a JSON scoring profile catalogue (default: built-in profiles)",
    ),
]
CandidatesOption = Annotated[
    Path,
    typer.Option("--input", "-i", help="Path to a JSON candidate file"),
]


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"resume-screener {__version__}")
        raise typer.Exit()


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Resume screener: score and rank candidates against configurable rubrics",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to a TOML config file (overrides environment values)",
            ),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = ScreenerConfig.from_env()
        if config_path is not None:
            deps = deps_builder(config=config)
            file_config = load_screener_config_file(path=config_path, fs=deps.fs)
            config = config.with_file_overrides(file_config)
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def score(
        ctx: typer.Context,
        candidates_path: CandidatesOption = DEFAULT_CANDIDATES_IN,
        profile: ProfileOption = None,
        profiles_file: ProfilesFileOption = None,
    ) -> None:
        """Score every candidate in a file and print verdicts."""
        state = _get_context(ctx)
        config = state.config.with_overrides(profile_name=profile, profile_path=profiles_file)
        deps = state.build_dependencies(config=config)
        results = run_scoring(candidates_path, config=config, fs=deps.fs)

        for result in results:
            rprint(
                f"{result.verdict_emoji} [bold]{escape(result.candidate_id)}[/bold]: "
                f"{result.total_score}/100 {result.verdict_label} ({result.verdict_action})"
            )
            for _, category_score in result.breakdown.items():
                rprint(
                    f"  {category_score.category_name}: "
                    f"{category_score.score}/{category_score.max_score:g} "
                    f"({category_score.percentage:.0f}%)"
                )
            for strength in result.strengths:
                rprint(f"  [green]+ {strength}[/green]")
            for concern in result.concerns:
                rprint(f"  [yellow]- {concern}[/yellow]")

    @app.command()
    def rank(
        ctx: typer.Context,
        candidates_path: CandidatesOption = DEFAULT_CANDIDATES_IN,
        out_dir: Annotated[
            Path | None,
            typer.Option(
                "--output-dir",
                "-o",
                help="Directory for output files (default: OUTPUT_DIR)",
            ),
        ] = None,
        profile: ProfileOption = None,
        profiles_file: ProfilesFileOption = None,
        min_score: Annotated[
            float | None,
            typer.Option(
                "--min-score",
                "-m",
                min=0.0,
                max=100.0,
                help="Override shortlist minimum total score (default: 55)",
            ),
        ] = None,
        workers: Annotated[
            int | None,
            typer.Option("--workers", "-w", min=1, help="Scoring worker threads"),
        ] = None,
    ) -> None:
        """Rank candidates and write results, rankings, shortlist and statistics."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            profile_name=profile,
            profile_path=profiles_file,
            min_total_score=min_score,
            max_workers=workers,
        )
        deps = state.build_dependencies(config=config)
        outs = run_screening(
            candidates_path=candidates_path,
            out_dir=out_dir,
            config=config,
            fs=deps.fs,
        )
        rprint("[green]✓ Screening complete:[/green]")
        for k, v in outs.items():
            rprint(f"  {k}: {v}")

    @app.command()
    def profiles(
        ctx: typer.Context,
        profiles_file: ProfilesFileOption = None,
    ) -> None:
        """List scoring profiles with their weights and preview keywords."""
        state = _get_context(ctx)
        config = state.config.with_overrides(profile_path=profiles_file)
        deps = state.build_dependencies(config=config)
        catalog = load_configured_catalog(profile_path=config.profile_path, fs=deps.fs)

        for item in catalog.profiles:
            marker = "*" if item.id == catalog.default_profile else " "
            rprint(f"{marker} [bold]{escape(item.id)}[/bold]: {escape(item.name)}")
            weights = ", ".join(
                f"{category} {item.weights.for_category(category):.0%}" for category in CATEGORIES
            )
            rprint(f"    weights: {weights}")
            keywords = summarise_profile_keywords(item)
            if keywords.required:
                rprint(f"    required: {', '.join(keywords.required)}")
            if keywords.bonus:
                rprint(f"    bonus: {', '.join(keywords.bonus)}")
            if keywords.penalty:
                rprint(f"    penalty: {', '.join(keywords.penalty)}")

    @app.command(name="export-profiles")
    def export_profiles(
        ctx: typer.Context,
        out_path: Annotated[
            Path,
            typer.Option("--output", "-o", help="Path for the JSON catalogue"),
        ] = DEFAULT_PROFILES_OUT,
    ) -> None:
        """Write the built-in scoring profiles as an editable JSON catalogue."""
        state = _get_context(ctx)
        deps = state.build_dependencies()
        write_scoring_profile_catalog(BUILT_IN_CATALOG, path=out_path, fs=deps.fs)
        rprint(f"[green]✓ Exported {len(BUILT_IN_CATALOG.profiles)} profiles:[/green] {out_path}")

    _ = (main, score, rank, profiles, export_profiles)

    return app
