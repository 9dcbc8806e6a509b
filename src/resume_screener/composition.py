"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import ScreenerConfig
from .infrastructure import LocalFileSystem


def build_cli_dependencies(*, config: ScreenerConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Screener configuration; local files need nothing from it yet.
    """
    _ = config
    return CliDependencies(fs=LocalFileSystem())


app = create_app(build_cli_dependencies)
