"""Concrete infrastructure implementations."""

from .io.filesystem import LocalFileSystem

__all__ = ["LocalFileSystem"]
