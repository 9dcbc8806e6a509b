"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that screening components depend
on, enabling isolated unit testing with in-memory implementations.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import pandas as pd


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading inputs and writing screening outputs."""

    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        """Write DataFrame to CSV file."""
        ...

    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        """Write JSON file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def write_text(self, content: str, path: Path) -> None:
        """Write text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory."""
        ...
