"""Filesystem implementations for infrastructure.

Usage example:
    from pathlib import Path

    import pandas as pd

    from resume_screener.infrastructure.io.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    fs.write_csv(pd.DataFrame({"candidate_id": ["jane@example.com"]}), Path("data/out.csv"))
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing_extensions import override

import pandas as pd

from ...protocols import FileSystem


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)

    @override
    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(dict(data), ensure_ascii=False, indent=2), encoding="utf-8")

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def write_text(self, content: str, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()

    @override
    def mkdir(self, path: Path, parents: bool = True) -> None:
        path.mkdir(parents=parents, exist_ok=True)
