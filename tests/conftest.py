from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

import pytest


class ComponentBuilder:
    """Utility for writing component sources into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str = "") -> Path:
        """Return an absolute path inside the project."""
        return self.root / relative if relative else self.root


@pytest.fixture
def component_builder(tmp_path: Path) -> ComponentBuilder:
    """Provide a reusable component builder rooted at the pytest tmp_path."""
    return ComponentBuilder(tmp_path)
