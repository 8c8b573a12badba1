"""Persist generated modules next to the component."""

from __future__ import annotations

from .logging import get_logger
from .models import ComponentPaths

_LOGGER = get_logger("writer")


def write_artifacts(paths: ComponentPaths, fixture_text: str, test_text: str) -> None:
    """Create the test directory if needed and overwrite both output files."""
    paths.test_directory.mkdir(parents=True, exist_ok=True)
    paths.fixture_file_path.write_text(fixture_text, encoding="utf-8")
    _LOGGER.debug("Wrote %s", paths.fixture_file_path)
    paths.test_file_path.write_text(test_text, encoding="utf-8")
    _LOGGER.debug("Wrote %s", paths.test_file_path)


__all__ = ["write_artifacts"]
