"""Derive identifier names and output locations from a component file path."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .config import DEFAULT_TESTS_DIR
from .errors import MissingInputError
from .logging import get_logger
from .models import ComponentPaths

_LEADING_LOWER = re.compile(r"^[a-z]")
_SNAKE_BOUNDARY = re.compile(r"_([a-z])")
_DEFAULT_EXTENSION = ".js"

_LOGGER = get_logger("paths")


def derive_identifier(base_name: str) -> str:
    """Turn ``user_card`` into ``UserCard``."""
    name = _LEADING_LOWER.sub(lambda match: match.group(0).upper(), base_name)
    return _SNAKE_BOUNDARY.sub(lambda match: match.group(1).upper(), name)


def resolve_paths(
    filepath: str | os.PathLike[str] | None,
    *,
    tests_dir: str = DEFAULT_TESTS_DIR,
    extension: str | None = None,
) -> ComponentPaths:
    """Return the naming metadata for ``filepath``."""
    if filepath is None or not str(filepath).strip():
        raise MissingInputError()

    source_path = Path(filepath)
    base_name = source_path.stem
    suffix = extension or source_path.suffix or _DEFAULT_EXTENSION
    test_directory = source_path.parent / tests_dir

    return ComponentPaths(
        identifier_name=derive_identifier(base_name),
        source_path=source_path,
        source_base_name=base_name,
        test_directory=test_directory,
        fixture_file_path=test_directory / f"{base_name}.test_cases{suffix}",
        test_file_path=test_directory / f"{base_name}.test{suffix}",
        extension=suffix,
    )


def relative_prefix(test_directory: Path, root: Path) -> str:
    """Return the ``../..`` prefix leading from ``test_directory`` back to ``root``.

    The number of ``..`` segments equals the depth of the test directory below
    the project root. Relative directories are taken from the current working
    directory, matching how the CLI receives them. A directory outside the
    root falls back to its own depth as given.
    """
    directory = Path(test_directory)
    absolute = directory if directory.is_absolute() else Path.cwd() / directory
    relative = Path(os.path.relpath(absolute.resolve(), Path(root).resolve()))
    parts = [part for part in relative.parts if part not in ("", ".")]
    if not parts or ".." in parts:
        parts = [part for part in directory.parts if part not in (directory.anchor, ".")]
        _LOGGER.warning("%s is outside the project root %s", test_directory, root)
    return "/".join([".."] * len(parts))


__all__ = ["derive_identifier", "relative_prefix", "resolve_paths"]
