"""High-level orchestration for scaffold runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .analyzers import AMBIGUOUS, ComponentResolver, Failed, Wrapped, grammar_for_file
from .analyzers.resolver import UNPARSEABLE_MESSAGE
from .classifier import classify_schema
from .config import ScaffoldConfig, load_config
from .emitters import FixtureEmitter, TestEmitter
from .errors import AmbiguousComponentError, UnparseableComponentError
from .logging import get_logger
from .models import ComponentPaths, ComponentRecord
from .paths import resolve_paths
from .writer import write_artifacts

Writer = Callable[[ComponentPaths, str, str], None]


@dataclass
class ScaffoldResult:
    """Generated module text for one component, and whether it was written."""

    record: ComponentRecord
    fixture_text: str
    test_text: str
    written: bool = False


class Orchestrator:
    """Runs the resolve, classify, emit and write stages in order."""

    def __init__(
        self,
        *,
        root: Path | None = None,
        config: ScaffoldConfig | None = None,
        resolver: ComponentResolver | None = None,
        writer: Writer = write_artifacts,
    ) -> None:
        self.root = Path(root) if root is not None else Path.cwd()
        self.config = config or load_config(self.root)
        self.resolver = resolver or ComponentResolver()
        self.writer = writer
        self.logger = get_logger("orchestrator")

    def generate(self, filepath: str | os.PathLike[str] | None) -> ScaffoldResult:
        """Build both modules for ``filepath`` without touching the filesystem."""
        paths = resolve_paths(
            filepath,
            tests_dir=self.config.tests_dir,
            extension=self.config.extension,
        )
        self.logger.debug("Analyzing %s as %s", paths.source_path, paths.identifier_name)
        try:
            source = paths.source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise UnparseableComponentError(UNPARSEABLE_MESSAGE) from exc

        resolution = self.resolver.resolve(source, grammar_for_file(paths.source_path))
        if isinstance(resolution, Failed):
            if resolution.kind == AMBIGUOUS:
                raise AmbiguousComponentError(resolution.reason)
            raise UnparseableComponentError(resolution.reason)

        record = ComponentRecord(
            paths=paths,
            schema=resolution.schema,
            is_wrapped=isinstance(resolution, Wrapped),
        )
        record.classified = classify_schema(record.schema)
        self.logger.debug(
            "%s: %d required, %d optional prop(s)%s",
            paths.identifier_name,
            len(record.required_props),
            len(record.optional_props),
            " (wrapped)" if record.is_wrapped else "",
        )

        fixture_text = FixtureEmitter(root=self.root, spy_helper=self.config.spy_helper).emit(record)
        test_text = TestEmitter().emit(record, record.scenario_names)
        return ScaffoldResult(record=record, fixture_text=fixture_text, test_text=test_text)

    def run(self, filepath: str | os.PathLike[str] | None, *, dry_run: bool = False) -> ScaffoldResult:
        """Generate both modules and write them unless ``dry_run`` is set."""
        result = self.generate(filepath)
        if dry_run:
            self.logger.info("Dry run: skipping writes for %s", result.record.paths.source_path)
            return result
        self.writer(result.record.paths, result.fixture_text, result.test_text)
        result.written = True
        return result


__all__ = ["Orchestrator", "ScaffoldResult"]
