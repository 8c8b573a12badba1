"""Resolve the component defined by a source file into a prop schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..logging import get_logger
from ..models import PropertyDescriptor
from .finders import AllDefinitionsFinder, ExportedDefinitionFinder
from .module import SourceModule
from .props import extract_schema
from .tree_sitter import DEFAULT_GRAMMAR, ParserUnavailableError, SourceParser

_LOGGER = get_logger("analyzers.resolver")

UNPARSEABLE = "unparseable"
AMBIGUOUS = "ambiguous"

UNPARSEABLE_MESSAGE = (
    "Failed to analyze component definition, could not automatically generate tests."
)
AMBIGUOUS_MESSAGE = (
    "Found more than one component definition, could not automatically generate tests."
)


@dataclass(frozen=True)
class Direct:
    """The file exports exactly one component definition."""

    schema: Dict[str, PropertyDescriptor] = field(default_factory=dict)
    name: Optional[str] = None


@dataclass(frozen=True)
class Wrapped:
    """The only component definition is reached through a wrapping function."""

    schema: Dict[str, PropertyDescriptor] = field(default_factory=dict)
    name: Optional[str] = None


@dataclass(frozen=True)
class Failed:
    """No usable definition; ``kind`` is ``unparseable`` or ``ambiguous``."""

    reason: str
    kind: str = UNPARSEABLE


Resolution = Union[Direct, Wrapped, Failed]


class ComponentResolver:
    """Tries the direct strategy first and falls back to the wrapped one."""

    def __init__(self, parser: SourceParser | None = None) -> None:
        self._parser = parser or SourceParser()
        self._direct = ExportedDefinitionFinder()
        self._wrapped = AllDefinitionsFinder()

    def resolve(self, source: str, grammar: str = DEFAULT_GRAMMAR) -> Resolution:
        try:
            root, source_bytes = self._parser.parse(source, grammar)
        except ParserUnavailableError as exc:
            _LOGGER.error("%s", exc)
            return Failed(reason=UNPARSEABLE_MESSAGE)
        if root.has_error:
            _LOGGER.debug("Source contains syntax the %s grammar could not parse", grammar)
        module = SourceModule.from_tree(root, source_bytes)

        try:
            exported = self._direct.find(module)
            if len(exported) == 1:
                definition = exported[0]
                _LOGGER.debug("Resolved exported component %s", definition.name or "<anonymous>")
                return Direct(schema=extract_schema(definition, module), name=definition.name)
            _LOGGER.debug("Found %d exported component(s); searching the whole file", len(exported))
        except Exception as exc:  # pragma: no cover - falls through to the wrapped strategy
            _LOGGER.debug("Direct resolution failed: %s", exc, exc_info=True)

        try:
            candidates = self._wrapped.find(module)
            if len(candidates) > 1:
                names = ", ".join(c.name or "<anonymous>" for c in candidates)
                _LOGGER.debug("Multiple component definitions: %s", names)
                return Failed(reason=AMBIGUOUS_MESSAGE, kind=AMBIGUOUS)
            if not candidates:
                return Failed(reason=UNPARSEABLE_MESSAGE)
            definition = candidates[0]
            _LOGGER.debug("Resolved wrapped component %s", definition.name or "<anonymous>")
            return Wrapped(schema=extract_schema(definition, module), name=definition.name)
        except Exception as exc:  # pragma: no cover - reported as an unparseable component
            _LOGGER.debug("Wrapped resolution failed: %s", exc, exc_info=True)
            return Failed(reason=UNPARSEABLE_MESSAGE)


def resolve_component(source: str, grammar: str = DEFAULT_GRAMMAR) -> Resolution:
    """Resolve ``source`` with a fresh :class:`ComponentResolver`."""
    return ComponentResolver().resolve(source, grammar)


__all__ = [
    "AMBIGUOUS",
    "AMBIGUOUS_MESSAGE",
    "ComponentResolver",
    "Direct",
    "Failed",
    "Resolution",
    "UNPARSEABLE",
    "UNPARSEABLE_MESSAGE",
    "Wrapped",
    "resolve_component",
]
