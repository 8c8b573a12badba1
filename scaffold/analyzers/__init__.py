"""Component resolution: locate a component definition and read its props."""

from __future__ import annotations

from .base import DefinitionFinder
from .definitions import ComponentDefinition
from .finders import AllDefinitionsFinder, ExportedDefinitionFinder
from .resolver import (
    AMBIGUOUS,
    UNPARSEABLE,
    ComponentResolver,
    Direct,
    Failed,
    Resolution,
    Wrapped,
    resolve_component,
)
from .tree_sitter import TREE_SITTER_AVAILABLE, grammar_for_file

__all__ = [
    "AMBIGUOUS",
    "AllDefinitionsFinder",
    "ComponentDefinition",
    "ComponentResolver",
    "DefinitionFinder",
    "Direct",
    "ExportedDefinitionFinder",
    "Failed",
    "Resolution",
    "TREE_SITTER_AVAILABLE",
    "UNPARSEABLE",
    "Wrapped",
    "grammar_for_file",
    "resolve_component",
]
