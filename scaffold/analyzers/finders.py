"""Direct and wrapped strategies for locating component definitions."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .base import DefinitionFinder
from .definitions import ComponentDefinition, as_definition
from .module import SourceModule


class ExportedDefinitionFinder(DefinitionFinder):
    """Finds components the module exports directly.

    Covers ``export default``, named exports, ``export { Name }`` and
    ``module.exports``; exported identifiers are followed to their top-level
    binding. Higher-order wrappers such as ``connect(...)(Name)`` are not
    looked through.
    """

    name = "direct"

    def find(self, module: SourceModule) -> List[ComponentDefinition]:
        found: Dict[Tuple[int, int], ComponentDefinition] = {}
        for exported in module.exports:
            definition = as_definition(module.resolve(exported), module)
            if definition is not None and definition.key not in found:
                found[definition.key] = definition
        return list(found.values())


class AllDefinitionsFinder(DefinitionFinder):
    """Finds every component definition anywhere in the module.

    The walk does not descend into a definition once found, so render helpers
    declared inside a component are not reported as components themselves.
    """

    name = "wrapped"

    def find(self, module: SourceModule) -> List[ComponentDefinition]:
        found: List[ComponentDefinition] = []
        stack = [module.root]
        while stack:
            node = stack.pop()
            definition = as_definition(node, module)
            if definition is not None:
                found.append(definition)
                continue
            stack.extend(reversed(node.named_children))
        return found


__all__ = ["AllDefinitionsFinder", "ExportedDefinitionFinder"]
