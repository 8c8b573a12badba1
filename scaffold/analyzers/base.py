"""Base classes for component definition finders."""

from abc import ABC, abstractmethod
from typing import List

from .definitions import ComponentDefinition
from .module import SourceModule


class DefinitionFinder(ABC):
    """Contract for strategies that locate component definitions in a module."""

    name: str = "finder"

    @abstractmethod
    def find(self, module: SourceModule) -> List[ComponentDefinition]:
        """Return the distinct component definitions this strategy can see."""
