"""Core data models shared across scaffold components."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

BASE_SCENARIO = "base"

# Words that cannot name an exported binding in an ES module.
RESERVED_WORDS = frozenset(
    """
    await break case catch class const continue debugger default delete do else
    enum export extends false finally for function if implements import in
    instanceof interface let new null package private protected public return
    static super switch this throw true try typeof var void while with yield
    """.split()
)

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^\w$]")


@dataclass(frozen=True)
class ComponentPaths:
    """Naming metadata derived from the component file path."""

    identifier_name: str
    source_path: Path
    source_base_name: str
    test_directory: Path
    fixture_file_path: Path
    test_file_path: Path
    extension: str


@dataclass(frozen=True)
class TypeAnnotation:
    """Static (Flow or TypeScript) type of a single prop."""

    name: str
    required: bool
    elements: Tuple[str, ...] = ()


@dataclass
class PropertyDescriptor:
    """A prop declared by the component, as found in the source."""

    name: str
    type_annotation: Optional[TypeAnnotation] = None
    runtime_type: Optional[str] = None


@dataclass
class ClassifiedProp:
    """A prop with its required flag and representative default literal."""

    name: str
    effective_type: str
    required: bool
    classified_value: Optional[str]
    diagnostic: Optional[str] = None


@dataclass
class ComponentRecord:
    """Everything the pipeline knows about the component being scaffolded."""

    paths: ComponentPaths
    schema: Dict[str, PropertyDescriptor] = field(default_factory=dict)
    is_wrapped: bool = False
    classified: List[ClassifiedProp] = field(default_factory=list)

    @property
    def identifier_name(self) -> str:
        return self.paths.identifier_name

    @property
    def required_props(self) -> List[ClassifiedProp]:
        return [prop for prop in self.classified if prop.required]

    @property
    def optional_props(self) -> List[ClassifiedProp]:
        return [prop for prop in self.classified if not prop.required]

    @property
    def scenario_names(self) -> List[str]:
        """Return ``base`` followed by one export name per optional prop.

        Prop names that are not usable as an exported binding are rewritten
        (``data-id`` becomes ``data_id``, ``default`` becomes ``default_``) and
        a trailing ``_`` is added until every name is unique.
        """
        names = [BASE_SCENARIO]
        taken = {BASE_SCENARIO}
        for prop in self.optional_props:
            name = scenario_identifier(prop.name, taken)
            taken.add(name)
            names.append(name)
        return names


def scenario_identifier(prop_name: str, taken: Set[str]) -> str:
    name = _INVALID_IDENTIFIER_CHARS.sub("_", prop_name) or "_"
    if name[0].isdigit():
        name = f"_{name}"
    while name in RESERVED_WORDS or name in taken:
        name = f"{name}_"
    return name
