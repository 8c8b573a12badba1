"""Map declared prop types to representative fixture values."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .logging import get_logger
from .models import ClassifiedProp, PropertyDescriptor

_LOGGER = get_logger("classifier")

# Effective type name -> JavaScript literal used as the fixture value.
PROP_TYPE_DEFAULTS: Dict[str, str] = {
    "any": "''",
    "boolean": "true",
    "bool": "true",
    "Function": "safeSpy()",
    "func": "safeSpy()",
    "immutable.list": "Immutable.List()",
    "immutable.map": "Immutable.Map()",
    "number": "0",
    "string": "''",
    "union": "''",
    "unknown": "Immutable.fromJS()",
}

UNDEDUCED_TYPE = "any"
UNDEDUCED_MESSAGE = "Could not deduce prop type"

_REQUIRED_MARKER = ".isRequired"
_NAMESPACE = re.compile(r"^(?:React\.)?(Immutable)?PropTypes\.")


def runtime_type_name(raw: str) -> Tuple[str, bool]:
    """Return ``(effective type, required)`` for a ``propTypes`` validator.

    ``PropTypes.string.isRequired`` becomes ``("string", True)``;
    ``ImmutablePropTypes.list`` becomes ``("immutable.list", False)``.
    """
    text = "".join(raw.split())
    required = _REQUIRED_MARKER in text
    name = _NAMESPACE.sub(lambda match: "immutable." if match.group(1) else "", text, count=1)
    if name.endswith(_REQUIRED_MARKER):
        name = name[: -len(_REQUIRED_MARKER)]
    return name, required


def classify_prop(
    descriptor: PropertyDescriptor, table: Mapping[str, str] = PROP_TYPE_DEFAULTS
) -> ClassifiedProp:
    """Decide the required flag and default literal for one prop."""
    diagnostic: Optional[str] = None
    annotation = descriptor.type_annotation
    if annotation is not None:
        effective = annotation.name
        if effective == "union" and annotation.elements:
            effective = annotation.elements[0]
        required = annotation.required
    elif descriptor.runtime_type:
        effective, required = runtime_type_name(descriptor.runtime_type)
    else:
        effective = UNDEDUCED_TYPE
        required = False
        diagnostic = UNDEDUCED_MESSAGE

    value = table.get(effective)
    _LOGGER.debug("Classified prop %s as %s -> %s", descriptor.name, effective, value)
    return ClassifiedProp(
        name=descriptor.name,
        effective_type=effective,
        required=required,
        classified_value=value,
        diagnostic=diagnostic,
    )


def classify_schema(
    schema: Mapping[str, PropertyDescriptor] | Iterable[PropertyDescriptor],
    table: Mapping[str, str] = PROP_TYPE_DEFAULTS,
) -> List[ClassifiedProp]:
    """Classify every prop, preserving the schema's insertion order."""
    descriptors = schema.values() if isinstance(schema, Mapping) else schema
    return [classify_prop(descriptor, table) for descriptor in descriptors]


__all__ = [
    "PROP_TYPE_DEFAULTS",
    "UNDEDUCED_MESSAGE",
    "classify_prop",
    "classify_schema",
    "runtime_type_name",
]
