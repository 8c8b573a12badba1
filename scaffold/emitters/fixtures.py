"""Render the ``<name>.test_cases`` fixture module."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import DEFAULT_SPY_HELPER
from ..models import BASE_SCENARIO, ClassifiedProp, ComponentRecord
from ..paths import relative_prefix

WRAPPED_ACCESSOR = ".WrappedComponent"
NO_PROPS_COMMENT = "could not find prop type declarations"
NO_REQUIRED_PROPS_COMMENT = "could not find required props"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


class FixtureEmitter:
    """Builds one exported scenario object per fixture.

    ``base`` carries the required props only; every optional prop gets its own
    scenario holding the required props plus that single optional prop.
    """

    def __init__(self, *, root: Path | None = None, spy_helper: str = DEFAULT_SPY_HELPER) -> None:
        self.root = root or Path.cwd()
        self.spy_helper = spy_helper

    def emit(self, record: ComponentRecord) -> str:
        paths = record.paths
        component = record.identifier_name + (WRAPPED_ACCESSOR if record.is_wrapped else "")
        spy_prefix = relative_prefix(paths.test_directory, self.root)

        lines = [
            "import Immutable from 'immutable';",
            f"import safeSpy from '{spy_prefix}/{self.spy_helper}';",
            f"import {{ {record.identifier_name} }} from '../{paths.source_base_name}';",
            "",
            f"export const {BASE_SCENARIO} = {{",
            f"  description: '{BASE_SCENARIO}',",
            f"  component: {component},",
        ]
        lines.extend(self._base_props(record))
        lines.extend(["};", ""])

        required = record.required_props
        for prop, scenario in zip(record.optional_props, record.scenario_names[1:]):
            lines.append(f"export const {scenario} = {{")
            lines.append(f"  description: '{_escape(prop.name)} optional prop',")
            lines.append(f"  component: {component},")
            lines.append("  props: {")
            lines.extend(_prop_lines(required, trailing_comma=True))
            lines.append(f"    {_format_prop(prop)}")
            lines.append("  }")
            lines.extend(["};", ""])

        return "\n".join(lines)

    @staticmethod
    def _base_props(record: ComponentRecord) -> List[str]:
        if not record.schema:
            return [f"  props: {{}} // {NO_PROPS_COMMENT}"]
        required = record.required_props
        if not required:
            return [f"  props: {{}} // {NO_REQUIRED_PROPS_COMMENT}"]
        return ["  props: {", *_prop_lines(required, trailing_comma=False), "  }"]


def _prop_lines(props: Sequence[ClassifiedProp], *, trailing_comma: bool) -> List[str]:
    lines = []
    for index, prop in enumerate(props):
        last = index == len(props) - 1
        punctuation = "" if last and not trailing_comma else ","
        lines.append(f"    {_format_prop(prop, punctuation)}")
    return lines


def _format_prop(prop: ClassifiedProp, punctuation: str = "") -> str:
    key = prop.name if _IDENTIFIER.match(prop.name) else f"'{_escape(prop.name)}'"
    return f"{key}: {_format_value(prop.classified_value)}{punctuation}{_comment(prop.diagnostic)}"


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def _format_value(value: Optional[str]) -> str:
    return "null" if value is None else value


def _comment(diagnostic: Optional[str]) -> str:
    return f" // {diagnostic}" if diagnostic else ""


__all__ = ["FixtureEmitter", "NO_PROPS_COMMENT", "NO_REQUIRED_PROPS_COMMENT", "WRAPPED_ACCESSOR"]
