"""Tests for the fixture module emitter."""

from __future__ import annotations

from pathlib import Path
from typing import List

from scaffold.emitters.fixtures import FixtureEmitter
from scaffold.models import ClassifiedProp, ComponentRecord, PropertyDescriptor
from scaffold.paths import resolve_paths


def _record(props: List[ClassifiedProp], *, wrapped: bool = False) -> ComponentRecord:
    return ComponentRecord(
        paths=resolve_paths("components/user_card.js"),
        schema={prop.name: PropertyDescriptor(name=prop.name) for prop in props},
        is_wrapped=wrapped,
        classified=props,
    )


def _emit(record: ComponentRecord, **kwargs) -> str:
    return FixtureEmitter(root=Path.cwd(), **kwargs).emit(record)


def test_fixture_module_for_required_and_optional_props() -> None:
    record = _record(
        [
            ClassifiedProp(name="name", effective_type="string", required=True, classified_value="''"),
            ClassifiedProp(name="active", effective_type="bool", required=False, classified_value="true"),
        ]
    )

    assert _emit(record) == (
        "import Immutable from 'immutable';\n"
        "import safeSpy from '../../test/safe_spy';\n"
        "import { UserCard } from '../user_card';\n"
        "\n"
        "export const base = {\n"
        "  description: 'base',\n"
        "  component: UserCard,\n"
        "  props: {\n"
        "    name: ''\n"
        "  }\n"
        "};\n"
        "\n"
        "export const active = {\n"
        "  description: 'active optional prop',\n"
        "  component: UserCard,\n"
        "  props: {\n"
        "    name: '',\n"
        "    active: true\n"
        "  }\n"
        "};\n"
    )


def test_component_without_props_gets_empty_props_comment() -> None:
    record = ComponentRecord(paths=resolve_paths("components/user_card.js"))

    text = _emit(record)

    assert "  props: {} // could not find prop type declarations" in text
    assert text.count("export const") == 1


def test_component_without_required_props() -> None:
    record = _record(
        [ClassifiedProp(name="active", effective_type="bool", required=False, classified_value="true")]
    )

    text = _emit(record)

    assert "  props: {} // could not find required props" in text
    assert "export const active = {\n" in text
    assert "  props: {\n    active: true\n  }\n" in text


def test_every_required_prop_appears_in_every_scenario() -> None:
    record = _record(
        [
            ClassifiedProp(name="id", effective_type="number", required=True, classified_value="0"),
            ClassifiedProp(name="title", effective_type="string", required=True, classified_value="''"),
            ClassifiedProp(name="onSelect", effective_type="func", required=False, classified_value="safeSpy()"),
            ClassifiedProp(name="tags", effective_type="immutable.list", required=False, classified_value="Immutable.List()"),
        ]
    )

    text = _emit(record)

    assert text.count("export const") == 3
    assert "    id: 0,\n    title: ''\n  }" in text
    assert "    id: 0,\n    title: '',\n    onSelect: safeSpy()\n" in text
    assert "    id: 0,\n    title: '',\n    tags: Immutable.List()\n" in text


def test_wrapped_component_uses_accessor_in_every_scenario() -> None:
    record = _record(
        [
            ClassifiedProp(name="name", effective_type="string", required=True, classified_value="''"),
            ClassifiedProp(name="active", effective_type="bool", required=False, classified_value="true"),
        ],
        wrapped=True,
    )

    text = _emit(record)

    assert text.count("  component: UserCard.WrappedComponent,\n") == 2


def test_unmapped_values_and_diagnostics_are_rendered() -> None:
    record = _record(
        [
            ClassifiedProp(name="children", effective_type="React.Node", required=True, classified_value=None),
            ClassifiedProp(
                name="label",
                effective_type="any",
                required=False,
                classified_value="''",
                diagnostic="Could not deduce prop type",
            ),
        ]
    )

    text = _emit(record)

    assert "    children: null\n" in text
    assert "    children: null,\n    label: '' // Could not deduce prop type\n" in text


def test_spy_helper_and_quoted_keys() -> None:
    record = _record(
        [ClassifiedProp(name="aria-label", effective_type="string", required=True, classified_value="''")]
    )

    text = _emit(record, spy_helper="support/spy")

    assert "import safeSpy from '../../support/spy';" in text
    assert "    'aria-label': ''\n" in text


def test_optional_props_with_unusable_names_get_distinct_exports() -> None:
    record = _record(
        [
            ClassifiedProp(name="base", effective_type="string", required=False, classified_value="''"),
            ClassifiedProp(name="data-id", effective_type="string", required=False, classified_value="''"),
            ClassifiedProp(name="default", effective_type="bool", required=False, classified_value="true"),
        ]
    )

    text = _emit(record)

    assert record.scenario_names == ["base", "base_", "data_id", "default_"]
    assert text.count("export const base = {") == 1
    assert "export const base_ = {\n  description: 'base optional prop'," in text
    assert "export const data_id = {\n  description: 'data-id optional prop'," in text
    assert "    'data-id': ''\n" in text
    assert "export const default_ = {" in text
    assert "export const default = {" not in text
