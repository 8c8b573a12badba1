"""Tests for the snapshot-test module emitter."""

from __future__ import annotations

from scaffold.emitters.tests import TestEmitter
from scaffold.models import ClassifiedProp, ComponentRecord
from scaffold.paths import resolve_paths


def _record() -> ComponentRecord:
    return ComponentRecord(
        paths=resolve_paths("components/user_card.js"),
        classified=[
            ClassifiedProp(name="name", effective_type="string", required=True, classified_value="''"),
            ClassifiedProp(name="active", effective_type="bool", required=False, classified_value="true"),
        ],
    )


def test_snapshot_module_for_single_scenario() -> None:
    record = ComponentRecord(paths=resolve_paths("components/user_card.js"))

    assert TestEmitter().emit(record) == (
        "import React from 'react';\n"
        "import { shallow } from 'enzyme';\n"
        "import toJson from 'enzyme-to-json';\n"
        "import * as testCases from './user_card.test_cases';\n"
        "\n"
        "describe('<UserCard>', () => {\n"
        "  let testCase;\n"
        "  let wrapper;\n"
        "\n"
        "  describe(testCases.base.description, () => {\n"
        "    beforeEach(() => {\n"
        "      testCase = testCases.base;\n"
        "      wrapper = shallow(React.createElement(testCase.component, testCase.props));\n"
        "    });\n"
        "\n"
        "    it('renders', () => {\n"
        "      expect(toJson(wrapper)).toMatchSnapshot();\n"
        "    });\n"
        "  });\n"
        "});\n"
    )


def test_one_block_per_scenario_in_fixture_order() -> None:
    text = TestEmitter().emit(_record())

    assert text.count("it('renders'") == 2
    assert text.index("testCases.base.description") < text.index("testCases.active.description")
    assert "  });\n\n  describe(testCases.active.description" in text
    assert text.endswith("  });\n});\n")


def test_explicit_scenario_names_override_record() -> None:
    text = TestEmitter().emit(_record(), ["base"])

    assert "testCases.active" not in text


def test_scenarios_reference_sanitised_export_names() -> None:
    record = ComponentRecord(
        paths=resolve_paths("components/user_card.js"),
        classified=[
            ClassifiedProp(name="data-id", effective_type="string", required=False, classified_value="''"),
            ClassifiedProp(name="class", effective_type="string", required=False, classified_value="''"),
        ],
    )

    text = TestEmitter().emit(record)

    assert "  describe(testCases.data_id.description, () => {\n" in text
    assert "      testCase = testCases.class_;\n" in text
    assert "testCases.data-id" not in text
