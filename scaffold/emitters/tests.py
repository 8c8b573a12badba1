"""Render the ``<name>.test`` snapshot module."""

from __future__ import annotations

from typing import Sequence

from ..models import ComponentRecord


class TestEmitter:
    """Emits one shallow-render snapshot ``describe`` block per scenario."""

    __test__ = False  # not a pytest test class

    def emit(self, record: ComponentRecord, scenario_names: Sequence[str] | None = None) -> str:
        names = list(scenario_names) if scenario_names is not None else record.scenario_names
        base_name = record.paths.source_base_name

        lines = [
            "import React from 'react';",
            "import { shallow } from 'enzyme';",
            "import toJson from 'enzyme-to-json';",
            f"import * as testCases from './{base_name}.test_cases';",
            "",
            f"describe('<{record.identifier_name}>', () => {{",
            "  let testCase;",
            "  let wrapper;",
            "",
        ]
        for index, name in enumerate(names):
            lines.extend(
                [
                    f"  describe(testCases.{name}.description, () => {{",
                    "    beforeEach(() => {",
                    f"      testCase = testCases.{name};",
                    "      wrapper = shallow(React.createElement(testCase.component, testCase.props));",
                    "    });",
                    "",
                    "    it('renders', () => {",
                    "      expect(toJson(wrapper)).toMatchSnapshot();",
                    "    });",
                    "  });",
                ]
            )
            if index != len(names) - 1:
                lines.append("")
        lines.extend(["});", ""])
        return "\n".join(lines)


__all__ = ["TestEmitter"]
