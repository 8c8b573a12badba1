"""Recognise React-style component definitions in a syntax tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .module import SourceModule
from .tree_sitter import SyntaxNode, first_named_child

_COMPONENT_BASES = {"Component", "PureComponent"}
_CLASS_FACTORIES = {"createReactClass", "createClass", "React.createClass"}
_ELEMENT_FACTORIES = {"createElement", "React.createElement"}

CLASS_NODES = {"class_declaration", "abstract_class_declaration", "class"}
FUNCTION_NODES = {
    "function_declaration",
    "generator_function_declaration",
    "function",
    "function_expression",
    "arrow_function",
}
_JSX_NODES = {"jsx_element", "jsx_self_closing_element", "jsx_fragment"}
# Nodes a definition name can be read through, e.g. ``const Foo = memo(() => ...)``.
_NAME_CARRIERS = {"arguments", "call_expression", "parenthesized_expression"}

_EXTENDS = re.compile(r"extends\s+([A-Za-z_$][\w$.]*)")


@dataclass(frozen=True)
class ComponentDefinition:
    """A component found in the source, with the name it is bound to."""

    node: SyntaxNode
    kind: str
    name: Optional[str] = None

    @property
    def key(self) -> Tuple[int, int]:
        return (self.node.start_byte, self.node.end_byte)


def as_definition(node: SyntaxNode, module: SourceModule) -> Optional[ComponentDefinition]:
    """Return a definition when ``node`` itself defines a component."""
    if node is None:
        return None
    kind = node.type
    if kind in CLASS_NODES and _extends_component(node, module):
        return ComponentDefinition(node=node, kind="class", name=_definition_name(node, module))
    if kind == "call_expression" and _is_class_factory(node, module):
        return ComponentDefinition(node=node, kind="factory", name=_definition_name(node, module))
    if kind in FUNCTION_NODES and _returns_jsx(node, module):
        return ComponentDefinition(node=node, kind="function", name=_definition_name(node, module))
    return None


def factory_spec(node: SyntaxNode) -> Optional[SyntaxNode]:
    """Return the object literal passed to ``createReactClass``."""
    arguments = node.child_by_field_name("arguments")
    spec = first_named_child(arguments)
    if spec is not None and spec.type == "object":
        return spec
    return None


def own_returns(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield return statements of a function body, skipping nested functions."""
    for child in node.named_children:
        if child.type == "return_statement":
            yield child
        elif child.type in FUNCTION_NODES or child.type in CLASS_NODES:
            continue
        elif child.type == "method_definition":
            continue
        else:
            yield from own_returns(child)


def _extends_component(node: SyntaxNode, module: SourceModule) -> bool:
    for child in node.children:
        if child.type != "class_heritage":
            continue
        match = _EXTENDS.search(module.text(child))
        if match:
            return match.group(1).split(".")[-1] in _COMPONENT_BASES
    return False


def _is_class_factory(node: SyntaxNode, module: SourceModule) -> bool:
    function = node.child_by_field_name("function")
    if function is None or module.text(function) not in _CLASS_FACTORIES:
        return False
    return factory_spec(node) is not None


def _returns_jsx(node: SyntaxNode, module: SourceModule) -> bool:
    body = node.child_by_field_name("body")
    if body is None:
        return False
    if body.type != "statement_block":
        return _is_element(body, module)
    return any(_is_element(first_named_child(ret), module) for ret in own_returns(body))


def _is_element(node: Optional[SyntaxNode], module: SourceModule) -> bool:
    if node is None:
        return False
    kind = node.type
    if kind in _JSX_NODES:
        return True
    if kind == "parenthesized_expression":
        return _is_element(first_named_child(node), module)
    if kind == "ternary_expression":
        return _is_element(node.child_by_field_name("consequence"), module) or _is_element(
            node.child_by_field_name("alternative"), module
        )
    if kind == "binary_expression":
        return _is_element(node.child_by_field_name("left"), module) or _is_element(
            node.child_by_field_name("right"), module
        )
    if kind == "call_expression":
        function = node.child_by_field_name("function")
        return function is not None and module.text(function) in _ELEMENT_FACTORIES
    return False


def _definition_name(node: SyntaxNode, module: SourceModule) -> Optional[str]:
    name_node = node.child_by_field_name("name")
    if name_node is not None and node.type not in {"function", "function_expression", "class"}:
        return module.text(name_node)
    parent = node.parent
    while parent is not None and parent.type in _NAME_CARRIERS:
        parent = parent.parent
    if parent is not None and parent.type == "variable_declarator":
        declarator_name = parent.child_by_field_name("name")
        if declarator_name is not None and declarator_name.type == "identifier":
            return module.text(declarator_name)
    if name_node is not None:
        return module.text(name_node)
    return None


__all__ = [
    "CLASS_NODES",
    "ComponentDefinition",
    "FUNCTION_NODES",
    "as_definition",
    "factory_spec",
    "own_returns",
]
