"""Extract the declared prop schema of a component definition."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..logging import get_logger
from ..models import PropertyDescriptor, TypeAnnotation
from .definitions import ComponentDefinition, factory_spec, own_returns
from .module import SourceModule
from .tree_sitter import SyntaxNode, first_named_child, has_token, walk

_LOGGER = get_logger("analyzers.props")

_FIELD_NODES = {"public_field_definition", "field_definition"}
_PARAMETER_NODES = {"required_parameter", "optional_parameter"}
_OBJECT_TYPE_NODES = {"object_type", "interface_body"}
_MEMBER_NODES = {"property_signature", "method_signature"}
# Utility types that leave the wrapped object's members unchanged.
_TRANSPARENT_GENERICS = {"Readonly", "$ReadOnly", "$Exact", "Partial"}
# Function component types whose first type argument is the props type.
_COMPONENT_GENERICS = {
    "FC",
    "FunctionComponent",
    "SFC",
    "StatelessComponent",
    "VFC",
    "React.FC",
    "React.FunctionComponent",
    "React.SFC",
    "React.StatelessComponent",
    "React.VFC",
}
# Flow maybe type (`?string`); the TypeScript grammar recovers it as an error node.
_MAYBE_TYPE = re.compile(r"^\s*\??\s*:\s*\?\s*([A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*)")

_TYPE_NAMES = {
    "union_type": "union",
    "intersection_type": "intersection",
    "function_type": "Function",
    "constructor_type": "Function",
    "object_type": "signature",
    "array_type": "Array",
    "tuple_type": "tuple",
    "literal_type": "literal",
}


def extract_schema(
    definition: ComponentDefinition, module: SourceModule
) -> Dict[str, PropertyDescriptor]:
    """Return the props of ``definition`` keyed by name, in declaration order.

    Static type annotations come first, then ``propTypes`` validators, then
    names that only appear in ``defaultProps``.
    """
    schema: Dict[str, PropertyDescriptor] = {}

    for name, annotation in _annotated_props(definition, module):
        schema.setdefault(name, PropertyDescriptor(name=name)).type_annotation = annotation

    for name, raw in _object_entries(_static_member(definition, module, "propTypes"), module):
        schema.setdefault(name, PropertyDescriptor(name=name)).runtime_type = raw

    defaults = _static_member(definition, module, "defaultProps")
    if defaults is None and definition.kind == "factory":
        defaults = _method_result(definition.node, module, "getDefaultProps")
    for name, _ in _object_entries(defaults, module):
        schema.setdefault(name, PropertyDescriptor(name=name))

    _LOGGER.debug(
        "Extracted %d prop(s) from %s %s",
        len(schema),
        definition.kind,
        definition.name or "<anonymous>",
    )
    return schema


# Static type annotations


def _annotated_props(
    definition: ComponentDefinition, module: SourceModule
) -> List[Tuple[str, TypeAnnotation]]:
    type_node = _props_type(definition, module)
    if type_node is None:
        return []
    props: List[Tuple[str, TypeAnnotation]] = []
    for signature in _object_members(type_node, module, set()):
        name_node = signature.child_by_field_name("name")
        if name_node is None:
            continue
        if signature.type == "method_signature":
            value_type = None
            name = "Function"
        else:
            value_type = first_named_child(signature.child_by_field_name("type"))
            name = _maybe_type_name(name_node, module) or type_name(value_type, module)
        props.append(
            (
                _unquote(module.text(name_node)),
                TypeAnnotation(
                    name=name,
                    required=not has_token(signature, "?"),
                    elements=tuple(_union_names(value_type, module)),
                ),
            )
        )
    return props


def _props_type(definition: ComponentDefinition, module: SourceModule) -> Optional[SyntaxNode]:
    node = definition.node
    if definition.kind == "class":
        for child in node.children:
            if child.type != "class_heritage":
                continue
            for descendant in walk(child):
                if descendant.type == "type_arguments":
                    return first_named_child(descendant)
        body = node.child_by_field_name("body")
        for member in body.named_children if body is not None else []:
            if member.type in _FIELD_NODES and _member_name(member, module) == "props":
                return first_named_child(member.child_by_field_name("type"))
        return None
    if definition.kind == "function":
        parameters = node.child_by_field_name("parameters")
        first = first_named_child(parameters)
        if first is not None and first.type in _PARAMETER_NODES:
            annotated = first_named_child(first.child_by_field_name("type"))
            if annotated is not None:
                return annotated
        return _declared_component_props(node, module)
    return None


def _declared_component_props(node: SyntaxNode, module: SourceModule) -> Optional[SyntaxNode]:
    """Props type of `const X: React.FC<Props> = (...) => ...`."""
    declarator = node.parent
    if declarator is None or declarator.type != "variable_declarator":
        return None
    declared = first_named_child(declarator.child_by_field_name("type"))
    if declared is None or declared.type != "generic_type":
        return None
    name_node = declared.child_by_field_name("name")
    if name_node is None or module.text(name_node) not in _COMPONENT_GENERICS:
        return None
    return first_named_child(declared.child_by_field_name("type_arguments"))


def _object_members(
    node: Optional[SyntaxNode], module: SourceModule, seen: Set[str]
) -> List[SyntaxNode]:
    if node is None:
        return []
    kind = node.type
    if kind in _OBJECT_TYPE_NODES:
        return [child for child in node.named_children if child.type in _MEMBER_NODES]
    if kind == "type_identifier":
        return _named_type_members(module.text(node), module, seen)
    if kind == "generic_type":
        name_node = node.child_by_field_name("name")
        name = module.text(name_node) if name_node is not None else ""
        if name in _TRANSPARENT_GENERICS:
            arguments = node.child_by_field_name("type_arguments")
            return _object_members(first_named_child(arguments), module, seen)
        return _named_type_members(name, module, seen)
    if kind == "intersection_type":
        members: List[SyntaxNode] = []
        for part in node.named_children:
            members.extend(_object_members(part, module, seen))
        return members
    if kind == "parenthesized_type":
        return _object_members(first_named_child(node), module, seen)
    return []


def _named_type_members(name: str, module: SourceModule, seen: Set[str]) -> List[SyntaxNode]:
    if name in seen or name not in module.types:
        return []
    seen.add(name)
    return _object_members(module.types[name], module, seen)


def type_name(node: Optional[SyntaxNode], module: SourceModule) -> str:
    """Return the descriptor name of a type node (``string``, ``union``, ...)."""
    if node is None:
        return "unknown"
    kind = node.type
    if kind in {"predefined_type", "type_identifier", "nested_type_identifier"}:
        return module.text(node)
    if kind == "generic_type":
        name_node = node.child_by_field_name("name")
        return module.text(name_node if name_node is not None else first_named_child(node))
    if kind == "parenthesized_type":
        return type_name(first_named_child(node), module)
    return _TYPE_NAMES.get(kind, "unknown")


def _maybe_type_name(name_node: SyntaxNode, module: SourceModule) -> Optional[str]:
    following = module.source[name_node.end_byte : name_node.end_byte + 256]
    match = _MAYBE_TYPE.match(following.decode("utf-8", errors="ignore"))
    return match.group(1) if match else None


def _union_names(node: Optional[SyntaxNode], module: SourceModule) -> Iterable[str]:
    while node is not None and node.type == "parenthesized_type":
        node = first_named_child(node)
    if node is None or node.type != "union_type":
        return []
    names: List[str] = []
    for part in node.named_children:
        if part.type == "union_type":
            names.extend(_union_names(part, module))
        elif part.type != "comment":
            names.append(type_name(part, module))
    return names


# Runtime validators and defaults


def _static_member(
    definition: ComponentDefinition, module: SourceModule, member: str
) -> Optional[SyntaxNode]:
    node = definition.node
    if definition.kind == "class":
        body = node.child_by_field_name("body")
        for child in body.named_children if body is not None else []:
            if not has_token(child, "static") or _member_name(child, module) != member:
                continue
            if child.type in _FIELD_NODES:
                return module.resolve(child.child_by_field_name("value"))
            if child.type == "method_definition":
                return _returned_object(child, module)
    if definition.kind == "factory":
        spec = factory_spec(node)
        for pair in spec.named_children if spec is not None else []:
            if pair.type == "pair" and _pair_key(pair, module) == member:
                return module.resolve(pair.child_by_field_name("value"))
    if definition.name is not None:
        return module.resolve(module.statics.get((definition.name, member)))
    return None


def _method_result(node: SyntaxNode, module: SourceModule, method: str) -> Optional[SyntaxNode]:
    spec = factory_spec(node)
    for child in spec.named_children if spec is not None else []:
        if child.type == "method_definition" and _member_name(child, module) == method:
            return _returned_object(child, module)
    return None


def _returned_object(method: SyntaxNode, module: SourceModule) -> Optional[SyntaxNode]:
    body = method.child_by_field_name("body")
    if body is None:
        return None
    for statement in own_returns(body):
        value = first_named_child(statement)
        while value is not None and value.type == "parenthesized_expression":
            value = first_named_child(value)
        return module.resolve(value)
    return None


def _object_entries(node: Optional[SyntaxNode], module: SourceModule) -> List[Tuple[str, str]]:
    if node is None or node.type != "object":
        return []
    entries: List[Tuple[str, str]] = []
    for child in node.named_children:
        if child.type != "pair":
            continue
        key = _pair_key(child, module)
        value = child.child_by_field_name("value")
        if key is not None and value is not None:
            entries.append((key, module.text(value)))
    return entries


def _pair_key(pair: SyntaxNode, module: SourceModule) -> Optional[str]:
    key = pair.child_by_field_name("key")
    if key is None or key.type == "computed_property_name":
        return None
    return _unquote(module.text(key))


def _member_name(member: SyntaxNode, module: SourceModule) -> Optional[str]:
    name_node = member.child_by_field_name("name") or member.child_by_field_name("property")
    return module.text(name_node) if name_node is not None else None


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"', "`"}:
        return text[1:-1]
    return text


__all__ = ["extract_schema", "type_name"]
