"""Top-level index of a parsed component source file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .tree_sitter import SyntaxNode, node_text

_DECLARATION_TYPES = {"lexical_declaration", "variable_declaration"}
_NAMED_DECLARATIONS = {
    "class_declaration",
    "abstract_class_declaration",
    "function_declaration",
    "generator_function_declaration",
}
_MODULE_EXPORTS = {"module.exports", "exports.default"}


@dataclass
class SourceModule:
    """Bindings, type declarations, static assignments and exports of a module.

    Only top-level statements are indexed; that is where components, their
    prop types and ``Name.propTypes = ...`` assignments live.
    """

    root: SyntaxNode
    source: bytes
    bindings: Dict[str, SyntaxNode] = field(default_factory=dict)
    types: Dict[str, SyntaxNode] = field(default_factory=dict)
    statics: Dict[Tuple[str, str], SyntaxNode] = field(default_factory=dict)
    exports: List[SyntaxNode] = field(default_factory=list)

    @classmethod
    def from_tree(cls, root: SyntaxNode, source: bytes) -> "SourceModule":
        module = cls(root=root, source=source)
        for statement in root.named_children:
            module._index_statement(statement)
        return module

    def text(self, node: SyntaxNode) -> str:
        return node_text(node, self.source)

    def resolve(self, node: Optional[SyntaxNode]) -> Optional[SyntaxNode]:
        """Follow identifiers to the value they are bound to at the top level."""
        seen = set()
        while node is not None and node.type == "identifier":
            name = self.text(node)
            if name in seen or name not in self.bindings:
                break
            seen.add(name)
            node = self.bindings[name]
        return node

    def _index_statement(self, statement: SyntaxNode) -> None:
        kind = statement.type
        if kind == "export_statement":
            self._index_export(statement)
        elif kind == "expression_statement":
            self._index_assignment(statement)
        else:
            self._index_declaration(statement)

    def _index_declaration(self, node: SyntaxNode) -> List[SyntaxNode]:
        """Record the bindings ``node`` introduces and return their values."""
        kind = node.type
        values: List[SyntaxNode] = []
        if kind in _NAMED_DECLARATIONS:
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                self.bindings[self.text(name_node)] = node
            values.append(node)
        elif kind in _DECLARATION_TYPES:
            for declarator in node.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                value = declarator.child_by_field_name("value")
                if name_node is None or value is None:
                    continue
                if name_node.type == "identifier":
                    self.bindings[self.text(name_node)] = value
                values.append(value)
        elif kind == "type_alias_declaration":
            name_node = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if name_node is not None and value is not None:
                self.types[self.text(name_node)] = value
        elif kind == "interface_declaration":
            name_node = node.child_by_field_name("name")
            body = node.child_by_field_name("body")
            if name_node is not None and body is not None:
                self.types[self.text(name_node)] = body
        return values

    def _index_export(self, statement: SyntaxNode) -> None:
        declaration = statement.child_by_field_name("declaration")
        if declaration is not None:
            self.exports.extend(self._index_declaration(declaration))
            return
        value = statement.child_by_field_name("value")
        if value is not None:
            self.exports.append(value)
            return
        if statement.child_by_field_name("source") is not None:
            # Re-exports point at other files.
            return
        for child in statement.named_children:
            if child.type != "export_clause":
                continue
            for specifier in child.named_children:
                if specifier.type != "export_specifier":
                    continue
                name_node = specifier.child_by_field_name("name")
                if name_node is not None:
                    self.exports.append(name_node)

    def _index_assignment(self, statement: SyntaxNode) -> None:
        for expression in statement.named_children:
            if expression.type != "assignment_expression":
                continue
            left = expression.child_by_field_name("left")
            right = expression.child_by_field_name("right")
            if left is None or right is None or left.type != "member_expression":
                continue
            target = self.text(left)
            if target in _MODULE_EXPORTS:
                self.exports.append(right)
                continue
            owner = left.child_by_field_name("object")
            member = left.child_by_field_name("property")
            if owner is not None and member is not None and owner.type == "identifier":
                self.statics[(self.text(owner), self.text(member))] = right


__all__ = ["SourceModule"]
