"""Tree-sitter parsing helpers for component sources."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

try:  # pragma: no cover - optional dependency
    from tree_sitter import Parser
    from tree_sitter_languages import get_language

    TREE_SITTER_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    Parser = None  # type: ignore[assignment]
    get_language = None  # type: ignore[assignment]
    TREE_SITTER_AVAILABLE = False

# tree_sitter.Node; kept loose so this module imports without the grammars.
SyntaxNode = Any

DEFAULT_GRAMMAR = "tsx"

_GRAMMARS_BY_SUFFIX = {
    ".js": "tsx",
    ".jsx": "tsx",
    ".mjs": "tsx",
    ".cjs": "tsx",
    ".tsx": "tsx",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
}


class ParserUnavailableError(RuntimeError):
    """Raised when tree-sitter or its bundled grammars are not installed."""


def grammar_for_file(path: Path | str) -> str:
    """Return the grammar used to parse ``path``.

    The TSX grammar accepts plain JavaScript, JSX and the Flow-style
    annotations components usually carry, so it is the default.
    """
    return _GRAMMARS_BY_SUFFIX.get(Path(path).suffix.lower(), DEFAULT_GRAMMAR)


class SourceParser:
    """Caches one tree-sitter parser per grammar."""

    def __init__(self, enabled: Optional[bool] = None) -> None:
        self._enabled = TREE_SITTER_AVAILABLE if enabled is None else enabled
        self._parsers: Dict[str, Parser] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    def parse(self, source: str, grammar: str = DEFAULT_GRAMMAR) -> Tuple[SyntaxNode, bytes]:
        """Parse ``source`` and return the root node with the encoded source."""
        parser = self._get_parser(grammar)
        if parser is None:
            raise ParserUnavailableError(
                "tree-sitter grammars are not installed (pip install tree-sitter-languages)"
            )
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        return tree.root_node, source_bytes

    def _get_parser(self, grammar: str) -> Optional[Parser]:
        parser = self._parsers.get(grammar)
        if parser is not None:
            return parser
        if not self._enabled or not TREE_SITTER_AVAILABLE:
            return None
        language = get_language(grammar)
        parser = Parser()
        parser.set_language(language)
        self._parsers[grammar] = parser
        return parser


def node_text(node, source_bytes: bytes) -> str:  # type: ignore[no-untyped-def]
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def walk(node) -> Iterator[SyntaxNode]:  # type: ignore[no-untyped-def]
    """Yield ``node`` and its named descendants in source order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.named_children))


def first_named_child(node) -> Optional[SyntaxNode]:  # type: ignore[no-untyped-def]
    """Return the first named child that is not a comment."""
    if node is None:
        return None
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def has_token(node, token: str) -> bool:  # type: ignore[no-untyped-def]
    """Return True when ``node`` has a direct anonymous child spelled ``token``."""
    return any(not child.is_named and child.type == token for child in node.children)


__all__ = [
    "DEFAULT_GRAMMAR",
    "ParserUnavailableError",
    "SourceParser",
    "SyntaxNode",
    "TREE_SITTER_AVAILABLE",
    "first_named_child",
    "grammar_for_file",
    "has_token",
    "node_text",
    "walk",
]
