"""Read-only node model over tree-sitter Java syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

import tree_sitter

__all__ = ["NodeKind", "JavaNode"]


class NodeKind(str, Enum):
    METHOD_CALL = "method_call"
    METHOD_DECLARATION = "method_declaration"
    BLOCK = "block"
    LOOP = "loop"
    TRY_STATEMENT = "try_statement"
    CATCH_CLAUSE = "catch_clause"
    BINARY_EXPRESSION = "binary_expression"
    LITERAL = "literal"
    IDENTIFIER = "identifier"
    THROW_STATEMENT = "throw_statement"
    RETURN_STATEMENT = "return_statement"
    BREAK_STATEMENT = "break_statement"
    OTHER = "other"


_KIND_BY_TYPE: dict[str, NodeKind] = {
    "method_invocation": NodeKind.METHOD_CALL,
    "method_declaration": NodeKind.METHOD_DECLARATION,
    "block": NodeKind.BLOCK,
    "constructor_body": NodeKind.BLOCK,
    "for_statement": NodeKind.LOOP,
    "enhanced_for_statement": NodeKind.LOOP,
    "while_statement": NodeKind.LOOP,
    "try_statement": NodeKind.TRY_STATEMENT,
    "try_with_resources_statement": NodeKind.TRY_STATEMENT,
    "catch_clause": NodeKind.CATCH_CLAUSE,
    "binary_expression": NodeKind.BINARY_EXPRESSION,
    "identifier": NodeKind.IDENTIFIER,
    "throw_statement": NodeKind.THROW_STATEMENT,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "break_statement": NodeKind.BREAK_STATEMENT,
}

_LITERAL_TYPES: dict[str, str] = {
    "string_literal": "string",
    "text_block": "string",
    "character_literal": "char",
    "decimal_integer_literal": "integer",
    "hex_integer_literal": "integer",
    "octal_integer_literal": "integer",
    "binary_integer_literal": "integer",
    "decimal_floating_point_literal": "double",
    "hex_floating_point_literal": "double",
    "true": "boolean",
    "false": "boolean",
    "null_literal": "null",
}

# Rendered as written; never split into tokens.
_ATOMIC_TYPES = frozenset(_LITERAL_TYPES)


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


@dataclass(frozen=True)
class JavaNode:
    """A node of one file's syntax tree.

    Wraps the tree-sitter node together with the file's source bytes so that
    text, position and navigation are available without touching the parser.
    Only named, non-comment nodes are exposed as children.
    """

    raw: tree_sitter.Node
    source: bytes = field(repr=False)

    @property
    def kind(self) -> NodeKind:
        if self.raw.type in _LITERAL_TYPES:
            return NodeKind.LITERAL
        return _KIND_BY_TYPE.get(self.raw.type, NodeKind.OTHER)

    @property
    def node_type(self) -> str:
        return self.raw.type

    @property
    def line(self) -> int:
        return self.raw.start_point[0] + 1

    @property
    def column(self) -> int:
        return self.raw.start_point[1] + 1

    @property
    def text(self) -> str:
        return self.source[self.raw.start_byte:self.raw.end_byte].decode("utf-8", errors="replace")

    @property
    def parent(self) -> JavaNode | None:
        parent = self.raw.parent
        return self._wrap(parent) if parent is not None else None

    @property
    def children(self) -> list[JavaNode]:
        return [self._wrap(c) for c in self.raw.named_children if not c.is_extra]

    def _wrap(self, node: tree_sitter.Node) -> JavaNode:
        return JavaNode(raw=node, source=self.source)

    def _field(self, name: str) -> JavaNode | None:
        node = self.raw.child_by_field_name(name)
        return self._wrap(node) if node is not None else None

    # -- navigation -------------------------------------------------------

    def walk(self) -> Iterator[JavaNode]:
        """Pre-order traversal starting at (and including) this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_all(self, kind: NodeKind, predicate: Callable[[JavaNode], bool] | None = None) -> list[JavaNode]:
        return [n for n in self.walk() if n.kind is kind and (predicate is None or predicate(n))]

    def ancestors(self) -> Iterator[JavaNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def find_ancestor(self, kind: NodeKind) -> JavaNode | None:
        for node in self.ancestors():
            if node.kind is kind:
                return node
        return None

    def has_ancestor(self, kind: NodeKind) -> bool:
        return self.find_ancestor(kind) is not None

    def enclosing_block(self) -> JavaNode | None:
        return self.find_ancestor(NodeKind.BLOCK)

    def enclosing_method(self) -> JavaNode | None:
        return self.find_ancestor(NodeKind.METHOD_DECLARATION)

    # -- kind-specific accessors -----------------------------------------

    @property
    def name(self) -> str:
        name_node = self._field("name")
        return name_node.text if name_node is not None else ""

    @property
    def scope(self) -> JavaNode | None:
        """Receiver of a method call (``System.out`` in ``System.out.println()``)."""
        return self._field("object")

    @property
    def arguments(self) -> list[JavaNode]:
        args = self._field("arguments")
        return args.children if args is not None else []

    @property
    def statements(self) -> list[JavaNode]:
        return self.children if self.kind is NodeKind.BLOCK else []

    @property
    def body(self) -> JavaNode | None:
        return self._field("body")

    @property
    def catch_clauses(self) -> list[JavaNode]:
        return [c for c in self.children if c.kind is NodeKind.CATCH_CLAUSE]

    @property
    def operator(self) -> str:
        op = self.raw.child_by_field_name("operator")
        return op.type if op is not None else ""

    @property
    def literal_type(self) -> str | None:
        return _LITERAL_TYPES.get(self.raw.type)

    @property
    def is_string_literal(self) -> bool:
        return self.literal_type == "string"

    @property
    def string_value(self) -> str:
        """Content between the quotes, escape sequences left as written."""
        text = self.text
        if text.startswith('"""'):
            return text[3:-3]
        return text[1:-1]

    @property
    def canonical_text(self) -> str:
        """Source text with comments dropped and whitespace normalised.

        Two calls that differ only in layout produce the same string.
        """
        tokens: list[str] = []
        self._collect_tokens(self.raw, tokens)
        out = ""
        for token in tokens:
            if not token:
                continue
            if token == ",":
                out += ", "
                continue
            if out and _is_word_char(out[-1]) and _is_word_char(token[0]):
                out += " "
            out += token
        return out.strip()

    def _collect_tokens(self, root: tree_sitter.Node, tokens: list[str]) -> None:
        # Explicit stack: a '+' chain nests one level per operand.
        stack: list[tuple[tree_sitter.Node, bool]] = [(root, False)]
        while stack:
            node, is_operator = stack.pop()
            if is_operator:
                tokens.append(f" {node.type} ")
                continue
            if node.is_extra:
                continue
            if node.type in _ATOMIC_TYPES or node.child_count == 0:
                tokens.append(self._wrap(node).text)
                continue
            operator = node.child_by_field_name("operator") if node.type == "binary_expression" else None
            for child in reversed(node.children):
                marks_operator = (
                    operator is not None and child.start_byte == operator.start_byte and child.type == operator.type
                )
                stack.append((child, marks_operator))
