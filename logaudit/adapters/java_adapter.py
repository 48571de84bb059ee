"""Java adapter – tree-sitter based parser for Java source files."""

from __future__ import annotations

import logging
from pathlib import Path

import tree_sitter
import tree_sitter_java

from logaudit.adapters.base import BaseSourceAdapter, ParseFailure, ParseResult, SourceUnit
from logaudit.adapters.java_nodes import JavaNode

__all__ = ["JavaAdapter", "JAVA_LANGUAGE"]

logger = logging.getLogger(__name__)

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())


class JavaAdapter(BaseSourceAdapter):
    """Adapter that discovers ``.java`` files and parses them with tree-sitter."""

    extensions = (".java",)

    def parse_source(self, source: bytes | str, file_path: Path) -> ParseResult:
        if isinstance(source, str):
            source = source.encode("utf-8")
        # Parsers are not shared so that files can be parsed from worker threads.
        parser = tree_sitter.Parser(JAVA_LANGUAGE)
        tree = parser.parse(source)
        root = tree.root_node
        if root.has_error:
            line = _first_error_line(root)
            logger.warning("Syntax error in %s near line %d – skipping", file_path, line)
            return ParseFailure(file_path=file_path, reason=f"syntax error near line {line}")
        return SourceUnit(file_path=file_path, root=JavaNode(raw=root, source=source))


def _first_error_line(root: tree_sitter.Node) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed(node.children))
    return root.start_point[0] + 1
