"""Tests for the Java adapter and the syntax tree node model."""
from __future__ import annotations
from pathlib import Path
import pytest
from logaudit.adapters.base import ParseFailure, SourceUnit
from logaudit.adapters.java_adapter import JavaAdapter
from logaudit.adapters.java_nodes import NodeKind
from tests.conftest import BROKEN_SOURCE, CLEAN_SERVICE, parse_body, parse_java


class TestJavaAdapterDiscovery:
    def test_discovers_java_files_in_sorted_order(self, tmp_java_project) -> None:
        files = list(JavaAdapter(tmp_java_project).discover_sources())
        assert [f.name for f in files] == ["CleanService.java", "OrderService.java"]

    def test_empty_directory(self, tmp_path) -> None:
        assert list(JavaAdapter(tmp_path).discover_sources()) == []

    def test_custom_extensions(self, tmp_path) -> None:
        (tmp_path / "A.java").write_text(CLEAN_SERVICE)
        (tmp_path / "B.jav").write_text(CLEAN_SERVICE)
        files = list(JavaAdapter(tmp_path, extensions=[".jav"]).discover_sources())
        assert [f.name for f in files] == ["B.jav"]

    def test_directories_named_like_sources_are_skipped(self, tmp_path) -> None:
        (tmp_path / "weird.java").mkdir()
        assert list(JavaAdapter(tmp_path).discover_sources()) == []


class TestJavaAdapterParsing:
    def test_parse_valid_file(self, tmp_path) -> None:
        path = tmp_path / "CleanService.java"
        path.write_text(CLEAN_SERVICE)
        result = JavaAdapter(tmp_path).parse(path)
        assert isinstance(result, SourceUnit) and result.file_path == path

    def test_syntax_error_is_a_failure(self) -> None:
        result = JavaAdapter(Path(".")).parse_source(BROKEN_SOURCE, Path("Broken.java"))
        assert isinstance(result, ParseFailure)
        assert "syntax error" in result.reason

    def test_missing_file_is_a_failure(self, tmp_path) -> None:
        result = JavaAdapter(tmp_path).parse(tmp_path / "Gone.java")
        assert isinstance(result, ParseFailure) and "unreadable" in result.reason


class TestJavaNode:
    def test_method_call_accessors(self) -> None:
        unit = parse_body('System.out.println("hi", 1);')
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert call.name == "println"
        assert call.scope is not None and call.scope.text == "System.out"
        assert [a.text for a in call.arguments] == ['"hi"', "1"]
        assert (call.line, call.column) == (3, 9)

    def test_literal_types(self) -> None:
        unit = parse_body('f("s", 1, 2.5, true, \'c\', null);')
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert [a.literal_type for a in call.arguments] == ["string", "integer", "double", "boolean", "char", "null"]
        assert call.arguments[0].string_value == "s"

    def test_string_value_keeps_escapes(self) -> None:
        unit = parse_body(r'f("a\tb");')
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert call.arguments[0].string_value == r"a\tb"

    def test_enclosing_block_and_method(self) -> None:
        unit = parse_body("""
            try { run(); } catch (Exception e) {
                log.error("x");
            }
        """, name="work")
        call = unit.root.find_all(NodeKind.METHOD_CALL, lambda c: c.name == "error")[0]
        block = call.enclosing_block()
        assert block is not None and block.parent is not None and block.parent.kind is NodeKind.CATCH_CLAUSE
        method = call.enclosing_method()
        assert method is not None and method.name == "work"

    def test_try_and_catch_navigation(self) -> None:
        unit = parse_body("""
            try { run(); }
            catch (IOException e) { a(); }
            catch (RuntimeException e) { throw e; }
        """)
        (try_stmt,) = unit.root.find_all(NodeKind.TRY_STATEMENT)
        clauses = try_stmt.catch_clauses
        assert len(clauses) == 2
        assert [s.kind for s in clauses[1].body.statements] == [NodeKind.THROW_STATEMENT]

    def test_binary_operator(self) -> None:
        unit = parse_body('f("a" + b);')
        (binary,) = unit.root.find_all(NodeKind.BINARY_EXPRESSION)
        assert binary.operator == "+"

    def test_find_all_is_preorder(self) -> None:
        unit = parse_body("outer(inner(1), other());")
        assert [c.name for c in unit.root.find_all(NodeKind.METHOD_CALL)] == ["outer", "inner", "other"]

    def test_constructor_body_is_a_block(self) -> None:
        unit = parse_java("class A {\n    A() { log.info(\"x\"); throw new Error(); }\n}\n")
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        block = call.enclosing_block()
        assert block is not None and block.node_type == "constructor_body"

    @pytest.mark.parametrize("source", [
        'log.info(  "a {}" ,x );',
        'log.info("a {}", /* why */ x);',
        'log.info("a {}",\n        x);',
    ])
    def test_canonical_text_ignores_layout(self, source: str) -> None:
        unit = parse_body(source)
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert call.canonical_text == 'log.info("a {}", x)'

    def test_canonical_text_of_long_concatenation(self) -> None:
        terms = " + ".join(f"a{i}" for i in range(1500))
        unit = parse_body(f'log.info("x" + {terms});')
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert call.canonical_text == f'log.info("x" + {terms})'

    def test_canonical_text_of_concatenation(self) -> None:
        unit = parse_body('log.info("x: "+y);')
        (call,) = unit.root.find_all(NodeKind.METHOD_CALL)
        assert call.canonical_text == 'log.info("x: " + y)'
