"""Shared pytest fixtures for the logaudit test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from logaudit.adapters.base import SourceUnit
from logaudit.adapters.java_adapter import JavaAdapter

CLEAN_SERVICE = textwrap.dedent("""\
    package com.example;

    import org.slf4j.Logger;
    import org.slf4j.LoggerFactory;

    public class CleanService {
        private static final Logger log = LoggerFactory.getLogger(CleanService.class);

        public void greet(String user) {
            log.info("Greeting user {}", user);
        }
    }
""")

ORDER_SERVICE = textwrap.dedent("""\
    package com.example;

    import java.io.IOException;
    import java.util.List;

    public class OrderService {
        public void process(List<String> orders) {
            for (String order : orders) {
                log.info("Processing order " + order);
            }
            try {
                save();
            } catch (IOException e) {
                e.printStackTrace();
            }
        }
    }
""")

CONSOLE_SERVICE = textwrap.dedent("""\
    public class ConsoleService {
        public void report(int total) {
            System.out.println("total");
            System.err.println(total);
        }
    }
""")

BROKEN_SOURCE = textwrap.dedent("""\
    public class Broken {
        public void oops( {
            log.info("never analysed");
    }
""")


def wrap_method(body: str, name: str = "handle") -> str:
    """Place *body* inside ``void <name>()`` of a class; the body starts on line 3."""
    indented = textwrap.indent(textwrap.dedent(body).strip("\n"), " " * 8)
    return f"class Sample {{\n    void {name}() {{\n{indented}\n    }}\n}}\n"


def parse_java(source: str, path: str = "Sample.java") -> SourceUnit:
    result = JavaAdapter(Path(".")).parse_source(source, Path(path))
    assert isinstance(result, SourceUnit), result
    return result


def parse_body(body: str, name: str = "handle") -> SourceUnit:
    return parse_java(wrap_method(body, name))


@pytest.fixture
def tmp_java_project(tmp_path: Path) -> Path:
    src = tmp_path / "src" / "main" / "java" / "com" / "example"
    src.mkdir(parents=True)
    (src / "CleanService.java").write_text(CLEAN_SERVICE)
    (src / "OrderService.java").write_text(ORDER_SERVICE)
    (tmp_path / "README.md").write_text("log.info(\"not java\");\n")
    return tmp_path


@pytest.fixture
def clean_java_project(tmp_path: Path) -> Path:
    (tmp_path / "CleanService.java").write_text(CLEAN_SERVICE)
    return tmp_path
