"""Base rule interface and issue model for the logaudit rule engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from logaudit.adapters.java_nodes import JavaNode, NodeKind

if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["LOG_METHODS", "Issue", "BaseRule", "is_log_call", "make_issue"]

LOG_METHODS: frozenset[str] = frozenset({"debug", "info", "warn", "error", "trace", "fatal"})


@dataclass(frozen=True)
class Issue:
    file_path: str
    line_number: int
    description: str
    rule_id: str = ""


def is_log_call(node: JavaNode) -> bool:
    """A method call named like a logger severity method, whatever the receiver."""
    return node.kind is NodeKind.METHOD_CALL and node.name in LOG_METHODS


def make_issue(rule_id: str, unit: SourceUnit, node: JavaNode, description: str) -> Issue:
    """Create an Issue located at the line where *node* begins."""
    return Issue(file_path=str(unit.file_path), line_number=node.line, description=description, rule_id=rule_id)


class BaseRule(ABC):
    rule_id: str = "base"
    description: str = ""

    @abstractmethod
    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        """Analyse one parsed file and return any issues found."""

    def log_calls(self, scope: JavaNode) -> list[JavaNode]:
        return scope.find_all(NodeKind.METHOD_CALL, is_log_call)
