"""Rule: Detect System.out / System.err printing."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["ConsoleOutputRule"]

_CONSOLE_STREAMS: tuple[str, ...] = ("System.out", "System.err")


class ConsoleOutputRule(BaseRule):
    rule_id = "console-output"
    description = "Detects println calls on the standard output or error streams."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in unit.root.find_all(NodeKind.METHOD_CALL, lambda c: c.name == "println"):
            scope = call.scope.text if call.scope is not None else ""
            if any(stream in scope for stream in _CONSOLE_STREAMS):
                issues.append(make_issue(self.rule_id, unit, call, f"Uses {scope}.println instead of structured logging"))
        return issues
