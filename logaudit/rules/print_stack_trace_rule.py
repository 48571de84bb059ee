"""Rule: Detect direct printStackTrace() calls."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["PrintStackTraceRule"]


class PrintStackTraceRule(BaseRule):
    rule_id = "print-stack-trace"
    description = "Detects stack traces printed to the console instead of being logged."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        return [
            make_issue(self.rule_id, unit, call, "Uses e.printStackTrace() instead of structured logging")
            for call in unit.root.find_all(NodeKind.METHOD_CALL, lambda c: c.name == "printStackTrace")
        ]
