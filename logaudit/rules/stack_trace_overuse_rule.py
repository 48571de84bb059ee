"""Rule: Detect exceptions appended to error/warn log calls."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import JavaNode, NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
from logaudit.rules.heuristics import mentions_exception
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["StackTraceOveruseRule"]


def _appends_exception(call: JavaNode) -> bool:
    if call.name not in ("error", "warn"):
        return False
    args = call.arguments
    if len(args) <= 1:
        return False
    last = args[-1]
    return last.kind is NodeKind.IDENTIFIER and mentions_exception(last.text)


class StackTraceOveruseRule(BaseRule):
    rule_id = "stack-trace-overuse"
    description = "Detects error and warn calls that attach a full exception stack trace."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        return [
            make_issue(self.rule_id, unit, call, "Overuse of exception stack trace in log")
            for call in unit.root.find_all(NodeKind.METHOD_CALL, _appends_exception)
        ]
