"""Rule: Detect log levels that do not match what is being logged."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import JavaNode, NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
from logaudit.rules.heuristics import mentions_exception
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["InconsistentLevelRule"]


class InconsistentLevelRule(BaseRule):
    rule_id = "inconsistent-level"
    description = "Detects exceptions logged at info and minor issues logged at warn."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in unit.root.find_all(NodeKind.METHOD_CALL):
            message = self._check(call)
            if message:
                issues.append(make_issue(self.rule_id, unit, call, message))
        return issues

    @staticmethod
    def _check(call: JavaNode) -> str | None:
        args = call.arguments
        if call.name == "info" and len(args) > 1:
            second = args[1]
            if second.kind is NodeKind.IDENTIFIER and mentions_exception(second.text):
                return "Inconsistent log level: info used for exception"
        elif call.name == "warn" and len(args) == 1:
            first = args[0]
            if first.is_string_literal and "minor" in first.string_value:
                return "Inconsistent log level: warn used for minor issue"
        return None
