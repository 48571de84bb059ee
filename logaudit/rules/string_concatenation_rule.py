"""Rule: Detect string concatenation used to build log messages."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["StringConcatenationRule"]


class StringConcatenationRule(BaseRule):
    rule_id = "string-concatenation"
    description = "Detects single-argument log calls that build their message with '+'."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            args = call.arguments
            if len(args) == 1 and args[0].kind is NodeKind.BINARY_EXPRESSION and args[0].operator == "+":
                issues.append(make_issue(self.rule_id, unit, call, "String concatenation instead of placeholders"))
        return issues
