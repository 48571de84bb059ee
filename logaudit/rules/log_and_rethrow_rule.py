"""Rule: Detect log statements that sit next to a throw statement."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["LogAndRethrowRule"]


class LogAndRethrowRule(BaseRule):
    rule_id = "log-and-rethrow"
    description = "Detects exceptions that are both logged and thrown, which logs the same failure twice."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            block = call.enclosing_block()
            # Only throws that are direct statements of the same block count.
            if block is not None and any(s.kind is NodeKind.THROW_STATEMENT for s in block.statements):
                issues.append(make_issue(self.rule_id, unit, call, "Logging and rethrowing detected"))
        return issues
