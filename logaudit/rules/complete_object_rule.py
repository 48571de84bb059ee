"""Rule: Detect whole objects or collections passed to a logger."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
from logaudit.rules.heuristics import looks_like_complete_object
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["CompleteObjectRule"]


class CompleteObjectRule(BaseRule):
    rule_id = "complete-object"
    description = "Detects log arguments that look like entire objects or collections."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            for index, arg in enumerate(call.arguments):
                if arg.kind in (NodeKind.LITERAL, NodeKind.BINARY_EXPRESSION):
                    continue
                if not looks_like_complete_object(arg.text):
                    continue
                message = "Logging complete object as message" if index == 0 else "Logging potentially large object as argument"
                issues.append(make_issue(self.rule_id, unit, call, message))
        return issues
