"""Rule: Detect catch blocks that only log the exception."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["CaughtWithoutActionRule"]

_ACTION_KINDS = (NodeKind.THROW_STATEMENT, NodeKind.RETURN_STATEMENT, NodeKind.BREAK_STATEMENT)


class CaughtWithoutActionRule(BaseRule):
    rule_id = "caught-without-action"
    description = "Detects caught exceptions that are logged but neither rethrown nor acted upon."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for try_stmt in unit.root.find_all(NodeKind.TRY_STATEMENT):
            for clause in try_stmt.catch_clauses:
                block = clause.body
                if block is None:
                    continue
                calls = self.log_calls(block)
                if not calls or any(s.kind in _ACTION_KINDS for s in block.statements):
                    continue
                issues.extend(
                    make_issue(self.rule_id, unit, call, "Logging caught exception without action") for call in calls
                )
        return issues
