"""Rule: Detect log statements inside loops."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["LogInLoopRule"]


class LogInLoopRule(BaseRule):
    rule_id = "log-in-loop"
    description = "Detects log calls inside for, for-each and while loops."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        """Report each log call with a loop ancestor once.

        The loop header counts as part of the loop, so a log call in a
        condition or update expression is reported as well.
        """
        return [
            make_issue(self.rule_id, unit, call, "Logging inside loop (potential log flood)")
            for call in self.log_calls(unit.root)
            if call.has_ancestor(NodeKind.LOOP)
        ]
