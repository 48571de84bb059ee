"""Rule: Detect log calls whose first argument carries no message."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["MissingContextRule"]


class MissingContextRule(BaseRule):
    rule_id = "missing-context"
    description = "Detects empty log messages and log calls that pass something other than a message first."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            args = call.arguments
            if not args:
                continue
            first = args[0]
            if first.is_string_literal:
                if not first.string_value.strip():
                    issues.append(make_issue(self.rule_id, unit, call, "Logging without meaningful context (empty message)"))
            else:
                # Also fires for log.error(e); see DESIGN.md.
                issues.append(make_issue(self.rule_id, unit, call, "Logging exception without message"))
        return issues
