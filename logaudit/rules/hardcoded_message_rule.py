"""Rule: Detect fixed log messages without placeholders."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
from logaudit.rules.heuristics import has_placeholder
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["HardcodedMessageRule"]


class HardcodedMessageRule(BaseRule):
    rule_id = "hardcoded-message"
    description = "Detects single-argument log calls with a literal message and no placeholders."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            args = call.arguments
            if len(args) == 1 and args[0].is_string_literal and not has_placeholder(args[0].string_value):
                issues.append(make_issue(self.rule_id, unit, call, "Hardcoded log message without placeholders"))
        return issues
