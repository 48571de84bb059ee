"""Rule: Detect overly long literal log messages."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["VerboseMessageRule"]


class VerboseMessageRule(BaseRule):
    rule_id = "verbose-message"
    description = "Detects literal log messages longer than the configured maximum."

    def __init__(self, max_length: int = 200) -> None:
        self.max_length = max_length

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for call in self.log_calls(unit.root):
            args = call.arguments
            if not args or not args[0].is_string_literal:
                continue
            length = len(args[0].string_value)
            if length > self.max_length:
                issues.append(make_issue(self.rule_id, unit, call, f"Overly verbose log message ({length} chars)"))
        return issues
