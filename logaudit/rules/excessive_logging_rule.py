"""Rule: Detect methods with too many log statements."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["ExcessiveLoggingRule"]


class ExcessiveLoggingRule(BaseRule):
    rule_id = "excessive-logging"
    description = "Detects methods whose log call count exceeds the configured threshold."

    def __init__(self, threshold: int = 5) -> None:
        self.threshold = threshold

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for method in unit.root.find_all(NodeKind.METHOD_DECLARATION):
            count = len(self.log_calls(method))
            if count > self.threshold:
                issues.append(make_issue(
                    self.rule_id, unit, method,
                    f"Excessive logging: {count} log statements in method {method.name}",
                ))
        return issues
