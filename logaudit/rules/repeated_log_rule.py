"""Rule: Detect identical log statements repeated within a method."""
from __future__ import annotations
from typing import TYPE_CHECKING
from logaudit.adapters.java_nodes import NodeKind
from logaudit.rules.base_rule import BaseRule, Issue, make_issue
if TYPE_CHECKING:
    from logaudit.adapters.base import SourceUnit

__all__ = ["RepeatedLogRule"]


class RepeatedLogRule(BaseRule):
    rule_id = "repeated-log"
    description = "Detects log statements that appear more than once, verbatim, in the same method."

    def evaluate(self, unit: SourceUnit) -> list[Issue]:
        issues: list[Issue] = []
        for method in unit.root.find_all(NodeKind.METHOD_DECLARATION):
            counts: dict[str, int] = {}
            for call in self.log_calls(method):
                text = call.canonical_text
                counts[text] = counts.get(text, 0) + 1
            for text, count in counts.items():
                if count > 1:
                    issues.append(make_issue(
                        self.rule_id, unit, method,
                        f"Repeated log statement ({count} times) in method {method.name}: {text}",
                    ))
        return issues
