"""Append-only, ordered collection of issues for one run."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator

from logaudit.rules.base_rule import Issue

__all__ = ["IssueCollector"]


class IssueCollector:
    """Keeps issues in insertion order. Never deduplicates."""

    def __init__(self) -> None:
        self._issues: list[Issue] = []
        self._lock = threading.Lock()

    def add(self, issue: Issue) -> None:
        with self._lock:
            self._issues.append(issue)

    def extend(self, issues: Iterable[Issue]) -> None:
        batch = list(issues)
        with self._lock:
            self._issues.extend(batch)

    def as_list(self) -> list[Issue]:
        with self._lock:
            return list(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self.as_list())

    def __len__(self) -> int:
        with self._lock:
            return len(self._issues)
