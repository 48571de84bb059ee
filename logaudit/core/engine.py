"""Orchestration engine – ties the adapter, rules and issue collection together."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from logaudit.adapters.base import BaseSourceAdapter, ParseFailure, SourceUnit
from logaudit.adapters.java_adapter import JavaAdapter
from logaudit.config.settings import LogAuditSettings
from logaudit.core.collector import IssueCollector
from logaudit.rules.base_rule import BaseRule, Issue
from logaudit.rules.caught_without_action_rule import CaughtWithoutActionRule
from logaudit.rules.complete_object_rule import CompleteObjectRule
from logaudit.rules.console_output_rule import ConsoleOutputRule
from logaudit.rules.excessive_logging_rule import ExcessiveLoggingRule
from logaudit.rules.hardcoded_message_rule import HardcodedMessageRule
from logaudit.rules.inconsistent_level_rule import InconsistentLevelRule
from logaudit.rules.log_and_rethrow_rule import LogAndRethrowRule
from logaudit.rules.log_in_loop_rule import LogInLoopRule
from logaudit.rules.missing_context_rule import MissingContextRule
from logaudit.rules.print_stack_trace_rule import PrintStackTraceRule
from logaudit.rules.repeated_log_rule import RepeatedLogRule
from logaudit.rules.stack_trace_overuse_rule import StackTraceOveruseRule
from logaudit.rules.string_concatenation_rule import StringConcatenationRule
from logaudit.rules.verbose_message_rule import VerboseMessageRule

__all__ = ["LogAuditEngine", "FileReport", "ScanResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileReport:
    file_path: Path
    issues: list[Issue] = field(default_factory=list)
    failure: ParseFailure | None = None


class ScanResult:
    def __init__(self, issues: list[Issue], failures: list[ParseFailure], files_scanned: int) -> None:
        self.issues = issues
        self.failures = failures
        self.files_scanned = files_scanned

    @property
    def exit_code(self) -> int:
        # Findings and per-file failures never fail the run.
        return 0


class LogAuditEngine:
    """Runs the fixed rule battery over every source file under a root directory."""

    def __init__(
        self,
        settings: LogAuditSettings | None = None,
        root_dir: Path | None = None,
        adapter: BaseSourceAdapter | None = None,
    ) -> None:
        self.settings = settings or LogAuditSettings()
        self.root_dir = (root_dir or Path.cwd()).resolve()
        self._adapter = adapter or JavaAdapter(self.root_dir, extensions=self.settings.scan.extensions)
        self._rules: list[BaseRule] = self._build_rules()

    @property
    def rules(self) -> list[BaseRule]:
        return list(self._rules)

    def _build_rules(self) -> list[BaseRule]:
        cfg = self.settings.rules
        return [
            PrintStackTraceRule(),
            LogAndRethrowRule(),
            CompleteObjectRule(),
            ExcessiveLoggingRule(threshold=cfg.excessive_log_threshold),
            ConsoleOutputRule(),
            MissingContextRule(),
            HardcodedMessageRule(),
            RepeatedLogRule(),
            LogInLoopRule(),
            VerboseMessageRule(max_length=cfg.max_message_length),
            InconsistentLevelRule(),
            CaughtWithoutActionRule(),
            StringConcatenationRule(),
            StackTraceOveruseRule(),
        ]

    def analyze(self, unit: SourceUnit) -> list[Issue]:
        """Run every rule against one parsed file, in rule order."""
        issues: list[Issue] = []
        for rule in self._rules:
            issues.extend(rule.evaluate(unit))
        return issues

    def analyze_source(self, source: bytes | str, file_path: Path | str = "<memory>") -> FileReport:
        path = Path(file_path)
        return self._report(self._adapter.parse_source(source, path), path)

    def analyze_file(self, path: Path) -> FileReport:
        return self._report(self._adapter.parse(path), path)

    def _report(self, parsed: SourceUnit | ParseFailure, path: Path) -> FileReport:
        if isinstance(parsed, ParseFailure):
            return FileReport(file_path=path, failure=parsed)
        try:
            issues = self.analyze(parsed)
        except Exception as exc:
            logger.warning("Rule failure while analysing %s – skipping file", path, exc_info=True)
            return FileReport(file_path=path, failure=ParseFailure(file_path=path, reason=f"analysis failed: {exc}"))
        return FileReport(file_path=path, issues=issues)

    def _reports(self, paths: Iterable[Path]) -> Iterator[FileReport]:
        jobs = self.settings.scan.jobs
        if jobs <= 1:
            for path in paths:
                yield self.analyze_file(path)
            return
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            # map() yields in submission order, so output does not depend on scheduling.
            yield from pool.map(self.analyze_file, paths)

    def run_scan(self) -> ScanResult:
        collector = IssueCollector()
        failures: list[ParseFailure] = []
        scanned = 0
        for report in self._reports(self._adapter.discover_sources()):
            scanned += 1
            if report.failure is not None:
                failures.append(report.failure)
                continue
            collector.extend(report.issues)
        logger.debug("Scanned %d file(s): %d issue(s), %d failure(s)", scanned, len(collector), len(failures))
        return ScanResult(issues=collector.as_list(), failures=failures, files_scanned=scanned)
