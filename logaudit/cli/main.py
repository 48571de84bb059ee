"""logaudit CLI – Typer application and plain-text report."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from logaudit.config.settings import load_settings
from logaudit.core.engine import LogAuditEngine, ScanResult
from logaudit.rules.base_rule import Issue
from logaudit.utils.logger import (
    configure_logging, err_console, print_error, print_info, print_plain, print_warning,
)

__all__ = ["app", "format_issue", "render_report"]

app = typer.Typer(
    name="logaudit",
    help="Report logging anti-patterns in a Java source tree.",
    add_completion=False,
    rich_markup_mode="rich",
)

REPORT_HEADER = "Logging Issues Report:"
_USAGE = "Usage: logaudit <project-directory>"


def format_issue(issue: Issue) -> str:
    absolute = Path(issue.file_path).resolve().as_posix()
    return f"file://{absolute}:{issue.line_number} - {issue.description}"


def render_report(issues: list[Issue]) -> list[str]:
    lines = [REPORT_HEADER, ""]
    if not issues:
        lines.append("No issues found.")
        return lines
    lines.extend(format_issue(i) for i in issues)
    lines.extend(["", f"Total issues found: {len(issues)}"])
    return lines


def _print_failures(result: ScanResult) -> None:
    for failure in result.failures:
        print_warning(f"Skipped {failure.file_path}: {failure.reason}")
    print_info(f"{result.files_scanned} file(s) scanned, {len(result.failures)} skipped")


@app.command()
def scan(
    project_dir: Optional[Path] = typer.Argument(None, help="Project root directory", show_default=False),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to logaudit.yaml"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Number of files analysed in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging and skipped files on stderr"),
) -> None:
    """Scan PROJECT_DIR for Java files and report logging anti-patterns."""
    if project_dir is None:
        err_console.print(_USAGE, markup=False, highlight=False)
        raise typer.Exit(code=1)
    if not project_dir.is_dir():
        print_error(f"Error: {project_dir} is not a valid directory")
        raise typer.Exit(code=1)

    configure_logging(verbose)
    root = project_dir.resolve()
    try:
        settings = load_settings(config_path=config, search_dir=root)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as exc:
        print_error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1)
    if jobs is not None:
        settings.scan.jobs = jobs

    result = LogAuditEngine(settings=settings, root_dir=root).run_scan()

    for line in render_report(result.issues):
        print_plain(line)
    if verbose:
        _print_failures(result)
    raise typer.Exit(code=result.exit_code)


if __name__ == "__main__":
    app()
