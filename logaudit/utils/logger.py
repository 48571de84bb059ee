"""Rich-based terminal output and logging setup for logaudit."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

__all__ = [
    "console",
    "err_console",
    "print_plain",
    "print_warning",
    "print_error",
    "print_info",
    "configure_logging",
]

_THEME = Theme(
    {
        "warning": "bold yellow",
        "error": "bold red",
        "info": "bold cyan",
        "muted": "dim",
    }
)

console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)


def print_plain(line: str = "") -> None:
    """Print a report line verbatim: no markup, highlighting or wrapping."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message with a caution sign to stderr."""
    err_console.print(f"[warning]⚠[/warning] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message with a cross to stderr."""
    err_console.print(f"[error]✖[/error] {escape(message)}", soft_wrap=True)


def print_info(message: str) -> None:
    """Print an informational message to stderr."""
    err_console.print(f"[info]ℹ[/info] {escape(message)}", soft_wrap=True)


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr through rich."""
    level = logging.DEBUG if verbose else logging.ERROR
    root = logging.getLogger("logaudit")
    root.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
