"""Pydantic-based configuration model and YAML loader for logaudit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


__all__ = ["RulesConfig", "ScanConfig", "LogAuditSettings", "load_settings"]

_CONFIG_FILE_NAMES: list[str] = [
    "logaudit.yaml",
    "logaudit.yml",
    ".logaudit.yaml",
    ".logaudit.yml",
]


class RulesConfig(BaseModel):
    """Thresholds shared by the rule engine."""

    excessive_log_threshold: int = Field(
        default=5,
        ge=0,
        description="Maximum number of log calls allowed in one method before it is reported.",
    )
    max_message_length: int = Field(
        default=200,
        ge=0,
        description="Maximum length of a literal log message before it is reported.",
    )


class ScanConfig(BaseModel):
    """File discovery and execution settings."""

    extensions: list[str] = Field(
        default_factory=lambda: [".java"],
        description="File extensions treated as source files.",
    )
    jobs: int = Field(
        default=1,
        ge=1,
        description="Number of files analysed concurrently.",
    )


class LogAuditSettings(BaseModel):
    """Top-level logaudit configuration."""

    rules: RulesConfig = Field(
        default_factory=RulesConfig,
        description="Rule thresholds.",
    )
    scan: ScanConfig = Field(
        default_factory=ScanConfig,
        description="Discovery and concurrency settings.",
    )


def _find_config_file(search_dir: Path) -> Path | None:
    """Walk up from *search_dir* looking for a config file."""
    current = search_dir.resolve()
    while True:
        for name in _CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_settings(
    config_path: Path | None = None,
    search_dir: Path | None = None,
) -> LogAuditSettings:
    """Load settings from a YAML file, falling back to defaults."""
    raw: dict[str, Any] = {}

    if config_path is not None:
        resolved = Path(config_path).resolve()
        if not resolved.is_file():
            raise FileNotFoundError(f"Config file not found: {resolved}")
        raw = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    else:
        found = _find_config_file(search_dir or Path.cwd())
        if found is not None:
            raw = yaml.safe_load(found.read_text(encoding="utf-8")) or {}

    return LogAuditSettings(**raw)
