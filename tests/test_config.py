"""Tests for configuration loading."""
from __future__ import annotations
from pathlib import Path
import pytest
from pydantic import ValidationError
from logaudit.config.settings import LogAuditSettings, RulesConfig, ScanConfig, load_settings


class TestRulesConfig:
    def test_defaults(self) -> None:
        c = RulesConfig()
        assert c.excessive_log_threshold == 5 and c.max_message_length == 200

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RulesConfig(excessive_log_threshold=-1)


class TestScanConfig:
    def test_defaults(self) -> None:
        c = ScanConfig()
        assert c.extensions == [".java"] and c.jobs == 1

    def test_zero_jobs_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScanConfig(jobs=0)


class TestLogAuditSettings:
    def test_nested_dicts(self) -> None:
        s = LogAuditSettings(rules={"max_message_length": 80}, scan={"jobs": 4})
        assert s.rules.max_message_length == 80 and s.scan.jobs == 4


class TestLoadSettings:
    def test_load_defaults_no_file(self, tmp_path) -> None:
        assert load_settings(search_dir=tmp_path).rules.excessive_log_threshold == 5

    def test_load_from_yaml(self, tmp_path) -> None:
        (tmp_path / "logaudit.yaml").write_text("rules:\n  excessive_log_threshold: 3\nscan:\n  jobs: 2\n")
        s = load_settings(search_dir=tmp_path)
        assert s.rules.excessive_log_threshold == 3 and s.scan.jobs == 2

    def test_explicit_path_takes_precedence(self, tmp_path) -> None:
        (tmp_path / "logaudit.yaml").write_text("rules:\n  max_message_length: 10\n")
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("rules:\n  max_message_length: 99\n")
        assert load_settings(config_path=explicit, search_dir=tmp_path).rules.max_message_length == 99

    def test_missing_explicit_path(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(config_path=tmp_path / "nope.yaml")

    def test_empty_yaml_returns_defaults(self, tmp_path) -> None:
        (tmp_path / "logaudit.yaml").write_text("")
        assert load_settings(search_dir=tmp_path).rules.max_message_length == 200

    def test_parent_dir_search(self, tmp_path) -> None:
        (tmp_path / ".logaudit.yml").write_text("scan:\n  extensions: ['.java', '.jav']\n")
        child = tmp_path / "child" / "subdir"
        child.mkdir(parents=True)
        assert load_settings(search_dir=child).scan.extensions == [".java", ".jav"]
