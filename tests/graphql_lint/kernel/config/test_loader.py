"""Tests for graphql_lint.kernel.config.loader and models."""

from __future__ import annotations

from pathlib import Path

import pytest

from graphql_lint.kernel.config.loader import load_config
from graphql_lint.kernel.config.models import LinterConfig, LinterSettings, Suppression
from graphql_lint.kernel.exceptions import ConfigurationError, GraphQLLintError

FULL_CONFIG = """\
settings:
  strictMode: false
  validateFederation: true
  checkDescriptions: false
suppressions:
  - file: schemas/legacy.graphql
    line: 12
    rule: types-have-descriptions
    reason: generated code
  - rule: suspicious-enum-value
    value: INACTIVE1
    reason: upstream name
"""


class TestModels:
    def test_defaults(self) -> None:
        config = LinterConfig()
        assert config.settings.strict_mode
        assert config.settings.validate_federation
        assert config.settings.check_descriptions
        assert config.suppressions == ()

    def test_aliases_and_names(self) -> None:
        assert not LinterSettings(strictMode=False).strict_mode
        assert not LinterSettings(strict_mode=False).strict_mode

    def test_null_fields_fall_back(self) -> None:
        entry = Suppression.model_validate({"file": None, "line": None, "rule": "r"})
        assert entry.file == ""
        assert entry.line == 0

    def test_numeric_value_becomes_string(self) -> None:
        assert Suppression.model_validate({"value": 42}).value == "42"

    def test_negative_line_rejected(self) -> None:
        with pytest.raises(ValueError):
            Suppression(line=-1)

    def test_frozen(self) -> None:
        config = LinterConfig()
        with pytest.raises(ValueError):
            config.suppressions = ()  # type: ignore[misc]


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".graphql-linter.yml"
        path.write_text(FULL_CONFIG)
        config = load_config(path)
        assert not config.settings.strict_mode
        assert not config.settings.check_descriptions
        assert len(config.suppressions) == 2
        assert config.suppressions[0].line == 12
        assert config.suppressions[1].value == "INACTIVE1"
        assert config.suppressions[1].file == ""

    def test_missing_default_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / ".graphql-linter.yml") == LinterConfig()

    def test_missing_explicit_file_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="file not found"):
            load_config(tmp_path / "lint.yml", explicit=True)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.yml"
        path.write_text("")
        assert load_config(path, explicit=True) == LinterConfig()

    def test_partial_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.yml"
        path.write_text("settings:\nsuppressions:\n")
        assert load_config(path) == LinterConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.yml"
        path.write_text("settings: [unclosed\n")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.yml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(GraphQLLintError, match="expected a mapping"):
            load_config(path)

    def test_invalid_setting_type(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.yml"
        path.write_text("settings:\n  strictMode: sometimes\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_logs_suppression_count(self, tmp_path: Path, log_capture: list[dict]) -> None:
        path = tmp_path / "lint.yml"
        path.write_text(FULL_CONFIG)
        load_config(path)
        assert "loaded config with 2 suppressions" in [r["message"] for r in log_capture]
