"""Tests for graphql_lint.kernel.logging."""

from __future__ import annotations

from graphql_lint.kernel.logging import _console_format, format_fields, get_logger


class TestFormatFields:
    def test_sorted_and_quoted(self) -> None:
        fields = {"totalFiles": 4, "percentPassed": "75.00%", "passedFiles": 3}
        assert format_fields(fields) == 'passedFiles=3 percentPassed="75.00%" totalFiles=4'

    def test_module_binding_is_hidden(self) -> None:
        assert format_fields({"module": "graphql_lint.cli.main", "n": 1}) == "n=1"

    def test_empty(self) -> None:
        assert format_fields({}) == ""


class TestConsoleFormat:
    def test_fields_are_appended(self) -> None:
        formatter = _console_format(use_color=False)
        rendered = formatter({"extra": {"totalFiles": 2}})
        assert rendered == "{level: <8} | {message} totalFiles=2\n{exception}"

    def test_braces_in_values_are_escaped(self) -> None:
        formatter = _console_format(use_color=False)
        rendered = formatter({"extra": {"target": "{x}"}})
        assert 'target="{{x}}"' in rendered

    def test_no_fields(self) -> None:
        formatter = _console_format(use_color=False)
        assert formatter({"extra": {"module": "m"}}) == "{level: <8} | {message}\n{exception}"


class TestGetLogger:
    def test_bound_with_module_name(self, log_capture: list[dict]) -> None:
        get_logger("graphql_lint.tests").info("hello", passedFiles=1)
        record = log_capture[-1]
        assert record["message"] == "hello"
        assert record["extra"]["module"] == "graphql_lint.tests"
        assert record["extra"]["passedFiles"] == 1

    def test_cached(self) -> None:
        assert get_logger("graphql_lint.tests") is get_logger("graphql_lint.tests")
