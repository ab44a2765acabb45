"""Tests for graphql_lint.kernel.linting.data_types."""

from __future__ import annotations

import pytest
from loguru import logger

from graphql_lint.kernel.linting.data_types import (
    check_enum_values,
    check_type_references,
    is_suspicious_enum_value,
    is_valid_enum_value,
    suggest_enum_value,
    validate_data_types,
)
from graphql_lint.kernel.schema.builder import add_enum, add_object, new_document, render_sdl
from graphql_lint.kernel.schema.parser import parse_schema


class TestCheckTypeReferences:
    def test_builtin_and_defined_types(self) -> None:
        source = (
            "type Query { user(id: ID!): User, count: Int, ok: Boolean }\n"
            "type User { name: String, score: Float, role: Role }\n"
            "enum Role { ADMIN }\n"
        )
        parsed = parse_schema(source)
        assert check_type_references(parsed.document, source) == []

    def test_undefined_field_type(self) -> None:
        source = "type Query {\n  foo: Bar\n}"
        parsed = parse_schema(source)
        diagnostics = check_type_references(parsed.document, source)
        assert len(diagnostics) == 1
        assert diagnostics[0].message == (
            "defined-types-are-used: Field 'foo' references undefined type 'Bar'"
        )
        assert diagnostics[0].line == 2
        assert diagnostics[0].line_content == "foo: Bar"

    def test_undefined_input_value_type(self) -> None:
        source = "type Query { a: ID }\ninput Filter {\n  when: [DateTime!]\n}"
        parsed = parse_schema(source)
        diagnostics = check_type_references(parsed.document, source)
        assert [d.message for d in diagnostics] == [
            "defined-types-are-used: Input value 'when' references undefined type 'DateTime'"
        ]
        assert diagnostics[0].line == 3

    def test_fallback_location(self) -> None:
        source = "type Query {\n  foo:\n    Bar\n}"
        parsed = parse_schema(source)
        diagnostics = check_type_references(parsed.document, source)
        assert diagnostics[0].line == 2

    def test_logs_available_types(self, log_capture: list[dict]) -> None:
        source = "type Query { foo: Bar }"
        check_type_references(parse_schema(source).document, source, logger)
        debug = [r["message"] for r in log_capture if r["level"] == "DEBUG"]
        assert any("available types" in m and "'Query'" in m for m in debug)


class TestEnumValuePredicates:
    @pytest.mark.parametrize("value", ["ACTIVE", "_hidden", "Ünïcode", "V2"])
    def test_valid(self, value: str) -> None:
        assert is_valid_enum_value(value)

    @pytest.mark.parametrize("value", ["", "2FA", "has-dash", "with space"])
    def test_invalid(self, value: str) -> None:
        assert not is_valid_enum_value(value)

    def test_suspicious(self) -> None:
        assert is_suspicious_enum_value("INACTIVE1")
        assert is_suspicious_enum_value("V2BETA")
        assert not is_suspicious_enum_value("ACTIVE")


class TestSuggestEnumValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("STRING2", "STRING"),
            ("BOOLE3AN", "BOOLEAN"),
            ("FLO2AT", "FLOAT"),
            ("I2NT", "INT"),
            ("INTE2GER", "INTEGER"),
            ("ID9", "ID"),
            ("STRNG1", "STRING"),
        ],
    )
    def test_suggestion(self, value: str, expected: str) -> None:
        assert suggest_enum_value(value) == expected

    def test_no_suggestion(self) -> None:
        assert suggest_enum_value("INACTIVE1") is None


class TestCheckEnumValues:
    def test_suspicious_value(self) -> None:
        source = "enum X { ACTIVE INACTIVE1 }"
        diagnostics = check_enum_values(parse_schema(source).document, source)
        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.rule_id == "suspicious-enum-value"
        assert diagnostic.value == "INACTIVE1"
        assert diagnostic.message == (
            "suspicious-enum-value: Enum 'X' has suspicious value 'INACTIVE1'. "
            "Did you mean 'INACTIVE'? Enum values typically don't contain numbers."
        )

    def test_suggested_value(self) -> None:
        source = "enum Kind {\n  BOOLEAN2\n}"
        diagnostics = check_enum_values(parse_schema(source).document, source)
        assert diagnostics[0].message.endswith("Did you mean 'BOOLEAN'?")
        assert diagnostics[0].line == 2

    def test_invalid_value_from_built_document(self) -> None:
        doc = new_document()
        add_enum(doc, "Kind", "", ["9LIVES"])
        source = render_sdl(doc)
        diagnostics = check_enum_values(doc, source)
        assert [d.rule_id for d in diagnostics] == ["invalid-enum-value", "suspicious-enum-value"]
        assert diagnostics[0].message == "invalid-enum-value: Enum 'Kind' has invalid value '9LIVES'"


class TestValidateDataTypes:
    def test_references_before_enum_checks(self) -> None:
        source = "enum A { X1 }\ntype Query { a: Missing }"
        diagnostics = validate_data_types(parse_schema(source).document, source)
        assert [d.rule_id for d in diagnostics] == [
            "defined-types-are-used",
            "suspicious-enum-value",
        ]

    def test_empty_document(self) -> None:
        doc = new_document()
        add_object(doc, "Query")
        assert validate_data_types(doc, render_sdl(doc)) == []
