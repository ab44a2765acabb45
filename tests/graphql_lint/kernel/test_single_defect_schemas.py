"""Synthetic schemas with one injected defect yield exactly one diagnostic.

Each case starts from a clean document (``Query`` plus ``PageInfo``, every
element described and sorted), applies a single change with the builder
helpers and lints the rendered SDL through :class:`SchemaLinter`.
"""

from __future__ import annotations

import pytest
from loguru import logger

from graphql_lint.kernel.linter import SchemaLinter
from graphql_lint.kernel.schema.builder import (
    EnumValue,
    InputField,
    add_argument,
    add_directive,
    add_enum,
    add_field_to_interface,
    add_field_to_object,
    add_input_object,
    add_interface,
    add_list_field_to_object,
    add_object,
    add_scalar,
    new_document,
    render_sdl,
)
from graphql_lint.kernel.schema.document import SchemaDocument


def _clean_schema(
    *, query: bool = True, page_info: bool = True
) -> tuple[SchemaDocument, int, int]:
    """Return the document with the indexes of ``Query`` and ``PageInfo`` (-1 when absent)."""
    doc = new_document()
    query_index = page_info_index = -1
    if query:
        query_index = add_object(doc, "Query", "Query root")
        if page_info:
            add_field_to_object(doc, query_index, "pageInfo", "PageInfo", "Relay paging")
        else:
            add_field_to_object(doc, query_index, "id", "ID", "Node id")
    if page_info:
        page_info_index = add_object(doc, "PageInfo", "Relay page info")
        add_field_to_object(doc, page_info_index, "hasNextPage", "Boolean", "More pages follow")
        if not query:
            add_field_to_object(doc, page_info_index, "next", "PageInfo", "Following page")
    return doc, query_index, page_info_index


def _lint(doc: SchemaDocument):
    return SchemaLinter(log=logger).lint_source(render_sdl(doc), "synthetic.graphql")


# Each injector receives (doc, query index, PageInfo index). Fields added to
# Query sort after ``pageInfo`` unless the case is about ordering.


def _nothing(doc, query, page_info) -> None:
    pass


def _lowercase_type(doc, query, page_info) -> None:
    user = add_object(doc, "user", "A user")
    add_field_to_object(doc, user, "id", "ID", "User id")
    add_field_to_object(doc, query, "user", "user", "Look up a user")


def _undescribed_type(doc, query, page_info) -> None:
    user = add_object(doc, "User")
    add_field_to_object(doc, user, "id", "ID", "User id")
    add_field_to_object(doc, query, "user", "User", "Look up a user")


def _undescribed_field(doc, query, page_info) -> None:
    add_field_to_object(doc, page_info, "hasPreviousPage", "Boolean")


def _snake_case_field(doc, query, page_info) -> None:
    add_field_to_object(doc, page_info, "has_previous_page", "Boolean", "Earlier pages exist")


def _undescribed_argument(doc, query, page_info) -> None:
    users = add_field_to_object(doc, query, "users", "ID", "User ids")
    add_argument(doc, users, "limit", "Int")


def _role_field(doc, query) -> None:
    add_field_to_object(doc, query, "role", "Role", "Viewer role")


def _undescribed_enum_value(doc, query, page_info) -> None:
    add_enum(doc, "Role", "User role", ["ADMIN"])
    _role_field(doc, query)


def _filtered_users(doc, query) -> None:
    users = add_field_to_object(doc, query, "users", "ID", "User ids")
    add_argument(doc, users, "filter", "UserFilter", "Filter")


def _undescribed_input_value(doc, query, page_info) -> None:
    add_input_object(doc, "UserFilter", "User filter", [InputField("name", "String")])
    _filtered_users(doc, query)


def _snake_case_input_value(doc, query, page_info) -> None:
    add_input_object(
        doc, "UserFilter", "User filter", [InputField("user_name", "String", "User name")]
    )
    _filtered_users(doc, query)


def _deprecated_without_reason(doc, query, page_info) -> None:
    role = add_enum(doc, "Role", "User role", [EnumValue("ADMIN", "Administrator")])
    admin = doc.enum_value_definitions[doc.enum_types[role].values[0]]
    add_directive(doc, admin, "deprecated")
    _role_field(doc, query)


def _lowercase_description(doc, query, page_info) -> None:
    add_field_to_object(doc, page_info, "hasPreviousPage", "Boolean", "earlier pages exist")


def _unsorted_enum(doc, query, page_info) -> None:
    add_enum(
        doc, "Role", "User role", [EnumValue("USER", "Member"), EnumValue("ADMIN", "Administrator")]
    )
    _role_field(doc, query)


def _unsorted_input(doc, query, page_info) -> None:
    add_input_object(
        doc,
        "UserFilter",
        "User filter",
        [InputField("name", "String", "Name"), InputField("age", "Int", "Age")],
    )
    _filtered_users(doc, query)


def _unsorted_type_fields(doc, query, page_info) -> None:
    add_field_to_object(doc, query, "apples", "ID", "Apple ids")


def _unsorted_interface_fields(doc, query, page_info) -> None:
    node = add_interface(doc, "Node", "Any node")
    add_field_to_interface(doc, node, "name", "String", "Node name")
    add_field_to_interface(doc, node, "id", "ID", "Node id")
    add_field_to_object(doc, query, "search", "Node", "Find a node")


def _user_connection(doc) -> int:
    connection = add_object(doc, "UserConnection", "Users page")
    add_list_field_to_object(doc, connection, "edges", "ID", "Page edges")
    return connection


def _connection_without_page_info(doc, query, page_info) -> None:
    _user_connection(doc)
    users = add_field_to_object(doc, query, "users", "UserConnection", "Users")
    add_argument(doc, users, "first", "Int", "Page size")


def _connection_field_without_arguments(doc, query, page_info) -> None:
    connection = _user_connection(doc)
    add_field_to_object(doc, connection, "pageInfo", "PageInfo", "Page info")
    add_field_to_object(doc, query, "users", "UserConnection", "Users")


def _unused_type(doc, query, page_info) -> None:
    add_scalar(doc, "Date", "Calendar date")


def _undefined_type(doc, query, page_info) -> None:
    add_field_to_object(doc, query, "user", "User", "Look up a user")


def _suspicious_enum_value(doc, query, page_info) -> None:
    add_enum(doc, "Role", "User role", [EnumValue("ADMIN2", "Administrator")])
    _role_field(doc, query)


SINGLE_DEFECT_CASES = [
    pytest.param("types-are-capitalized", {}, _lowercase_type, id="lowercase-type"),
    pytest.param("types-have-descriptions", {}, _undescribed_type, id="undescribed-type"),
    pytest.param("fields-have-descriptions", {}, _undescribed_field, id="undescribed-field"),
    pytest.param("fields-are-camel-cased", {}, _snake_case_field, id="snake-case-field"),
    pytest.param(
        "arguments-have-descriptions", {}, _undescribed_argument, id="undescribed-argument"
    ),
    pytest.param(
        "enum-values-have-descriptions", {}, _undescribed_enum_value, id="undescribed-enum-value"
    ),
    pytest.param(
        "input-object-values-have-descriptions",
        {},
        _undescribed_input_value,
        id="undescribed-input-value",
    ),
    pytest.param(
        "input-object-values-are-camel-cased",
        {},
        _snake_case_input_value,
        id="snake-case-input-value",
    ),
    pytest.param(
        "deprecations-have-a-reason", {}, _deprecated_without_reason, id="deprecated-no-reason"
    ),
    pytest.param(
        "descriptions-are-capitalized", {}, _lowercase_description, id="lowercase-description"
    ),
    pytest.param("enum-values-sorted-alphabetically", {}, _unsorted_enum, id="unsorted-enum"),
    pytest.param(
        "input-object-fields-sorted-alphabetically", {}, _unsorted_input, id="unsorted-input"
    ),
    pytest.param(
        "type-fields-sorted-alphabetically", {}, _unsorted_type_fields, id="unsorted-type"
    ),
    pytest.param(
        "interface-fields-sorted-alphabetically",
        {},
        _unsorted_interface_fields,
        id="unsorted-interface",
    ),
    pytest.param("invalid-graphql-schema", {"query": False}, _nothing, id="missing-query"),
    pytest.param("relay-page-info-spec", {"page_info": False}, _nothing, id="missing-page-info"),
    pytest.param(
        "relay-connection-types-spec",
        {},
        _connection_without_page_info,
        id="connection-missing-page-info",
    ),
    pytest.param(
        "relay-connection-arguments-spec",
        {},
        _connection_field_without_arguments,
        id="connection-without-arguments",
    ),
    pytest.param("defined-types-are-used", {}, _unused_type, id="unused-type"),
    pytest.param("defined-types-are-used", {}, _undefined_type, id="undefined-type"),
    pytest.param("suspicious-enum-value", {}, _suspicious_enum_value, id="suspicious-enum-value"),
]


class TestSingleDefectSchemas:
    def test_clean_schema_has_no_diagnostics(self) -> None:
        doc, _, _ = _clean_schema()
        result = _lint(doc)
        assert result.diagnostics == []
        assert result.error_count == 0

    @pytest.mark.parametrize(("rule", "base", "inject"), SINGLE_DEFECT_CASES)
    def test_exactly_one_diagnostic(self, rule: str, base: dict, inject) -> None:
        doc, query, page_info = _clean_schema(**base)
        inject(doc, query, page_info)

        result = _lint(doc)

        assert [d.rule_id for d in result.diagnostics] == [rule]
        assert not result.directive_failed
