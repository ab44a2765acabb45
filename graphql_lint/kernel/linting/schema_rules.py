"""Schema-level lint rules for GraphQL SDL documents.

Rule ids follow the vocabulary of ``graphql-schema-linter`` so existing
suppression lists keep working. Each rule reports in document order;
``ALL_SCHEMA_RULES`` fixes the order in which rules run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from graphql_lint.kernel.linting.models import Diagnostic
from graphql_lint.kernel.linting.rules import SchemaRule, SuppressingSchemaRule, run_rules
from graphql_lint.kernel.linting.strings import is_camel_case, is_capitalized
from graphql_lint.kernel.linting.suppression import is_suppressed
from graphql_lint.kernel.schema.document import ROOT_OPERATION_TYPES, SchemaDocument
from graphql_lint.kernel.schema.source import line_of, line_of_field, line_of_type

if TYPE_CHECKING:
    from loguru import Logger

    from graphql_lint.kernel.config.models import LinterConfig, LinterSettings

_CONNECTION_SUFFIX = "Connection"
_CONNECTION_FIELDS = ("pageInfo", "edges")
_PAGINATION_ARGUMENTS = frozenset({"first", "after", "last", "before"})


def _expected_order(names: list[str]) -> list[str] | None:
    """Return the sorted names when ``names`` is out of order, else None."""
    if len(names) < 2:
        return None
    expected = sorted(names)
    return expected if names != expected else None


def _object_fields(document: SchemaDocument):
    """Yield ``(type_name, field)`` for every field of every object type."""
    for obj in document.object_types:
        for handle in obj.fields:
            yield obj.name, document.field_definitions[handle]


def _enum_values(document: SchemaDocument):
    for enum in document.enum_types:
        for handle in enum.values:
            yield enum.name, document.enum_value_definitions[handle]


def _input_fields(document: SchemaDocument):
    for inp in document.input_object_types:
        for handle in inp.fields:
            yield inp.name, document.input_value_definitions[handle]


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TypesAreCapitalizedRule:
    """Object type names start with an uppercase letter."""

    rule_id = "types-are-capitalized"
    description = "Object type names are capitalized"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of(source, f"type {obj.name}"),
                f"{self.rule_id}: The object type '{obj.name}' should start with a capital letter.",
            )
            for obj in document.object_types
            if obj.name and obj.name not in ROOT_OPERATION_TYPES and not obj.name[0].isupper()
        ]


class FieldsAreCamelCasedRule:
    rule_id = "fields-are-camel-cased"
    description = "Object type fields are camelCased"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of_field(source, f.name, ""),
                f"{self.rule_id}: The field '{type_name}.{f.name}' is not camel cased.",
            )
            for type_name, f in _object_fields(document)
            if not is_camel_case(f.name)
        ]


class InputObjectValuesAreCamelCasedRule:
    rule_id = "input-object-values-are-camel-cased"
    description = "Input object fields are camelCased"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of(source, f"{value.name}:"),
                f"{self.rule_id}: The input value `{type_name}.{value.name}` is not camel cased.",
            )
            for type_name, value in _input_fields(document)
            if not is_camel_case(value.name)
        ]


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


class TypesHaveDescriptionsRule:
    rule_id = "types-have-descriptions"
    description = "Object types have a description"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of(source, f"type {obj.name}"),
                f"{self.rule_id}: Object type '{obj.name}' is missing a description",
            )
            for obj in document.object_types
            if not obj.description.is_defined
        ]


class FieldsHaveDescriptionsRule:
    rule_id = "fields-have-descriptions"
    description = "Object type fields have a description"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of_field(source, f.name, ""),
                f"{self.rule_id}: Field '{type_name}.{f.name}' is missing a description.",
            )
            for type_name, f in _object_fields(document)
            if not f.description.is_defined
        ]


class ArgumentsHaveDescriptionsRule:
    rule_id = "arguments-have-descriptions"
    description = "Field arguments have a description"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for _, f in _object_fields(document):
            for handle in f.arguments:
                arg = document.input_value_definitions[handle]
                if arg.description.is_defined:
                    continue
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, f"{arg.name}:"),
                        f"{self.rule_id}: The '{arg.name}' argument of '{f.name}' "
                        "is missing a description.",
                    )
                )
        return diagnostics


class EnumValuesHaveDescriptionsRule:
    rule_id = "enum-values-have-descriptions"
    description = "Enum values have a description"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of(source, value.name),
                f"{self.rule_id}: Enum value '{enum_name}.{value.name}' is missing a description.",
            )
            for enum_name, value in _enum_values(document)
            if not value.description.is_defined
        ]


class InputObjectValuesHaveDescriptionsRule:
    rule_id = "input-object-values-have-descriptions"
    description = "Input object fields have a description"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        return [
            Diagnostic.at(
                source,
                line_of(source, f"{value.name}:"),
                f"{self.rule_id}: The input value `{type_name}.{value.name}` "
                "is missing a description.",
            )
            for type_name, value in _input_fields(document)
            if not value.description.is_defined
        ]


class DeprecationsHaveAReasonRule:
    """``@deprecated`` on an enum value must pass a ``reason``."""

    rule_id = "deprecations-have-a-reason"
    description = "Deprecated enum values state a reason"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for enum_name, value in _enum_values(document):
            for handle in value.directives:
                directive = document.directives[handle]
                if directive.name == "deprecated" and not directive.arguments:
                    diagnostics.append(
                        Diagnostic.at(
                            source,
                            line_of(source, value.name),
                            f"{self.rule_id}: Deprecated enum value "
                            f"'{enum_name}.{value.name}' is missing a reason.",
                        )
                    )
        return diagnostics


class DescriptionsAreCapitalizedRule:
    """Defined descriptions start with an uppercase letter.

    Checked for object types, object type fields, enum values and field
    arguments, in that order.
    """

    rule_id = "descriptions-are-capitalized"
    description = "Descriptions are capitalized"

    def _message(self, kind: str, name: str) -> str:
        return f"{self.rule_id}: The description for {kind} `{name}` should be capitalized."

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for obj in document.object_types:
            if obj.description.is_defined and not is_capitalized(obj.description.content):
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, f"type {obj.name}"),
                        self._message("type", obj.name),
                    )
                )

        for type_name, f in _object_fields(document):
            if f.description.is_defined and not is_capitalized(f.description.content):
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of_field(source, f.name, ""),
                        self._message("field", f"{type_name}.{f.name}"),
                    )
                )

        for enum_name, value in _enum_values(document):
            if value.description.is_defined and not is_capitalized(value.description.content):
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, value.name),
                        self._message("enum value", f"{enum_name}.{value.name}"),
                    )
                )

        for _, f in _object_fields(document):
            for handle in f.arguments:
                arg = document.input_value_definitions[handle]
                if arg.description.is_defined and not is_capitalized(arg.description.content):
                    diagnostics.append(
                        Diagnostic.at(
                            source,
                            line_of(source, f"{arg.name}:"),
                            self._message("argument", f"{f.name}.{arg.name}"),
                        )
                    )
        return diagnostics


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def _sorting_message(rule_id: str, subject: str, expected: list[str]) -> str:
    return (
        f"{rule_id}: The {subject} should be sorted in alphabetical order. "
        f"Expected sorting: {', '.join(expected)}"
    )


class EnumValuesSortedAlphabeticallyRule:
    """Enum values are listed alphabetically.

    Suppressible per enum: the suppression ``value`` is the message text
    after the rule id.
    """

    rule_id = "enum-values-sorted-alphabetically"
    description = "Enum values are sorted alphabetically"
    suppresses_instances: ClassVar[bool] = True

    def check(
        self,
        document: SchemaDocument,
        source: str,
        config: LinterConfig | None = None,
        file: str = "",
        log: Logger | None = None,
    ) -> list[Diagnostic]:
        diagnostics = []
        for enum in document.enum_types:
            names = [document.enum_value_definitions[h].name for h in enum.values]
            expected = _expected_order(names)
            if expected is None:
                continue
            message = _sorting_message(self.rule_id, f"values of enum `{enum.name}`", expected)
            line = line_of(source, f"enum {enum.name}")
            value = message.split(": ", 1)[1]
            if is_suppressed(config, file, line, self.rule_id, value, log):
                continue
            diagnostics.append(Diagnostic.at(source, line, message))
        return diagnostics


class InputObjectFieldsSortedAlphabeticallyRule:
    rule_id = "input-object-fields-sorted-alphabetically"
    description = "Input object fields are sorted alphabetically"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for inp in document.input_object_types:
            names = [document.input_value_definitions[h].name for h in inp.fields]
            if (expected := _expected_order(names)) is not None:
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, f"input {inp.name}"),
                        _sorting_message(
                            self.rule_id, f"fields of input type `{inp.name}`", expected
                        ),
                    )
                )
        return diagnostics


class TypeFieldsSortedAlphabeticallyRule:
    rule_id = "type-fields-sorted-alphabetically"
    description = "Object type fields are sorted alphabetically"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for obj in document.object_types:
            names = [document.field_definitions[h].name for h in obj.fields]
            if (expected := _expected_order(names)) is not None:
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, f"type {obj.name}"),
                        _sorting_message(
                            self.rule_id, f"fields of object type `{obj.name}`", expected
                        ),
                    )
                )
        return diagnostics


class InterfaceFieldsSortedAlphabeticallyRule:
    rule_id = "interface-fields-sorted-alphabetically"
    description = "Interface fields are sorted alphabetically"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for iface in document.interface_types:
            names = [document.field_definitions[h].name for h in iface.fields]
            if (expected := _expected_order(names)) is not None:
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line_of(source, f"interface {iface.name}"),
                        _sorting_message(
                            self.rule_id, f"fields of interface type `{iface.name}`", expected
                        ),
                    )
                )
        return diagnostics


# ---------------------------------------------------------------------------
# Schema structure and Relay conventions
# ---------------------------------------------------------------------------


class QueryRootRule:
    """A ``Query`` object type must be defined."""

    rule_id = "invalid-graphql-schema"
    description = "Query root type is defined"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        if document.has_object_type("Query"):
            return []
        return [Diagnostic.at(source, 1, f"{self.rule_id}: Query root type must be provided.")]


class RelayPageInfoRule:
    rule_id = "relay-page-info-spec"
    description = "A PageInfo object type is defined"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        if document.has_object_type("PageInfo"):
            return []
        return [
            Diagnostic.at(
                source,
                1,
                f"{self.rule_id}: A `PageInfo` object type is required as per the Relay spec.",
            )
        ]


class RelayConnectionTypesRule:
    """``*Connection`` object types declare ``pageInfo`` and ``edges``."""

    rule_id = "relay-connection-types-spec"
    description = "Connection types have pageInfo and edges fields"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for obj in document.object_types:
            if not obj.name.endswith(_CONNECTION_SUFFIX):
                continue
            field_names = {document.field_definitions[h].name for h in obj.fields}
            for required in _CONNECTION_FIELDS:
                if required not in field_names:
                    diagnostics.append(
                        Diagnostic.at(
                            source,
                            line_of(source, f"type {obj.name}"),
                            f"{self.rule_id}: Connection `{obj.name}` is missing the "
                            f"following field: {required}.",
                        )
                    )
        return diagnostics


class RelayConnectionArgumentsRule:
    """Fields returning a connection accept forward or backward pagination arguments."""

    rule_id = "relay-connection-arguments-spec"
    description = "Connection fields take first/after or last/before"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        diagnostics = []
        for f in document.field_definitions:
            if not document.base_type_name(f.type).endswith(_CONNECTION_SUFFIX):
                continue
            args = {document.input_value_definitions[h].name for h in f.arguments}
            if args & _PAGINATION_ARGUMENTS:
                continue
            diagnostics.append(
                Diagnostic.at(
                    source,
                    line_of_field(source, f.name, ""),
                    f"{self.rule_id}: A field that returns a Connection Type must include "
                    "forward pagination arguments (`first` and `after`), backward pagination "
                    "arguments (`last` and `before`), or both as per the Relay spec.",
                )
            )
        return diagnostics


class DefinedTypesAreUsedRule:
    """Every defined type other than the root operation types is referenced."""

    rule_id = "defined-types-are-used"
    description = "Defined types are referenced"

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        used = {document.base_type_name(f.type) for f in document.field_definitions}
        used |= {document.base_type_name(v.type) for v in document.input_value_definitions}
        for union in document.union_types:
            used |= {document.base_type_name(m) for m in union.members}

        return [
            Diagnostic.at(
                source,
                line_of_type(source, name),
                f"{self.rule_id}: Type '{name}' is defined but not used",
            )
            for name in document.defined_type_names()
            if name not in ROOT_OPERATION_TYPES and name not in used
        ]


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

ALL_SCHEMA_RULES: list[SchemaRule | SuppressingSchemaRule] = [
    TypesAreCapitalizedRule(),
    TypesHaveDescriptionsRule(),
    FieldsHaveDescriptionsRule(),
    FieldsAreCamelCasedRule(),
    ArgumentsHaveDescriptionsRule(),
    EnumValuesHaveDescriptionsRule(),
    InputObjectValuesHaveDescriptionsRule(),
    InputObjectValuesAreCamelCasedRule(),
    DeprecationsHaveAReasonRule(),
    DescriptionsAreCapitalizedRule(),
    EnumValuesSortedAlphabeticallyRule(),
    InputObjectFieldsSortedAlphabeticallyRule(),
    TypeFieldsSortedAlphabeticallyRule(),
    InterfaceFieldsSortedAlphabeticallyRule(),
    QueryRootRule(),
    RelayPageInfoRule(),
    RelayConnectionTypesRule(),
    RelayConnectionArgumentsRule(),
    DefinedTypesAreUsedRule(),
]

DESCRIPTION_RULE_IDS = frozenset({
    "types-have-descriptions",
    "fields-have-descriptions",
    "arguments-have-descriptions",
    "enum-values-have-descriptions",
    "input-object-values-have-descriptions",
    "descriptions-are-capitalized",
})


def active_rules(
    settings: LinterSettings | None = None,
) -> list[SchemaRule | SuppressingSchemaRule]:
    """Return the catalogue in run order, without description rules when disabled."""
    if settings is None or settings.check_descriptions:
        return list(ALL_SCHEMA_RULES)
    return [r for r in ALL_SCHEMA_RULES if r.rule_id not in DESCRIPTION_RULE_IDS]


def run_schema_rules(
    document: SchemaDocument,
    source: str,
    config: LinterConfig | None = None,
    file: str = "",
    log: Logger | None = None,
) -> list[Diagnostic]:
    """Run the active catalogue against one document.

    Parameters
    ----------
    document : SchemaDocument
        Parsed schema
    source : str
        Original schema text, used to locate lines
    config : LinterConfig | None
        Configuration for settings and per-instance suppressions
    file : str
        Path stamped onto each diagnostic

    Returns
    -------
    list[Diagnostic]
        Diagnostics in catalogue order, each rule in document order
    """
    rules = active_rules(config.settings if config is not None else None)
    return run_rules(rules, document, source, config, file, log)
