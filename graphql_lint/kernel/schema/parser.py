"""Parse SDL text with graphql-core into a :class:`SchemaDocument`.

Parsing is all-or-nothing: on a syntax error the result carries the parse
errors and an empty document, so file-level rules still run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError, GraphQLSyntaxError, parse
from graphql.language import ast as gql

from graphql_lint.kernel.schema.document import (
    DefinitionKind,
    Description,
    DirectiveApplication,
    DirectiveDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputObjectTypeDefinition,
    InputValueDefinition,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    SchemaDocument,
    TypeKind,
    TypeRef,
    UnionTypeDefinition,
)
from graphql_lint.kernel.schema.source import line_content

if TYPE_CHECKING:
    from loguru import Logger

_CONTEXT_BEFORE = 2
_CONTEXT_AFTER = 3


@dataclass(frozen=True, slots=True)
class ParseError:
    """A parser diagnostic; ``internal`` marks errors not caused by the input syntax."""

    message: str
    line: int = 0
    column: int = 0
    internal: bool = False


@dataclass(slots=True)
class ParsedSchema:
    """Source text, flat document and parse report of one schema file."""

    source: str
    document: SchemaDocument
    errors: list[ParseError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def internal_errors(self) -> list[ParseError]:
        return [e for e in self.errors if e.internal]

    @property
    def external_errors(self) -> list[ParseError]:
        return [e for e in self.errors if not e.internal]


def parse_schema(source: str) -> ParsedSchema:
    """Parse SDL text and convert it into a flat :class:`SchemaDocument`.

    Parameters
    ----------
    source : str
        SDL text of one schema file.

    Returns
    -------
    ParsedSchema
        The document (empty when parsing failed) and the parse errors.
    """
    try:
        node = parse(source, no_location=True)
    except GraphQLSyntaxError as e:
        return ParsedSchema(source, SchemaDocument(), _errors_from(e, internal=False))
    except GraphQLError as e:
        return ParsedSchema(source, SchemaDocument(), _errors_from(e, internal=True))
    return ParsedSchema(source, _DocumentConverter().convert(node))


def _errors_from(error: GraphQLError, *, internal: bool) -> list[ParseError]:
    if not error.locations:
        return [ParseError(error.message, internal=internal)]
    return [
        ParseError(error.message, loc.line, loc.column, internal=internal)
        for loc in error.locations
    ]


def report_parse_errors(parsed: ParsedSchema, log: Logger) -> None:
    """Log parse errors with their location and a window of surrounding lines."""
    if not parsed.has_errors:
        return
    log.error(f"Failed to parse schema - found {len(parsed.errors)} errors")
    for label, errors in (
        ("Internal", parsed.internal_errors),
        ("External", parsed.external_errors),
    ):
        for number, error in enumerate(errors, start=1):
            log.error(f"{label} Error {number}:")
            log.error(f"  Message: {error.message}")
            if error.line <= 0:
                continue
            log.error(f"  Location: Line {error.line}, Column {error.column}")
            log.error(f"  Problematic line: {line_content(parsed.source, error.line)}")
            for line in _context_window(parsed.source, error.line):
                log.error(line)


def _context_window(source: str, line: int) -> list[str]:
    total = source.count("\n") + 1
    first = max(1, line - _CONTEXT_BEFORE)
    last = min(total, line + _CONTEXT_AFTER)
    raw_lines = source.split("\n")
    window = ["  Context:"]
    for number in range(first, last + 1):
        marker = ">>>" if number == line else "   "
        window.append(f"  {marker} {number:4d}: {raw_lines[number - 1]}")
    return window


# ---------------------------------------------------------------------------
# graphql-core AST -> SchemaDocument
# ---------------------------------------------------------------------------


def _description(node: Any) -> Description:
    described = getattr(node, "description", None)
    return Description.of(described.value if described is not None else None)


class _DocumentConverter:
    """Walk a graphql-core ``DocumentNode`` and fill the flat arrays."""

    def __init__(self) -> None:
        self.doc = SchemaDocument()

    def convert(self, node: gql.DocumentNode) -> SchemaDocument:
        for definition in node.definitions:
            self._convert_definition(definition)
        return self.doc

    def _convert_definition(self, node: gql.DefinitionNode) -> None:
        doc = self.doc
        if isinstance(node, gql.ObjectTypeDefinitionNode):
            doc.object_types.append(self._object(node))
            doc.definitions.append((DefinitionKind.OBJECT, len(doc.object_types) - 1))
        elif isinstance(node, gql.ObjectTypeExtensionNode):
            doc.object_type_extensions.append(self._object(node))
        elif isinstance(node, gql.InterfaceTypeDefinitionNode):
            doc.interface_types.append(
                InterfaceTypeDefinition(
                    name=node.name.value,
                    description=_description(node),
                    fields=self._fields(node.fields),
                    directives=self._directives(node.directives),
                )
            )
            doc.definitions.append((DefinitionKind.INTERFACE, len(doc.interface_types) - 1))
        elif isinstance(node, gql.InterfaceTypeExtensionNode):
            self._fields(node.fields)
        elif isinstance(node, gql.InputObjectTypeDefinitionNode):
            doc.input_object_types.append(
                InputObjectTypeDefinition(
                    name=node.name.value,
                    description=_description(node),
                    fields=self._input_values(node.fields),
                    directives=self._directives(node.directives),
                )
            )
            doc.definitions.append((DefinitionKind.INPUT, len(doc.input_object_types) - 1))
        elif isinstance(node, gql.InputObjectTypeExtensionNode):
            self._input_values(node.fields)
        elif isinstance(node, gql.EnumTypeDefinitionNode):
            doc.enum_types.append(
                EnumTypeDefinition(
                    name=node.name.value,
                    description=_description(node),
                    values=[self._enum_value(v) for v in node.values or ()],
                    directives=self._directives(node.directives),
                )
            )
            doc.definitions.append((DefinitionKind.ENUM, len(doc.enum_types) - 1))
        elif isinstance(node, gql.UnionTypeDefinitionNode):
            doc.union_types.append(
                UnionTypeDefinition(
                    name=node.name.value,
                    description=_description(node),
                    members=[self._type(member) for member in node.types or ()],
                    directives=self._directives(node.directives),
                )
            )
            doc.definitions.append((DefinitionKind.UNION, len(doc.union_types) - 1))
        elif isinstance(node, gql.ScalarTypeDefinitionNode):
            doc.scalar_types.append(
                ScalarTypeDefinition(
                    name=node.name.value,
                    description=_description(node),
                    directives=self._directives(node.directives),
                )
            )
            doc.definitions.append((DefinitionKind.SCALAR, len(doc.scalar_types) - 1))
        elif isinstance(node, gql.DirectiveDefinitionNode):
            doc.directive_definitions.append(
                DirectiveDefinition(
                    name=node.name.value,
                    description=_description(node),
                    arguments=self._input_values(node.arguments),
                    locations=[loc.value for loc in node.locations or ()],
                )
            )
        # Schema definitions and remaining extensions carry nothing the rules inspect.

    def _object(
        self, node: gql.ObjectTypeDefinitionNode | gql.ObjectTypeExtensionNode
    ) -> ObjectTypeDefinition:
        return ObjectTypeDefinition(
            name=node.name.value,
            description=_description(node),
            fields=self._fields(node.fields),
            directives=self._directives(node.directives),
            interfaces=[i.name.value for i in node.interfaces or ()],
        )

    def _fields(self, nodes: Any) -> list[int]:
        handles = []
        for node in nodes or ():
            handles.append(
                self.doc.add_field(
                    FieldDefinition(
                        name=node.name.value,
                        type=self._type(node.type),
                        description=_description(node),
                        arguments=self._input_values(node.arguments),
                        directives=self._directives(node.directives),
                    )
                )
            )
        return handles

    def _input_values(self, nodes: Any) -> list[int]:
        handles = []
        for node in nodes or ():
            handles.append(
                self.doc.add_input_value(
                    InputValueDefinition(
                        name=node.name.value,
                        type=self._type(node.type),
                        description=_description(node),
                        directives=self._directives(node.directives),
                    )
                )
            )
        return handles

    def _enum_value(self, node: gql.EnumValueDefinitionNode) -> int:
        return self.doc.add_enum_value(
            EnumValueDefinition(
                name=node.name.value,
                description=_description(node),
                directives=self._directives(node.directives),
            )
        )

    def _directives(self, nodes: Any) -> list[int]:
        return [
            self.doc.add_directive(
                DirectiveApplication(
                    name=node.name.value,
                    arguments=[arg.name.value for arg in node.arguments or ()],
                )
            )
            for node in nodes or ()
        ]

    def _type(self, node: gql.TypeNode) -> int:
        if isinstance(node, gql.NamedTypeNode):
            return self.doc.add_type(TypeRef(TypeKind.NAMED, name=node.name.value))
        if isinstance(node, gql.ListTypeNode):
            inner = self._type(node.type)
            return self.doc.add_type(TypeRef(TypeKind.LIST, of_type=inner))
        if isinstance(node, gql.NonNullTypeNode):
            inner = self._type(node.type)
            return self.doc.add_type(TypeRef(TypeKind.NON_NULL, of_type=inner))
        return self.doc.add_type(TypeRef(TypeKind.UNKNOWN))
