"""Helpers for assembling a :class:`SchemaDocument` by hand and rendering it as SDL.

Used to build synthetic schemas that trigger a single rule, both in tests
and when writing fixture files.

Examples
--------
>>> doc = new_document()
>>> query = add_object(doc, "Query", "Query root")
>>> _ = add_field_to_object(doc, query, "user", "User", "Look up a user")
>>> print(render_sdl(doc))
"Query root"
type Query {
  "Look up a user"
  user: User
}
<BLANKLINE>
"""

from __future__ import annotations

from dataclasses import dataclass

from graphql_lint.kernel.schema.document import (
    DefinitionKind,
    Description,
    DirectiveApplication,
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

UNKNOWN_TYPE = "Unknown"


@dataclass(frozen=True, slots=True)
class InputField:
    """Name, named type and description of an input-object field."""

    name: str
    type: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class EnumValue:
    name: str
    description: str = ""


def _description(text: str) -> Description:
    """An empty string means no description."""
    return Description.of(text or None)


def new_document() -> SchemaDocument:
    return SchemaDocument()


def named_type(doc: SchemaDocument, name: str) -> int:
    return doc.add_type(TypeRef(TypeKind.NAMED, name=name))


def wrap_type(doc: SchemaDocument, kind: TypeKind, inner: int) -> int:
    return doc.add_type(TypeRef(kind, of_type=inner))


# ---------------------------------------------------------------------------
# Type definitions
# ---------------------------------------------------------------------------


def add_object(doc: SchemaDocument, name: str, description: str = "") -> int:
    doc.object_types.append(ObjectTypeDefinition(name=name, description=_description(description)))
    index = len(doc.object_types) - 1
    doc.definitions.append((DefinitionKind.OBJECT, index))
    return index


def add_interface(doc: SchemaDocument, name: str, description: str = "") -> int:
    doc.interface_types.append(
        InterfaceTypeDefinition(name=name, description=_description(description))
    )
    index = len(doc.interface_types) - 1
    doc.definitions.append((DefinitionKind.INTERFACE, index))
    return index


def add_input_object(
    doc: SchemaDocument, name: str, description: str = "", fields: list[InputField] | None = None
) -> int:
    handles = [
        doc.add_input_value(
            InputValueDefinition(
                name=f.name,
                type=named_type(doc, f.type),
                description=_description(f.description),
            )
        )
        for f in fields or []
    ]
    doc.input_object_types.append(
        InputObjectTypeDefinition(name=name, description=_description(description), fields=handles)
    )
    index = len(doc.input_object_types) - 1
    doc.definitions.append((DefinitionKind.INPUT, index))
    return index


def add_enum(
    doc: SchemaDocument,
    name: str,
    description: str = "",
    values: list[EnumValue | str] | None = None,
) -> int:
    handles = []
    for value in values or []:
        if isinstance(value, str):
            value = EnumValue(value)
        handles.append(
            doc.add_enum_value(
                EnumValueDefinition(name=value.name, description=_description(value.description))
            )
        )
    doc.enum_types.append(
        EnumTypeDefinition(name=name, description=_description(description), values=handles)
    )
    index = len(doc.enum_types) - 1
    doc.definitions.append((DefinitionKind.ENUM, index))
    return index


def add_union(
    doc: SchemaDocument, name: str, members: list[str], description: str = ""
) -> int:
    doc.union_types.append(
        UnionTypeDefinition(
            name=name,
            description=_description(description),
            members=[named_type(doc, member) for member in members],
        )
    )
    index = len(doc.union_types) - 1
    doc.definitions.append((DefinitionKind.UNION, index))
    return index


def add_scalar(doc: SchemaDocument, name: str, description: str = "") -> int:
    doc.scalar_types.append(ScalarTypeDefinition(name=name, description=_description(description)))
    index = len(doc.scalar_types) - 1
    doc.definitions.append((DefinitionKind.SCALAR, index))
    return index


# ---------------------------------------------------------------------------
# Fields, arguments and directives
# ---------------------------------------------------------------------------


def _add_field(doc: SchemaDocument, name: str, type_handle: int, description: str) -> int:
    return doc.add_field(
        FieldDefinition(name=name, type=type_handle, description=_description(description))
    )


def add_field_to_object(
    doc: SchemaDocument, object_index: int, name: str, type_name: str, description: str = ""
) -> int:
    handle = _add_field(doc, name, named_type(doc, type_name), description)
    doc.object_types[object_index].fields.append(handle)
    return handle


def add_list_field_to_object(
    doc: SchemaDocument, object_index: int, name: str, element_type: str, description: str = ""
) -> int:
    """Add a ``name: [element_type]`` field."""
    type_handle = wrap_type(doc, TypeKind.LIST, named_type(doc, element_type))
    handle = _add_field(doc, name, type_handle, description)
    doc.object_types[object_index].fields.append(handle)
    return handle


def add_non_null_field_to_object(
    doc: SchemaDocument, object_index: int, name: str, type_name: str, description: str = ""
) -> int:
    """Add a ``name: type_name!`` field."""
    type_handle = wrap_type(doc, TypeKind.NON_NULL, named_type(doc, type_name))
    handle = _add_field(doc, name, type_handle, description)
    doc.object_types[object_index].fields.append(handle)
    return handle


def add_field_to_interface(
    doc: SchemaDocument, interface_index: int, name: str, type_name: str, description: str = ""
) -> int:
    handle = _add_field(doc, name, named_type(doc, type_name), description)
    doc.interface_types[interface_index].fields.append(handle)
    return handle


def add_argument(
    doc: SchemaDocument, field_handle: int, name: str, type_name: str, description: str = ""
) -> int:
    handle = doc.add_input_value(
        InputValueDefinition(
            name=name, type=named_type(doc, type_name), description=_description(description)
        )
    )
    doc.field_definitions[field_handle].arguments.append(handle)
    return handle


def add_directive(
    doc: SchemaDocument,
    target: ObjectTypeDefinition | FieldDefinition | EnumValueDefinition | InputValueDefinition,
    name: str,
    arguments: list[str] | None = None,
) -> int:
    """Apply ``@name`` to a definition, with the given argument names."""
    handle = doc.add_directive(DirectiveApplication(name=name, arguments=list(arguments or [])))
    target.directives.append(handle)
    return handle


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_type(doc: SchemaDocument, handle: int) -> str:
    """Render a type reference, or ``Unknown`` for a bad handle or kind."""
    if handle < 0 or handle >= len(doc.types):
        return UNKNOWN_TYPE
    ref = doc.types[handle]
    if ref.kind is TypeKind.NAMED:
        return ref.name
    if ref.kind is TypeKind.LIST:
        return f"[{render_type(doc, ref.of_type)}]"
    if ref.kind is TypeKind.NON_NULL:
        return f"{render_type(doc, ref.of_type)}!"
    return UNKNOWN_TYPE


def _render_description(description: Description, indent: str) -> list[str]:
    if not description.is_defined:
        return []
    escaped = description.content.replace("\\", "\\\\").replace('"', '\\"')
    return [f'{indent}"{escaped}"']


def _render_directives(doc: SchemaDocument, handles: list[int]) -> str:
    rendered = []
    for handle in handles:
        application = doc.directives[handle]
        if application.arguments:
            args = ", ".join(f'{arg}: ""' for arg in application.arguments)
            rendered.append(f"@{application.name}({args})")
        else:
            rendered.append(f"@{application.name}")
    return "".join(f" {r}" for r in rendered)


def _render_arguments(doc: SchemaDocument, handles: list[int]) -> str:
    if not handles:
        return ""
    parts = []
    for handle in handles:
        arg = doc.input_value_definitions[handle]
        prefix = ""
        if arg.description.is_defined:
            prefix = _render_description(arg.description, "")[0] + " "
        parts.append(f"{prefix}{arg.name}: {render_type(doc, arg.type)}")
    return f"({', '.join(parts)})"


def _render_field_block(doc: SchemaDocument, handles: list[int]) -> list[str]:
    lines = []
    for handle in handles:
        definition = doc.field_definitions[handle]
        lines += _render_description(definition.description, "  ")
        lines.append(
            f"  {definition.name}{_render_arguments(doc, definition.arguments)}: "
            f"{render_type(doc, definition.type)}"
            f"{_render_directives(doc, definition.directives)}"
        )
    return lines


def render_sdl(doc: SchemaDocument) -> str:
    """Render the type definitions of ``doc`` as SDL, in document order."""
    blocks: list[list[str]] = []
    for kind, index in doc.definitions:
        lines: list[str] = []
        if kind is DefinitionKind.OBJECT:
            obj = doc.object_types[index]
            implements = f" implements {' & '.join(obj.interfaces)}" if obj.interfaces else ""
            lines += _render_description(obj.description, "")
            lines.append(
                f"type {obj.name}{implements}{_render_directives(doc, obj.directives)} {{"
            )
            lines += _render_field_block(doc, obj.fields)
            lines.append("}")
        elif kind is DefinitionKind.INTERFACE:
            iface = doc.interface_types[index]
            lines += _render_description(iface.description, "")
            lines.append(f"interface {iface.name} {{")
            lines += _render_field_block(doc, iface.fields)
            lines.append("}")
        elif kind is DefinitionKind.INPUT:
            inp = doc.input_object_types[index]
            lines += _render_description(inp.description, "")
            lines.append(f"input {inp.name} {{")
            for handle in inp.fields:
                value = doc.input_value_definitions[handle]
                lines += _render_description(value.description, "  ")
                lines.append(f"  {value.name}: {render_type(doc, value.type)}")
            lines.append("}")
        elif kind is DefinitionKind.ENUM:
            enum = doc.enum_types[index]
            lines += _render_description(enum.description, "")
            lines.append(f"enum {enum.name} {{")
            for handle in enum.values:
                value = doc.enum_value_definitions[handle]
                lines += _render_description(value.description, "  ")
                lines.append(f"  {value.name}{_render_directives(doc, value.directives)}")
            lines.append("}")
        elif kind is DefinitionKind.UNION:
            union = doc.union_types[index]
            lines += _render_description(union.description, "")
            members = " | ".join(render_type(doc, m) for m in union.members)
            lines.append(f"union {union.name} = {members}")
        else:
            scalar = doc.scalar_types[index]
            lines += _render_description(scalar.description, "")
            lines.append(f"scalar {scalar.name}")
        blocks.append(lines)
    return "\n\n".join("\n".join(block) for block in blocks) + "\n"
