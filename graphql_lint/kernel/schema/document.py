"""Flat, index-based schema document consumed by the lint rules.

Every entity lives in a list on :class:`SchemaDocument` and refers to other
entities by integer handle. Type references form a chain through
``TypeRef.of_type`` (List and NonNull wrap an inner handle, Named terminates
it), so no node owns another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

BUILTIN_SCALARS = frozenset({"String", "Int", "Float", "Boolean", "ID"})
ROOT_OPERATION_TYPES = frozenset({"Query", "Mutation", "Subscription"})


class TypeKind(StrEnum):
    """Kind of a type reference."""

    NAMED = "named"
    LIST = "list"
    NON_NULL = "non_null"
    UNKNOWN = "unknown"


class DefinitionKind(StrEnum):
    """Kind of a top-level type definition, valued by its SDL keyword."""

    OBJECT = "type"
    INTERFACE = "interface"
    INPUT = "input"
    ENUM = "enum"
    UNION = "union"
    SCALAR = "scalar"


@dataclass(frozen=True, slots=True)
class Description:
    """Optional description; ``is_defined`` separates absent from empty."""

    is_defined: bool = False
    content: str = ""

    @classmethod
    def of(cls, content: str | None) -> Description:
        if content is None:
            return cls()
        return cls(is_defined=True, content=content)


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Type reference: ``name`` when Named, ``of_type`` handle when wrapping."""

    kind: TypeKind
    name: str = ""
    of_type: int = -1


@dataclass(slots=True)
class DirectiveApplication:
    """A directive applied to a definition, with its argument names."""

    name: str
    arguments: list[str] = field(default_factory=list)


@dataclass(slots=True)
class InputValueDefinition:
    """Field argument, input-object field or directive-definition argument."""

    name: str
    type: int
    description: Description = field(default_factory=Description)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class FieldDefinition:
    name: str
    type: int
    description: Description = field(default_factory=Description)
    arguments: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class EnumValueDefinition:
    name: str
    description: Description = field(default_factory=Description)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class ObjectTypeDefinition:
    """Object type or object type extension; ``fields`` index ``field_definitions``."""

    name: str
    description: Description = field(default_factory=Description)
    fields: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)


@dataclass(slots=True)
class InterfaceTypeDefinition:
    name: str
    description: Description = field(default_factory=Description)
    fields: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class InputObjectTypeDefinition:
    """Input object; ``fields`` index ``input_value_definitions``."""

    name: str
    description: Description = field(default_factory=Description)
    fields: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class EnumTypeDefinition:
    name: str
    description: Description = field(default_factory=Description)
    values: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class UnionTypeDefinition:
    """Union; ``members`` index ``types``."""

    name: str
    description: Description = field(default_factory=Description)
    members: list[int] = field(default_factory=list)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class ScalarTypeDefinition:
    name: str
    description: Description = field(default_factory=Description)
    directives: list[int] = field(default_factory=list)


@dataclass(slots=True)
class DirectiveDefinition:
    name: str
    description: Description = field(default_factory=Description)
    arguments: list[int] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SchemaDocument:
    """All definitions of one schema file in flat arrays.

    ``definitions`` records ``(kind, index)`` pairs for the type definitions in
    document order; extensions are kept apart in ``object_type_extensions`` so
    that type-level rules see each type once while field-level rules still see
    every field.
    """

    types: list[TypeRef] = field(default_factory=list)
    object_types: list[ObjectTypeDefinition] = field(default_factory=list)
    object_type_extensions: list[ObjectTypeDefinition] = field(default_factory=list)
    interface_types: list[InterfaceTypeDefinition] = field(default_factory=list)
    input_object_types: list[InputObjectTypeDefinition] = field(default_factory=list)
    enum_types: list[EnumTypeDefinition] = field(default_factory=list)
    union_types: list[UnionTypeDefinition] = field(default_factory=list)
    scalar_types: list[ScalarTypeDefinition] = field(default_factory=list)
    field_definitions: list[FieldDefinition] = field(default_factory=list)
    input_value_definitions: list[InputValueDefinition] = field(default_factory=list)
    enum_value_definitions: list[EnumValueDefinition] = field(default_factory=list)
    directives: list[DirectiveApplication] = field(default_factory=list)
    directive_definitions: list[DirectiveDefinition] = field(default_factory=list)
    definitions: list[tuple[DefinitionKind, int]] = field(default_factory=list)

    # -- handles -----------------------------------------------------------

    def add_type(self, ref: TypeRef) -> int:
        self.types.append(ref)
        return len(self.types) - 1

    def add_directive(self, application: DirectiveApplication) -> int:
        self.directives.append(application)
        return len(self.directives) - 1

    def add_field(self, definition: FieldDefinition) -> int:
        self.field_definitions.append(definition)
        return len(self.field_definitions) - 1

    def add_input_value(self, definition: InputValueDefinition) -> int:
        self.input_value_definitions.append(definition)
        return len(self.input_value_definitions) - 1

    def add_enum_value(self, definition: EnumValueDefinition) -> int:
        self.enum_value_definitions.append(definition)
        return len(self.enum_value_definitions) - 1

    # -- lookups -----------------------------------------------------------

    def base_type_name(self, handle: int) -> str:
        """Resolve a type handle through List/NonNull wrappers to its Named name.

        Returns ``""`` for an out-of-range handle or an unknown kind.
        """
        seen = 0
        while 0 <= handle < len(self.types) and seen <= len(self.types):
            ref = self.types[handle]
            if ref.kind is TypeKind.NAMED:
                return ref.name
            if ref.kind is TypeKind.UNKNOWN:
                return ""
            handle = ref.of_type
            seen += 1
        return ""

    def directive_names(self, handles: list[int]) -> list[str]:
        return [self.directives[h].name for h in handles]

    def has_object_type(self, name: str) -> bool:
        return any(obj.name == name for obj in self.object_types)

    def definition(self, kind: DefinitionKind, index: int) -> Any:
        """Return the definition at ``index`` in the list for ``kind``."""
        return self._definitions_of(kind)[index]

    def definition_name(self, kind: DefinitionKind, index: int) -> str:
        return self.definition(kind, index).name

    def defined_type_names(self) -> list[str]:
        """Names of all user-defined types in document order, without duplicates."""
        names: list[str] = []
        for kind, index in self.definitions:
            name = self.definition_name(kind, index)
            if name not in names:
                names.append(name)
        return names

    def _definitions_of(self, kind: DefinitionKind) -> list:
        return {
            DefinitionKind.OBJECT: self.object_types,
            DefinitionKind.INTERFACE: self.interface_types,
            DefinitionKind.INPUT: self.input_object_types,
            DefinitionKind.ENUM: self.enum_types,
            DefinitionKind.UNION: self.union_types,
            DefinitionKind.SCALAR: self.scalar_types,
        }[kind]
