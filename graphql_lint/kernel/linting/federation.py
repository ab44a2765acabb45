"""Apollo Federation awareness.

Directive applications on object types and fields are checked against the
federation and built-in directive allow-list, and ``@key`` selections are
checked against the fields their type declares.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphql import GraphQLError, parse
from graphql.language import ast as gql

from graphql_lint.kernel.linting.strings import levenshtein

if TYPE_CHECKING:
    from loguru import Logger

    from graphql_lint.kernel.schema.document import SchemaDocument

INVALID_DIRECTIVE_RULE = "invalid-federation-directive"

FEDERATION_DIRECTIVES = frozenset({
    "key",
    "external",
    "requires",
    "provides",
    "extends",
    "shareable",
    "inaccessible",
    "override",
    "composeDirective",
    "interfaceObject",
    "tag",
    "deprecated",
    "specifiedBy",
    "oneOf",
})

DIRECTIVE_SUGGESTION_THRESHOLD = 3
_SUGGESTION_TARGETS = ("key", "external")

_ENTITY_NODES = (
    gql.ObjectTypeDefinitionNode,
    gql.ObjectTypeExtensionNode,
    gql.InterfaceTypeDefinitionNode,
    gql.InterfaceTypeExtensionNode,
)


@dataclass(frozen=True, slots=True)
class InvalidDirective:
    """A directive outside the allow-list, with the element it is applied to."""

    context: str
    element: str
    directive: str

    @property
    def message(self) -> str:
        return (
            f"{INVALID_DIRECTIVE_RULE}: Invalid federation directive "
            f"'@{self.directive}' on {self.context} '{self.element}'"
        )

    @property
    def hint(self) -> str | None:
        """``Did you mean`` text for type contexts, when a close name exists."""
        if self.context != "type":
            return None
        suggestion = suggest_directive(self.directive)
        return f"Did you mean '@{suggestion}'?" if suggestion else None


def suggest_directive(name: str) -> str | None:
    """Return ``key`` or ``external`` when ``name`` contains or resembles it."""
    for target in _SUGGESTION_TARGETS:
        if target in name or levenshtein(name, target) <= DIRECTIVE_SUGGESTION_THRESHOLD:
            return target
    return None


def find_invalid_directives(document: SchemaDocument) -> list[InvalidDirective]:
    """Collect disallowed directives on object types, then on fields."""
    invalid = [
        InvalidDirective("type", obj.name, name)
        for obj in document.object_types
        for name in document.directive_names(obj.directives)
        if name not in FEDERATION_DIRECTIVES
    ]
    invalid += [
        InvalidDirective("field", f.name, name)
        for f in document.field_definitions
        for name in document.directive_names(f.directives)
        if name not in FEDERATION_DIRECTIVES
    ]
    return invalid


def validate_federation_directives(document: SchemaDocument, log: Logger | None = None) -> bool:
    """Log every disallowed directive; return True when there is none."""
    invalid = find_invalid_directives(document)
    if log is not None:
        allowed = ", ".join(f"@{name}" for name in sorted(FEDERATION_DIRECTIVES))
        for item in invalid:
            log.error(item.message)
            if item.hint:
                log.error(f"  {item.hint}")
            log.error(f"  Allowed directives: {allowed}")
    return not invalid


# ---------------------------------------------------------------------------
# Composition check
# ---------------------------------------------------------------------------


def _key_selection(fields: str) -> list[str] | None:
    """Top-level field names of a ``@key(fields: ...)`` selection, None if unparsable."""
    try:
        node = parse(f"{{ {fields} }}", no_location=True)
    except GraphQLError:
        return None
    operation = node.definitions[0]
    if not isinstance(operation, gql.OperationDefinitionNode):
        return None
    return [
        selection.name.value
        for selection in operation.selection_set.selections
        if isinstance(selection, gql.FieldNode)
    ]


def _fields_argument(directive: gql.DirectiveNode) -> str | None:
    for argument in directive.arguments or ():
        if argument.name.value == "fields" and isinstance(argument.value, gql.StringValueNode):
            return argument.value.value
    return None


def validate_federation_schema(source: str, log: Logger | None = None) -> bool:
    """Check that ``@key`` selections only name fields their entity declares.

    Parameters
    ----------
    source : str
        Schema text with ``//`` comment lines removed
    log : Logger | None
        Receives one error record per broken key

    Returns
    -------
    bool
        False when any ``@key`` is malformed or names an undeclared field.
        Unparsable input returns True; parse errors are reported elsewhere.
    """
    try:
        node = parse(source, no_location=True)
    except GraphQLError as e:
        if log is not None:
            log.debug(f"Skipping federation composition check: {e.message}")
        return True

    declared: dict[str, set[str]] = {}
    entities = [d for d in node.definitions if isinstance(d, _ENTITY_NODES)]
    for definition in entities:
        declared.setdefault(definition.name.value, set()).update(
            f.name.value for f in definition.fields or ()
        )

    valid = True
    keys_found = 0
    for definition in entities:
        type_name = definition.name.value
        for directive in definition.directives or ():
            if directive.name.value != "key":
                continue
            keys_found += 1
            fields = _fields_argument(directive)
            selection = _key_selection(fields) if fields is not None else None
            if not selection:
                valid = False
                if log is not None:
                    log.error(f"Invalid @key on '{type_name}': 'fields' must be a selection string")
                continue
            for name in selection:
                if name not in declared[type_name]:
                    valid = False
                    if log is not None:
                        log.error(f"Invalid @key on '{type_name}': field '{name}' is not declared")

    if log is not None:
        log.debug(f"Federation composition check: {keys_found} @key directive(s) inspected")
    return valid
