"""Type-reference and enum-value validation.

Every field and input value must reference a built-in scalar or a type
defined in the same document. Enum values must be valid names and are
flagged when they contain digits, which usually points at a typo such as
``STRING2``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql_lint.kernel.linting.models import Diagnostic
from graphql_lint.kernel.linting.strings import levenshtein
from graphql_lint.kernel.schema.document import BUILTIN_SCALARS, SchemaDocument
from graphql_lint.kernel.schema.source import line_of, line_of_field

if TYPE_CHECKING:
    from loguru import Logger

UNDEFINED_TYPE_RULE = "defined-types-are-used"
SUSPICIOUS_ENUM_RULE = "suspicious-enum-value"
INVALID_ENUM_RULE = "invalid-enum-value"

ENUM_SUGGESTION_THRESHOLD = 2

_ENUM_CORRECTIONS = {
    "STRING2": "STRING",
    "BOOLEAN2": "BOOLEAN",
    "BOOLE3AN": "BOOLEAN",
    "BOOL3AN": "BOOLEAN",
    "BOOLEAN3": "BOOLEAN",
    "FLOA2T": "FLOAT",
    "FLO2AT": "FLOAT",
    "FLOAT2": "FLOAT",
    "INT2": "INT",
    "INTEGER2": "INTEGER",
    "I2NT": "INT",
    "INTE2GER": "INTEGER",
}
_STANDARD_ENUM_VALUES = ("STRING", "BOOLEAN", "FLOAT", "INT", "INTEGER", "ID")
_ASCII_DIGITS = "0123456789"
_DROP_DIGITS = str.maketrans("", "", _ASCII_DIGITS)


# ---------------------------------------------------------------------------
# Type references
# ---------------------------------------------------------------------------


def _locate_reference(source: str, name: str, base: str) -> int:
    return (
        line_of_field(source, name, base)
        or line_of(source, f"{name}: {base}")
        or line_of(source, f"{name}:")
    )


def check_type_references(
    document: SchemaDocument, source: str, log: Logger | None = None
) -> list[Diagnostic]:
    """Report fields and input values whose base type is not known.

    Parameters
    ----------
    document : SchemaDocument
        Parsed schema
    source : str
        Original schema text
    log : Logger | None
        Receives the list of available types for each undefined reference

    Returns
    -------
    list[Diagnostic]
        Field references first, then input value references, each in
        document order
    """
    known = BUILTIN_SCALARS | set(document.defined_type_names())
    references = [("Field", f.name, f.type) for f in document.field_definitions]
    references += [("Input value", v.name, v.type) for v in document.input_value_definitions]

    diagnostics = []
    for label, name, handle in references:
        base = document.base_type_name(handle)
        if not base or base in known:
            continue
        line = _locate_reference(source, name, base)
        diagnostics.append(
            Diagnostic.at(
                source,
                line,
                f"{UNDEFINED_TYPE_RULE}: {label} '{name}' references undefined type '{base}'",
            )
        )
        if log is not None:
            log.debug(
                f"{label} '{name}' references undefined type '{base}' (line {line}); "
                f"available types: {sorted(known)}"
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Enum values
# ---------------------------------------------------------------------------


def is_valid_enum_value(value: str) -> bool:
    """A letter or ``_`` followed by letters, digits or ``_`` (Unicode aware)."""
    if not value:
        return False
    first, rest = value[0], value[1:]
    if not (first.isalpha() or first == "_"):
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch == "_" for ch in rest)


def is_suspicious_enum_value(value: str) -> bool:
    """True when the value contains an ASCII digit."""
    return any(ch in _ASCII_DIGITS for ch in value)


def suggest_enum_value(value: str) -> str | None:
    """Guess the intended value of a suspicious enum value.

    Known typos come from a fixed table. Otherwise the digits are removed
    and the result is compared with the standard scalar-like names; an exact
    match wins, then the first within edit distance 2.

    Examples
    --------
    >>> suggest_enum_value("BOOLE3AN")
    'BOOLEAN'
    >>> suggest_enum_value("FLAOT7")
    'FLOAT'
    >>> suggest_enum_value("INACTIVE1") is None
    True
    """
    if value in _ENUM_CORRECTIONS:
        return _ENUM_CORRECTIONS[value]
    cleaned = value.translate(_DROP_DIGITS)
    if cleaned in _STANDARD_ENUM_VALUES:
        return cleaned
    for candidate in _STANDARD_ENUM_VALUES:
        if levenshtein(cleaned, candidate) <= ENUM_SUGGESTION_THRESHOLD:
            return candidate
    return None


def _suspicious_hint(value: str) -> str:
    if suggestion := suggest_enum_value(value):
        return f"Did you mean '{suggestion}'?"
    return (
        f"Did you mean '{value.rstrip(_ASCII_DIGITS)}'? "
        "Enum values typically don't contain numbers."
    )


def check_enum_values(
    document: SchemaDocument, source: str, log: Logger | None = None
) -> list[Diagnostic]:
    """Report invalid and suspicious enum values.

    Suspicious-value diagnostics carry the offending value so a suppression
    can target a single value.
    """
    diagnostics = []
    for enum in document.enum_types:
        for handle in enum.values:
            value = document.enum_value_definitions[handle].name
            line = line_of(source, value)
            if not is_valid_enum_value(value):
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line,
                        f"{INVALID_ENUM_RULE}: Enum '{enum.name}' has invalid value '{value}'",
                    )
                )
            if is_suspicious_enum_value(value):
                hint = _suspicious_hint(value)
                if log is not None:
                    log.debug(f"Enum '{enum.name}' value '{value}': {hint}")
                diagnostics.append(
                    Diagnostic.at(
                        source,
                        line,
                        f"{SUSPICIOUS_ENUM_RULE}: Enum '{enum.name}' has suspicious value "
                        f"'{value}'. {hint}",
                        value=value,
                    )
                )
    return diagnostics


def validate_data_types(
    document: SchemaDocument, source: str, log: Logger | None = None
) -> list[Diagnostic]:
    """Type-reference diagnostics followed by enum-value diagnostics."""
    return check_type_references(document, source, log) + check_enum_values(document, source, log)
