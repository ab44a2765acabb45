"""Map identifiers in schema text back to 1-based source lines.

graphql-core nodes carry locations, but the linter builds a flat index-based
document that drops them. Diagnostics are instead located by substring scans
over the schema text, which is enough for SDL files where a name appears
once on its definition line.

Examples
--------
>>> source = "type Query {\\n  user: User\\n}"
>>> line_of(source, "user:")
2
>>> line_content(source, 2)
'user: User'
>>> line_of_field(source, "user", "User")
2
"""

from __future__ import annotations

_TYPE_PREFIXES = ("type ", "input ", "enum ", "interface ", "union ", "scalar ")


def _lines(source: str) -> list[str]:
    return source.split("\n")


def line_of(source: str, literal: str) -> int:
    """Return the first 1-based line containing ``literal``, or 0 when absent.

    An empty literal matches line 1.
    """
    for index, line in enumerate(_lines(source), start=1):
        if literal in line:
            return index
    return 0


def line_content(source: str, line: int) -> str:
    """Return the trimmed text of a 1-based line, or ``""`` when out of range."""
    lines = _lines(source)
    if line <= 0 or line > len(lines):
        return ""
    return lines[line - 1].strip()


def line_of_type(source: str, name: str) -> int:
    """Locate the definition line of a named type of any kind."""
    for prefix in _TYPE_PREFIXES:
        if found := line_of(source, prefix + name):
            return found
    return 0


def line_of_field(source: str, field_name: str, type_name: str) -> int:
    """Locate a ``field_name:`` line, optionally requiring ``type_name`` on it.

    Parameters
    ----------
    source : str
        Schema text.
    field_name : str
        Field, argument or input value name; matched as ``field_name:``.
    type_name : str
        When non-empty, the line must also reference this type as ``T!``,
        ``T]``, ``[T``, ``T `` or end with ``T``.

    Returns
    -------
    int
        1-based line number, or 0 when no line qualifies.
    """
    needle = f"{field_name}:"
    for index, raw in enumerate(_lines(source), start=1):
        line = raw.strip()
        if needle not in line:
            continue
        if not type_name or _references_type(line, type_name):
            return index
    return 0


def _references_type(line: str, type_name: str) -> bool:
    return (
        f"{type_name}!" in line
        or f"{type_name}]" in line
        or f"[{type_name}" in line
        or line.endswith(type_name)
        or f"{type_name} " in line
    )


def strip_comment_lines(source: str) -> str:
    """Drop lines whose first non-whitespace content is ``//``."""
    return "\n".join(line for line in _lines(source) if not line.strip().startswith("//"))
