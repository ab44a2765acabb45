"""String predicates shared by the schema rules and validators."""

from __future__ import annotations


def is_camel_case(name: str) -> bool:
    """True when ``name`` is non-empty, has no underscore and starts with ``a``-``z``."""
    if not name or "_" in name:
        return False
    return "a" <= name[0] <= "z"


def is_capitalized(text: str) -> bool:
    """True when the trimmed text is empty or starts with an uppercase letter."""
    stripped = text.strip()
    if not stripped:
        return True
    return stripped[0].isupper()


def levenshtein(source: str, target: str) -> int:
    """Edit distance with unit cost for insert, delete and substitute.

    Examples
    --------
    >>> levenshtein("kitten", "sitting")
    3
    >>> levenshtein("", "abc")
    3
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    rows, cols = len(source) + 1, len(target) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[rows - 1][cols - 1]


def rule_key(message: str) -> str:
    """Return the rule id of a diagnostic message.

    The id is the text before the first ``:``, or before the first space when
    the message has no colon.
    """
    if ":" in message:
        return message.split(":", 1)[0]
    return message.split(" ", 1)[0]
