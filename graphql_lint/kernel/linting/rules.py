"""Lint rule protocols and runner for GraphQL schema documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

if TYPE_CHECKING:
    from loguru import Logger

    from graphql_lint.kernel.config.models import LinterConfig
    from graphql_lint.kernel.linting.models import Diagnostic
    from graphql_lint.kernel.schema.document import SchemaDocument


class SchemaRule(Protocol):
    """Protocol for a single schema lint rule."""

    rule_id: str
    description: str

    def check(self, document: SchemaDocument, source: str) -> list[Diagnostic]:
        """Run this rule against the document and return diagnostics."""
        ...


class SuppressingSchemaRule(Protocol):
    """A rule that applies per-instance suppressions itself.

    Used when the suppression ``value`` is only known inside the rule.
    """

    rule_id: str
    description: str
    suppresses_instances: ClassVar[bool]

    def check(
        self,
        document: SchemaDocument,
        source: str,
        config: LinterConfig | None,
        file: str,
        log: Logger | None = None,
    ) -> list[Diagnostic]:
        """Run this rule, dropping instances suppressed for ``file``."""
        ...


def run_rules(
    rules: list[SchemaRule | SuppressingSchemaRule],
    document: SchemaDocument,
    source: str,
    config: LinterConfig | None = None,
    file: str = "",
    log: Logger | None = None,
) -> list[Diagnostic]:
    """Run rules in order and concatenate their diagnostics, stamped with ``file``."""
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        if getattr(rule, "suppresses_instances", False):
            found = rule.check(document, source, config, file, log)  # type: ignore[call-arg]
        else:
            found = rule.check(document, source)  # type: ignore[call-arg]
        diagnostics.extend(d.in_file(file) for d in found)
    return diagnostics
