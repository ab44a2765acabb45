"""Linter driver: discover schema files and run every check on each of them."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from graphql_lint.kernel.config.models import LinterConfig, get_default_config
from graphql_lint.kernel.discovery import find_schema_files
from graphql_lint.kernel.linting.data_types import validate_data_types
from graphql_lint.kernel.linting.federation import (
    validate_federation_directives,
    validate_federation_schema,
)
from graphql_lint.kernel.linting.models import Diagnostic, FileResult
from graphql_lint.kernel.linting.schema_rules import DeprecationsHaveAReasonRule, run_schema_rules
from graphql_lint.kernel.linting.suppression import is_suppressed
from graphql_lint.kernel.logging import get_logger
from graphql_lint.kernel.schema.parser import parse_schema, report_parse_errors
from graphql_lint.kernel.schema.source import line_content, strip_comment_lines

if TYPE_CHECKING:
    from loguru import Logger

READ_FAILURE_MESSAGE = "failed-to-read-schema-file: failed to read schema file"
PARSE_ERROR_RULE = "invalid-graphql-schema"


class SchemaLinter:
    """Run the parse, rule, data-type and federation pipeline per schema file.

    The configuration and logger are fixed for the lifetime of the linter;
    per-file state lives only in the returned :class:`FileResult`.

    Examples
    --------
    >>> linter = SchemaLinter()
    >>> result = linter.lint_source('type Query { "Id" id: ID }', "schema.graphql")
    >>> result.has_errors
    True
    """

    def __init__(self, config: LinterConfig | None = None, log: Logger | None = None) -> None:
        self.config = config if config is not None else get_default_config()
        self.log = log if log is not None else get_logger(__name__)

    def lint_path(self, target: str | Path) -> list[FileResult]:
        """Lint every schema file under ``target``, in walk order.

        Raises
        ------
        SchemaDiscoveryError
            If ``target`` is missing or holds no schema files
        """
        files = find_schema_files(target)
        self.log.debug(f"Found {len(files)} schema file(s):")
        for file in files:
            self.log.debug(f"  {file}")
        return [self.lint_file(file) for file in files]

    def lint_file(self, path: str) -> FileResult:
        """Read and lint one file; a read failure becomes a diagnostic."""
        self.log.debug(f"=== Linting {path} ===")
        try:
            source = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.log.debug(f"Cannot read {path}: {e}")
            result = FileResult(path)
            self._keep(result, Diagnostic(path, 0, READ_FAILURE_MESSAGE))
            return result
        return self.lint_source(source, path)

    def lint_source(self, source: str, file: str) -> FileResult:
        """Lint schema text attributed to ``file``."""
        settings = self.config.settings
        result = FileResult(file)

        parsed = parse_schema(source)
        report_parse_errors(parsed, self.log)
        if settings.strict_mode:
            for error in parsed.errors:
                self._keep(
                    result,
                    Diagnostic(
                        file,
                        error.line,
                        f"{PARSE_ERROR_RULE}: {error.message}",
                        line_content(source, error.line),
                    ),
                )

        for diagnostic in run_schema_rules(parsed.document, source, self.config, file, self.log):
            self._keep(result, diagnostic)
        result.deprecation_failed = any(
            d.rule_id == DeprecationsHaveAReasonRule.rule_id for d in result.diagnostics
        )

        for diagnostic in validate_data_types(parsed.document, source, self.log):
            self._keep(result, diagnostic.in_file(file), data_type=True)

        if settings.validate_federation:
            directives_valid = validate_federation_directives(parsed.document, self.log)
            composition_valid = validate_federation_schema(strip_comment_lines(source), self.log)
            result.directive_failed = not (directives_valid and composition_valid)

        return result

    def _keep(self, result: FileResult, diagnostic: Diagnostic, *, data_type: bool = False) -> None:
        if is_suppressed(
            self.config,
            diagnostic.file,
            diagnostic.line,
            diagnostic.rule_id,
            diagnostic.value,
            self.log,
        ):
            return
        result.add(diagnostic, data_type=data_type)
