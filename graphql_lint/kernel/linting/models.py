"""Core models for the graphql-lint linting framework."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace

from graphql_lint.kernel.linting.strings import rule_key
from graphql_lint.kernel.schema.source import line_content


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single lint finding.

    ``message`` is ``"<rule-id>: <text>"``. ``line`` is 1-based, 0 when the
    location is unknown. ``value`` is the per-instance discriminator matched
    against a suppression's ``value`` (empty for most rules).
    """

    file: str
    line: int
    message: str
    line_content: str = ""
    value: str = ""

    @classmethod
    def at(cls, source: str, line: int, message: str, value: str = "") -> Diagnostic:
        """Build a diagnostic for ``line`` of ``source``; the file is stamped later."""
        return cls("", line, message, line_content(source, line), value)

    @property
    def rule_id(self) -> str:
        return rule_key(self.message)

    def in_file(self, file: str) -> Diagnostic:
        return replace(self, file=file)


class FileResult:
    """Outcome of linting one schema file."""

    __slots__ = (
        "_diagnostics",
        "file",
        "n_desc",
        "n_data_types",
        "directive_failed",
        "deprecation_failed",
    )

    def __init__(self, file: str) -> None:
        """Initialize an empty result for ``file``."""
        self.file = file
        self._diagnostics: list[Diagnostic] = []
        self.n_desc = 0
        self.n_data_types = 0
        self.directive_failed = False
        self.deprecation_failed = False

    def add(self, diagnostic: Diagnostic, *, data_type: bool = False) -> None:
        """Add a retained diagnostic and count it in its bucket."""
        self._diagnostics.append(diagnostic)
        if data_type:
            self.n_data_types += 1
        else:
            self.n_desc += 1

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Retained diagnostics in emission order."""
        return self._diagnostics

    @property
    def error_count(self) -> int:
        """Errors counted for this file.

        Retained diagnostics plus one unit each for a failed directive or
        federation check and an unsuppressed deprecation without reason.
        """
        return (
            self.n_desc
            + self.n_data_types
            + (1 if self.directive_failed else 0)
            + (1 if self.deprecation_failed else 0)
        )

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


def _percent(part: int, total: int) -> str:
    value = part / total * 100 if total else 0.0
    return f"{value:.2f}%"


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Aggregate over all linted files."""

    total_files: int
    passed_files: int
    files_with_errors: int
    total_errors: int
    rule_counts: dict[str, int]

    @classmethod
    def from_results(cls, results: list[FileResult]) -> RunSummary:
        counts: Counter[str] = Counter()
        for result in results:
            counts.update(d.rule_id for d in result.diagnostics)
        failed = sum(1 for r in results if r.has_errors)
        return cls(
            total_files=len(results),
            passed_files=len(results) - failed,
            files_with_errors=failed,
            total_errors=sum(r.error_count for r in results),
            rule_counts=dict(sorted(counts.items())),
        )

    @property
    def percent_passed(self) -> str:
        return _percent(self.passed_files, self.total_files)

    @property
    def percent_with_errors(self) -> str:
        return _percent(self.files_with_errors, self.total_files)

    @property
    def passed(self) -> bool:
        return self.total_errors == 0
