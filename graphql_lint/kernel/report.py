"""Print lint results and the run summary through the logger."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql_lint.kernel.linting.models import RunSummary

if TYPE_CHECKING:
    from loguru import Logger

    from graphql_lint.kernel.linting.models import FileResult


def report_results(results: list[FileResult], log: Logger) -> RunSummary:
    """Log every retained diagnostic, the per-rule summary and the totals.

    Parameters
    ----------
    results : list[FileResult]
        Per-file results in processing order
    log : Logger
        Destination for all records

    Returns
    -------
    RunSummary
        Aggregate counts; ``summary.passed`` is False when any error remains.
        Terminating the process is left to the caller.
    """
    summary = RunSummary.from_results(results)

    for result in results:
        for d in result.diagnostics:
            log.error(f"{d.file}:{d.line}: {d.message}\n  {d.line_content}")

    if summary.rule_counts:
        log.error("Error type summary:")
        for rule, count in summary.rule_counts.items():
            log.error(f"  {rule}: {count}")

    log.info(
        "linting summary",
        passedFiles=summary.passed_files,
        totalFiles=summary.total_files,
        percentPassed=summary.percent_passed,
    )

    if not summary.passed:
        log.error(
            "files with at least one error",
            filesWithAtLeastOneError=summary.files_with_errors,
            percentageFilesWithErrors=summary.percent_with_errors,
        )
        log.critical(f"totalErrors: {summary.total_errors}")
    else:
        log.info(f"All {summary.total_files} schema file(s) passed linting successfully!")

    return summary
