"""graphql-lint CLI - Main entrypoint.

Flags accept both the single-dash camelCase spelling (``-targetPath``) and a
conventional long form (``--target-path``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from graphql_lint import __version__
from graphql_lint.kernel.config.loader import load_config
from graphql_lint.kernel.config.models import DEFAULT_CONFIG_FILENAME
from graphql_lint.kernel.discovery import find_project_root
from graphql_lint.kernel.exceptions import GraphQLLintError
from graphql_lint.kernel.linter import SchemaLinter
from graphql_lint.kernel.logging import configure_logging, get_logger
from graphql_lint.kernel.report import report_results

app = typer.Typer(
    name="graphql-lint",
    help="Lint GraphQL SDL schema files.",
    add_completion=False,
    pretty_exceptions_enable=False,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold blue]graphql-lint[/bold blue] [green]{__version__}[/green]")
        raise typer.Exit()


@app.command()
def lint(
    target_path: Annotated[
        Path | None,
        typer.Option(
            "-targetPath",
            "--target-path",
            help="Directory or schema file to lint (default: project root)",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "-configPath",
            "--config-path",
            help=f"YAML configuration file (default: <project root>/{DEFAULT_CONFIG_FILENAME})",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-verbose", "--verbose", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "-version",
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Lint GraphQL schema files and exit non-zero when errors remain.

    Examples
    --------
    graphql-lint
    graphql-lint -targetPath schemas/ -verbose
    graphql-lint --target-path api.graphql --config-path lint.yml
    """
    configure_logging(level="DEBUG" if verbose else "INFO", force_reconfigure=True)
    log = get_logger(__name__)
    if verbose:
        log.debug("Verbose output enabled")

    try:
        if target_path is None or config_path is None:
            root = find_project_root()
            target = target_path if target_path is not None else root
            config = (
                load_config(config_path, explicit=True)
                if config_path is not None
                else load_config(root / DEFAULT_CONFIG_FILENAME)
            )
        else:
            target = target_path
            config = load_config(config_path, explicit=True)

        results = SchemaLinter(config, log).lint_path(target)
    except GraphQLLintError as e:
        log.critical(str(e))
        raise typer.Exit(1) from e

    summary = report_results(results, log)
    if not summary.passed:
        raise typer.Exit(1)


def main() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
