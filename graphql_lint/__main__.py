"""Entry point for running graphql-lint as a module: ``python -m graphql_lint``."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from graphql_lint.cli.main import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
