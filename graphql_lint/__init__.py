"""graphql-lint: a linter for GraphQL SDL schema files.

Checks schemas against the ``graphql-schema-linter`` rule vocabulary,
validates type references and enum values, and accepts Apollo Federation
directives.
"""

from importlib.metadata import PackageNotFoundError, version

from graphql_lint.kernel.linter import SchemaLinter
from graphql_lint.kernel.linting.models import Diagnostic, FileResult, RunSummary

# Version is defined in pyproject.toml and read dynamically
try:
    __version__ = version("graphql-lint")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for development installs

__all__ = [
    "Diagnostic",
    "FileResult",
    "RunSummary",
    "SchemaLinter",
    "__version__",
]
