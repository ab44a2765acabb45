"""Exception hierarchy for graphql-lint.

Rule findings are never raised; they travel as diagnostics. The exceptions
below are for conditions that stop a whole run. All of them inherit from
GraphQLLintError so the CLI can catch them in one place.
"""

from __future__ import annotations

# ============================================================================
# Base Exception
# ============================================================================


class GraphQLLintError(Exception):
    """Base exception for all graphql-lint errors."""

    pass


# ============================================================================
# Run-level Errors
# ============================================================================


class ConfigurationError(GraphQLLintError):
    """Raised when the linter configuration cannot be read or is invalid.

    Examples
    --------
    Example usage::

        raise ConfigurationError(".graphql-linter.yml", "file not found")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Config file or setting that is invalid
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


class SchemaDiscoveryError(GraphQLLintError):
    """Raised when the target path is missing or holds no schema files."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Schema discovery failed for '{target}': {reason}")
        self.target = target
        self.reason = reason


class ProjectRootError(GraphQLLintError):
    """Raised when no project root marker is found above the working directory."""

    def __init__(self, start: str, markers: tuple[str, ...]) -> None:
        super().__init__(
            f"Cannot determine project root from '{start}': "
            f"none of {', '.join(markers)} found"
        )
        self.start = start
        self.markers = markers
