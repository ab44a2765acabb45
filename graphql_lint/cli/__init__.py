"""Command-line interface for graphql-lint."""
