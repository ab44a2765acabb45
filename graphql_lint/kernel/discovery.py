"""Schema file discovery and project root lookup."""

from __future__ import annotations

import os
from pathlib import Path

from graphql_lint.kernel.config.models import DEFAULT_CONFIG_FILENAME
from graphql_lint.kernel.exceptions import ProjectRootError, SchemaDiscoveryError

SCHEMA_EXTENSIONS = frozenset({".graphql", ".graphqls"})
IGNORED_DIRECTORIES = frozenset({"node_modules", "vendor", ".git"})
PROJECT_ROOT_MARKERS = (DEFAULT_CONFIG_FILENAME, ".git", "pyproject.toml")


def _is_schema_file(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in SCHEMA_EXTENSIONS


def find_schema_files(target: str | Path) -> list[str]:
    """Return schema files under ``target`` in walk order.

    Entries whose name starts with ``.`` are skipped, as are the directories
    ``node_modules``, ``vendor`` and ``.git`` (case-insensitive). Directory
    listings are sorted so runs are reproducible. A file target is returned
    as-is when it has a schema extension.

    Raises
    ------
    SchemaDiscoveryError
        If ``target`` does not exist or contains no schema files
    """
    root = Path(target)
    if not root.exists():
        raise SchemaDiscoveryError(str(root), "path does not exist")

    if root.is_file():
        files = [str(root)] if _is_schema_file(root.name) else []
    else:
        files = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not d.startswith(".") and d.lower() not in IGNORED_DIRECTORIES
            )
            files.extend(
                os.path.join(dirpath, name)
                for name in sorted(filenames)
                if not name.startswith(".") and _is_schema_file(name)
            )

    if not files:
        raise SchemaDiscoveryError(str(root), "no .graphql or .graphqls files found")
    return files


def find_project_root(start: str | Path | None = None) -> Path:
    """Walk up from ``start`` (default: cwd) to the first directory holding a root marker.

    Raises
    ------
    ProjectRootError
        If no directory up to the filesystem root contains a marker
    """
    origin = Path(start) if start is not None else Path.cwd()
    origin = origin.resolve()
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return directory
    raise ProjectRootError(str(origin), PROJECT_ROOT_MARKERS)
