"""Tests for graphql_lint.kernel.discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from graphql_lint.kernel.discovery import find_project_root, find_schema_files
from graphql_lint.kernel.exceptions import ProjectRootError, SchemaDiscoveryError


def _touch(root: Path, relative: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("type Query { id: ID }")
    return path


class TestFindSchemaFiles:
    def test_walk_order_and_filters(self, tmp_path: Path) -> None:
        _touch(tmp_path, "b.graphql")
        _touch(tmp_path, "a.GRAPHQLS")
        _touch(tmp_path, "notes.txt")
        _touch(tmp_path, ".hidden.graphql")
        _touch(tmp_path, "api/users.graphql")
        _touch(tmp_path, ".cache/x.graphql")
        _touch(tmp_path, "node_modules/pkg/schema.graphql")
        _touch(tmp_path, "Vendor/lib.graphql")

        files = find_schema_files(tmp_path)
        relative = [os.path.relpath(f, tmp_path) for f in files]
        assert relative == ["a.GRAPHQLS", "b.graphql", os.path.join("api", "users.graphql")]

    def test_single_file_target(self, tmp_path: Path) -> None:
        path = _touch(tmp_path, "schema.graphqls")
        assert find_schema_files(path) == [str(path)]

    def test_missing_target(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaDiscoveryError, match="does not exist"):
            find_schema_files(tmp_path / "nope")

    def test_no_schema_files(self, tmp_path: Path) -> None:
        _touch(tmp_path, "readme.md")
        with pytest.raises(SchemaDiscoveryError, match="no .graphql"):
            find_schema_files(tmp_path)


class TestFindProjectRoot:
    def test_nearest_marker(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_config_file_is_marker(self, tmp_path: Path) -> None:
        (tmp_path / "outer").mkdir()
        inner = tmp_path / "outer" / "inner"
        inner.mkdir()
        (inner / ".graphql-linter.yml").write_text("")
        assert find_project_root(inner) == inner.resolve()

    def test_no_marker(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "graphql_lint.kernel.discovery.PROJECT_ROOT_MARKERS", ("no-such-marker-file",)
        )
        with pytest.raises(ProjectRootError):
            find_project_root(tmp_path)
