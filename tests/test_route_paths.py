"""Tests for lilypad.routes.paths: mount paths, routes, and import paths."""

from pathlib import Path, PureWindowsPath

import pytest

from lilypad.config import ScanConfig
from lilypad.routes.paths import (
    import_path,
    mount_path,
    path_to_route,
    relative_route,
    route_from_parts,
)


class TestMountPath:
    def test_root(self, tmp_path: Path) -> None:
        assert mount_path(tmp_path, tmp_path) == "/"

    def test_nested(self, tmp_path: Path) -> None:
        assert mount_path(tmp_path / "users", tmp_path) == "/users"

    def test_deeply_nested(self, tmp_path: Path) -> None:
        assert mount_path(tmp_path / "api" / "v1" / "[id]", tmp_path) == "/api/v1/[id]"


class TestPathToRoute:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("index.dart", "/"),
            ("about.dart", "/about"),
            ("users/index.dart", "/users"),
            ("users/[id].dart", "/users/[id]"),
            ("users/[id]/posts.dart", "/users/[id]/posts"),
        ],
    )
    def test_routes(self, path: str, expected: str) -> None:
        assert path_to_route(path) == expected

    def test_backslash_separators(self) -> None:
        assert path_to_route("users\\[id].dart") == "/users/[id]"

    def test_windows_path(self) -> None:
        assert path_to_route(PureWindowsPath("users", "index.dart")) == "/users"

    def test_index_directory_is_not_collapsed(self) -> None:
        assert path_to_route("index/about.dart") == "/index/about"

    def test_stem_containing_index(self) -> None:
        assert path_to_route("reindex.dart") == "/reindex"

    def test_custom_extension_and_index(self) -> None:
        cfg = ScanConfig(extension=".py", index_name="page")
        assert path_to_route("docs/page.py", cfg) == "/docs"


class TestRelativeRoute:
    def test_root_directory_keeps_route(self) -> None:
        assert relative_route("/about", "/") == "/about"

    def test_root_index(self) -> None:
        assert relative_route("/", "/") == "/"

    def test_directory_index_collapses_to_slash(self) -> None:
        assert relative_route("/users", "/users") == "/"

    def test_strips_directory_prefix(self) -> None:
        assert relative_route("/users/[id]", "/users") == "/[id]"

    def test_prefix_must_end_on_segment(self) -> None:
        assert relative_route("/usersettings", "/users") == "/usersettings"

    def test_adds_leading_slash(self) -> None:
        assert relative_route("about", "/") == "/about"


class TestImportPath:
    def test_prefixed_forward_slashes(self, tmp_path: Path) -> None:
        file = tmp_path / "routes" / "users" / "[id].dart"
        assert import_path(file, tmp_path) == "../routes/users/[id].dart"

    def test_custom_prefix(self, tmp_path: Path) -> None:
        file = tmp_path / "routes" / "index.dart"
        assert import_path(file, tmp_path, "../..") == "../../routes/index.dart"

    def test_trailing_slash_prefix(self, tmp_path: Path) -> None:
        file = tmp_path / "routes" / "index.dart"
        assert import_path(file, tmp_path, "../") == "../routes/index.dart"

    def test_empty_prefix(self, tmp_path: Path) -> None:
        file = tmp_path / "routes" / "index.dart"
        assert import_path(file, tmp_path, "") == "routes/index.dart"

    def test_windows_paths_join_with_forward_slashes(self) -> None:
        file = PureWindowsPath("C:\\project\\routes\\users\\[id].dart")
        project = PureWindowsPath("C:\\project")
        assert import_path(file, project) == "../routes/users/[id].dart"

    def test_routes_outside_project(self, tmp_path: Path) -> None:
        file = tmp_path / "shared" / "routes" / "index.dart"
        project = tmp_path / "app"
        assert import_path(file, project) == "../../shared/routes/index.dart"


class TestRouteFromParts:
    def test_segments(self) -> None:
        assert route_from_parts(("users", "[id].dart")) == "/users/[id]"

    def test_index(self) -> None:
        assert route_from_parts(("users", "index.dart")) == "/users"

    def test_empty(self) -> None:
        assert route_from_parts(()) == "/"

    def test_backslash_is_part_of_the_name(self) -> None:
        assert route_from_parts(("a\\b.dart",)) == "/a\\b"
