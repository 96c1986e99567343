"""Path derivation for discovered routes.

Mount paths, route strings, and import paths are all built from path
parts and joined with forward slashes so generated code is identical on
every host.
"""

import os
from collections.abc import Sequence
from pathlib import Path, PurePath, PurePosixPath

from lilypad.config import ScanConfig

_DEFAULT_CONFIG = ScanConfig()


def mount_path(path: PurePath, root: PurePath) -> str:
    """Return the URL prefix for *path* relative to the routes *root*.

    The root itself mounts at ``/``.
    """
    parts = path.relative_to(root).parts
    return "/" + "/".join(parts)


def route_from_parts(parts: Sequence[str], config: ScanConfig = _DEFAULT_CONFIG) -> str:
    """Full route for a file given its path segments under the routes root."""
    segments = [p for p in parts if p not in ("/", ".")]
    if not segments:
        return "/"

    segments[-1] = segments[-1].removesuffix(config.extension)
    if segments[-1] == config.index_name:
        segments.pop()

    return "/" + "/".join(segments)


def path_to_route(path: str | os.PathLike[str], config: ScanConfig = _DEFAULT_CONFIG) -> str:
    """Convert a routes-relative file path into its full route.

    The extension is stripped and a trailing ``index`` segment maps to
    the enclosing directory::

        path_to_route("index.dart")          # "/"
        path_to_route("users/index.dart")    # "/users"
        path_to_route("users/[id].dart")     # "/users/[id]"

    Strings and path objects are parsed the same way on every host:
    backslashes count as separators.
    """
    parts = PurePosixPath(os.fspath(path).replace("\\", "/")).parts
    return route_from_parts(parts, config)


def relative_route(route: str, directory_path: str) -> str:
    """Strip the directory's mount path from a full route.

    An empty remainder is the directory index and becomes ``/``.
    """
    if directory_path != "/" and (
        route == directory_path or route.startswith(directory_path + "/")
    ):
        route = route[len(directory_path) :]

    if not route:
        return "/"
    return route if route.startswith("/") else f"/{route}"


def import_path(file: PurePath, project_dir: PurePath, prefix: str = "..") -> str:
    """Import path for *file* as seen from the generation directory.

    Segments come from the path's own flavour, so a Windows path joins
    with ``/`` just like a POSIX one.
    """
    try:
        parts = file.relative_to(project_dir).parts
    except ValueError:
        # Routes root outside the project directory
        parts = Path(os.path.relpath(file, project_dir)).parts

    relative = "/".join(parts)
    if not prefix:
        return relative
    return f"{prefix.rstrip('/')}/{relative}"
