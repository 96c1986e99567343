"""Filesystem route discovery for the routes/ directory.

Walks the routes directory tree and discovers:
- ``_middleware.dart`` files as middleware (global at the root, nested below)
- other ``.dart`` files as route handlers
- every directory as a router mount point

``index.dart`` maps to the directory URL; other files append their
stem to the path.  Bracketed names such as ``[id].dart`` pass through
unchanged for the generator to interpret.

Directories are returned parents first.  Generators walk them in
reverse (see :attr:`RouteConfiguration.mount_order`) so every router
exists before the router that mounts it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lilypad.config import ScanConfig
from lilypad.errors import FilesystemAccessError, RoutesDirectoryNotFound
from lilypad.routes.assembler import GLOBAL_MIDDLEWARE_ALIAS, AliasCounter, RouteCollector
from lilypad.routes.paths import import_path, mount_path, relative_route, route_from_parts
from lilypad.routes.types import MiddlewareFile, RouteConfiguration, RouteDirectory, RouteFile

logger = logging.getLogger("lilypad.routes")


def build_route_configuration(
    project_dir: str | Path | None = None,
    config: ScanConfig | None = None,
) -> RouteConfiguration:
    """Walk a project's routes directory and build its route configuration.

    Args:
        project_dir: Directory containing the routes root.  Defaults to
            the current working directory.  Import paths are computed
            relative to it.
        config: Filesystem conventions.  Defaults to :class:`ScanConfig`.

    Returns:
        The assembled :class:`RouteConfiguration`.

    Raises:
        RoutesDirectoryNotFound: The routes root does not exist.
        FilesystemAccessError: A directory under the root could not be listed.
    """
    config = config or ScanConfig()
    project = Path.cwd() if project_dir is None else Path(project_dir)
    root = project / config.routes_dir
    if not root.is_dir():
        raise RoutesDirectoryNotFound(root)

    global_middleware: MiddlewareFile | None = None
    global_file = root / config.middleware_filename
    if global_file.is_file():
        global_middleware = MiddlewareFile(
            name=GLOBAL_MIDDLEWARE_ALIAS,
            path=import_path(global_file, project, config.import_prefix),
        )
        logger.debug("Global middleware %s", global_middleware.path)

    collector = RouteCollector()
    directories = _walk_directory(
        root,
        root,
        project=project,
        config=config,
        aliases=AliasCounter(),
        collector=collector,
        visited={root.resolve()},
        depth=0,
    )

    route_config = collector.build(global_middleware, directories)
    logger.info(
        "Discovered %d routes, %d directories, %d nested middleware under %s",
        len(route_config.routes),
        len(route_config.directories),
        len(route_config.middleware),
        root,
    )
    return route_config


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    project: Path,
    config: ScanConfig,
    aliases: AliasCounter,
    collector: RouteCollector,
    visited: set[Path],
    depth: int,
) -> list[RouteDirectory]:
    """Recursively walk a directory, returning its records pre-order.

    Args:
        directory: Current directory being walked.
        root: Routes root (for computing mount paths).
        project: Project directory (for computing import paths).
        config: Filesystem conventions.
        aliases: Alias sequences shared by the whole traversal.
        collector: Receives every route and nested middleware file.
        visited: Resolved directories already walked; symlinks back into
            the tree are skipped so each directory is emitted once.
        depth: Current nesting depth (0 = root).
    """
    entries = _list_directory(directory)
    directory_path = mount_path(directory, root)
    directory_alias = aliases.next_directory()
    logger.debug("Walking %s (depth %d) as %s", directory_path, depth, directory_alias)

    # Route files at this level
    files: list[RouteFile] = []
    for item in entries:
        if not _is_route(item, config):
            continue

        full_route = route_from_parts(item.relative_to(root).parts, config)
        route = RouteFile(
            name=aliases.next_route(),
            path=import_path(item, project, config.import_prefix),
            route=relative_route(full_route, directory_path),
        )
        logger.debug("Route %s -> %s%s", route.name, directory_path, route.route)
        collector.on_route(route)
        files.append(route)

    # Only nested middleware here -- the root's is global and handled once
    middleware: MiddlewareFile | None = None
    if depth > 0:
        middleware_file = directory / config.middleware_filename
        if middleware_file in entries and middleware_file.is_file():
            middleware = MiddlewareFile(
                name=aliases.next_middleware(),
                path=import_path(middleware_file, project, config.import_prefix),
            )
            logger.debug("Middleware %s for %s", middleware.name, directory_path)
            collector.on_middleware(middleware)

    directories = [
        RouteDirectory(
            name=directory_alias,
            path=directory_path,
            middleware=middleware,
            files=tuple(files),
        )
    ]

    # Recurse into subdirectories
    for item in entries:
        if not item.is_dir():
            continue
        resolved = item.resolve()
        if resolved in visited:
            logger.debug("Skipping %s, already walked as %s", item, resolved)
            continue
        visited.add(resolved)
        directories.extend(
            _walk_directory(
                item,
                root,
                project=project,
                config=config,
                aliases=aliases,
                collector=collector,
                visited=visited,
                depth=depth + 1,
            )
        )

    return directories


def _list_directory(directory: Path) -> list[Path]:
    """Immediate children of *directory*, sorted by name."""
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise FilesystemAccessError(directory, exc.strerror or str(exc)) from exc


def _is_route(item: Path, config: ScanConfig) -> bool:
    return (
        item.name.endswith(config.extension)
        and item.name != config.middleware_filename
        and item.is_file()
    )
