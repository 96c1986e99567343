"""Data models for filesystem-based route configuration.

Immutable frozen dataclasses representing discovered route files,
middleware files, and route directories.  Built once per scan during
discovery and handed to the code generator read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class MiddlewareFile:
    """A ``_middleware`` file discovered in the filesystem.

    The instance at the routes root is the *global* middleware; all
    others are *nested* and apply to their directory's subtree only.

    Attributes:
        name: Alias used by generated code (``m0``, ``m1``, ...).
        path: Import path relative to the generation directory.
    """

    name: str
    path: str

    def with_name(self, name: str) -> MiddlewareFile:
        """Return a new MiddlewareFile with a different alias."""
        return replace(self, name=name)

    def with_path(self, path: str) -> MiddlewareFile:
        """Return a new MiddlewareFile with a different import path."""
        return replace(self, path=path)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path}


@dataclass(frozen=True, slots=True)
class RouteFile:
    """A single route handler file.

    Attributes:
        name: Alias used by generated code (``r0``, ``r1``, ...).
        path: Import path relative to the generation directory.
        route: Route within the enclosing directory's router
            (e.g., ``/`` or ``/[id]``).
    """

    name: str
    path: str
    route: str

    def with_name(self, name: str) -> RouteFile:
        """Return a new RouteFile with a different alias."""
        return replace(self, name=name)

    def with_path(self, path: str) -> RouteFile:
        """Return a new RouteFile with a different import path."""
        return replace(self, path=path)

    def with_route(self, route: str) -> RouteFile:
        """Return a new RouteFile with a different route."""
        return replace(self, route=route)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path, "route": self.route}


@dataclass(frozen=True, slots=True)
class RouteDirectory:
    """A directory mapped to a router mount point.

    Attributes:
        name: Alias used by generated code (``d0`` for the root).
        path: Mount path for the directory's router (e.g., ``/users``).
        middleware: Nested middleware for this directory, if any.
            The root's own middleware is tracked as global instead.
        files: Route files directly inside this directory.
    """

    name: str
    path: str
    middleware: MiddlewareFile | None = None
    files: tuple[RouteFile, ...] = ()

    def with_name(self, name: str) -> RouteDirectory:
        """Return a new RouteDirectory with a different alias."""
        return replace(self, name=name)

    def with_path(self, path: str) -> RouteDirectory:
        """Return a new RouteDirectory with a different mount path."""
        return replace(self, path=path)

    def with_middleware(self, middleware: MiddlewareFile | None) -> RouteDirectory:
        """Return a new RouteDirectory with different (or no) middleware."""
        return replace(self, middleware=middleware)

    def with_files(self, files: tuple[RouteFile, ...]) -> RouteDirectory:
        """Return a new RouteDirectory with a different set of route files."""
        return replace(self, files=tuple(files))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "middleware": self.middleware.to_dict() if self.middleware else None,
            "files": [f.to_dict() for f in self.files],
        }


@dataclass(frozen=True, slots=True)
class RouteConfiguration:
    """All route metadata required to generate a server's routing table.

    Attributes:
        global_middleware: Middleware at the routes root, if any.
        middleware: Nested middleware in discovery order.  The global
            middleware is excluded (see ``global_middleware``).
        directories: Route directories, parents before descendants.
        routes: Every route file in discovery order.
    """

    global_middleware: MiddlewareFile | None = None
    middleware: tuple[MiddlewareFile, ...] = ()
    directories: tuple[RouteDirectory, ...] = ()
    routes: tuple[RouteFile, ...] = ()

    @property
    def mount_order(self) -> tuple[RouteDirectory, ...]:
        """Directories from leaf nodes to root.

        A router can only be mounted once every router beneath it
        exists, so generators compose directories in this order.
        """
        return tuple(reversed(self.directories))

    def to_dict(self) -> dict[str, Any]:
        return {
            "globalMiddleware": (
                self.global_middleware.to_dict() if self.global_middleware else None
            ),
            "middleware": [m.to_dict() for m in self.middleware],
            "directories": [d.to_dict() for d in self.directories],
            "routes": [r.to_dict() for r in self.routes],
        }
