"""Accumulate discovery events into a RouteConfiguration.

The collector is an observer: discovery calls ``on_route`` and
``on_middleware`` as files are classified, and ``build`` freezes what
was seen into the final configuration without reordering anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lilypad.routes.types import MiddlewareFile, RouteConfiguration, RouteDirectory, RouteFile

# Alias reserved for the middleware at the routes root
GLOBAL_MIDDLEWARE_ALIAS = "m0"


@dataclass(slots=True)
class AliasCounter:
    """Monotonic alias sequences for one traversal.

    One counter per namespace.  ``m0`` is reserved for the global
    middleware, so nested middleware starts at ``m1`` whether or not
    a global middleware exists.
    """

    directories: int = 0
    middleware: int = 1
    routes: int = 0

    def next_directory(self) -> str:
        alias = f"d{self.directories}"
        self.directories += 1
        return alias

    def next_middleware(self) -> str:
        alias = f"m{self.middleware}"
        self.middleware += 1
        return alias

    def next_route(self) -> str:
        alias = f"r{self.routes}"
        self.routes += 1
        return alias


@dataclass(slots=True)
class RouteCollector:
    """Ordered accumulators for route and nested middleware files."""

    routes: list[RouteFile] = field(default_factory=list)
    middleware: list[MiddlewareFile] = field(default_factory=list)

    def on_route(self, route: RouteFile) -> None:
        self.routes.append(route)

    def on_middleware(self, middleware: MiddlewareFile) -> None:
        self.middleware.append(middleware)

    def build(
        self,
        global_middleware: MiddlewareFile | None,
        directories: list[RouteDirectory],
    ) -> RouteConfiguration:
        return RouteConfiguration(
            global_middleware=global_middleware,
            middleware=tuple(self.middleware),
            directories=tuple(directories),
            routes=tuple(self.routes),
        )
