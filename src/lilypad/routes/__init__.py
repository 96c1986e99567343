"""Filesystem-based route configuration.

The ``routes/`` directory structure defines URL paths, router nesting,
and middleware scope.

Conventions:

    routes/
      _middleware.dart     # Global middleware (m0)
      index.dart           # /
      users/
        _middleware.dart   # Nested middleware for /users
        index.dart         # /users
        [id].dart          # /users/[id]
"""

from lilypad.routes.discovery import build_route_configuration
from lilypad.routes.paths import path_to_route
from lilypad.routes.types import MiddlewareFile, RouteConfiguration, RouteDirectory, RouteFile

__all__ = [
    "MiddlewareFile",
    "RouteConfiguration",
    "RouteDirectory",
    "RouteFile",
    "build_route_configuration",
    "path_to_route",
]
