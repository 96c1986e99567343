"""Lilypad: route configuration discovery for file-based routers.

Scans a ``routes/`` directory and describes it as an ordered model of
route files, middleware chains, and router mount points, ready for a
code generator to render into a server's routing table.

Basic usage::

    from lilypad import build_route_configuration

    config = build_route_configuration("path/to/project")
    for directory in config.mount_order:
        ...
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "FilesystemAccessError",
    "LilypadError",
    "MiddlewareFile",
    "RouteConfiguration",
    "RouteDirectory",
    "RouteFile",
    "RoutesDirectoryNotFound",
    "ScanConfig",
    "build_route_configuration",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import lilypad`` fast while providing a clean top-level API.
    """
    if name == "build_route_configuration":
        from lilypad.routes.discovery import build_route_configuration

        return build_route_configuration

    if name == "ScanConfig":
        from lilypad.config import ScanConfig

        return ScanConfig

    if name in ("MiddlewareFile", "RouteConfiguration", "RouteDirectory", "RouteFile"):
        from lilypad.routes import types as _types

        return getattr(_types, name)

    if name in ("FilesystemAccessError", "LilypadError", "RoutesDirectoryNotFound"):
        from lilypad import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
