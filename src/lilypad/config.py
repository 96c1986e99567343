"""Scan configuration.

ScanConfig is a frozen dataclass: immutable after creation and
IDE-autocompletable, with no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Filesystem conventions for route discovery. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ScanConfig(routes_dir="api", import_prefix="../..")
    """

    # Layout
    routes_dir: str = "routes"  # Routes root, relative to the project directory

    # Classification
    extension: str = ".dart"  # Route source extension
    middleware_name: str = "_middleware"  # Reserved middleware stem
    index_name: str = "index"  # Stem that maps to the directory's own route

    # Generated imports
    import_prefix: str = ".."  # Escapes the generation directory

    @property
    def middleware_filename(self) -> str:
        return f"{self.middleware_name}{self.extension}"
