"""Lilypad exception hierarchy.

Shared across discovery and the assembler so callers catch one
family of types.
"""

from pathlib import Path


class LilypadError(Exception):
    """Base for all lilypad-specific errors."""


class RoutesDirectoryNotFound(LilypadError, FileNotFoundError):  # noqa: N818
    """The routes root does not exist.

    Fatal: the scan aborts and no partial configuration is produced.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not find directory {self.path}")

    def __str__(self) -> str:
        return f"Could not find directory {self.path}"


class FilesystemAccessError(LilypadError, OSError):
    """Listing a directory under the routes root failed.

    Raised from the underlying ``OSError``, which stays available as
    ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        if self.reason:
            return f"Could not read directory {self.path}: {self.reason}"
        return f"Could not read directory {self.path}"

    def __str__(self) -> str:
        return self._message()
