"""lse — a small, portable directory lister modelled on ``ls``."""

from __future__ import annotations

from pathlib import Path

__version__ = "0.1.0"


class LseError(Exception):
    """User-facing CLI error.

    Raised for invalid arguments and unreadable paths. The message is
    printed to stderr and the process exits with code 1.
    """


class FilesystemError(LseError):
    """A path could not be found, opened, or stat'd.

    Always raised ``from`` the underlying ``OSError``.

    Attributes:
        path: The path that failed.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"cannot access '{self.path}': {reason}")

    @classmethod
    def from_os_error(cls, path: str | Path, exc: OSError) -> FilesystemError:
        """Build an error from an ``OSError`` raised while touching ``path``."""
        return cls(path, exc.strerror or str(exc))
