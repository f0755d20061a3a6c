"""Exception classes for bytelex.

The scanner itself never raises: malformed input becomes an INVALID
token. Exceptions only come from the collaborators around it.
"""

from __future__ import annotations

import os


class BytelexError(Exception):
    """Base exception for all bytelex errors.

    Subclass this for specific error categories.
    """

    pass


class SourceReadError(BytelexError):
    """Error while reading scanner input from a file.

    Raised when the path does not exist, is unreadable, is a directory,
    or the read is interrupted. The original OSError is chained.
    """

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        """Initialize read error.

        Args:
            path: Path that could not be read
            reason: Human-readable description of the failure
        """
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
