"""Input collaborators: turn a file or an argument list into scanner bytes.

Both functions produce the raw buffer a Scanner is built from. Read
failures surface here as SourceReadError, before any Scanner exists.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from bytelex.errors import SourceReadError
from bytelex.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | os.PathLike[str]) -> bytes:
    """Read the whole file at ``path`` as bytes.

    Single-shot read with no retry.

    Args:
        path: File to read

    Returns:
        The file contents.

    Raises:
        SourceReadError: If the file is missing, unreadable, a directory,
            or the read is interrupted.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc
    logger.debug("Read %d bytes from %s", len(data), os.fspath(path))
    return data


def join_args(args: Iterable[str]) -> bytes:
    """Join text arguments with single spaces and encode as UTF-8.

    Zero arguments yield an empty buffer.

    Example:
        >>> join_args(["1", "+", "2"])
        b'1 + 2'
    """
    return " ".join(args).encode("utf-8")
