"""Path helpers: parent directory creation and key sanitization."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from littleutils.interfaces import PathLike

logger = logging.getLogger(__name__)

DIR_MODE = 0o777
_SEPARATORS = ("/", "\\")


def mkdir_parent(path: PathLike) -> None:
    """Create the parent directories of ``path``.

    A path without any directory separator is relative to the current working
    directory and needs nothing created. Otherwise every missing component of
    the parent is created with mode ``0o777`` (subject to the umask).

    Args:
        path: Target file path.

    Raises:
        OSError: If a directory cannot be created, e.g. permission denied or a
            component already exists as a regular file.
    """
    raw = os.fspath(path)
    if not any(sep in raw for sep in _SEPARATORS):
        return
    parent = Path(raw).parent
    if parent.is_dir():
        return
    parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    logger.debug("Created directory %s", parent)


def _last_segment(key: str) -> str:
    separators = os.sep + (os.altsep or "")
    trimmed = key.rstrip(separators)
    if not trimmed:
        # empty key, or a key made only of separators
        return "."
    return os.path.basename(trimmed)


def sanitize_file_path(key: str) -> str:
    """Turn an arbitrary key into a safe, canonical file name.

    Only the last path segment is kept, then it is lexically cleaned,
    lowercased, and spaces become underscores. The result never contains a
    path separator.

    A key whose last segment is ``.`` or ``..`` yields that segment unchanged
    (an empty key gives ``.``), and ``..`` joined onto a directory names its
    parent. Callers that store under a fixed directory must reject those two names.

    Examples:
        >>> sanitize_file_path("My File.TXT")
        'my_file.txt'
        >>> sanitize_file_path("../../etc/passwd")
        'passwd'
        >>> sanitize_file_path("a/b/c d")
        'c_d'
    """
    segment = os.path.normpath(_last_segment(key))
    return segment.lower().replace(" ", "_")
