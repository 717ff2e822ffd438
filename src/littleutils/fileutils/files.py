"""File writers and the single-pass copy-with-hash.

Every handle opened here is released through :func:`open_file`, which closes
it on all exit paths. A failing ``close()`` is reported as a
:class:`~littleutils.errors.CloseWarning` and never replaces the result or the
error of the operation that used the handle.

Failures to create directories, open, read, write, seek or truncate raise the
underlying ``OSError`` unchanged; nothing is retried and nothing is rolled
back, so a destination may be left partially written.
"""

from __future__ import annotations

import hashlib
import logging
import os
import warnings
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from littleutils.errors import CloseWarning
from littleutils.interfaces import BinaryReader, PathLike

from .paths import mkdir_parent

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
BUFFER_CHUNK_SIZE = 4096


# --- Handle management ---


def close(handle: BinaryIO) -> None:
    """Close ``handle``, downgrading a failure to a diagnostic.

    Every failure is logged at WARNING on this module's logger and also
    issued as a ``CloseWarning``. The warnings machinery may collapse repeats
    of the same message; the log record is emitted each time.
    """
    try:
        handle.close()
    except OSError as e:
        name = getattr(handle, "name", repr(handle))
        logger.warning("Failed to close %s: %s", name, e)
        warnings.warn(
            f"failed to close {name}: {e}",
            CloseWarning,
            stacklevel=2,
        )


@contextmanager
def open_file(path: PathLike, mode: str) -> Iterator[BinaryIO]:
    """Open ``path`` in binary ``mode`` and close it on exit, whatever happens."""
    handle: BinaryIO = open(path, mode)  # pylint: disable=consider-using-with
    try:
        yield handle
    finally:
        close(handle)


def create(path: PathLike) -> BinaryIO:
    """Create ``path`` for writing after creating its parent directories.

    Uses create semantics: a missing file is created, an existing one is
    truncated. The caller owns the returned handle.

    Raises:
        OSError: If the parent directories or the file cannot be created.
    """
    mkdir_parent(path)
    return open(path, "wb")  # pylint: disable=consider-using-with


@contextmanager
def _created(path: PathLike) -> Iterator[BinaryIO]:
    mkdir_parent(path)
    with open_file(path, "wb") as handle:
        yield handle
        # surface buffered write errors here, not as a CloseWarning
        handle.flush()


def _reset(handle: BinaryIO) -> None:
    handle.truncate(0)
    handle.seek(0)


def _pump(stream: BinaryReader, handle: BinaryIO, chunk_size: int) -> int:
    written = 0
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        handle.write(chunk)
        written += len(chunk)
    return written


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")


# --- Writers ---


def save(path: PathLike, data: bytes) -> None:
    """Create ``path`` (and its parents) and write ``data`` to it.

    Args:
        path: Destination file.
        data: Payload to write.

    Raises:
        OSError: On any directory, open or write failure.
    """
    with _created(path) as handle:
        handle.write(data)
    logger.debug("Saved %d bytes to %s", len(data), path)


def save_or_overwrite(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, explicitly discarding any previous content.

    The file is truncated to zero length and the cursor reset to the start
    before writing, so afterwards it holds exactly ``data``.

    Raises:
        OSError: On any directory, open, truncate, seek or write failure.
    """
    with _created(path) as handle:
        _reset(handle)
        handle.write(data)
    logger.debug("Overwrote %s with %d bytes", path, len(data))


def save_buffer(
    path: PathLike, stream: BinaryReader, *, chunk_size: int = BUFFER_CHUNK_SIZE
) -> None:
    """Stream ``stream`` into ``path`` in ``chunk_size`` pieces.

    The stream is consumed until EOF and is **not** closed by this function.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
        OSError: On any directory, open, read or write failure.
    """
    _check_chunk_size(chunk_size)
    with _created(path) as handle:
        written = _pump(stream, handle, chunk_size)
    logger.debug("Saved %d bytes to %s", written, path)


def save_or_overwrite_buffer(
    path: PathLike, stream: BinaryReader, *, chunk_size: int = BUFFER_CHUNK_SIZE
) -> None:
    """Like :func:`save_buffer`, but truncates ``path`` before writing."""
    _check_chunk_size(chunk_size)
    with _created(path) as handle:
        _reset(handle)
        written = _pump(stream, handle, chunk_size)
    logger.debug("Overwrote %s with %d bytes", path, written)


# --- Copy ---


def copy_with_hash(
    source: PathLike, dest: PathLike, *, chunk_size: int = CHUNK_SIZE
) -> str:
    """Copy ``source`` to ``dest`` and return the SHA-256 of the copied bytes.

    Bytes are read in bounded chunks and every chunk is fed to the hash and
    written to the destination in the same pass, so the digest always covers
    exactly what was written and files larger than memory are fine.

    The destination is created before the source is opened. If the source
    cannot be opened, an empty destination file is left behind.

    Args:
        source: Existing, readable file.
        dest: Destination file; missing parent directories are created.
        chunk_size: Read size per iteration (bytes).

    Returns:
        str: Lowercase hex SHA-256 digest (64 characters).

    Raises:
        ValueError: If ``chunk_size`` is not positive.
        FileNotFoundError: If ``source`` does not exist.
        OSError: On any other directory, open, read or write failure.
    """
    _check_chunk_size(chunk_size)
    hasher = hashlib.sha256()
    size = 0

    with _created(dest) as out, open_file(source, "rb") as src:
        for chunk in iter(lambda: src.read(chunk_size), b""):
            hasher.update(chunk)
            out.write(chunk)
            size += len(chunk)

    sha256 = hasher.hexdigest()
    logger.debug(
        "Copied %d bytes from %s to %s (sha256=%s)",
        size,
        os.fspath(source),
        os.fspath(dest),
        sha256,
    )
    return sha256
