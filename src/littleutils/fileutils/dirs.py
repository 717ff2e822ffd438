"""Process-wide home and working directory lookup.

Both directories are resolved lazily on first access and cached afterwards.
Explicit values can be injected at startup with :func:`configure_directories`
(or through ``LITTLEUTILS_HOME_DIR`` / ``LITTLEUTILS_WORKING_DIR``), which is
the preferred way for applications and tests.

Failure to resolve a directory the first time raises
:class:`~littleutils.errors.FatalStartupError`; callers should treat it as a
reason to stop.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path

from littleutils import config
from littleutils.errors import FatalStartupError
from littleutils.interfaces import PathLike

logger = logging.getLogger(__name__)


class DirectoryResolver:
    """Lazily resolves and caches the home and working directories.

    Args:
        home: Explicit home directory; skips environment and system lookup.
        working: Explicit working directory; skips environment and system lookup.
    """

    def __init__(
        self, home: PathLike | None = None, working: PathLike | None = None
    ) -> None:
        self._lock = threading.Lock()
        self._home = Path(home) if home is not None else None
        self._working = Path(working) if working is not None else None

    def home_dir(self) -> Path:
        """Return the cached home directory, resolving it on first use."""
        with self._lock:
            if self._home is None:
                self._home = _resolve(
                    "home directory", config.get_home_dir_override, Path.home
                )
            return self._home

    def working_dir(self) -> Path:
        """Return the cached working directory, resolving it on first use."""
        with self._lock:
            if self._working is None:
                self._working = _resolve(
                    "working directory", config.get_working_dir_override, Path.cwd
                )
            return self._working


def _resolve(
    what: str,
    override: Callable[[], Path | None],
    lookup: Callable[[], Path],
) -> Path:
    if (path := override()) is not None:
        logger.debug("Using configured %s: %s", what, path)
        return path
    try:
        path = lookup()
    except (OSError, RuntimeError, KeyError) as e:
        # Path.home() raises RuntimeError/KeyError, Path.cwd() raises OSError
        raise FatalStartupError(what, e) from e
    logger.debug("Resolved %s: %s", what, path)
    return path


_resolver = DirectoryResolver()
_resolver_lock = threading.Lock()


def configure_directories(
    home: PathLike | None = None, working: PathLike | None = None
) -> None:
    """Install explicit directories, replacing anything cached so far.

    Directories left as ``None`` are resolved lazily again.
    """
    global _resolver  # pylint: disable=global-statement
    with _resolver_lock:
        _resolver = DirectoryResolver(home=home, working=working)


def reset_directories() -> None:
    """Forget cached directories so the next access resolves them again."""
    configure_directories()


def get_home_dir() -> Path:
    """Get the home directory of the current user (cached).

    Raises:
        FatalStartupError: If the home directory cannot be determined.
    """
    return _resolver.home_dir()


def _join_under(base: Path, paths: tuple[PathLike, ...]) -> Path:
    # an absolute part would replace the base instead of extending it
    parts = (os.fspath(p).lstrip("/\\") for p in paths)
    return base.joinpath(*parts)


def join_home_path(*paths: PathLike) -> Path:
    """Join ``paths`` onto the home directory.

    Leading separators are dropped from every part, so the result always
    stays under the home directory prefix.
    """
    return _join_under(get_home_dir(), paths)


def get_working_directory() -> Path:
    """Get the working directory of the process (cached).

    Raises:
        FatalStartupError: If the working directory cannot be determined.
    """
    return _resolver.working_dir()


def join_working_directory(*paths: PathLike) -> Path:
    """Join ``paths`` onto the working directory, like :func:`join_home_path`."""
    return _join_under(get_working_directory(), paths)
