"""Configuration utilities for littleutils.

Settings come from the environment and are read on demand, never at import
time, so tests can set and clear them freely.
"""

import os
from pathlib import Path

from littleutils.errors import InvalidSettingError

HOME_DIR_ENV = "LITTLEUTILS_HOME_DIR"  # pragma: no mutate
WORKING_DIR_ENV = "LITTLEUTILS_WORKING_DIR"  # pragma: no mutate
CHUNK_SIZE_ENV = "LITTLEUTILS_CHUNK_SIZE"  # pragma: no mutate


def _get_path(name: str) -> Path | None:
    if not (value := os.environ.get(name)):
        return None
    return Path(value).expanduser()


def get_home_dir_override() -> Path | None:
    """Return the home directory set through ``LITTLEUTILS_HOME_DIR``, if any."""
    return _get_path(HOME_DIR_ENV)


def get_working_dir_override() -> Path | None:
    """Return the working directory set through ``LITTLEUTILS_WORKING_DIR``, if any."""
    return _get_path(WORKING_DIR_ENV)


def get_chunk_size(default: int) -> int:
    """Get the copy chunk size from the environment.

    Args:
        default: Value returned when ``LITTLEUTILS_CHUNK_SIZE`` is unset or empty.

    Returns:
        The chunk size in bytes.

    Raises:
        InvalidSettingError: If the variable is not a positive integer.
    """
    if not (raw := os.environ.get(CHUNK_SIZE_ENV)):
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise InvalidSettingError(CHUNK_SIZE_ENV, raw, "not an integer") from e
    if value <= 0:
        raise InvalidSettingError(CHUNK_SIZE_ENV, raw, "must be positive")
    return value
