"""Shared type definitions for littleutils."""

import os
from typing import Protocol

PathLike = str | os.PathLike[str]


class BinaryReader(Protocol):  # pylint: disable=too-few-public-methods
    """Anything with a ``read(size)`` returning bytes, e.g. an open binary file."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes; an empty result means EOF."""
