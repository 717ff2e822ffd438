"""Global pytest fixtures for littleutils."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from littleutils.fileutils import reset_directories


@pytest.fixture
def fresh_directories() -> Iterator[None]:
    """Drop cached home/working directories before and after the test.

    Not autouse: Hypothesis rejects function-scoped fixtures on ``@given`` tests.
    """
    reset_directories()
    yield
    reset_directories()


@pytest.fixture
def arbitrary_bytes() -> bytes:
    """Deterministic sample payload for quick copy/save checks."""
    return b"The quick brown fox jumps over the lazy dog"
