"""Hypothesis property tests for the copy and save helpers.

- **Digest fidelity**: ``copy_with_hash`` returns the SHA-256 of the source.
- **Byte fidelity**: the destination holds exactly the source bytes.
- **Chunk invariance**: the chunk size never changes digest or content.
- **Overwrite exactness**: after ``save_or_overwrite`` the file holds only the
  newest payload, whatever was there before.
"""

from __future__ import annotations

import hashlib
import io
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from littleutils.fileutils import (
    copy_with_hash,
    save_or_overwrite,
    save_or_overwrite_buffer,
)

pytestmark = [pytest.mark.property]

# pylint: disable=redefined-outer-name

# Keep small for CI (~50), can be larger locally.
_PROPSET = settings(max_examples=50, deadline=None)


@pytest.fixture(scope="module")
def workdir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Module-scoped scratch directory shared by all generated examples."""
    return tmp_path_factory.mktemp("copy_props")


@_PROPSET
@given(
    data=st.binary(min_size=0, max_size=64_000),
    chunk=st.integers(min_value=1, max_value=16_384),
)
def test_copy_digest_and_bytes_match_source(workdir: Path, data: bytes, chunk: int):
    """Returned digest and destination bytes match the source for any chunking."""
    source = workdir / "src.bin"
    source.write_bytes(data)
    dest = workdir / "nested" / "dst.bin"

    digest = copy_with_hash(source, dest, chunk_size=chunk)

    assert digest == hashlib.sha256(data).hexdigest()
    assert dest.read_bytes() == data


@_PROPSET
@given(
    first=st.binary(min_size=0, max_size=8_192),
    second=st.binary(min_size=0, max_size=8_192),
)
def test_overwrite_leaves_only_new_payload(workdir: Path, first: bytes, second: bytes):
    """Whatever the previous content, the file ends up holding exactly ``second``."""
    path = workdir / "overwrite" / "file.bin"

    save_or_overwrite(path, first)
    save_or_overwrite(path, second)
    assert path.read_bytes() == second

    save_or_overwrite_buffer(path, io.BytesIO(first))
    assert path.read_bytes() == first
