"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Use fakes at boundaries (streams, handles, directory lookups).
- Filesystem access only under pytest's temporary directories.
- Keep tests small, fast, and deterministic.
"""
