"""Integration tests.

Purpose
- Exercise the file helpers against the real filesystem: directory creation,
  create/truncate semantics, permissions and error propagation.
"""
