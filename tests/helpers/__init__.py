"""Shared helpers for the littleutils test suite."""
