"""Command-line interface for littleutils."""
