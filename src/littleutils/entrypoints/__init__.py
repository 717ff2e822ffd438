"""Entrypoints (inbound adapters) for littleutils.

Expose the library to the outside world. Parse and validate inputs, call the
library functions, and present results.
"""
