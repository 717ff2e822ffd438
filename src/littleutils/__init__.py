"""littleutils

Small, dependency-light file helpers: a single-pass copy that returns the
SHA-256 digest of the copied bytes, save/overwrite writers that create missing
parent directories, a path sanitizer, cached home/working directory lookup and
scoped lock helpers.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
