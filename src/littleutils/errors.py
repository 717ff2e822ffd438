"""Error definitions for littleutils.

I/O failures are not wrapped: they surface as the built-in ``OSError``
(``IOError`` is an alias) raised by the failing call, carrying the errno and
filename of the underlying system error.
"""

# ============================================================================
#                               Base error
# ============================================================================


class LittleUtilsError(Exception):
    """Base class for littleutils errors."""


# ============================================================================
#                       Startup / configuration errors
# ============================================================================


class FatalStartupError(LittleUtilsError):
    """Raised when a process-wide directory could not be resolved.

    The home and working directories are assumed to exist in any normal
    execution environment. Failing to resolve them on first access is not
    recoverable; callers should stop instead of retrying.
    """

    def __init__(self, what: str, cause: BaseException | None = None) -> None:
        message = f"failed to get {what}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.what = what
        self.cause = cause


class InvalidSettingError(LittleUtilsError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


# ============================================================================
#                               Diagnostics
# ============================================================================


class CloseWarning(UserWarning):
    """Issued when a file handle fails to close.

    The primary result (or error) of the operation that used the handle is
    left untouched; this is a diagnostic only.

    The same failure is always logged by ``littleutils.fileutils.files`` as
    well, so nothing is lost when the warning filters suppress a repeat.
    """
