"""Error types raised by gh-download.

Every error carries a plain message that is shown to the user as
``Error: <message>``. Callers add context by re-raising the same error
class with a prefix, see :meth:`GhDownloadError.wrap`.
"""


class GhDownloadError(Exception):
    """Base class for all gh-download errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def wrap(cls, context: str, error: Exception) -> "GhDownloadError":
        """Build an error of this class that prefixes ``error`` with ``context``."""
        return cls(f"{context}: {error}")


class ConfigError(GhDownloadError):
    """Missing or invalid user input."""

    pass


class ApiError(GhDownloadError):
    """Transport failure or non-success response from the GitHub API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def wrap(cls, context: str, error: Exception) -> "ApiError":
        return cls(f"{context}: {error}", status_code=getattr(error, "status_code", None))


class InvalidPatternError(GhDownloadError):
    """Asset pattern is not a well-formed shell glob."""

    pass


class NoMatchError(GhDownloadError):
    """No release asset matched the pattern in download mode."""

    pass


class DownloadError(GhDownloadError):
    """Local failure while writing a download to disk."""

    pass
