"""Custom exceptions for pathfind.

Every error raised by the package derives from PathfindError so callers
driving a walk can catch the whole family in one place.
"""

from __future__ import annotations


class PathfindError(Exception):
    """Base exception for all pathfind errors."""

    pass


class ConfigError(PathfindError):
    """Error in configuration.

    Raised when configuration is invalid or missing required fields.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message = f"Configuration error in '{field}': {message}"
        super().__init__(full_message)


class OutputFileError(PathfindError):
    """An output file could not be opened.

    Raised when the target of -fprint/-fprint0 cannot be created or truncated.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        message = (
            f"Could not open output file '{path}': {reason}\n"
            "Check that the parent directory exists and is writable."
        )
        super().__init__(message)


class OutputFlushError(PathfindError):
    """Flushing an output destination failed.

    This is never absorbed by a matcher: once a destination refuses a flush
    the bytes already handed to it cannot be trusted, so the walk must stop.
    """

    def __init__(self, destination: str, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(f"Failed to flush output to {destination}: {reason}")


class UnknownActionError(PathfindError):
    """Unsupported print action requested."""

    def __init__(self, action: str, supported: list[str]):
        self.action = action
        self.supported = supported
        message = (
            f"Unknown action '-{action}'.\n"
            f"Supported actions: {', '.join('-' + name for name in sorted(supported))}"
        )
        super().__init__(message)
