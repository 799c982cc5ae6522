"""Errors raised by studio services."""


class StudioError(Exception):
    """Base error for recoverable studio operations."""


class ValidationError(StudioError):
    """Raised when user input is missing or inconsistent."""


class NotFoundError(StudioError):
    """Raised when a referenced record does not exist."""
