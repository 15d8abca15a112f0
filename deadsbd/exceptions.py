"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class DeadSbdError(Exception):
    """Base exception for all application-specific errors."""


class NetworkError(DeadSbdError):
    """Raised when a page or media file cannot be fetched from the archive."""


class NotFoundError(DeadSbdError):
    """Raised when a show name matches no item in the archive search."""


class DirectoryError(DeadSbdError):
    """Raised when the output directory for a show cannot be created."""


class TrackError(DeadSbdError):
    """
    Raised when a single track cannot be fetched or written.
    Never aborts the show it belongs to.
    """


class ConfigurationError(DeadSbdError):
    """Raised for issues related to configuration loading or validation."""
