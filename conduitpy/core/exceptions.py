"""
Custom exceptions for conduitpy.

This module defines the exception classes raised while composing
and dispatching requests.
"""
from typing import Optional


class ConduitException(Exception):
    """Base exception for all conduitpy errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidUrlError(ConduitException):
    """Exception raised when the effective origin is not an absolute URL."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            url: The offending origin
            error_code: Numeric error code (if available)
        """
        self.url = url
        super().__init__(message, error_code)


class TransportNotBoundError(ConduitException):
    """Exception raised when dispatching a request without a transport."""
    pass
