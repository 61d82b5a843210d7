"""
Directions Errors

Exception hierarchy shared by the builder, the codec, the transport policy
and the response factory.
"""

from typing import Optional


class DirectionsServiceError(Exception):
    """Base exception for directions errors."""


class DirectionsValidationError(DirectionsServiceError, ValueError):
    """Raised when a request violates a cross-field constraint at build time."""


class DirectionsEncodingError(DirectionsServiceError, ValueError):
    """Raised when a scalar value cannot be written in the wire grammar."""


class DirectionsTransportError(DirectionsServiceError):
    """Raised when network communication fails."""


class DirectionsAPIError(DirectionsTransportError):
    """Raised when the directions API answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DirectionsDecodeError(DirectionsServiceError):
    """Raised when response data cannot be parsed."""
