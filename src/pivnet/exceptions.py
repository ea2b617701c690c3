"""
Exception classes for pivnet-client.
"""

from typing import Any, Dict, List, Optional


class PivnetError(Exception):
    """Base exception class for Pivotal Network API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class AuthenticationError(PivnetError):
    """Raised when authentication fails."""

    pass


class PermissionError(PivnetError):
    """Raised when insufficient permissions for operation."""

    pass


class NotFoundError(PivnetError):
    """Raised when requested resource is not found."""

    pass


class RateLimitError(PivnetError):
    """Raised when rate limits are exceeded."""

    pass


class EULANotAcceptedError(PivnetError):
    """Raised when the EULA for a release has not been accepted (HTTP 451)."""

    pass


class ServerError(PivnetError):
    """Raised when server returns 5xx error."""

    pass


class ValidationError(PivnetError):
    """Raised when request validation fails."""

    pass


STATUS_ERRORS: Dict[int, type] = {
    401: AuthenticationError,
    403: PermissionError,
    404: NotFoundError,
    429: RateLimitError,
    451: EULANotAcceptedError,
}


def error_for_status(
    status_code: int, message: str, errors: Optional[List[Any]] = None
) -> PivnetError:
    """Build the exception matching an HTTP status code."""
    if status_code in STATUS_ERRORS:
        error_class = STATUS_ERRORS[status_code]
    elif status_code >= 500:
        error_class = ServerError
    else:
        error_class = PivnetError
    return error_class(message, status_code=status_code, errors=errors)
