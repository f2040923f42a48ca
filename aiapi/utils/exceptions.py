"""
Custom exception classes for the aiapi client library.

Every failure a ProviderClient can report derives from AIClientError, so
callers can catch one type or match on the specific kind.
"""

from typing import Optional


class AIClientError(Exception):
    """Base exception for aiapi."""

    pass


class NetworkError(AIClientError):
    """Raised when the transport fails before a reply is received.

    Covers connection errors, DNS failures and timeouts. The underlying
    transport exception is kept on ``cause``.
    """

    def __init__(self, cause: BaseException):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class InvalidResponseError(AIClientError):
    """Raised when a reply body is missing or matches neither the success
    nor the error shape of the provider."""

    pass


class APIError(AIClientError):
    """Raised when the provider explicitly reported a failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type


class InvalidAPIKeyError(AIClientError):
    """Raised when a client is created without a usable API key.

    Authentication failures reported by a provider arrive as APIError.
    """

    pass


class RequestEncodingError(AIClientError):
    """Raised when a request body cannot be JSON encoded.

    Always raised before any network call is attempted.
    """

    pass


class ResponseDecodingError(AIClientError):
    """Raised when a reply body is present but is not valid JSON."""

    pass


class ConfigValidationError(AIClientError):
    """Raised when configuration validation fails.

    This includes unreadable files, invalid JSON, unknown providers
    and missing credentials.
    """

    pass
