"""
Utility functions package for aiapi.

This package handles:
- Logging configuration and setup
- HTTP request/response dumps with credential redaction
- The exception hierarchy shared by all clients
"""

from .exceptions import (
    AIClientError,
    APIError,
    ConfigValidationError,
    InvalidAPIKeyError,
    InvalidResponseError,
    NetworkError,
    RequestEncodingError,
    ResponseDecodingError,
)
from .logging_utils import init_logging, get_client_logger, get_transport_logger

__all__ = [
    'AIClientError',
    'APIError',
    'ConfigValidationError',
    'InvalidAPIKeyError',
    'InvalidResponseError',
    'NetworkError',
    'RequestEncodingError',
    'ResponseDecodingError',
    'init_logging',
    'get_client_logger',
    'get_transport_logger',
]
