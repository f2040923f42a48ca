"""HTTP request/response logging utilities for transport layer debugging."""

import json
from logging import Logger
from typing import Any, Dict, Mapping, Optional

REDACTED = "***"

# Compared case-insensitively
SENSITIVE_HEADERS = {"authorization", "x-api-key"}
SENSITIVE_PARAMS = {"key"}


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Return a copy of headers with credential values masked."""
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def redact_params(params: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Return a copy of query parameters with credential values masked."""
    if not params:
        return {}
    return {
        name: REDACTED if name.lower() in SENSITIVE_PARAMS else value
        for name, value in params.items()
    }


def _payload_for_log(payload: Any) -> Any:
    if isinstance(payload, (bytes, bytearray)):
        text = payload.decode("utf-8", errors="replace")
        try:
            return json.loads(text)
        except ValueError:
            return text
    if isinstance(payload, (dict, list)):
        return payload
    return str(payload)


def dump_http_request(
    logger: Logger,
    trace_id: str,
    method: str,
    url: str,
    headers: Mapping[str, str],
    payload: Optional[Any] = None,
    params: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Dump HTTP request details to logger.

    Credentials in headers and query parameters are masked.

    Args:
        logger: Logger instance to use for logging
        trace_id: Unique trace identifier for request/response correlation
        method: HTTP method (GET, POST, etc.)
        url: Request URL without query string
        headers: Request headers dictionary
        payload: Request payload (bytes are decoded, dict/list kept as is)
        params: Query parameters
    """
    log_data = {
        "trace_id": trace_id,
        "type": "request",
        "method": method.upper(),
        "url": url,
        "params": redact_params(params),
        "headers": redact_headers(headers),
    }

    if payload is not None:
        log_data["payload"] = _payload_for_log(payload)

    try:
        log_message = json.dumps(log_data, indent=2, ensure_ascii=False)
        logger.info(f"HTTP_REQUEST[{trace_id}]:\n{log_message}")
    except (TypeError, ValueError) as e:
        logger.info(f"HTTP_REQUEST[{trace_id}]: {log_data} (JSON serialization failed: {e})")


def dump_http_response(
    logger: Logger,
    trace_id: str,
    status_code: int,
    headers: Mapping[str, str],
    payload: Optional[Any] = None,
    url: Optional[str] = None,
) -> None:
    """
    Dump HTTP response details to logger.

    Args:
        logger: Logger instance to use for logging
        trace_id: Unique trace identifier for request/response correlation
        status_code: HTTP status code
        headers: Response headers dictionary
        payload: Response payload (bytes are decoded, dict/list kept as is)
        url: Optional URL for additional context
    """
    log_data = {
        "trace_id": trace_id,
        "type": "response",
        "status_code": status_code,
        "headers": dict(headers),
    }

    if url:
        log_data["url"] = url

    if payload is not None:
        log_data["payload"] = _payload_for_log(payload)

    try:
        log_message = json.dumps(log_data, indent=2, ensure_ascii=False)
        logger.info(f"HTTP_RESPONSE[{trace_id}]:\n{log_message}")
    except (TypeError, ValueError) as e:
        logger.info(f"HTTP_RESPONSE[{trace_id}]: {log_data} (JSON serialization failed: {e})")
