"""HTTP transport for provider calls.

A thin wrapper over ``requests`` that performs exactly one POST per call and
never raises for transport failures: the failure is returned on the
TransportResponse so the response normalizer can classify it.
"""

import uuid
from dataclasses import dataclass, field
from logging import Logger
from typing import Dict, Mapping, Optional

import requests

from .utils.http_logging import dump_http_request, dump_http_response
from .utils.logging_utils import get_transport_logger

logger: Logger = get_transport_logger(__name__)

DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of one HTTP exchange.

    Attributes:
        status_code: HTTP status, None when no reply was received
        headers: Response headers
        body: Raw response body, None or empty when nothing was sent back
        error: Transport exception (connection error, timeout, ...)
    """
    status_code: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class HttpTransport:
    """Posts encoded JSON bodies with ``requests``.

    No retries, no connection state beyond an optional caller-supplied
    session.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds
            session: Session to send through; module-level requests.post when None
        """
        self.timeout = timeout
        self._session = session

    def post(
        self,
        url: str,
        headers: Mapping[str, str],
        data: bytes,
        params: Optional[Mapping[str, str]] = None,
        trace_id: Optional[str] = None,
    ) -> TransportResponse:
        """Send one POST request.

        Args:
            url: Endpoint URL without query string
            headers: Request headers
            data: Encoded request body
            params: Query parameters
            trace_id: Identifier correlating request and response dumps

        Returns:
            TransportResponse with either the reply or the transport error
        """
        trace_id = trace_id or uuid.uuid4().hex
        dump_http_request(logger, trace_id, "POST", url, headers, data, params)

        sender = self._session.post if self._session is not None else requests.post
        try:
            response = sender(
                url,
                headers=dict(headers),
                data=data,
                params=dict(params) if params else None,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as err:
            logger.error(f"HTTP_ERROR[{trace_id}]: {type(err).__name__}: {err}")
            return TransportResponse(error=err)

        dump_http_response(
            logger, trace_id, response.status_code, response.headers, response.content, url
        )
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
