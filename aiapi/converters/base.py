"""Base interfaces for format converters.

This module defines the abstract renderer and converter classes. A
converter owns the full translation for one provider: it renders the
strategy, builds the request body, and normalizes the reply.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models.prompt import Prompt
from ..models.provider import AIResponse, JSONValue, ProviderKind, RequestOptions
from ..models.strategy import Strategy
from ..transport import TransportResponse
from ..utils.exceptions import (
    APIError,
    InvalidResponseError,
    NetworkError,
    ResponseDecodingError,
)


@dataclass(frozen=True)
class WireRequest:
    """A request body ready for encoding.

    Attributes:
        body: Provider-specific request body
        model: Resolved model identifier; the body carries it for
            providers that take the model in the body, the endpoint
            carries it otherwise
    """
    body: Dict[str, Any]
    model: str


class StrategyRenderer(ABC):
    """Turns (content, strategy) into a provider-specific fragment."""

    @abstractmethod
    def render(self, content: str, strategy: Optional[Strategy]) -> Any:
        """Render content under a strategy.

        Args:
            content: Caller content, kept unmodified in the output
            strategy: Strategy to apply; None behaves as STANDARD

        Returns:
            A message list or a single string, depending on the provider
        """
        pass


class Converter(ABC):
    """Abstract base class for provider request/response converters.

    Subclasses implement the provider-specific parts: body layout
    (build_body) and success shape (extract_content/extract_metadata).
    Error detection and the normalization order are shared.
    """

    kind: ProviderKind
    renderer: StrategyRenderer

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def get_format_name(self) -> str:
        """Get the provider format name (e.g., 'openai')."""
        return self.kind.value

    def render(self, prompt: Prompt) -> Any:
        return self.renderer.render(prompt.content, prompt.strategy)

    def convert_request(
        self,
        prompt: Prompt,
        options: Optional[RequestOptions] = None,
        default_model: Optional[str] = None,
    ) -> WireRequest:
        """Build the full request for a prompt.

        Additional parameters are applied last and override any field set
        by the standard options.

        Args:
            prompt: Prompt to send
            options: Request options; defaults when None
            default_model: Model used when options name none

        Returns:
            WireRequest with body and resolved model
        """
        options = options or RequestOptions()
        model = options.model or default_model or self.get_default_model()

        body = self.build_body(self.render(prompt), model, options)
        for key, value in options.additional_parameters.items():
            body[key] = value

        return WireRequest(body=body, model=model)

    @abstractmethod
    def get_default_model(self) -> str:
        pass

    @abstractmethod
    def build_body(
        self, rendered: Any, model: str, options: RequestOptions
    ) -> Dict[str, Any]:
        """Lay out the rendered fragment and standard options.

        Optional options that are unset must not appear in the body.
        """
        pass

    def normalize_response(self, reply: TransportResponse, model: str) -> AIResponse:
        """Turn a transport outcome into an AIResponse or raise.

        Order: transport failure, missing body, success shape, error
        shape, unrecognized shape.

        Args:
            reply: Transport outcome
            model: Model the request was sent for

        Returns:
            Normalized response

        Raises:
            NetworkError: The transport failed
            InvalidResponseError: No body, or no known shape
            ResponseDecodingError: Body is not valid JSON
            APIError: Provider reported an error
        """
        if reply.error is not None:
            raise NetworkError(reply.error) from reply.error

        if not reply.body:
            raise InvalidResponseError(
                f"Empty response body from {self.get_format_name()} (status {reply.status_code})"
            )

        try:
            payload = json.loads(reply.body)
        except ValueError as err:
            self._logger.error(
                f"Could not decode {self.get_format_name()} response (status {reply.status_code}): {err}"
            )
            raise ResponseDecodingError(
                f"Invalid JSON in {self.get_format_name()} response: {err}"
            ) from err

        return self.convert_response(payload, model, reply.status_code)

    def convert_response(
        self, payload: Any, model: str, status_code: Optional[int] = None
    ) -> AIResponse:
        """Normalize a decoded reply body.

        A body without the success fields is always checked against the
        error shape before it is declared invalid.

        Args:
            payload: Decoded JSON body
            model: Model the request was sent for
            status_code: HTTP status of the reply, if known

        Returns:
            Normalized response

        Raises:
            APIError: Body has the error shape
            InvalidResponseError: Body has neither shape
        """
        if isinstance(payload, dict):
            content = self.extract_content(payload)
            if content is not None:
                return AIResponse(content=content, metadata=self.extract_metadata(payload, model))

            error = payload.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                error_type = error.get("type") or error.get("status") or error.get("code")
                raise APIError(
                    error["message"],
                    status_code=status_code,
                    error_type=str(error_type) if error_type is not None else None,
                )

        self._logger.warning(
            f"Unrecognized {self.get_format_name()} response shape (status {status_code})"
        )
        raise InvalidResponseError(
            f"Unrecognized response from {self.get_format_name()} (status {status_code})"
        )

    @abstractmethod
    def extract_content(self, payload: Dict[str, Any]) -> Optional[str]:
        """Return the generated text, or None if the success shape is absent."""
        pass

    @abstractmethod
    def extract_metadata(self, payload: Dict[str, Any], model: str) -> Dict[str, JSONValue]:
        """Copy documented diagnostic fields present in the payload."""
        pass


def first_dict(value: Any) -> Optional[Dict[str, Any]]:
    """Return the first element of a list if it is a dict, else None."""
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return None


def copy_present(
    payload: Dict[str, Any], metadata: Dict[str, JSONValue], *keys: str
) -> Dict[str, JSONValue]:
    """Copy the given keys from payload into metadata when present."""
    for key in keys:
        if key in payload and payload[key] is not None:
            metadata[key] = payload[key]
    return metadata
