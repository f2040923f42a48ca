"""Provider client.

Composes a provider descriptor, its converter and the HTTP transport into
one request/response cycle.
"""

import asyncio
import json
import threading
import uuid
from logging import Logger
from typing import Callable, Optional, Union

from .converters.base import Converter
from .converters.factory import ConverterFactory
from .models.prompt import Prompt
from .models.provider import AIResponse, ModelProvider, ProviderKind, RequestOptions
from .models.registry import get_global_registry
from .models.strategy import strategy_name
from .transport import HttpTransport
from .utils.exceptions import InvalidAPIKeyError, RequestEncodingError
from .utils.logging_utils import get_client_logger

logger: Logger = get_client_logger(__name__)

# Receives (response, None) on success and (None, error) on failure
Completion = Callable[[Optional[AIResponse], Optional[BaseException]], None]


class ProviderClient:
    """Client for one text-generation provider.

    The client holds its credential, base URL, default model and transport;
    all are fixed at construction, so one instance may serve concurrent
    sends without locking.

    Every send performs exactly one HTTP call: no retries, no caching.
    """

    def __init__(
        self,
        provider: Union[ProviderKind, str, ModelProvider],
        api_key: str,
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
        transport: Optional[HttpTransport] = None,
        converter: Optional[Converter] = None,
    ) -> None:
        """Initialize a client.

        Args:
            provider: ProviderKind, provider name or provider descriptor
            api_key: Provider API key
            base_url: API base URL; the provider's public URL when None
            default_model: Model used when RequestOptions name none
            transport: HTTP transport; a default HttpTransport when None
            converter: Request/response converter; the registered one when None

        Raises:
            InvalidAPIKeyError: If api_key is empty
            ValueError: If the provider is unknown
        """
        if isinstance(provider, ModelProvider):
            self._provider = provider
        else:
            self._provider = get_global_registry().get_provider_by_name(provider)
            if self._provider is None:
                raise ValueError(f"Provider '{provider}' is not registered")

        if not api_key or not api_key.strip():
            raise InvalidAPIKeyError(
                f"An API key is required for provider '{self._provider.get_provider_name()}'"
            )

        self._api_key = api_key
        self._base_url = base_url or self._provider.get_default_base_url()
        self._default_model = default_model
        self._transport = transport or HttpTransport()
        self._converter = converter or ConverterFactory.get_converter(self._provider.kind)

    @property
    def kind(self) -> ProviderKind:
        return self._provider.kind

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"ProviderClient(provider={self.kind.value!r}, base_url={self._base_url!r})"

    async def send(self, prompt: Prompt, options: Optional[RequestOptions] = None) -> AIResponse:
        """Send a prompt and wait for the normalized reply.

        Args:
            prompt: Prompt to send
            options: Request options

        Returns:
            AIResponse with the generated text and provider metadata

        Raises:
            RequestEncodingError: Body could not be encoded (no call is made)
            NetworkError: The transport failed
            APIError: The provider reported an error
            InvalidResponseError: Reply missing or unrecognized
            ResponseDecodingError: Reply is not valid JSON
        """
        wire = self._converter.convert_request(prompt, options, self._default_model)
        data = self._encode(wire.body)

        url = self._provider.get_endpoint_url(self._base_url, wire.model)
        headers = self._provider.get_headers(self._api_key)
        params = self._provider.get_query_params(self._api_key)
        trace_id = uuid.uuid4().hex

        logger.info(
            f"Sending prompt [{trace_id}] to {self.kind.value} "
            f"(model={wire.model}, strategy={strategy_name(prompt.strategy)})"
        )

        reply = await asyncio.to_thread(
            self._transport.post, url, headers, data, params, trace_id
        )

        try:
            response = self._converter.normalize_response(reply, wire.model)
        except Exception as err:
            logger.warning(f"Prompt [{trace_id}] to {self.kind.value} failed: {type(err).__name__}: {err}")
            raise

        logger.info(f"Prompt [{trace_id}] to {self.kind.value} succeeded")
        return response

    def send_prompt(
        self,
        prompt: Prompt,
        options: Optional[RequestOptions],
        completion: Completion,
    ) -> threading.Thread:
        """Send a prompt and report the outcome through a callback.

        Runs send() on a worker thread; completion is called exactly once,
        from that thread, with (response, None) or (None, error).

        Args:
            prompt: Prompt to send
            options: Request options
            completion: Outcome callback

        Returns:
            The started worker thread (join it to wait for completion)
        """
        def _run() -> None:
            try:
                response = asyncio.run(self.send(prompt, options))
            except Exception as err:
                completion(None, err)
                return
            completion(response, None)

        worker = threading.Thread(
            target=_run, name=f"aiapi-{self.kind.value}-send", daemon=True
        )
        worker.start()
        return worker

    def _encode(self, body) -> bytes:
        try:
            return json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as err:
            logger.error(f"Could not encode {self.kind.value} request body: {err}")
            raise RequestEncodingError(f"Request body is not JSON serializable: {err}") from err
