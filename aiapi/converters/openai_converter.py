"""OpenAI format converter.

Builds Chat Completions request bodies and normalizes Chat Completions
replies.
"""

from typing import Any, Dict, List, Optional

from ..models.openai_provider import OpenAIProvider
from ..models.provider import JSONValue, ProviderKind, RequestOptions
from .base import Converter, copy_present, first_dict
from .renderers import MessageArrayRenderer


class OpenAIConverter(Converter):
    """Converter for the OpenAI Chat Completions format.

    Request::

        {"messages": [...], "model": ..., "max_tokens"?: ..., "temperature"?: ...}

    Reply text is read from ``choices[0].message.content``.
    """

    kind = ProviderKind.OPENAI

    def __init__(self):
        super().__init__()
        self.renderer = MessageArrayRenderer(ProviderKind.OPENAI)

    def get_default_model(self) -> str:
        return OpenAIProvider.DEFAULT_MODEL

    def build_body(
        self, rendered: List[Dict[str, str]], model: str, options: RequestOptions
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"messages": rendered, "model": model}

        if options.max_tokens is not None:
            body["max_tokens"] = options.max_tokens
        if options.temperature is not None:
            body["temperature"] = options.temperature

        return body

    def extract_content(self, payload: Dict[str, Any]) -> Optional[str]:
        choice = first_dict(payload.get("choices"))
        if choice is None:
            return None
        message = choice.get("message")
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else None

    def extract_metadata(self, payload: Dict[str, Any], model: str) -> Dict[str, JSONValue]:
        metadata = copy_present(payload, {}, "usage", "model", "id")
        choice = first_dict(payload.get("choices"))
        if choice is not None and choice.get("finish_reason") is not None:
            metadata["finish_reason"] = choice["finish_reason"]
        return metadata
