"""Anthropic format converter.

Builds Messages API request bodies and normalizes Messages API replies.
"""

from typing import Any, Dict, Optional

from ..models.anthropic_provider import AnthropicProvider
from ..models.provider import JSONValue, ProviderKind, RequestOptions
from .base import Converter, copy_present, first_dict
from .renderers import InstructionBlockRenderer


class AnthropicConverter(Converter):
    """Converter for the Anthropic Messages format.

    The rendered prompt (instructions block + content) becomes the content
    of a single user message. Reply text is read from ``content[0].text``.
    """

    kind = ProviderKind.ANTHROPIC

    def __init__(self):
        super().__init__()
        self.renderer = InstructionBlockRenderer(ProviderKind.ANTHROPIC)

    def get_default_model(self) -> str:
        return AnthropicProvider.DEFAULT_MODEL

    def build_body(self, rendered: str, model: str, options: RequestOptions) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "messages": [{"role": "user", "content": rendered}],
            "model": model,
        }

        # Required by the Messages API, but only sent when the caller set it
        if options.max_tokens is not None:
            body["max_tokens"] = options.max_tokens
        if options.temperature is not None:
            body["temperature"] = options.temperature

        return body

    def extract_content(self, payload: Dict[str, Any]) -> Optional[str]:
        block = first_dict(payload.get("content"))
        if block is None:
            return None
        text = block.get("text")
        return text if isinstance(text, str) else None

    def extract_metadata(self, payload: Dict[str, Any], model: str) -> Dict[str, JSONValue]:
        return copy_present(payload, {}, "usage", "model", "id", "stop_reason")
