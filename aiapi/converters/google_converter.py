"""Google format converter.

Builds generateContent request bodies and normalizes generateContent
replies.
"""

from typing import Any, Dict, Optional

from ..models.google_provider import GoogleProvider
from ..models.provider import JSONValue, ProviderKind, RequestOptions
from .base import Converter, copy_present, first_dict
from .renderers import LabeledTextRenderer


class GoogleConverter(Converter):
    """Converter for the Gemini generateContent format.

    Request::

        {"contents": [{"parts": [{"text": ...}]}],
         "generationConfig"?: {"temperature"?: ..., "maxOutputTokens"?: ...}}

    The model is not part of the body; it goes into the endpoint path.
    Reply text is read from ``candidates[0].content.parts[0].text``.
    """

    kind = ProviderKind.GOOGLE

    def __init__(self):
        super().__init__()
        self.renderer = LabeledTextRenderer(ProviderKind.GOOGLE)

    def get_default_model(self) -> str:
        return GoogleProvider.DEFAULT_MODEL

    def build_body(self, rendered: str, model: str, options: RequestOptions) -> Dict[str, Any]:
        body: Dict[str, Any] = {"contents": [{"parts": [{"text": rendered}]}]}

        generation_config: Dict[str, Any] = {}
        if options.temperature is not None:
            generation_config["temperature"] = options.temperature
        if options.max_tokens is not None:
            generation_config["maxOutputTokens"] = options.max_tokens

        if generation_config:
            body["generationConfig"] = generation_config

        return body

    def extract_content(self, payload: Dict[str, Any]) -> Optional[str]:
        candidate = first_dict(payload.get("candidates"))
        if candidate is None:
            return None
        content = candidate.get("content")
        if not isinstance(content, dict):
            return None
        part = first_dict(content.get("parts"))
        if part is None:
            return None
        text = part.get("text")
        return text if isinstance(text, str) else None

    def extract_metadata(self, payload: Dict[str, Any], model: str) -> Dict[str, JSONValue]:
        # Gemini does not echo the model; report the one requested
        metadata = copy_present(payload, {"model": model}, "usageMetadata", "modelVersion")
        candidate = first_dict(payload.get("candidates"))
        if candidate is not None and candidate.get("finishReason") is not None:
            metadata["finishReason"] = candidate["finishReason"]
        return metadata
