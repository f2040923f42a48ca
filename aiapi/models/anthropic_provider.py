"""Anthropic model provider implementation.

This module implements the ModelProvider interface for the Anthropic
Messages API (Claude models).
"""

import logging
from typing import Dict

from ..version import get_version
from .catalog import AnthropicModel
from .detector import ModelDetector
from .provider import ModelProvider, ProviderKind


class AnthropicProvider(ModelProvider):
    """Provider for Anthropic Claude models.

    Features:
    - Single /messages endpoint, model travels in the body
    - API key in the x-api-key header, plus the API version header and a
      client identifier header
    """

    kind = ProviderKind.ANTHROPIC

    DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
    DEFAULT_MODEL = AnthropicModel.CLAUDE3_OPUS.value
    API_VERSION = "2023-06-01"

    def __init__(self):
        self._logger = logging.getLogger(__name__)
        self._detector = ModelDetector()

    def supports_model(self, model: str) -> bool:
        return self._detector.is_anthropic_model(model)

    def get_default_base_url(self) -> str:
        return self.DEFAULT_BASE_URL

    def get_default_model(self) -> str:
        return self.DEFAULT_MODEL

    def get_endpoint_url(self, base_url: str, model: str) -> str:
        endpoint_url = f"{base_url.rstrip('/')}/messages"
        self._logger.debug(f"Anthropic endpoint for model '{model}': {endpoint_url}")
        return endpoint_url

    def get_headers(self, api_key: str) -> Dict[str, str]:
        """Build Anthropic headers.

        Anthropic does not use bearer auth: the key goes in x-api-key.

        Args:
            api_key: Anthropic API key

        Returns:
            Request headers
        """
        return {
            "x-api-key": api_key,
            "anthropic-version": self.API_VERSION,
            "X-Client-User-Agent": f"aiapi-python/{get_version()}",
            "Content-Type": "application/json",
        }
