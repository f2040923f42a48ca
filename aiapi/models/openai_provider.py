"""OpenAI model provider implementation.

This module implements the ModelProvider interface for the OpenAI Chat
Completions API.
"""

import logging
from typing import Dict

from .catalog import OpenAIModel
from .detector import ModelDetector
from .provider import ModelProvider, ProviderKind


class OpenAIProvider(ModelProvider):
    """Provider for OpenAI chat models.

    Features:
    - Single /chat/completions endpoint, model travels in the body
    - Bearer token authentication
    """

    kind = ProviderKind.OPENAI

    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = OpenAIModel.GPT4.value

    def __init__(self):
        self._logger = logging.getLogger(__name__)
        self._detector = ModelDetector()

    def supports_model(self, model: str) -> bool:
        return self._detector.is_openai_model(model)

    def get_default_base_url(self) -> str:
        return self.DEFAULT_BASE_URL

    def get_default_model(self) -> str:
        return self.DEFAULT_MODEL

    def get_endpoint_url(self, base_url: str, model: str) -> str:
        """Generate endpoint URL for OpenAI.

        The endpoint does not depend on the model.

        Args:
            base_url: Base URL of the API
            model: Model name (not used for URL)

        Returns:
            Chat completions URL
        """
        endpoint_url = f"{base_url.rstrip('/')}/chat/completions"
        self._logger.debug(f"OpenAI endpoint for model '{model}': {endpoint_url}")
        return endpoint_url

    def get_headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
