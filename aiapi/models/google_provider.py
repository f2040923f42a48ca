"""Google model provider implementation.

This module implements the ModelProvider interface for the Google
Generative Language API (Gemini models).
"""

import logging
from typing import Dict

from .catalog import GoogleModel
from .detector import ModelDetector
from .provider import ModelProvider, ProviderKind


class GoogleProvider(ModelProvider):
    """Provider for Google Gemini models.

    Features:
    - Model is part of the endpoint path (/models/{model}:generateContent)
    - API key passed as the ``key`` query parameter
    """

    kind = ProviderKind.GOOGLE

    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1"
    DEFAULT_MODEL = GoogleModel.GEMINI_PRO.value

    def __init__(self):
        self._logger = logging.getLogger(__name__)
        self._detector = ModelDetector()

    def supports_model(self, model: str) -> bool:
        return self._detector.is_google_model(model)

    def get_default_base_url(self) -> str:
        return self.DEFAULT_BASE_URL

    def get_default_model(self) -> str:
        return self.DEFAULT_MODEL

    def get_endpoint_url(self, base_url: str, model: str) -> str:
        """Generate endpoint URL for a Gemini model.

        Accepts both "gemini-pro" and "models/gemini-pro" forms.

        Args:
            base_url: Base URL of the API
            model: Model name

        Returns:
            generateContent URL for the model
        """
        model_path = model[len("models/"):] if model.startswith("models/") else model
        endpoint_url = f"{base_url.rstrip('/')}/models/{model_path}:generateContent"
        self._logger.debug(f"Google endpoint for model '{model}': {endpoint_url}")
        return endpoint_url

    def get_headers(self, api_key: str) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def get_query_params(self, api_key: str) -> Dict[str, str]:
        return {"key": api_key}
