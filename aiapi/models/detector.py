"""Model detection and provider identification.

Guesses which provider serves a model identifier: catalog membership
first, then name keywords.
"""

import logging
from typing import Optional

from .catalog import MODEL_CATALOG
from .provider import ProviderKind


class ModelDetector:
    """Detects which provider a model identifier belongs to."""

    OPENAI_KEYWORDS = ["gpt-", "gpt4", "gpt3", "davinci", "o1-", "o3", "o4-mini"]
    ANTHROPIC_KEYWORDS = ["claude", "anthropic", "sonnet", "opus", "haiku"]
    GOOGLE_KEYWORDS = ["gemini", "palm", "bison", "gemma"]

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def is_openai_model(self, model: str) -> bool:
        return self._matches(model, ProviderKind.OPENAI, self.OPENAI_KEYWORDS)

    def is_anthropic_model(self, model: str) -> bool:
        """Check if model is a Claude model.

        Supports catalog identifiers (claude-3-opus-20240229, ...) and any
        name containing a Claude family keyword (sonnet, opus, haiku).
        """
        return self._matches(model, ProviderKind.ANTHROPIC, self.ANTHROPIC_KEYWORDS)

    def is_google_model(self, model: str) -> bool:
        return self._matches(model, ProviderKind.GOOGLE, self.GOOGLE_KEYWORDS)

    def detect_provider(self, model: str) -> Optional[ProviderKind]:
        """Detect which provider serves the given model.

        Args:
            model: Model identifier

        Returns:
            ProviderKind, or None when nothing matches
        """
        for kind, catalog in MODEL_CATALOG.items():
            if model in [entry.value for entry in catalog]:
                return kind

        if self.is_anthropic_model(model):
            return ProviderKind.ANTHROPIC
        if self.is_google_model(model):
            return ProviderKind.GOOGLE
        if self.is_openai_model(model):
            return ProviderKind.OPENAI

        self._logger.debug(f"No provider detected for model '{model}'")
        return None

    def _matches(self, model: str, kind: ProviderKind, keywords) -> bool:
        if model in [entry.value for entry in MODEL_CATALOG[kind]]:
            return True
        model_lower = model.lower()
        return any(keyword in model_lower for keyword in keywords)


_default_detector: Optional[ModelDetector] = None


def get_default_detector() -> ModelDetector:
    """Get or create default detector instance."""
    global _default_detector
    if _default_detector is None:
        _default_detector = ModelDetector()
    return _default_detector


def detect_provider(model: str) -> Optional[ProviderKind]:
    """Module-level shortcut for ModelDetector.detect_provider."""
    return get_default_detector().detect_provider(model)
