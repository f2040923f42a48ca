"""Provider registry for model provider lookup.

This module implements a registry pattern for managing the provider
descriptors, with lookup by provider name or by model identifier.
"""

import logging
import threading
from typing import Dict, List, Optional, Union

from .provider import ModelProvider, ProviderKind


class ProviderRegistry:
    """Registry for managing model providers.

    Features:
    - Thread-safe provider registration and lookup
    - Registration order decides which provider claims a model first
    """

    def __init__(self):
        self._providers: List[ModelProvider] = []
        self._provider_map: Dict[ProviderKind, ModelProvider] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def register(self, provider: ModelProvider) -> None:
        """Register a model provider.

        A second provider of an already registered kind is ignored.

        Args:
            provider: ModelProvider instance to register
        """
        with self._lock:
            if provider.kind in self._provider_map:
                self._logger.warning(
                    f"Provider '{provider.get_provider_name()}' already registered, skipping"
                )
                return

            self._providers.append(provider)
            self._provider_map[provider.kind] = provider
            self._logger.debug(f"Registered provider: {provider.get_provider_name()}")

    def get_provider(self, model: str) -> Optional[ModelProvider]:
        """Get the first registered provider that supports the given model.

        Args:
            model: Model name to find provider for

        Returns:
            ModelProvider instance or None if no provider found
        """
        with self._lock:
            for provider in self._providers:
                if provider.supports_model(model):
                    self._logger.debug(
                        f"Found provider '{provider.get_provider_name()}' for model '{model}'"
                    )
                    return provider

            self._logger.warning(f"No provider found for model '{model}'")
            return None

    def get_provider_by_name(self, name: Union[ProviderKind, str]) -> Optional[ModelProvider]:
        """Get a provider by its name.

        Args:
            name: ProviderKind or provider name (e.g., 'openai')

        Returns:
            ModelProvider instance or None if not registered

        Raises:
            ValueError: If name is not a supported provider
        """
        kind = ProviderKind.parse(name)
        with self._lock:
            return self._provider_map.get(kind)

    def list_providers(self) -> List[str]:
        with self._lock:
            return [p.get_provider_name() for p in self._providers]

    def clear(self) -> None:
        """Clear all registered providers."""
        with self._lock:
            self._providers.clear()
            self._provider_map.clear()


_global_registry: Optional[ProviderRegistry] = None
_registry_lock = threading.Lock()


def get_global_registry() -> ProviderRegistry:
    """Get or create the global provider registry.

    The global registry is populated with the OpenAI, Anthropic and Google
    providers on first use.

    Returns:
        Global ProviderRegistry instance
    """
    global _global_registry

    if _global_registry is None:
        with _registry_lock:
            if _global_registry is None:
                from .anthropic_provider import AnthropicProvider
                from .google_provider import GoogleProvider
                from .openai_provider import OpenAIProvider

                registry = ProviderRegistry()
                registry.register(AnthropicProvider())
                registry.register(GoogleProvider())
                registry.register(OpenAIProvider())
                _global_registry = registry

    return _global_registry
