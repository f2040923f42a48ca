"""Unit tests for models.registry module.

Tests the ProviderRegistry class and global registry functions.
"""

import threading

import pytest

from aiapi.models.anthropic_provider import AnthropicProvider
from aiapi.models.google_provider import GoogleProvider
from aiapi.models.openai_provider import OpenAIProvider
from aiapi.models.provider import ProviderKind
from aiapi.models.registry import ProviderRegistry, get_global_registry


class TestProviderRegistry:
    """Test cases for ProviderRegistry class."""

    @pytest.fixture
    def registry(self):
        """Create a fresh ProviderRegistry instance."""
        return ProviderRegistry()

    @pytest.fixture
    def full_registry(self, registry):
        registry.register(AnthropicProvider())
        registry.register(GoogleProvider())
        registry.register(OpenAIProvider())
        return registry

    def test_register_single_provider(self, registry):
        registry.register(AnthropicProvider())

        assert registry.list_providers() == ["anthropic"]

    def test_register_multiple_providers(self, full_registry):
        assert set(full_registry.list_providers()) == {"anthropic", "google", "openai"}

    def test_register_duplicate_provider_skipped(self, registry):
        registry.register(AnthropicProvider())
        registry.register(AnthropicProvider())  # Duplicate

        assert len(registry.list_providers()) == 1

    @pytest.mark.parametrize(
        "model, expected",
        [
            ("claude-3-opus-20240229", "anthropic"),
            ("claude-2.1", "anthropic"),
            ("gemini-pro", "google"),
            ("gemini-1.5-flash", "google"),
            ("gpt-4", "openai"),
            ("gpt-3.5-turbo-instruct", "openai"),
        ],
    )
    def test_get_provider_by_model(self, full_registry, model, expected):
        provider = full_registry.get_provider(model)
        assert provider is not None
        assert provider.get_provider_name() == expected

    def test_get_provider_unknown_model(self, full_registry):
        assert full_registry.get_provider("llama-3-70b") is None

    def test_get_provider_by_name(self, full_registry):
        provider = full_registry.get_provider_by_name("google")
        assert isinstance(provider, GoogleProvider)

    def test_get_provider_by_name_not_registered(self, registry):
        assert registry.get_provider_by_name(ProviderKind.OPENAI) is None

    def test_get_provider_by_name_unsupported(self, registry):
        with pytest.raises(ValueError, match="Available providers"):
            registry.get_provider_by_name("mistral")

    def test_clear(self, full_registry):
        full_registry.clear()
        assert full_registry.list_providers() == []
        assert full_registry.get_provider("gpt-4") is None

    def test_concurrent_registration(self, registry):
        providers = [AnthropicProvider() for _ in range(10)]
        threads = [threading.Thread(target=registry.register, args=(p,)) for p in providers]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.list_providers() == ["anthropic"]


class TestGlobalRegistry:
    """Test cases for the global registry."""

    def test_global_registry_is_singleton(self):
        assert get_global_registry() is get_global_registry()

    def test_global_registry_has_all_providers(self):
        assert set(get_global_registry().list_providers()) == {"anthropic", "google", "openai"}
