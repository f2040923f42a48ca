"""Model provider abstraction module.

This module provides the shared request/response values, prompt strategies
and templates, and one provider descriptor per supported service
(OpenAI, Anthropic, Google).

Usage:
    from aiapi.models import Prompt, PromptStrategy, RequestOptions, get_global_registry

    prompt = Prompt("Explain closures", PromptStrategy.CHAIN_THINKING)
    provider = get_global_registry().get_provider_by_name("anthropic")
    endpoint = provider.get_endpoint_url(provider.get_default_base_url(), "claude-3-haiku-20240307")
"""

from .anthropic_provider import AnthropicProvider
from .catalog import (
    AnthropicModel,
    GoogleModel,
    OpenAIModel,
    available_models,
    is_valid_model,
)
from .detector import ModelDetector, detect_provider
from .google_provider import GoogleProvider
from .openai_provider import OpenAIProvider
from .prompt import BUILTIN_TEMPLATES, Prompt, PromptTemplate, get_template, substitute_variables
from .provider import AIResponse, JSONValue, ModelProvider, ProviderKind, RequestOptions
from .registry import ProviderRegistry, get_global_registry
from .strategy import CustomStrategy, PromptStrategy, Strategy, resolve_strategy

__all__ = [
    # Values
    "AIResponse",
    "JSONValue",
    "Prompt",
    "PromptTemplate",
    "RequestOptions",
    # Strategies and templates
    "BUILTIN_TEMPLATES",
    "CustomStrategy",
    "PromptStrategy",
    "Strategy",
    "get_template",
    "resolve_strategy",
    "substitute_variables",
    # Catalog and detection
    "AnthropicModel",
    "GoogleModel",
    "OpenAIModel",
    "ModelDetector",
    "available_models",
    "detect_provider",
    "is_valid_model",
    # Providers
    "ModelProvider",
    "ProviderKind",
    "AnthropicProvider",
    "GoogleProvider",
    "OpenAIProvider",
    "ProviderRegistry",
    "get_global_registry",
]
