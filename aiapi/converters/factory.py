"""Converter factory.

This module implements the Factory pattern for creating the converter of a
provider. The three built-in converters are registered at import time.
"""

import logging
import threading
from typing import Dict, Type, Union

from ..models.provider import ProviderKind
from .anthropic_converter import AnthropicConverter
from .base import Converter
from .google_converter import GoogleConverter
from .openai_converter import OpenAIConverter


class ConverterFactory:
    """Factory for creating converters by provider.

    Thread-safe registration and lookup.
    """

    _converters: Dict[ProviderKind, Type[Converter]] = {}
    _lock = threading.Lock()

    @classmethod
    def register_converter(cls, kind: ProviderKind, converter_class: Type[Converter]) -> None:
        """Register (or replace) the converter class of a provider.

        Example:
            ConverterFactory.register_converter(ProviderKind.OPENAI, OpenAIConverter)
        """
        with cls._lock:
            cls._converters[kind] = converter_class
            logging.debug(f"Registered converter: {kind.value} -> {converter_class.__name__}")

    @classmethod
    def get_converter(cls, provider: Union[ProviderKind, str]) -> Converter:
        """Get a converter instance for a provider.

        Args:
            provider: ProviderKind or provider name

        Returns:
            New Converter instance

        Raises:
            ValueError: If the provider is unknown or has no converter
        """
        kind = ProviderKind.parse(provider)
        with cls._lock:
            if kind not in cls._converters:
                raise ValueError(
                    f"No converter found for {kind.value}. "
                    f"Available converters: {', '.join(k.value for k in cls._converters)}"
                )
            converter_class = cls._converters[kind]
        return converter_class()

    @classmethod
    def list_converters(cls) -> Dict[str, str]:
        with cls._lock:
            return {
                kind.value: converter_class.__name__
                for kind, converter_class in cls._converters.items()
            }

    @classmethod
    def has_converter(cls, provider: Union[ProviderKind, str]) -> bool:
        kind = ProviderKind.parse(provider)
        with cls._lock:
            return kind in cls._converters


ConverterFactory.register_converter(ProviderKind.OPENAI, OpenAIConverter)
ConverterFactory.register_converter(ProviderKind.ANTHROPIC, AnthropicConverter)
ConverterFactory.register_converter(ProviderKind.GOOGLE, GoogleConverter)
