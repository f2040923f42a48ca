"""Format conversion module.

This module translates provider-agnostic prompts into each provider's wire
format and normalizes provider replies into AIResponse values.

Key Components:
- Strategy preamble table (one row per strategy, one column per provider)
- Renderers for the three rendering shapes
- One converter per provider (request body + response normalization)
- Factory for converter selection (ConverterFactory)

Usage:
    from aiapi.converters import ConverterFactory

    converter = ConverterFactory.get_converter('google')
    wire = converter.convert_request(prompt, options)
    response = converter.convert_response(decoded_reply, wire.model)
"""

from .anthropic_converter import AnthropicConverter
from .base import Converter, StrategyRenderer, WireRequest
from .factory import ConverterFactory
from .google_converter import GoogleConverter
from .openai_converter import OpenAIConverter
from .renderers import InstructionBlockRenderer, LabeledTextRenderer, MessageArrayRenderer
from .strategy_table import STRATEGY_PREAMBLES, get_preamble

__all__ = [
    'Converter',
    'StrategyRenderer',
    'WireRequest',
    'ConverterFactory',
    'AnthropicConverter',
    'GoogleConverter',
    'OpenAIConverter',
    'InstructionBlockRenderer',
    'LabeledTextRenderer',
    'MessageArrayRenderer',
    'STRATEGY_PREAMBLES',
    'get_preamble',
]
