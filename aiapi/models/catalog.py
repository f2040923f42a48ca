"""Known model identifiers per provider.

The catalog is informational: clients never reject a model that is not
listed here, they pass it through to the provider.
"""

from enum import Enum
from typing import Dict, List, Type, Union

from .provider import ProviderKind


class OpenAIModel(str, Enum):
    GPT4 = "gpt-4"
    GPT4_TURBO = "gpt-4-turbo"
    GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
    GPT35_TURBO = "gpt-3.5-turbo"
    GPT35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"


class AnthropicModel(str, Enum):
    CLAUDE3_OPUS = "claude-3-opus-20240229"
    CLAUDE3_SONNET = "claude-3-sonnet-20240229"
    CLAUDE3_HAIKU = "claude-3-haiku-20240307"
    CLAUDE2 = "claude-2.1"
    CLAUDE1 = "claude-1"


class GoogleModel(str, Enum):
    GEMINI_PRO = "gemini-pro"
    GEMINI_PRO_VISION = "gemini-pro-vision"
    GEMINI_ULTRA = "gemini-ultra"


MODEL_CATALOG: Dict[ProviderKind, Type[Enum]] = {
    ProviderKind.OPENAI: OpenAIModel,
    ProviderKind.ANTHROPIC: AnthropicModel,
    ProviderKind.GOOGLE: GoogleModel,
}


def available_models(provider: Union[ProviderKind, str]) -> List[str]:
    """Return the known model identifiers for a provider."""
    kind = ProviderKind.parse(provider)
    return [model.value for model in MODEL_CATALOG[kind]]


def is_valid_model(model: str, provider: Union[ProviderKind, str]) -> bool:
    """Check whether a model identifier is in the provider's catalog."""
    return model in available_models(provider)
