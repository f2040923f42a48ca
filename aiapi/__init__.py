"""aiapi: one client interface for OpenAI, Anthropic and Google text models.

Usage:
    from aiapi import AIAPI, Prompt, PromptStrategy, RequestOptions

    client = AIAPI(api_key).create_client("openai")
    response = await client.send(
        Prompt("Explain recursion", PromptStrategy.CHAIN_THINKING),
        RequestOptions(max_tokens=200),
    )
    print(response.content)
"""

from .api import AIAPI, create_clients
from .client import ProviderClient
from .models import (
    AIResponse,
    AnthropicModel,
    BUILTIN_TEMPLATES,
    CustomStrategy,
    GoogleModel,
    OpenAIModel,
    Prompt,
    PromptStrategy,
    PromptTemplate,
    ProviderKind,
    RequestOptions,
    available_models,
    detect_provider,
    get_template,
    is_valid_model,
)
from .transport import HttpTransport, TransportResponse
from .utils.exceptions import (
    AIClientError,
    APIError,
    ConfigValidationError,
    InvalidAPIKeyError,
    InvalidResponseError,
    NetworkError,
    RequestEncodingError,
    ResponseDecodingError,
)
from .version import get_version

__version__ = get_version()

__all__ = [
    'AIAPI',
    'create_clients',
    'ProviderClient',
    'HttpTransport',
    'TransportResponse',
    'AIResponse',
    'Prompt',
    'PromptTemplate',
    'PromptStrategy',
    'CustomStrategy',
    'ProviderKind',
    'RequestOptions',
    'BUILTIN_TEMPLATES',
    'get_template',
    'AnthropicModel',
    'GoogleModel',
    'OpenAIModel',
    'available_models',
    'detect_provider',
    'is_valid_model',
    'AIClientError',
    'APIError',
    'ConfigValidationError',
    'InvalidAPIKeyError',
    'InvalidResponseError',
    'NetworkError',
    'RequestEncodingError',
    'ResponseDecodingError',
]
