"""Base interfaces and shared values for model providers.

This module defines the closed set of supported providers, the request and
response values every client shares, and the abstract provider descriptor
that knows each vendor's endpoint, credentials placement and defaults.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

# Values allowed in passthrough parameters and response metadata
JSONValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]


class ProviderKind(str, Enum):
    """The supported text-generation services."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"

    @classmethod
    def parse(cls, value: Union["ProviderKind", str]) -> "ProviderKind":
        """Resolve a provider from its name (case-insensitive).

        Raises:
            ValueError: If the name is not a supported provider
        """
        if isinstance(value, ProviderKind):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown provider '{value}'. "
                f"Available providers: {', '.join(kind.value for kind in cls)}"
            ) from None


@dataclass(frozen=True)
class RequestOptions:
    """Per-request generation options.

    Attributes:
        max_tokens: Maximum tokens to generate (positive)
        temperature: Sampling temperature, passed through unvalidated
        model: Model identifier; known-model enum members are reduced to
            their identifier, unknown strings pass through
        additional_parameters: Provider-specific fields merged last into
            the request body, overriding anything set before
    """
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    model: Optional[str] = None
    additional_parameters: Mapping[str, JSONValue] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.model, Enum):
            object.__setattr__(self, "model", self.model.value)
        if self.max_tokens is not None and self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True)
class AIResponse:
    """Normalized successful reply.

    Attributes:
        content: Generated text
        metadata: Provider-reported diagnostics (usage, model, ...)
    """
    content: str
    metadata: Dict[str, JSONValue] = field(default_factory=dict)


class ModelProvider(ABC):
    """Abstract descriptor of one provider's transport contract.

    Each provider knows where its endpoint lives, where the credential goes
    and which model to use when the caller names none. Body translation is
    not done here (that's in converters/).
    """

    kind: ProviderKind

    def get_provider_name(self) -> str:
        """Get the provider name identifier (e.g., 'openai')."""
        return self.kind.value

    @abstractmethod
    def supports_model(self, model: str) -> bool:
        """Check if this provider serves the given model."""
        pass

    @abstractmethod
    def get_default_base_url(self) -> str:
        """Base URL used when the client is given none."""
        pass

    @abstractmethod
    def get_default_model(self) -> str:
        """Model identifier used when the request names none."""
        pass

    @abstractmethod
    def get_endpoint_url(self, base_url: str, model: str) -> str:
        """Generate the generation endpoint URL.

        Args:
            base_url: Base URL of the API
            model: Resolved model identifier

        Returns:
            Complete endpoint URL without query string
        """
        pass

    @abstractmethod
    def get_headers(self, api_key: str) -> Dict[str, str]:
        """Build the request headers, including credentials if header-borne."""
        pass

    def get_query_params(self, api_key: str) -> Dict[str, str]:
        """Build query parameters, including credentials if query-borne."""
        return {}
