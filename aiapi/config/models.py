"""
Pydantic configuration models for aiapi.

A configuration file names the providers to build clients for and, per
provider, where the credential comes from and how to reach the service.
"""

import os
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models.provider import ProviderKind


class ProviderSettingsModel(BaseModel):
    """Settings for one provider.

    Exactly one credential source is needed: ``api_key`` inline, or
    ``api_key_env`` naming an environment variable read at load time.
    """

    model_config = ConfigDict(extra='forbid')

    api_key: Optional[str] = Field(default=None, repr=False)
    api_key_env: Optional[str] = None
    base_url: Optional[str] = None
    default_model: Optional[str] = None
    timeout: float = Field(default=60.0, gt=0)

    @model_validator(mode='after')
    def resolve_api_key(self) -> 'ProviderSettingsModel':
        if not self.api_key and self.api_key_env:
            self.api_key = os.environ.get(self.api_key_env)
            if not self.api_key:
                raise ValueError(
                    f"Environment variable '{self.api_key_env}' is not set or empty"
                )
        if not self.api_key:
            raise ValueError("Either 'api_key' or 'api_key_env' is required")
        return self


class BridgeConfigModel(BaseModel):
    """Top-level configuration: the configured providers."""

    model_config = ConfigDict(extra='forbid')

    providers: Dict[ProviderKind, ProviderSettingsModel] = Field(
        default_factory=dict,
        description="Mapping of provider names to their settings"
    )
    default_provider: Optional[ProviderKind] = None

    @model_validator(mode='after')
    def check_default_provider(self) -> 'BridgeConfigModel':
        if self.default_provider is not None and self.default_provider not in self.providers:
            raise ValueError(
                f"default_provider '{self.default_provider.value}' is not configured"
            )
        return self

    def get_settings(self, provider: ProviderKind) -> Optional[ProviderSettingsModel]:
        return self.providers.get(provider)
