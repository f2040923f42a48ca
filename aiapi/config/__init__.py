"""
Configuration management package for aiapi.

This package handles:
- Pydantic models for provider settings
- Configuration loading from JSON files
"""

from .loader import load_bridge_config, validate_config_dict
from .models import BridgeConfigModel, ProviderSettingsModel

__all__ = [
    'BridgeConfigModel',
    'ProviderSettingsModel',
    'load_bridge_config',
    'validate_config_dict',
]
