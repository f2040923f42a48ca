"""
Configuration loading for aiapi.

This module reads a JSON configuration file and validates it with the
Pydantic models in ``models.py``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from ..utils.exceptions import ConfigValidationError
from .models import BridgeConfigModel

logger = logging.getLogger(__name__)


def load_bridge_config(file_path: Union[str, Path]) -> BridgeConfigModel:
    """Load configuration from a JSON file.

    The file should follow the structure:

    {
        "providers": {
            "openai": {"api_key_env": "OPENAI_API_KEY", "default_model": "gpt-4"},
            "anthropic": {"api_key": "sk-ant-...", "timeout": 30},
            "google": {"api_key_env": "GOOGLE_API_KEY"}
        },
        "default_provider": "openai"
    }

    Args:
        file_path: Path to the JSON configuration file

    Returns:
        BridgeConfigModel instance with validated configuration

    Raises:
        ConfigValidationError: If the file is missing, unreadable, not JSON
            or fails validation
    """
    config_path = Path(file_path)
    if not config_path.exists():
        logger.error(f"Configuration file not found: {file_path}")
        raise ConfigValidationError(f"Configuration file not found: {file_path}")

    logger.debug(f"Loading configuration from: {file_path}")
    try:
        with open(config_path, 'r') as file:
            config_json = json.load(file)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file: {e}")
        raise ConfigValidationError(f"Invalid JSON in {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Could not read configuration file {file_path}: {e}")
        raise ConfigValidationError(f"Could not read {file_path}: {e}") from e

    config = validate_config_dict(config_json)
    logger.info(f"Successfully loaded configuration with {len(config.providers)} providers")
    return config


def validate_config_dict(config_dict: Dict[str, Any]) -> BridgeConfigModel:
    """Validate a configuration dictionary.

    Raises:
        ConfigValidationError: If validation fails
    """
    if not isinstance(config_dict, dict):
        raise ConfigValidationError("Configuration root must be a JSON object")
    try:
        return BridgeConfigModel(**config_dict)
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e
