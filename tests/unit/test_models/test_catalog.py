"""Unit tests for models.catalog module."""

import pytest

from aiapi.models.catalog import (
    AnthropicModel,
    GoogleModel,
    OpenAIModel,
    available_models,
    is_valid_model,
)


class TestCatalog:
    """Test cases for the known-model catalog."""

    def test_openai_models(self):
        assert available_models("openai") == [
            "gpt-4",
            "gpt-4-turbo",
            "gpt-4-turbo-preview",
            "gpt-3.5-turbo",
            "gpt-3.5-turbo-instruct",
        ]

    def test_anthropic_models(self):
        assert available_models("anthropic") == [
            "claude-3-opus-20240229",
            "claude-3-sonnet-20240229",
            "claude-3-haiku-20240307",
            "claude-2.1",
            "claude-1",
        ]

    def test_google_models(self):
        assert available_models("google") == ["gemini-pro", "gemini-pro-vision", "gemini-ultra"]

    def test_enum_members_compare_as_identifiers(self):
        assert OpenAIModel.GPT4 == "gpt-4"
        assert AnthropicModel.CLAUDE3_SONNET == "claude-3-sonnet-20240229"
        assert GoogleModel.GEMINI_PRO_VISION == "gemini-pro-vision"

    @pytest.mark.parametrize(
        "model, provider, expected",
        [
            ("gpt-4", "openai", True),
            ("gpt-4", "anthropic", False),
            ("claude-1", "anthropic", True),
            ("gemini-1.5-pro", "google", False),
        ],
    )
    def test_is_valid_model(self, model, provider, expected):
        assert is_valid_model(model, provider) is expected

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            available_models("mistral")
