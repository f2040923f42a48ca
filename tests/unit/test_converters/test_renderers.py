"""Unit tests for converters.renderers and converters.strategy_table.

Tests strategy rendering for every provider shape.
"""

import pytest
from unittest.mock import patch

from aiapi.converters.renderers import (
    InstructionBlockRenderer,
    LabeledTextRenderer,
    MessageArrayRenderer,
)
from aiapi.converters.strategy_table import STRATEGY_PREAMBLES, get_preamble
from aiapi.models.provider import ProviderKind
from aiapi.models.strategy import CustomStrategy, PromptStrategy

CONTENT = "Explain how a hash map resolves collisions."

RENDERERS = {
    ProviderKind.OPENAI: MessageArrayRenderer(ProviderKind.OPENAI),
    ProviderKind.ANTHROPIC: InstructionBlockRenderer(ProviderKind.ANTHROPIC),
    ProviderKind.GOOGLE: LabeledTextRenderer(ProviderKind.GOOGLE),
}

ALL_STRATEGIES = list(PromptStrategy) + [CustomStrategy("Answer in French.")]


def _flatten(rendered):
    if isinstance(rendered, list):
        return "\n".join(message["content"] for message in rendered)
    return rendered


class TestStrategyTable:
    """Test cases for the preamble table."""

    def test_every_named_strategy_except_standard_has_a_row(self):
        expected = set(PromptStrategy) - {PromptStrategy.STANDARD}
        assert set(STRATEGY_PREAMBLES) == expected

    def test_every_row_covers_every_provider(self):
        for row in STRATEGY_PREAMBLES.values():
            assert set(row) == set(ProviderKind)
            assert all(text.strip() for text in row.values())

    def test_standard_has_no_preamble(self):
        with pytest.raises(KeyError):
            get_preamble(PromptStrategy.STANDARD, ProviderKind.OPENAI)

    def test_google_preambles_are_labelled_lines(self):
        for row in STRATEGY_PREAMBLES.values():
            text = row[ProviderKind.GOOGLE]
            label, sep, _ = text.partition(": ")
            assert sep == ": "
            assert label
            assert "\n" not in text

    def test_chain_thinking_google_wording(self):
        assert (
            get_preamble(PromptStrategy.CHAIN_THINKING, ProviderKind.GOOGLE)
            == "Reasoning: Think step by step and show your reasoning."
        )


class TestRenderingProperties:
    """Properties that hold for every provider."""

    @pytest.mark.parametrize("kind", list(ProviderKind))
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=str)
    def test_rendering_is_pure(self, kind, strategy):
        renderer = RENDERERS[kind]
        assert renderer.render(CONTENT, strategy) == renderer.render(CONTENT, strategy)

    @pytest.mark.parametrize("kind", list(ProviderKind))
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=str)
    def test_content_is_kept_verbatim(self, kind, strategy):
        rendered = _flatten(RENDERERS[kind].render(CONTENT, strategy))
        assert CONTENT in rendered

    @pytest.mark.parametrize("kind", list(ProviderKind))
    def test_standard_adds_nothing(self, kind):
        rendered = _flatten(RENDERERS[kind].render(CONTENT, PromptStrategy.STANDARD))
        assert rendered == CONTENT

    @pytest.mark.parametrize("kind", list(ProviderKind))
    def test_none_behaves_as_standard(self, kind):
        renderer = RENDERERS[kind]
        assert renderer.render(CONTENT, None) == renderer.render(CONTENT, PromptStrategy.STANDARD)

    @pytest.mark.parametrize("kind", list(ProviderKind))
    def test_custom_uses_instruction_and_no_canned_text(self, kind):
        instruction = "Reply only with valid YAML."
        rendered = _flatten(RENDERERS[kind].render(CONTENT, CustomStrategy(instruction)))

        assert instruction in rendered
        for row in STRATEGY_PREAMBLES.values():
            assert row[kind] not in rendered

    @pytest.mark.parametrize("kind", list(ProviderKind))
    def test_named_strategy_includes_its_preamble(self, kind):
        rendered = _flatten(RENDERERS[kind].render(CONTENT, PromptStrategy.FEW_SHOT))
        assert get_preamble(PromptStrategy.FEW_SHOT, kind) in rendered


class TestMessageArrayRenderer:
    """Test cases for the OpenAI message list shape."""

    def test_standard_is_single_user_message(self):
        messages = RENDERERS[ProviderKind.OPENAI].render(CONTENT, PromptStrategy.STANDARD)
        assert messages == [{"role": "user", "content": CONTENT}]

    def test_strategy_adds_system_message_first(self):
        messages = RENDERERS[ProviderKind.OPENAI].render(CONTENT, PromptStrategy.OUTPUT_FORMAT)
        assert messages == [
            {
                "role": "system",
                "content": "Please format your response exactly as specified in my prompt.",
            },
            {"role": "user", "content": CONTENT},
        ]

    def test_custom_instruction_is_system_message(self):
        messages = RENDERERS[ProviderKind.OPENAI].render(CONTENT, CustomStrategy("Be terse."))
        assert messages[0] == {"role": "system", "content": "Be terse."}


class TestInstructionBlockRenderer:
    """Test cases for the Anthropic instructions block shape."""

    def test_named_strategy_is_wrapped(self):
        rendered = RENDERERS[ProviderKind.ANTHROPIC].render(CONTENT, PromptStrategy.CHAIN_THINKING)
        assert rendered == (
            "<instructions>\n"
            "Think through this step by step, showing your reasoning clearly.\n"
            "</instructions>\n"
            "\n" + CONTENT
        )

    def test_custom_instruction_is_wrapped(self):
        rendered = RENDERERS[ProviderKind.ANTHROPIC].render(CONTENT, CustomStrategy("Be terse."))
        assert rendered.startswith("<instructions>\nBe terse.\n</instructions>\n\n")
        assert rendered.endswith(CONTENT)


class TestLabeledTextRenderer:
    """Test cases for the Google labelled line shape."""

    def test_named_strategy_prefixes_labelled_line(self):
        rendered = RENDERERS[ProviderKind.GOOGLE].render(CONTENT, PromptStrategy.ROLE_DEFINITION)
        assert rendered == (
            "Role: Please adopt the role and perspective described below.\n\n" + CONTENT
        )

    def test_custom_instruction_is_bare_line(self):
        rendered = RENDERERS[ProviderKind.GOOGLE].render(CONTENT, CustomStrategy("Be terse."))
        assert rendered == "Be terse.\n\n" + CONTENT


class TestPreambleLookup:
    """Renderers read canned text through get_preamble."""

    @pytest.mark.parametrize("strategy", [s for s in PromptStrategy if s is not PromptStrategy.STANDARD])
    def test_labeled_renderer_uses_table_text(self, strategy):
        rendered = RENDERERS[ProviderKind.GOOGLE].render(CONTENT, strategy)
        assert rendered == get_preamble(strategy, ProviderKind.GOOGLE) + "\n\n" + CONTENT

    def test_lookup_goes_through_get_preamble(self):
        with patch("aiapi.converters.renderers.get_preamble", return_value="Patched.") as mock_get:
            rendered = RENDERERS[ProviderKind.ANTHROPIC].render(CONTENT, PromptStrategy.FEW_SHOT)

        mock_get.assert_called_once_with(PromptStrategy.FEW_SHOT, ProviderKind.ANTHROPIC)
        assert rendered.startswith("<instructions>\nPatched.\n</instructions>")

    def test_standard_never_looks_up(self):
        with patch("aiapi.converters.renderers.get_preamble") as mock_get:
            RENDERERS[ProviderKind.OPENAI].render(CONTENT, PromptStrategy.STANDARD)
        mock_get.assert_not_called()
