"""Strategy preambles for every provider.

One row per named strategy, one column per provider. STANDARD has no row:
it never adds text. Custom strategies have no row either: their preamble
is the caller's instruction.

OpenAI text becomes the system message. Anthropic text is wrapped in an
<instructions> block. Google text is a single "Label: text" line.
"""

from typing import Dict

from ..models.provider import ProviderKind
from ..models.strategy import PromptStrategy

STRATEGY_PREAMBLES: Dict[PromptStrategy, Dict[ProviderKind, str]] = {
    PromptStrategy.CLEAR_INSTRUCTIONS: {
        ProviderKind.OPENAI: "I will provide clear and specific instructions. Please follow them exactly.",
        ProviderKind.ANTHROPIC: "I need you to follow these instructions exactly.",
        ProviderKind.GOOGLE: "Instructions: I need you to follow these instructions exactly.",
    },
    PromptStrategy.LOGICAL_STRUCTURE: {
        ProviderKind.OPENAI: "I will provide information in a logical structure. Please respond in a similarly structured format.",
        ProviderKind.ANTHROPIC: "Please respond to the following structured information with a similarly structured response.",
        ProviderKind.GOOGLE: "Structure: Please respond to the following structured information with a similarly structured response.",
    },
    PromptStrategy.ROLE_DEFINITION: {
        ProviderKind.OPENAI: "Please adopt the role and perspective described in my prompt.",
        ProviderKind.ANTHROPIC: "Please adopt the role and perspective described below.",
        ProviderKind.GOOGLE: "Role: Please adopt the role and perspective described below.",
    },
    PromptStrategy.OUTPUT_FORMAT: {
        ProviderKind.OPENAI: "Please format your response exactly as specified in my prompt.",
        ProviderKind.ANTHROPIC: "Please format your response exactly as specified below.",
        ProviderKind.GOOGLE: "Output Format: Please format your response exactly as specified below.",
    },
    PromptStrategy.CHAIN_THINKING: {
        ProviderKind.OPENAI: "Please think through this step by step, showing your reasoning clearly.",
        ProviderKind.ANTHROPIC: "Think through this step by step, showing your reasoning clearly.",
        ProviderKind.GOOGLE: "Reasoning: Think step by step and show your reasoning.",
    },
    PromptStrategy.FEW_SHOT: {
        ProviderKind.OPENAI: "I will provide examples to demonstrate the pattern I want you to follow.",
        ProviderKind.ANTHROPIC: "I will provide examples to demonstrate the pattern I want you to follow.",
        ProviderKind.GOOGLE: "Examples: I will provide examples to demonstrate the pattern I want you to follow.",
    },
    PromptStrategy.CHAIN_OF_PROMPTS: {
        ProviderKind.OPENAI: "This is part of a series of related prompts. Please maintain context from previous interactions.",
        ProviderKind.ANTHROPIC: "This is part of a series of related prompts. Please maintain context from previous interactions.",
        ProviderKind.GOOGLE: "Context: This is part of a series of related prompts. Please maintain context from previous interactions.",
    },
    PromptStrategy.REFLECTION_REFINEMENT: {
        ProviderKind.OPENAI: "After your initial response, please reflect on it and provide a refined version.",
        ProviderKind.ANTHROPIC: "After your initial response, please reflect on it and provide a refined version.",
        ProviderKind.GOOGLE: "Refinement: After your initial response, please reflect on it and provide a refined version.",
    },
}


def get_preamble(strategy: PromptStrategy, provider: ProviderKind) -> str:
    """Return the canned preamble of a named strategy for a provider.

    Raises:
        KeyError: For STANDARD, which has no preamble
    """
    return STRATEGY_PREAMBLES[strategy][provider]
