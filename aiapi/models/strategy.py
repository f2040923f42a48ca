"""Prompt strategies.

A strategy controls the instructional framing added around the caller's
content before it is sent to a model. Nine strategies are named members of
PromptStrategy; a tenth, custom, carries caller-supplied instruction text
and is expressed with CustomStrategy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PromptStrategy(str, Enum):
    """Named prompting strategies."""

    STANDARD = "standard"
    CLEAR_INSTRUCTIONS = "clearInstructions"
    LOGICAL_STRUCTURE = "logicalStructure"
    ROLE_DEFINITION = "roleDefinition"
    OUTPUT_FORMAT = "outputFormat"
    CHAIN_THINKING = "chainThinking"
    FEW_SHOT = "fewShot"
    CHAIN_OF_PROMPTS = "chainOfPrompts"
    REFLECTION_REFINEMENT = "reflectionRefinement"


@dataclass(frozen=True)
class CustomStrategy:
    """Strategy whose preamble is exactly the given instruction."""

    instruction: str


Strategy = Union[PromptStrategy, CustomStrategy]


def resolve_strategy(
    value: Union[Strategy, str, None], instruction: Optional[str] = None
) -> Strategy:
    """Turn a loose strategy reference into a Strategy.

    Accepts strategy members, their wire names ("chainThinking"), member
    names ("CHAIN_THINKING") and "custom" (which needs ``instruction``).
    Anything unrecognized, None included, resolves to STANDARD.

    Args:
        value: Strategy, name, or None
        instruction: Instruction text used when value is "custom"

    Returns:
        Resolved strategy

    Raises:
        ValueError: If value is "custom" and no instruction was given
    """
    if isinstance(value, (PromptStrategy, CustomStrategy)):
        return value
    if not isinstance(value, str):
        return PromptStrategy.STANDARD

    name = value.strip()
    if name.lower() == "custom":
        if instruction is None:
            raise ValueError("The custom strategy requires an instruction")
        return CustomStrategy(instruction)

    for strategy in PromptStrategy:
        if name in (strategy.value, strategy.name):
            return strategy
    return PromptStrategy.STANDARD


def strategy_name(strategy: Optional[Strategy]) -> str:
    """Return the wire name of a strategy ("custom" for CustomStrategy)."""
    if isinstance(strategy, CustomStrategy):
        return "custom"
    return resolve_strategy(strategy).value
