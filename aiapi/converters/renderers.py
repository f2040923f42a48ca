"""Strategy renderers.

A renderer turns (content, strategy) into the fragment a provider expects.
Rendering is pure: no I/O, no state, the same inputs give the same output,
and the content itself is never modified.
"""

from typing import Dict, List, Optional

from ..models.provider import ProviderKind
from ..models.strategy import CustomStrategy, PromptStrategy, Strategy
from .base import StrategyRenderer
from .strategy_table import get_preamble


def _preamble_for(strategy: Optional[Strategy], provider: ProviderKind) -> Optional[str]:
    """Resolve the preamble text, or None when nothing must be added.

    Custom strategies yield their instruction verbatim; STANDARD and
    anything unrecognized yield None.
    """
    if isinstance(strategy, CustomStrategy):
        return strategy.instruction
    if isinstance(strategy, PromptStrategy) and strategy is not PromptStrategy.STANDARD:
        return get_preamble(strategy, provider)
    return None


class MessageArrayRenderer(StrategyRenderer):
    """Renders to a chat message list: optional system message, then user.

    STANDARD yields the user message alone.
    """

    def __init__(self, provider: ProviderKind = ProviderKind.OPENAI):
        self._provider = provider

    def render(self, content: str, strategy: Optional[Strategy]) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        preamble = _preamble_for(strategy, self._provider)
        if preamble is not None:
            messages.append({"role": "system", "content": preamble})
        messages.append({"role": "user", "content": content})
        return messages


class InstructionBlockRenderer(StrategyRenderer):
    """Renders to one string with the preamble in an <instructions> block.

    Output for non-standard strategies::

        <instructions>
        {preamble}
        </instructions>

        {content}
    """

    def __init__(self, provider: ProviderKind = ProviderKind.ANTHROPIC):
        self._provider = provider

    def render(self, content: str, strategy: Optional[Strategy]) -> str:
        preamble = _preamble_for(strategy, self._provider)
        if preamble is None:
            return content
        return f"<instructions>\n{preamble}\n</instructions>\n\n{content}"


class LabeledTextRenderer(StrategyRenderer):
    """Renders to one string: a "Label: text" preamble line, a blank line,
    then the content. Custom instructions are used as the line itself."""

    def __init__(self, provider: ProviderKind = ProviderKind.GOOGLE):
        self._provider = provider

    def render(self, content: str, strategy: Optional[Strategy]) -> str:
        preamble = _preamble_for(strategy, self._provider)
        if preamble is None:
            return content
        return f"{preamble}\n\n{content}"
