"""Prompt and prompt template values.

Templates carry ``{placeholder}`` markers that are replaced literally when a
Prompt is instantiated from them.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple, Union

from .strategy import PromptStrategy, Strategy, resolve_strategy


@dataclass(frozen=True)
class Prompt:
    """Content to send plus the strategy that frames it."""

    content: str
    strategy: Strategy = PromptStrategy.STANDARD

    def __post_init__(self):
        # Wire names and None are accepted; unknown names become STANDARD
        object.__setattr__(self, "strategy", resolve_strategy(self.strategy))

    @classmethod
    def from_template(
        cls,
        template: "PromptTemplate",
        variables: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
    ) -> "Prompt":
        """Create a prompt from a template.

        Args:
            template: Template to instantiate
            variables: Placeholder name to value, as a mapping or as pairs
                (for pairs, the last value given for a name wins)

        Returns:
            Prompt with the template's strategy
        """
        return cls(
            content=substitute_variables(template.content, variables),
            strategy=template.strategy,
        )


@dataclass(frozen=True)
class PromptTemplate:
    """Named prompt content with placeholders and a preferred strategy."""

    name: str
    content: str
    strategy: Strategy = PromptStrategy.STANDARD

    def __post_init__(self):
        object.__setattr__(self, "strategy", resolve_strategy(self.strategy))

    def instantiate(
        self, variables: Union[Mapping[str, str], Iterable[Tuple[str, str]]]
    ) -> Prompt:
        return Prompt.from_template(self, variables)


def substitute_variables(
    text: str, variables: Union[Mapping[str, str], Iterable[Tuple[str, str]]]
) -> str:
    """Replace every ``{name}`` marker with its value.

    Replacement is literal: no escaping, no nested expansion of markers
    introduced by a value, unknown markers stay in place.
    """
    pairs = variables.items() if isinstance(variables, Mapping) else variables
    resolved: Dict[str, str] = {}
    for key, value in pairs:
        resolved["{" + key + "}"] = value

    if not resolved:
        return text

    # Single pass so values are never rescanned for markers
    pattern = re.compile(
        "|".join(re.escape(marker) for marker in sorted(resolved, key=len, reverse=True))
    )
    return pattern.sub(lambda match: resolved[match.group(0)], text)


CODING = PromptTemplate(
    name="Coding Task",
    content=(
        "I need help with a coding task in {language}.\n"
        "\n"
        "Task description: {description}\n"
        "\n"
        "Requirements:\n"
        "{requirements}\n"
        "\n"
        "Please provide a solution with:\n"
        "1. Clear, well-commented code\n"
        "2. Explanation of your approach\n"
        "3. Any potential edge cases or optimizations"
    ),
    strategy=PromptStrategy.CLEAR_INSTRUCTIONS,
)

DATA_ANALYSIS = PromptTemplate(
    name="Data Analysis",
    content=(
        "I need to analyze the following data:\n"
        "\n"
        "{data}\n"
        "\n"
        "Analysis goals:\n"
        "{goals}\n"
        "\n"
        "Please provide:\n"
        "1. Key insights from the data\n"
        "2. Statistical analysis where appropriate\n"
        "3. Visualizations you would recommend\n"
        "4. Actionable recommendations based on findings"
    ),
    strategy=PromptStrategy.LOGICAL_STRUCTURE,
)

CREATIVE_WRITING = PromptTemplate(
    name="Creative Writing",
    content=(
        "You are a creative writer specializing in {genre}.\n"
        "\n"
        "Topic: {topic}\n"
        "Style: {style}\n"
        "Length: {length}\n"
        "\n"
        "Additional requirements:\n"
        "{requirements}\n"
        "\n"
        "Please write a compelling piece that captures the essence of the topic "
        "while adhering to the specified style."
    ),
    strategy=PromptStrategy.ROLE_DEFINITION,
)

RESEARCH_SUMMARY = PromptTemplate(
    name="Research Summary",
    content=(
        "Please provide a comprehensive summary of research on {topic}.\n"
        "\n"
        "Focus areas:\n"
        "{focusAreas}\n"
        "\n"
        "The summary should include:\n"
        "1. Key findings and consensus in the field\n"
        "2. Major debates or unresolved questions\n"
        "3. Recent developments (within the last {timeframe})\n"
        "4. Practical implications or applications\n"
        "5. Directions for future research\n"
        "\n"
        "Format the response as follows:\n"
        "- Executive Summary (2-3 sentences)\n"
        "- Background\n"
        "- Key Findings\n"
        "- Debates\n"
        "- Recent Developments\n"
        "- Implications\n"
        "- Future Directions\n"
        "- References (if applicable)"
    ),
    strategy=PromptStrategy.OUTPUT_FORMAT,
)

PRODUCT_DESCRIPTION = PromptTemplate(
    name="Product Description",
    content=(
        "Create a compelling product description for {productName}.\n"
        "\n"
        "Product details:\n"
        "- Category: {category}\n"
        "- Key features: {features}\n"
        "- Target audience: {audience}\n"
        "- Price point: {price}\n"
        "- Unique selling proposition: {usp}\n"
        "\n"
        "The description should be {tone} in tone and approximately {length} words.\n"
        "\n"
        "Include:\n"
        "1. Attention-grabbing headline\n"
        "2. Engaging opening paragraph\n"
        "3. Feature-benefit connections\n"
        "4. Social proof elements\n"
        "5. Clear call to action"
    ),
    strategy=PromptStrategy.CLEAR_INSTRUCTIONS,
)

# Built-in templates keyed by their CLI name
BUILTIN_TEMPLATES: Dict[str, PromptTemplate] = {
    "coding": CODING,
    "data-analysis": DATA_ANALYSIS,
    "creative-writing": CREATIVE_WRITING,
    "research-summary": RESEARCH_SUMMARY,
    "product-description": PRODUCT_DESCRIPTION,
}


def get_template(name: str) -> PromptTemplate:
    """Look up a built-in template.

    Raises:
        KeyError: If no template has that name
    """
    try:
        return BUILTIN_TEMPLATES[name]
    except KeyError:
        raise KeyError(
            f"Unknown template '{name}'. "
            f"Available templates: {', '.join(sorted(BUILTIN_TEMPLATES))}"
        ) from None
