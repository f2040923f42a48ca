"""
Command-line interface for aiapi.

Sends one prompt to one provider, or to every configured provider at once,
and prints each reply.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from .api import create_clients
from .client import ProviderClient
from .config.loader import load_bridge_config
from .models.catalog import available_models
from .models.prompt import BUILTIN_TEMPLATES, Prompt, get_template
from .models.provider import AIResponse, JSONValue, ProviderKind, RequestOptions
from .models.strategy import PromptStrategy, resolve_strategy
from .utils.exceptions import AIClientError
from .utils.logging_utils import init_logging
from .version import get_version_string

logger = logging.getLogger(__name__)

ALL_PROVIDERS = "all"
STRATEGY_CHOICES = [strategy.value for strategy in PromptStrategy] + ["custom"]


def _key_value(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got '{text}'")
    return key, value


def _key_json(text: str) -> Tuple[str, JSONValue]:
    key, value = _key_value(text)
    try:
        return key, json.loads(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"value of '{key}' is not valid JSON: {value}"
        ) from None


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments with the following attributes:
            - prompt (str | None): Prompt text
            - config (str): Path to configuration file (default: "config.json")
            - debug (bool): Enable debug mode
            - provider (str | None): Provider name or "all"
            - strategy (str | None): Strategy wire name or "custom"
            - instruction (str | None): Custom strategy instruction
            - template (str | None): Built-in template name
            - var (list[tuple[str, str]]): Template variables
            - model, max_tokens, temperature: Request options
            - param (list[tuple[str, JSONValue]]): Passthrough parameters
            - list_models (bool): Print the model catalog and exit
    """
    version_string = get_version_string()
    parser = argparse.ArgumentParser(
        prog="aiapi",
        description=f"Send prompts to OpenAI, Anthropic and Google models - {version_string}",
        epilog=f"Version: {version_string}",
    )
    parser.add_argument("prompt", nargs="?", help="Prompt text (omit when using --template)")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {version_string}",
        help="Show version information and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default="config.json",
        help="Path to the configuration file",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "--log-folder",
        type=str,
        default=None,
        help="Write per-channel log files into this folder",
    )
    parser.add_argument(
        "-p",
        "--provider",
        choices=[kind.value for kind in ProviderKind] + [ALL_PROVIDERS],
        default=None,
        help="Provider to send to (default: config default_provider, else the first configured)",
    )
    parser.add_argument(
        "-s",
        "--strategy",
        choices=STRATEGY_CHOICES,
        default=None,
        help="Prompt strategy (default: standard, or the template's strategy)",
    )
    parser.add_argument(
        "--instruction",
        type=str,
        default=None,
        help="Instruction text for the custom strategy",
    )
    parser.add_argument(
        "--template",
        choices=sorted(BUILTIN_TEMPLATES),
        default=None,
        help="Build the prompt from a built-in template",
    )
    parser.add_argument(
        "--var",
        type=_key_value,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (repeatable)",
    )
    parser.add_argument("-m", "--model", type=str, default=None, help="Model identifier")
    parser.add_argument("--max-tokens", type=int, default=None, help="Maximum tokens to generate")
    parser.add_argument("-t", "--temperature", type=float, default=None, help="Sampling temperature")
    parser.add_argument(
        "--param",
        type=_key_json,
        action="append",
        default=[],
        metavar="KEY=JSON",
        help="Provider-specific body field, merged last (repeatable)",
    )
    parser.add_argument(
        "--list-models",
        action="store_true",
        help="List known models and exit",
    )
    return parser.parse_args(argv)


def build_prompt(args: argparse.Namespace) -> Prompt:
    """Build the prompt from the prompt text or template and strategy flags.

    Raises:
        ValueError: If neither prompt text nor template is given, the
            custom strategy has no instruction, or an instruction is given
            with a named strategy
    """
    if args.template:
        prompt = get_template(args.template).instantiate(args.var)
    elif args.prompt:
        prompt = Prompt(args.prompt)
    else:
        raise ValueError("Either a prompt or --template is required")

    if args.strategy is None and args.instruction is None:
        return prompt

    if args.instruction is not None and args.strategy not in (None, "custom"):
        raise ValueError(
            f"--instruction only applies to the custom strategy, not '{args.strategy}'"
        )

    strategy_value = args.strategy or "custom"
    return Prompt(prompt.content, resolve_strategy(strategy_value, args.instruction))


def build_options(args: argparse.Namespace) -> RequestOptions:
    return RequestOptions(
        max_tokens=args.max_tokens,
        temperature=args.temperature,
        model=args.model,
        additional_parameters=dict(args.param),
    )


def select_clients(
    clients: Dict[ProviderKind, ProviderClient],
    provider: Optional[str],
    default_provider: Optional[ProviderKind],
) -> List[ProviderClient]:
    """Pick the clients to send to.

    Raises:
        ValueError: If nothing is configured or the provider is not configured
    """
    if not clients:
        raise ValueError("No providers are configured")
    if provider == ALL_PROVIDERS:
        return list(clients.values())

    if provider is not None:
        kind = ProviderKind.parse(provider)
    else:
        kind = default_provider or next(iter(clients))
    if kind not in clients:
        raise ValueError(f"Provider '{kind.value}' is not configured")
    return [clients[kind]]


async def send_all(
    clients: List[ProviderClient], prompt: Prompt, options: RequestOptions
) -> List[object]:
    """Send the prompt to every client concurrently.

    Returns:
        One AIResponse or exception per client, in client order
    """
    return await asyncio.gather(
        *(client.send(prompt, options) for client in clients),
        return_exceptions=True,
    )


def print_models(provider: Optional[str]) -> None:
    kinds = list(ProviderKind) if provider in (None, ALL_PROVIDERS) else [ProviderKind.parse(provider)]
    for kind in kinds:
        print(f"{kind.value}:")
        for model in available_models(kind):
            print(f"  {model}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Returns:
        0 when every send succeeded, 1 when any failed, 2 on usage or
        configuration errors
    """
    args = parse_arguments(argv)
    init_logging(debug=args.debug, log_folder=args.log_folder)

    if args.list_models:
        print_models(args.provider)
        return 0

    try:
        prompt = build_prompt(args)
        options = build_options(args)
        config = load_bridge_config(args.config)
        clients = create_clients(config)
        selected = select_clients(clients, args.provider, config.default_provider)
    except (AIClientError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 2

    results = asyncio.run(send_all(selected, prompt, options))

    exit_code = 0
    show_names = len(selected) > 1
    for client, result in zip(selected, results):
        if show_names:
            print(f"[{client.kind.value}]")
        if isinstance(result, AIResponse):
            print(result.content)
        else:
            exit_code = 1
            logger.error(f"{client.kind.value} failed: {type(result).__name__}: {result}")
            print(f"error: {type(result).__name__}: {result}", file=sys.stderr)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
