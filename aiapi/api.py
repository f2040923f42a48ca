"""Entry points for building provider clients."""

import logging
from typing import Dict, Optional, Union

from .client import ProviderClient
from .config.models import BridgeConfigModel
from .models.provider import ProviderKind
from .transport import HttpTransport

logger = logging.getLogger(__name__)


class AIAPI:
    """Creates clients that share one API key.

    Example:
        api = AIAPI(api_key)
        client = api.create_client("anthropic")
        response = await client.send(Prompt("Summarize this"))
    """

    def __init__(self, api_key: str, transport: Optional[HttpTransport] = None):
        self._api_key = api_key
        self._transport = transport

    def create_client(
        self,
        provider: Union[ProviderKind, str],
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
    ) -> ProviderClient:
        """Create a client for a provider.

        Raises:
            ValueError: If the provider is unknown
            InvalidAPIKeyError: If the API key is empty
        """
        return ProviderClient(
            ProviderKind.parse(provider),
            self._api_key,
            base_url=base_url,
            default_model=default_model,
            transport=self._transport,
        )


def create_clients(
    config: BridgeConfigModel, transport: Optional[HttpTransport] = None
) -> Dict[ProviderKind, ProviderClient]:
    """Build one client per configured provider.

    Each client gets its own transport with the provider's timeout unless a
    shared transport is given.

    Args:
        config: Validated configuration
        transport: Transport shared by every client (tests, custom sessions)

    Returns:
        Mapping of provider to client, in configuration order
    """
    clients: Dict[ProviderKind, ProviderClient] = {}
    for kind, settings in config.providers.items():
        clients[kind] = ProviderClient(
            kind,
            settings.api_key,
            base_url=settings.base_url,
            default_model=settings.default_model,
            transport=transport or HttpTransport(timeout=settings.timeout),
        )
        logger.debug(f"Created client for {kind.value} (base_url={clients[kind].base_url})")
    return clients
