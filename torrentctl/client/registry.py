"""Client type registry.

Maps client type names (e.g., "qbittorrent") to adapter classes and builds
named clients from configuration.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from torrentctl.client.base import ClientAdapter
from torrentctl.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from torrentctl.config.config import ConfigManager
    from torrentctl.models import ClientConfig

logger = logging.getLogger(__name__)

AdapterT = TypeVar("AdapterT", bound=type[ClientAdapter])


class ClientTypeRegistry:
    """Registry for client adapter classes."""

    def __init__(self):
        """Initialize client type registry."""
        self._adapters: dict[str, type[ClientAdapter]] = {}

    def register(self, client_type: str, adapter_cls: type[ClientAdapter]) -> None:
        """Register an adapter class for a client type.

        Args:
            client_type: Client type name (case-insensitive)
            adapter_cls: ClientAdapter subclass

        """
        self._adapters[client_type.lower()] = adapter_cls

    def get(self, client_type: str) -> type[ClientAdapter] | None:
        """Get adapter class for a client type, or None if not registered."""
        return self._adapters.get(client_type.lower())

    def has(self, client_type: str) -> bool:
        """Check if client type is registered."""
        return client_type.lower() in self._adapters

    def list_types(self) -> list[str]:
        """List all registered client types."""
        return sorted(self._adapters)


registry = ClientTypeRegistry()


def register_client_type(client_type: str) -> Callable[[AdapterT], AdapterT]:
    """Class decorator registering an adapter in the global registry."""

    def decorator(adapter_cls: AdapterT) -> AdapterT:
        registry.register(client_type, adapter_cls)
        return adapter_cls

    return decorator


def load_adapter_class(reference: str) -> type[ClientAdapter]:
    """Load an adapter class from a ``package.module:ClassName`` string.

    Raises:
        ConfigurationError: if the module or class cannot be loaded

    """
    module_name, _, class_name = reference.partition(":")
    if not module_name or not class_name:
        msg = f"Invalid adapter reference {reference!r}, expected 'package.module:ClassName'"
        raise ConfigurationError(msg)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Failed to import adapter module {module_name}: {e}"
        raise ConfigurationError(msg) from e
    adapter_cls = getattr(module, class_name, None)
    if not isinstance(adapter_cls, type) or not issubclass(adapter_cls, ClientAdapter):
        msg = f"{reference} is not a ClientAdapter subclass"
        raise ConfigurationError(msg)
    return adapter_cls


def resolve_adapter_class(
    client_config: ClientConfig,
    client_registry: ClientTypeRegistry | None = None,
) -> type[ClientAdapter]:
    """Find the adapter class for a client definition."""
    if client_config.adapter:
        return load_adapter_class(client_config.adapter)
    adapter_cls = (client_registry or registry).get(client_config.type)
    if adapter_cls is None:
        msg = f"Unsupported client type: {client_config.type}"
        raise ConfigurationError(
            msg, details={"registered": (client_registry or registry).list_types()}
        )
    return adapter_cls


def create_client(
    name: str,
    config_manager: ConfigManager,
    client_registry: ClientTypeRegistry | None = None,
) -> ClientAdapter:
    """Create the adapter for a named client.

    Args:
        name: Client name, i.e. the ``[clients.<name>]`` table
        config_manager: Loaded configuration
        client_registry: Registry to use instead of the global one

    Raises:
        ConfigurationError: if the client is not configured or its type is unknown

    """
    client_config = config_manager.get_client_config(name)
    adapter_cls = resolve_adapter_class(client_config, client_registry)
    logger.debug("Creating %s client %s", client_config.type, name)
    return adapter_cls(name, client_config)
