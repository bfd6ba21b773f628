"""Loads the concrete platform and identity-provider clients.

routectl ships no HTTP transport. The clients are provided by an
installed package and named in configuration as `module:callable`
(e.g. `platform.client_factory: mycorp_cf.clients:platform_client`).
The callable is invoked without arguments and must return an instance of
the matching interface.
"""

import importlib
import logging
from typing import Any, Callable, Type, TypeVar

from routectl.domain.errors import ConfigurationError
from routectl.domain.interfaces.platform_client import PlatformClient
from routectl.domain.interfaces.uaa_client import UAAClient
from routectl.infrastructure.config.settings import get_config

logger = logging.getLogger(__name__)

C = TypeVar("C")


def load_callable(spec: str) -> Callable[..., Any]:
    """Imports `module:attribute` and returns the attribute."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"Invalid factory '{spec}'; expected 'module:callable'.")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import factory module '{module_name}': {e}") from e
    try:
        factory = getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(f"Module '{module_name}' has no attribute '{attr}'.") from e
    if not callable(factory):
        raise ConfigurationError(f"Factory '{spec}' is not callable.")
    return factory


def build_client(config_key: str, interface: Type[C]) -> C:
    spec = get_config(config_key)
    if not spec:
        raise ConfigurationError(
            f"No {interface.__name__} configured. Set '{config_key}' in ~/.routectl/config.yaml "
            f"or the ROUTECTL_{config_key.upper().replace('.', '_')} environment variable."
        )
    client = load_callable(str(spec))()
    if not isinstance(client, interface):
        raise ConfigurationError(f"Factory '{spec}' returned {type(client).__name__}, not a {interface.__name__}.")
    logger.debug(f"Loaded {interface.__name__} from {spec}")
    return client


def build_platform_client() -> PlatformClient:
    return build_client("platform.client_factory", PlatformClient)


def build_uaa_client() -> UAAClient:
    return build_client("uaa.client_factory", UAAClient)
