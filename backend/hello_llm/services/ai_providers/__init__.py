"""
Hello provider implementations. Callers obtain providers through the factory
and talk to them via the HelloProvider interface.
"""

from .errors import (
    MissingCredentialError,
    NoProviderAvailableError,
    ProviderError,
    ProviderHTTPError,
    UnsupportedProviderError,
)
from .factory import (
    AUTO_SELECTION_ORDER,
    get_hello_provider,
    get_provider_class,
    list_provider_names,
    resolve_provider_id,
)
from .interface import HelloProvider

__all__ = [
    "AUTO_SELECTION_ORDER",
    "HelloProvider",
    "MissingCredentialError",
    "NoProviderAvailableError",
    "ProviderError",
    "ProviderHTTPError",
    "UnsupportedProviderError",
    "get_hello_provider",
    "get_provider_class",
    "list_provider_names",
    "resolve_provider_id",
]
