"""
Exceptions raised by providers and the provider selector.

Transport failures are not wrapped: httpx.TransportError propagates as-is.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from hello_llm.services.hello_service import ProviderAttempt


class ProviderError(Exception):
    """Base class for provider and selection errors."""


class MissingCredentialError(ProviderError, ValueError):
    """The provider's credential is absent or empty."""

    def __init__(self, provider: str, env_var: str):
        self.provider = provider
        self.env_var = env_var
        super().__init__(f"Missing {env_var} in env (provider: {provider})")


class ProviderHTTPError(ProviderError):
    """The vendor answered with a non-success HTTP status."""

    def __init__(self, provider: str, status_code: int, body: str):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider} {status_code} : {body}")


class UnsupportedProviderError(ProviderError, ValueError):
    """The forced directive does not name a known provider."""

    def __init__(self, provider: str, available: Iterable[str]):
        self.provider = provider
        self.available = list(available)
        super().__init__(
            f"Unsupported provider: {provider}. "
            f"Available: {', '.join(self.available)}"
        )


class NoProviderAvailableError(ProviderError):
    """Auto-selection found no credential, or every attempt failed."""

    def __init__(
        self,
        expected: Iterable[str],
        attempts: Optional[List["ProviderAttempt"]] = None,
    ):
        self.expected = list(expected)
        self.attempts = list(attempts or [])
        super().__init__(
            "No provider available. Set one of: " + ", ".join(self.expected)
        )
