"""
Common interface for all hello providers.

The selector talks to providers through this interface only. Implementations
hide vendor-specific details (URL, auth placement, body shape, response schema).
"""

from typing import Protocol, runtime_checkable

from hello_llm.schemas import HelloOutput, ProviderId


@runtime_checkable
class HelloProvider(Protocol):
    """
    Generic hello provider interface.

    Implementations are created with their credential and an HTTP client and
    expose a single parameterless call.
    """

    provider_id: ProviderId
    model: str

    async def say_hello(self) -> HelloOutput:
        """
        Send the fixed hello prompt and return the normalized result.

        Returns:
            HelloOutput for this provider.

        Raises:
            MissingCredentialError: If the credential is absent (checked before any request).
            ProviderHTTPError: If the vendor returns a non-success status.
            httpx.TransportError: On network failures, propagated unchanged.
        """
        ...
