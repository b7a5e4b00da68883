"""
Hello service: picks a provider and returns its normalized greeting.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

import httpx

from hello_llm.core.config import ProviderSettings, get_config, get_provider_settings
from hello_llm.core.logging import get_logger
from hello_llm.schemas import HelloOutput, ProviderId, ProviderInfo, ProviderListResponse
from hello_llm.services.ai_providers import (
    AUTO_SELECTION_ORDER,
    HelloProvider,
    NoProviderAvailableError,
    get_hello_provider,
    get_provider_class,
    resolve_provider_id,
)

logger = get_logger()


@dataclass(frozen=True)
class ProviderAttempt:
    """Outcome of calling one provider during auto-selection."""

    provider: ProviderId
    output: Optional[HelloOutput] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.output is not None


class HelloService:
    """
    Service for fetching a hello from the first usable provider.

    With a forced directive exactly one provider is called and its outcome is
    returned or raised as-is. Without one, credentialed providers are tried
    one at a time in AUTO_SELECTION_ORDER until one succeeds.
    """

    def __init__(
        self,
        settings: ProviderSettings,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self._client = client

    @asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected client, or a fresh one closed on exit."""
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=get_config().http.timeout) as client:
            yield client

    def _credential_env(self, provider_id: ProviderId) -> str:
        return get_provider_class(provider_id).credential_env

    def _has_credential(self, provider_id: ProviderId) -> bool:
        return self.settings.credential(self._credential_env(provider_id)) is not None

    async def _attempt(self, provider: HelloProvider) -> ProviderAttempt:
        """
        Call one provider and capture the outcome instead of raising.

        Args:
            provider: Provider to call.

        Returns:
            ProviderAttempt holding either the output or the error.
        """
        try:
            output = await provider.say_hello()
        except Exception as e:
            return ProviderAttempt(provider=provider.provider_id, error=e)
        return ProviderAttempt(provider=provider.provider_id, output=output)

    async def _say_hello_forced(
        self, provider_id: ProviderId, client: httpx.AsyncClient
    ) -> HelloOutput:
        logger.info("Using forced provider: %s", provider_id.value)
        provider = get_hello_provider(provider_id, self.settings, client=client)
        return await provider.say_hello()

    async def _say_hello_auto(self, client: httpx.AsyncClient) -> HelloOutput:
        attempts: List[ProviderAttempt] = []

        for provider_id in AUTO_SELECTION_ORDER:
            if not self._has_credential(provider_id):
                logger.debug(
                    "Skipping %s: %s not set",
                    provider_id.value,
                    self._credential_env(provider_id),
                )
                continue

            provider = get_hello_provider(provider_id, self.settings, client=client)
            attempt = await self._attempt(provider)
            attempts.append(attempt)

            if attempt.succeeded:
                logger.info("Hello served by provider: %s", provider_id.value)
                return attempt.output

            logger.warning(
                "Provider %s failed, trying next: %s",
                provider_id.value,
                attempt.error,
            )

        raise NoProviderAvailableError(
            [self._credential_env(provider_id) for provider_id in AUTO_SELECTION_ORDER],
            attempts,
        )

    async def say_hello(self, forced: Optional[str] = None) -> HelloOutput:
        """
        Get a hello from the forced provider or by auto-selection.

        Args:
            forced: Directive overriding settings.llm_provider for this call.
                None means use the settings value; "" means auto-select.

        Returns:
            HelloOutput from the provider that answered.

        Raises:
            UnsupportedProviderError: The directive names no known provider.
            NoProviderAvailableError: Auto-selection had nothing that worked.
            MissingCredentialError, ProviderHTTPError, httpx.TransportError:
                Propagated from a forced provider.
        """
        directive = self.settings.forced_provider if forced is None else forced.lower()

        # Validate before opening a client so bad directives fail immediately.
        provider_id = resolve_provider_id(directive) if directive else None

        async with self._http_client() as client:
            if provider_id is not None:
                return await self._say_hello_forced(provider_id, client)
            return await self._say_hello_auto(client)

    def list_providers(self) -> ProviderListResponse:
        """Describe every provider in auto-selection order."""
        providers = []
        for provider_id in AUTO_SELECTION_ORDER:
            cls = get_provider_class(provider_id)
            providers.append(
                ProviderInfo(
                    name=provider_id,
                    model=cls.DEFAULT_MODEL,
                    credential_env=cls.credential_env,
                    is_configured=self._has_credential(provider_id),
                )
            )
        return ProviderListResponse(
            forced_provider=self.settings.forced_provider,
            providers=providers,
        )


def get_hello_service(
    settings: Optional[ProviderSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> HelloService:
    """Get a hello service instance."""
    return HelloService(settings or get_provider_settings(), client=client)
