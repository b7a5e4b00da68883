"""
Factory for hello providers. Builds provider instances from ProviderSettings.
"""

from typing import Dict, List, Type

import httpx

from hello_llm.core.config import ProviderSettings
from hello_llm.schemas import ProviderId
from hello_llm.services.ai_providers.base import BaseHelloProvider
from hello_llm.services.ai_providers.errors import UnsupportedProviderError
from hello_llm.services.ai_providers.llm_gemini import GeminiHelloProvider
from hello_llm.services.ai_providers.llm_groq import GroqHelloProvider
from hello_llm.services.ai_providers.llm_openai import OpenAIHelloProvider

# Map of provider ids to provider classes
PROVIDER_MAP: Dict[ProviderId, Type[BaseHelloProvider]] = {
    ProviderId.OPENAI: OpenAIHelloProvider,
    ProviderId.GEMINI: GeminiHelloProvider,
    ProviderId.GROQ: GroqHelloProvider,
}

# Auto-selection priority; differs from the declaration order of ProviderId.
AUTO_SELECTION_ORDER: List[ProviderId] = [
    ProviderId.GEMINI,
    ProviderId.GROQ,
    ProviderId.OPENAI,
]


def resolve_provider_id(name: str) -> ProviderId:
    """
    Map a provider name to its ProviderId.

    Args:
        name: Provider name, case-insensitive (e.g. "Gemini")

    Raises:
        UnsupportedProviderError: If the name is not a known provider
    """
    try:
        return ProviderId(name.lower())
    except ValueError:
        raise UnsupportedProviderError(name, list_provider_names()) from None


def get_provider_class(provider_id: ProviderId) -> Type[BaseHelloProvider]:
    """Return the provider class registered for an id."""
    return PROVIDER_MAP[provider_id]


def get_hello_provider(
    provider_id: ProviderId,
    settings: ProviderSettings,
    client: httpx.AsyncClient,
) -> BaseHelloProvider:
    """
    Get a provider instance with its credential taken from settings.

    Args:
        provider_id: Which provider to build
        settings: Credentials source
        client: HTTP client the provider sends with

    Returns:
        BaseHelloProvider instance
    """
    cls = get_provider_class(provider_id)
    return cls(settings.credential(cls.credential_env), client=client)


def list_provider_names() -> List[str]:
    """List all provider names in auto-selection order."""
    return [provider_id.value for provider_id in AUTO_SELECTION_ORDER]
