"""
Base hello provider: one request/response cycle shared by every vendor.

Subclasses only describe their wire format through build_request() and
extract_text(); sending, status handling and normalization live here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import httpx

from hello_llm.core.logging import get_logger
from hello_llm.schemas import HelloOutput, ProviderId
from hello_llm.services.ai_providers.errors import (
    MissingCredentialError,
    ProviderHTTPError,
)

logger = get_logger()

HELLO_PROMPT = "Say a short hello"
FALLBACK_MESSAGE = "Hello!"


@dataclass(frozen=True)
class HelloRequest:
    """A vendor-specific POST request."""

    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)


def dig(data: Any, *path: Union[str, int]) -> Any:
    """
    Walk nested dicts/lists, returning None as soon as a link is missing.

    Example:
        dig({"a": [{"b": 1}]}, "a", 0, "b") -> 1
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


class BaseHelloProvider(ABC):
    """Base class for all hello providers."""

    provider_id: ProviderId
    credential_env: str
    DEFAULT_MODEL: str

    def __init__(
        self,
        api_key: Optional[str],
        client: httpx.AsyncClient,
        model: Optional[str] = None,
    ):
        """
        Initialize a provider.

        Args:
            api_key: Credential for the vendor; None or "" means absent
            client: HTTP client to send with; its owner closes it
            model: Model name (optional, uses DEFAULT_MODEL if not specified)
        """
        self.api_key = api_key or None
        self.model = model or self.DEFAULT_MODEL
        self._client = client

    @abstractmethod
    def build_request(self) -> HelloRequest:
        """Build the vendor request carrying the hello prompt."""

    @abstractmethod
    def extract_text(self, data: Any) -> Optional[str]:
        """Pull the generated text out of a parsed response body, or None."""

    async def say_hello(self) -> HelloOutput:
        """
        Send the hello prompt once and normalize the answer.

        Returns:
            HelloOutput with this provider's id and model
        """
        if not self.api_key:
            raise MissingCredentialError(self.provider_id.value, self.credential_env)

        request = self.build_request()
        logger.debug("%s hello: model=%s", self.provider_id.value, self.model)

        response = await self._client.post(
            request.url,
            headers=request.headers,
            json=request.body,
        )
        if not response.is_success:
            raise ProviderHTTPError(
                self.provider_id.value, response.status_code, response.text
            )

        text = self.extract_text(response.json())
        if text is None:
            logger.debug(
                "%s response had no text, using fallback", self.provider_id.value
            )
            text = FALLBACK_MESSAGE

        return HelloOutput(
            provider=self.provider_id,
            model=self.model,
            message=str(text).strip(),
        )
