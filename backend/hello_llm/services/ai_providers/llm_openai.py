"""
OpenAI hello provider, plus the chat-completions base shared with other
OpenAI-compatible vendors.
"""

from typing import Any, Optional

from hello_llm.schemas import ProviderId
from hello_llm.services.ai_providers.base import (
    HELLO_PROMPT,
    BaseHelloProvider,
    HelloRequest,
    dig,
)


class OpenAICompatibleHelloProvider(BaseHelloProvider):
    """Chat-completions provider with bearer-token auth."""

    BASE_URL: str

    def build_request(self) -> HelloRequest:
        return HelloRequest(
            url=f"{self.BASE_URL}/chat/completions",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            body={
                "model": self.model,
                "messages": [{"role": "user", "content": HELLO_PROMPT}],
                "temperature": 0,
            },
        )

    def extract_text(self, data: Any) -> Optional[str]:
        return dig(data, "choices", 0, "message", "content")


class OpenAIHelloProvider(OpenAICompatibleHelloProvider):
    """OpenAI provider (GPT models)."""

    provider_id = ProviderId.OPENAI
    credential_env = "OPENAI_API_KEY"
    BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-4o-mini"
