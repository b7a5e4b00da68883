"""
Google Gemini hello provider (generateContent REST endpoint).
"""

from typing import Any, Optional

from hello_llm.schemas import ProviderId
from hello_llm.services.ai_providers.base import (
    HELLO_PROMPT,
    BaseHelloProvider,
    HelloRequest,
    dig,
)


class GeminiHelloProvider(BaseHelloProvider):
    """Google Gemini provider. The credential travels in the query string."""

    provider_id = ProviderId.GEMINI
    credential_env = "GOOGLE_API_KEY"
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    DEFAULT_MODEL = "gemini-2.0-flash-lite"

    def build_request(self) -> HelloRequest:
        # Query string is "?=key=..." verbatim, not "?key=..."
        url = f"{self.BASE_URL}/models/{self.model}:generateContent?=key={self.api_key}"
        return HelloRequest(
            url=url,
            headers={"Content-Type": "application/json"},
            body={"contents": [{"parts": [{"text": HELLO_PROMPT}]}]},
        )

    def extract_text(self, data: Any) -> Optional[str]:
        return dig(data, "candidates", 0, "content", "parts", 0, "text")
