"""
Groq hello provider. Groq serves an OpenAI-compatible chat-completions API.
"""

from hello_llm.schemas import ProviderId
from hello_llm.services.ai_providers.llm_openai import OpenAICompatibleHelloProvider


class GroqHelloProvider(OpenAICompatibleHelloProvider):
    """Groq provider (hosted Llama models)."""

    provider_id = ProviderId.GROQ
    credential_env = "GROQ_API_KEY"
    BASE_URL = "https://api.groq.com/openai/v1"
    DEFAULT_MODEL = "llama-3.1-8b-instant"
