"""
Schemas package initialization.
"""

from hello_llm.schemas.hello import (
    HelloOutput,
    ProviderId,
    ProviderInfo,
    ProviderListResponse,
)

__all__ = [
    "HelloOutput",
    "ProviderId",
    "ProviderInfo",
    "ProviderListResponse",
]
