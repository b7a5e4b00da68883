"""
Services package initialization.
"""

from hello_llm.services.hello_service import (
    HelloService,
    ProviderAttempt,
    get_hello_service,
)

__all__ = [
    "HelloService",
    "ProviderAttempt",
    "get_hello_service",
]
