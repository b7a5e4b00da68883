"""
Core module initialization.
"""

from hello_llm.core.config import (
    AppConfig,
    ProviderSettings,
    get_config,
    get_provider_settings,
    load_config,
)
from hello_llm.core.logging import get_logger, setup_logging

__all__ = [
    "AppConfig",
    "ProviderSettings",
    "get_config",
    "get_provider_settings",
    "load_config",
    "get_logger",
    "setup_logging",
]
