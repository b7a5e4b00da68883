"""
Pydantic schemas for hello results and provider listings.
"""

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict


class ProviderId(str, Enum):
    """Supported text-generation providers."""

    OPENAI = "openai"
    GEMINI = "gemini"
    GROQ = "groq"


class HelloOutput(BaseModel):
    """Normalized hello result. Failures are raised, never returned."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    success: Literal[True] = True
    provider: ProviderId
    model: str
    message: str


class ProviderInfo(BaseModel):
    """Information about one provider."""

    name: ProviderId
    model: str
    credential_env: str
    is_configured: bool


class ProviderListResponse(BaseModel):
    """Providers in auto-selection order."""

    forced_provider: str = ""
    providers: List[ProviderInfo]
