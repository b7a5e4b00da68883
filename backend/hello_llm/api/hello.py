"""
Hello API routes.
"""

import json
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from hello_llm.core.config import ProviderSettings, get_provider_settings
from hello_llm.core.logging import get_logger
from hello_llm.schemas import HelloOutput, ProviderListResponse
from hello_llm.services import HelloService, get_hello_service
from hello_llm.services.ai_providers import (
    MissingCredentialError,
    NoProviderAvailableError,
    ProviderHTTPError,
    UnsupportedProviderError,
)

logger = get_logger()

router = APIRouter(prefix="/hello", tags=["Hello"])


def get_service(
    settings: ProviderSettings = Depends(get_provider_settings),
) -> HelloService:
    """Build a HelloService from the current environment."""
    return get_hello_service(settings)


@router.get("", response_model=HelloOutput)
async def say_hello(
    provider: Optional[str] = Query(
        None, description="Force a provider for this request (openai, gemini, groq)"
    ),
    service: HelloService = Depends(get_service),
):
    """
    Get a short hello from a text-generation provider.

    Uses the forced provider when one is configured (or given as a query
    parameter); otherwise the first credentialed provider that answers.
    """
    try:
        return await service.say_hello(forced=provider)
    except (UnsupportedProviderError, MissingCredentialError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProviderHTTPError as e:
        logger.error("Provider %s returned %s", e.provider, e.status_code)
        raise HTTPException(
            status_code=502,
            detail=f"Provider {e.provider} returned HTTP {e.status_code}",
        )
    except httpx.TransportError as e:
        logger.error("Provider transport error: %s", str(e))
        raise HTTPException(status_code=502, detail="Provider request failed")
    except json.JSONDecodeError as e:
        logger.error("Provider returned a non-JSON body: %s", str(e))
        raise HTTPException(status_code=502, detail="Provider returned an unreadable response")
    except NoProviderAvailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/providers", response_model=ProviderListResponse)
async def list_providers(service: HelloService = Depends(get_service)):
    """List providers in auto-selection order and whether each is configured."""
    return service.list_providers()
