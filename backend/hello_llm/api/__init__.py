"""
API routes package initialization.
"""

from fastapi import APIRouter

from hello_llm.api.hello import router as hello_router

# Create main API router with v1 versioning
api_router = APIRouter(prefix="/api/v1")

api_router.include_router(hello_router)

__all__ = ["api_router"]
