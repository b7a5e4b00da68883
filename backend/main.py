"""
hello-llm - Backend Application

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI

from hello_llm import __version__
from hello_llm.core.config import get_config, get_log_path
from hello_llm.core.logging import setup_logging, get_logger
from hello_llm.api import api_router


# Record startup time globally
_startup_time = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    """
    # Startup
    global _startup_time
    _startup_time = datetime.now(timezone.utc).isoformat()
    logger = setup_logging()
    logger.info("Starting hello-llm...")
    logger.debug("Log level: %s, log file: %s", get_config().logging.level, get_log_path())
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")


# Create FastAPI application
app = FastAPI(
    title="hello-llm",
    description="Short hello from the first available text-generation provider",
    version=__version__,
    lifespan=lifespan,
)

# Request logging middleware (flow-wise: log each request and response)
@app.middleware("http")
async def log_requests(request, call_next):
    logger = get_logger()
    method = request.method
    path = request.url.path
    logger.debug("Request started: %s %s", method, path)
    response = await call_next(request)
    logger.debug("Request completed: %s %s -> %s", method, path, response.status_code)
    return response

# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "name": "hello-llm",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint with startup time."""
    return {
        "status": "healthy",
        "startup_time": _startup_time,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
