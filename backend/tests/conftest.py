"""
Test configuration and fixtures
"""

import asyncio
import json
import os
import sys
import tempfile

import httpx
import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep test logs out of the project tree
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp())

from hello_llm.core.config import ProviderSettings  # noqa: E402

GEMINI_HOST = "generativelanguage.googleapis.com"
OPENAI_HOST = "api.openai.com"
GROQ_HOST = "api.groq.com"

# Clients handed out by FakeVendors.client(), closed after each test
_open_clients = []


def gemini_body(text):
    """Gemini generateContent response with one candidate."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def chat_body(text):
    """OpenAI-style chat-completions response with one choice."""
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}


class FakeVendors:
    """
    httpx MockTransport handler routing by host.

    Each route is a (status, json_body) tuple or an exception to raise.
    Unrouted hosts answer 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.host)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def hosts(self):
        return [request.url.host for request in self.requests]

    def body(self, index=0):
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        _open_clients.append(client)
        return client


def close_http_clients():
    """Close every client FakeVendors handed out."""
    while _open_clients:
        client = _open_clients.pop()
        if not client.is_closed:
            asyncio.run(client.aclose())


@pytest.fixture(autouse=True)
def _close_clients_after_test():
    yield
    close_http_clients()


@pytest.fixture
def make_settings():
    """Build ProviderSettings that ignore the real environment and .env file."""

    def _make(**overrides):
        values = {
            "google_api_key": None,
            "openai_api_key": None,
            "groq_api_key": None,
            "llm_provider": None,
        }
        values.update(overrides)
        return ProviderSettings(_env_file=None, **values)

    return _make


@pytest.fixture
def vendors():
    """All three vendors answering successfully."""
    return FakeVendors(
        {
            GEMINI_HOST: (200, gemini_body("Hello from Gemini!")),
            OPENAI_HOST: (200, chat_body("Hello from OpenAI!")),
            GROQ_HOST: (200, chat_body("Hello from Groq!")),
        }
    )
