"""Shared test fixtures for pytest.

We set minimal env defaults (ENVIRONMENT, GEMINI_API_KEY) early so importing
``main`` builds settings without an external .env file and without reaching
any real provider.
"""

import os
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient


os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

from core.config import get_settings
from dependencies.copilot import get_draft_orchestrator
from fixtures.gemini import FakeGemini, make_orchestrator
from main import app


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Tests that monkeypatch env vars get a fresh Settings instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_gemini() -> FakeGemini:
    """Upstream double with no scripted outcomes; tests append their own."""
    return FakeGemini()


@pytest.fixture
def client(fake_gemini: FakeGemini) -> Generator[TestClient, None, None]:
    """
    Create a test client whose draft routes talk to ``fake_gemini``.
    """
    app.dependency_overrides[get_draft_orchestrator] = lambda: make_orchestrator(
        fake_gemini
    )
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_draft_orchestrator, None)


@pytest_asyncio.fixture
async def async_client(fake_gemini: FakeGemini) -> AsyncGenerator[AsyncClient, None]:
    """Async client over ASGITransport for tests that await the app directly."""
    app.dependency_overrides[get_draft_orchestrator] = lambda: make_orchestrator(
        fake_gemini
    )
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_draft_orchestrator, None)
