"""Root conftest: shared test configuration and FastAPI test clients.

Invariants:
    - Tests never read a developer's .env redirect overrides
    - Every client fixture gets a freshly assembled app (no shared app.state)
    - get_settings cache cleared around each test so env changes take effect

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real ASGI stack in-process
    - failing_client sets raise_app_exceptions=False: Starlette re-raises after
      the catch-all handler responds, and tests assert on that response
"""

import os

# Pin defaults before any redirector module builds settings
os.environ.setdefault("REDIRECT_LOCATION", "index.jsp")
os.environ.setdefault("REDIRECT_STATUS_CODE", "302")

import pytest
from httpx import ASGITransport, AsyncClient

from redirector.config import Settings, get_settings
from redirector.main import create_app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client that does not follow redirects."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def failing_client(app):
    """Client that returns the 500 response instead of re-raising app errors."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
