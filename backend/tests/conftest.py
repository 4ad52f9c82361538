"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from book_registry.config import Settings
from book_registry.main import create_app
from book_registry.services.registry import BookRegistry


@pytest.fixture
def registry() -> BookRegistry:
    """Fresh, empty registry."""
    return BookRegistry()


@pytest.fixture
def app(registry: BookRegistry):
    """Application bound to the test registry."""
    return create_app(Settings(_env_file=None), registry=registry)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
