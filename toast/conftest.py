import asyncio
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

import toast.events.repository.orm_models  # noqa: F401  registers the tables
from toast.config.database import engine
from toast.identity.dependencies import get_token_verifier
from toast.identity.tests.fakes import StaticTokenVerifier
from toast.main import app
from toast.models.base import BaseModel


@pytest.fixture(scope="session", autouse=True)
def test_database():
    """Recreate the test database schema once per run."""

    async def reset():
        async with engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)
            await conn.run_sync(BaseModel.metadata.create_all)
        await engine.dispose()

    asyncio.run(reset())
    yield


@pytest.fixture
def client_factory():
    """
    Build a test client with dependency overrides applied.
    Bearer tokens are checked by a StaticTokenVerifier unless overridden.
    """

    @asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides[get_token_verifier] = lambda: StaticTokenVerifier()
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac
