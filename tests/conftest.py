"""
Shared fixtures: throwaway SQLite databases, settings and an app client.
"""

from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from auth.jwt import TokenService
from config.settings import Settings
from database.session import build_engine, build_session_factory, create_tables

TEST_SECRET = "test-secret"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'areacheck.db'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        create_tables=True,
        cors_origins=["*"],
    )


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture()
def client(settings):
    from main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def session(settings):
    """A session on a fresh database; left uncommitted, engine disposed afterwards."""
    engine = build_engine(settings.database_url)
    await create_tables(engine)
    factory = build_session_factory(engine)
    async with factory() as db:
        yield db
    await engine.dispose()
