import os

# Must be set before app.* is imported: settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["BOOTSTRAP_ON_STARTUP"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"

from decimal import Decimal

import httpx
import pytest_asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from app.main import app
from app.core.db import create_engine, get_db
from app.models.listing import Listing
from app.models.provider import Provider
from app.models.resource import ResourceCategory, ResourceItem
from app.services.schema import upgrade_schema
from app.services.seed import seed_sample_data


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    """
    Fresh SQLite file per test, schema built through the Alembic revisions
    (same path the app takes at start-up).
    """
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    try:
        await upgrade_schema(engine)
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(db_session):
    assert await seed_sample_data(db_session) is True


@pytest_asyncio.fixture
async def client(db_session: AsyncSession):
    """
    HTTP client that uses the test DB session via dependency override.
    """
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _sample_provider(db_session) -> Provider:
    return (await db_session.execute(select(Provider))).scalar_one()


@pytest_asyncio.fixture
async def extra_resources(db_session, seeded):
    """One resource per category plus an out-of-state and a provider-less row."""
    provider = await _sample_provider(db_session)

    db_session.add_all([
        ResourceItem(category=ResourceCategory.EMPLOYMENT, title="A Job Fair", state="GA", provider_id=provider.id),
        ResourceItem(category=ResourceCategory.BENEFITS, title="Zeta Benefits Desk", state="GA", provider_id=provider.id),
        ResourceItem(
            category=ResourceCategory.HOUSING,
            title="Apartment Search",
            state="TX",
            provider_id=None,
            description="Statewide listings help",
        ),
    ])
    await db_session.commit()
    return provider


@pytest_asyncio.fixture
async def extra_listings(db_session, seeded):
    """A cheaper GA listing and one with no published cost."""
    provider = await _sample_provider(db_session)

    cheap = Listing(
        provider_id=provider.id,
        title="Studio - Macon",
        state="GA",
        monthly_cost=Decimal("500.00"),
        pets_allowed=False,
        accessible=False,
    )
    unpriced = Listing(
        provider_id=provider.id,
        title="2BR Duplex - Savannah",
        state="GA",
        monthly_cost=None,
        pets_allowed=True,
        accessible=False,
    )
    db_session.add_all([cheap, unpriced])
    await db_session.commit()
    return {"cheap": cheap, "unpriced": unpriced}
