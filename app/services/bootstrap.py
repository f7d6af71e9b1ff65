import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.services.schema import upgrade_schema
from app.services.seed import seed_sample_data

log = logging.getLogger(__name__)


async def bootstrap(engine: AsyncEngine, session_factory: async_sessionmaker[AsyncSession]) -> None:
    """Bring the schema to head, then seed sample rows into an empty database."""
    revision = await upgrade_schema(engine)

    async with session_factory() as db:
        seeded = await seed_sample_data(db)

    log.info("bootstrap done (schema=%s, seeded=%s)", revision, seeded)
