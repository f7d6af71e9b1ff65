import asyncio
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.config import settings
from app.core.db import create_engine
from app.services.bootstrap import bootstrap


async def main():
    engine = create_engine(settings.database_url)
    Session = async_sessionmaker(engine, expire_on_commit=False)
    try:
        await bootstrap(engine, Session)
    finally:
        await engine.dispose()

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    asyncio.run(main())
# Upgrades the schema at DATABASE_URL to head and inserts the sample provider,
# resources and listing if the providers table is still empty.
