"""
Versioned schema initialization.

The schema is owned by the Alembic revisions under ``alembic/versions``. At
start-up we run ``upgrade head`` over a connection borrowed from the app's own
async engine, so a fresh database gets every table and an existing one only
the revisions it is missing.
"""
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

log = logging.getLogger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    return cfg


def _upgrade(connection: Connection, cfg: Config, revision: str) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, revision)


def _current_revision(connection: Connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


async def current_revision(engine: AsyncEngine) -> str | None:
    async with engine.connect() as conn:
        return await conn.run_sync(_current_revision)


async def upgrade_schema(engine: AsyncEngine, revision: str = "head") -> str | None:
    """Apply pending revisions up to ``revision``; returns the resulting revision."""
    before = await current_revision(engine)

    cfg = alembic_config()
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, cfg, revision)

    after = await current_revision(engine)
    if before != after:
        log.info("schema upgraded: %s -> %s", before or "<empty>", after)
    else:
        log.debug("schema already at %s", after)
    return after
