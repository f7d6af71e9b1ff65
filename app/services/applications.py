from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ClientError
from app.models.application import Application
from app.models.listing import Listing
from app.schemas.application import ApplicationCreate

log = logging.getLogger(__name__)

LISTING_NOT_FOUND = "Listing not found."


async def submit_application(db: AsyncSession, payload: ApplicationCreate) -> Application:
    """
    Insert one application for an existing listing.

    Raises ClientError (400) when the listing does not exist. No other field
    checks are made. ``submitted_utc`` is always the server's clock.

    Note: the commit is left to the API layer.
    """
    listing_id = (
        await db.execute(select(Listing.id).where(Listing.id == payload.listing_id))
    ).scalar_one_or_none()
    if listing_id is None:
        log.info("application rejected: unknown listing %s", payload.listing_id)
        raise ClientError(LISTING_NOT_FOUND)

    application = Application(
        listing_id=listing_id,
        full_name=payload.full_name,
        email=payload.email,
        phone=payload.phone,
        state=payload.state,
        notes=payload.notes,
        submitted_utc=datetime.now(timezone.utc),
    )
    db.add(application)
    await db.flush()
    return application
