from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.listing import Listing
from app.models.provider import Provider
from app.models.resource import ResourceCategory, ResourceItem

log = logging.getLogger(__name__)


async def seed_sample_data(db: AsyncSession) -> bool:
    """
    Insert the sample provider, its two resources and one listing.

    Gated on an empty providers table, so running it again against a
    database that already has providers is a no-op. Returns True when rows
    were inserted.
    """
    provider_count = (await db.execute(select(func.count()).select_from(Provider))).scalar_one()
    if provider_count:
        log.debug("seed skipped: %d provider(s) already present", provider_count)
        return False

    provider = Provider(name="Vet Homes GA", contact_email="contact@vethomes.org", state="GA")
    db.add(provider)
    await db.flush()  # provider.id is needed by the rows below

    db.add_all([
        ResourceItem(
            category=ResourceCategory.HOUSING,
            title="Transitional Housing",
            state="GA",
            provider_id=provider.id,
            description="3–6 months program",
        ),
        ResourceItem(
            category=ResourceCategory.COUNSELING,
            title="PTSD Support Group",
            state="GA",
            provider_id=provider.id,
        ),
    ])
    db.add(Listing(
        provider_id=provider.id,
        title="1BR Veteran Unit - Atlanta",
        state="GA",
        monthly_cost=Decimal("850.00"),
        pets_allowed=True,
        accessible=True,
    ))
    await db.commit()

    log.info("seeded sample data for provider %s", provider.id)
    return True
