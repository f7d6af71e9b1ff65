from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.listing import Listing


async def search_listings(
    db: AsyncSession,
    *,
    state: str | None = None,
    pets: bool | None = None,
    accessible: bool | None = None,
    max_rent: Decimal | None = None,
) -> list[Listing]:
    """
    Listings with their provider, narrowed by whichever filters are given.

    ``max_rent`` drops listings without a published cost. Ordered by monthly
    cost with cost-less listings first, then title, then id.
    """
    stmt = select(Listing)

    if state and state.strip():
        stmt = stmt.where(Listing.state == state)
    if pets is not None:
        stmt = stmt.where(Listing.pets_allowed.is_(pets))
    if accessible is not None:
        stmt = stmt.where(Listing.accessible.is_(accessible))
    if max_rent is not None:
        stmt = stmt.where(Listing.monthly_cost.is_not(None), Listing.monthly_cost <= max_rent)

    stmt = stmt.order_by(Listing.monthly_cost.asc().nulls_first(), Listing.title.asc(), Listing.id.asc())
    return list((await db.execute(stmt)).scalars().all())
