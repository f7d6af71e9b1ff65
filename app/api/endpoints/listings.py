from decimal import Decimal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.listing import ListingOut
from app.schemas.provider import provider_out
from app.services.listings import search_listings

router = APIRouter()


@router.get("/listings", response_model=list[ListingOut])
async def list_listings(
    state: str | None = Query(default=None),
    pets: bool | None = Query(default=None),
    accessible: bool | None = Query(default=None),
    max_rent: Decimal | None = Query(default=None, alias="maxRent"),
    db: AsyncSession = Depends(get_db),
) -> list[ListingOut]:
    rows = await search_listings(db, state=state, pets=pets, accessible=accessible, max_rent=max_rent)
    return [
        ListingOut(
            id=r.id,
            provider_id=r.provider_id,
            provider=provider_out(r.provider),
            title=r.title,
            description=r.description,
            state=r.state,
            monthly_cost=float(r.monthly_cost) if r.monthly_cost is not None else None,
            pets_allowed=r.pets_allowed,
            accessible=r.accessible,
        )
        for r in rows
    ]
