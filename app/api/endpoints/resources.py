from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.models.resource import ResourceCategory
from app.schemas.provider import provider_out
from app.schemas.resource import ResourceOut
from app.services.resources import search_resources

router = APIRouter()


@router.get("/resources", response_model=list[ResourceOut])
async def list_resources(
    category: ResourceCategory | None = Query(default=None, alias="type"),
    state: str | None = Query(default=None),
    q: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
) -> list[ResourceOut]:
    rows = await search_resources(db, category=category, state=state, q=q)
    return [
        ResourceOut(
            id=r.id,
            category=r.category,
            title=r.title,
            description=r.description,
            state=r.state,
            provider_id=r.provider_id,
            provider=provider_out(r.provider),
        )
        for r in rows
    ]
