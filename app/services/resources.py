from __future__ import annotations

from sqlalchemy import case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.sql import contains_case_sensitive
from app.models.resource import ResourceCategory, ResourceItem

# Housing < Benefits < Counseling < Employment
_CATEGORY_ORDER = case(
    {c: i for i, c in enumerate(ResourceCategory)},
    value=ResourceItem.category,
    else_=len(ResourceCategory),
)


async def search_resources(
    db: AsyncSession,
    *,
    category: ResourceCategory | None = None,
    state: str | None = None,
    q: str | None = None,
) -> list[ResourceItem]:
    """
    Resources with their provider, narrowed by whichever filters are given.

    Blank ``state``/``q`` count as not given. ``q`` is a case-sensitive
    substring match against title or description (missing description = "").
    Ordered by category ordinal, then title, then id.
    """
    stmt = select(ResourceItem)

    if category is not None:
        stmt = stmt.where(ResourceItem.category == category)
    if state and state.strip():
        stmt = stmt.where(ResourceItem.state == state)
    if q and q.strip():
        stmt = stmt.where(
            or_(
                contains_case_sensitive(ResourceItem.title, q),
                contains_case_sensitive(func.coalesce(ResourceItem.description, ""), q),
            )
        )

    stmt = stmt.order_by(_CATEGORY_ORDER.asc(), ResourceItem.title.asc(), ResourceItem.id.asc())
    return list((await db.execute(stmt)).scalars().all())
