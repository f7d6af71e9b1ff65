import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.application import ApplicationCreate, ApplicationOut
from app.schemas.common import ErrorResponse
from app.services.applications import submit_application

log = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/applications",
    response_model=ApplicationOut,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_application(
    payload: ApplicationCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> ApplicationOut:
    try:
        application = await submit_application(db, payload)
        await db.commit()
    except IntegrityError:
        # listing vanished between the existence check and the insert
        await db.rollback()
        log.exception("application insert failed: integrity error")
        raise HTTPException(status_code=409, detail="Constraint violation")

    log.info("application %s submitted for listing %s", application.id, application.listing_id)
    response.headers["Location"] = f"/api/applications/{application.id}"

    return ApplicationOut(
        id=application.id,
        listing_id=application.listing_id,
        full_name=application.full_name,
        email=application.email,
        phone=application.phone,
        state=application.state,
        notes=application.notes,
        submitted_utc=application.submitted_utc,
    )
