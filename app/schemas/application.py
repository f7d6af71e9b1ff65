from datetime import datetime

from app.schemas.common import ApiModel


class ApplicationCreate(ApiModel):
    # no submitted_utc here: unknown keys are dropped, the server stamps it
    listing_id: str
    full_name: str
    email: str
    phone: str | None = None
    state: str | None = None
    notes: str | None = None


class ApplicationOut(ApiModel):
    id: str
    listing_id: str
    full_name: str
    email: str
    phone: str | None
    state: str | None
    notes: str | None
    submitted_utc: datetime
