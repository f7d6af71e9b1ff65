from app.schemas.common import ApiModel
from app.schemas.provider import ProviderOut


class ListingOut(ApiModel):
    id: str
    provider_id: str
    provider: ProviderOut | None
    title: str
    description: str | None
    state: str
    monthly_cost: float | None
    pets_allowed: bool
    accessible: bool
