from pydantic import Field

from app.models.resource import ResourceCategory
from app.schemas.common import ApiModel
from app.schemas.provider import ProviderOut


class ResourceOut(ApiModel):
    id: str
    category: ResourceCategory = Field(alias="type")
    title: str
    description: str | None
    state: str | None
    provider_id: str | None
    provider: ProviderOut | None
