from app.models.provider import Provider
from app.schemas.common import ApiModel


class ProviderOut(ApiModel):
    id: str
    name: str
    contact_email: str | None
    phone: str | None
    state: str | None


def provider_out(p: Provider | None) -> ProviderOut | None:
    if p is None:
        return None
    return ProviderOut(
        id=p.id,
        name=p.name,
        contact_email=p.contact_email,
        phone=p.phone,
        state=p.state,
    )
