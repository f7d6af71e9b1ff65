from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.ids import PROVIDER_PREFIX, gen_id
from app.models.base import Base


class Provider(Base):
    __tablename__ = "providers"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id(PROVIDER_PREFIX))
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    contact_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    # two-letter region code, e.g. "GA"
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)
