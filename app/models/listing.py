from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.ids import LISTING_PREFIX, gen_id
from app.models.base import Base

DEFAULT_LISTING_STATE = "GA"


class Listing(Base):
    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id(LISTING_PREFIX))
    provider_id: Mapped[str] = mapped_column(String, ForeignKey("providers.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str] = mapped_column(String(2), nullable=False, default=DEFAULT_LISTING_STATE)

    # None = cost not published yet
    monthly_cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    pets_allowed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    provider = relationship("Provider", lazy="joined")
