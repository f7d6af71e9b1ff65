from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import DateTime

from app.core.ids import APPLICATION_PREFIX, gen_id
from app.models.base import Base


class Application(Base):
    __tablename__ = "applications"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id(APPLICATION_PREFIX))
    listing_id: Mapped[str] = mapped_column(String, ForeignKey("listings.id"), nullable=False)

    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # stamped by the service at acceptance time, never from the request body
    submitted_utc: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
