import enum

from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.ids import RESOURCE_PREFIX, gen_id
from app.models.base import Base


class ResourceCategory(str, enum.Enum):
    # declaration order is the sort order of the directory
    HOUSING = "Housing"
    BENEFITS = "Benefits"
    COUNSELING = "Counseling"
    EMPLOYMENT = "Employment"


class ResourceItem(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: gen_id(RESOURCE_PREFIX))
    category: Mapped[ResourceCategory] = mapped_column(
        Enum(
            ResourceCategory,
            native_enum=False,
            length=30,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str | None] = mapped_column(String(2), nullable=True)

    provider_id: Mapped[str | None] = mapped_column(String, ForeignKey("providers.id"), nullable=True)

    provider = relationship("Provider", lazy="joined")
