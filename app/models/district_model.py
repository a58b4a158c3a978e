import datetime as dt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .city_model import City
    from .street_model import Street

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.types import UTCDateTime
from app.models.city_model import utcnow


class District(Base):
    __tablename__ = "district"
    __table_args__ = (
        UniqueConstraint("district_name", "city_id", name="uq_district_name_city"),
        UniqueConstraint("district_code", "city_id", name="uq_district_code_city"),
    )

    district_id: Mapped[int] = mapped_column(primary_key=True)
    district_code: Mapped[str] = mapped_column(String(20), nullable=False)
    district_name: Mapped[str] = mapped_column(String(100), nullable=False)

    city_id: Mapped[int] = mapped_column(
        ForeignKey("city.city_id", ondelete="CASCADE"), nullable=False, index=True
    )
    city: Mapped["City"] = relationship(back_populates="districts")

    created_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )

    streets: Mapped[list["Street"]] = relationship(
        back_populates="district",
        cascade="all, delete-orphan",
        order_by="Street.street_id",
    )

    @property
    def city_code(self) -> str:
        return self.city.city_code

    def __repr__(self) -> str:
        return f"<District {self.district_code!r} {self.district_name!r}>"
