import datetime as dt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .district_model import District

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.types import UTCDateTime
from app.models.city_model import utcnow


class Street(Base):
    __tablename__ = "street"
    __table_args__ = (
        UniqueConstraint("street_name", "district_id", name="uq_street_name_district"),
        UniqueConstraint("street_code", "district_id", name="uq_street_code_district"),
    )

    street_id: Mapped[int] = mapped_column(primary_key=True)
    street_name: Mapped[str] = mapped_column(String(100), nullable=False)
    street_code: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    district_id: Mapped[int] = mapped_column(
        ForeignKey("district.district_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    district: Mapped["District"] = relationship(back_populates="streets")

    created_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )

    @property
    def district_code(self) -> str:
        return self.district.district_code

    @property
    def city_code(self) -> str:
        return self.district.city.city_code

    def __repr__(self) -> str:
        return f"<Street {self.street_code!r} {self.street_name!r}>"
