import datetime as dt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .district_model import District

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.types import UTCDateTime


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class City(Base):
    __tablename__ = "city"
    city_id: Mapped[int] = mapped_column(primary_key=True)
    city_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    city_code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )

    districts: Mapped[list["District"]] = relationship(
        back_populates="city",
        cascade="all, delete-orphan",
        order_by="District.district_id",
    )

    def __repr__(self) -> str:
        return f"<City {self.city_code!r} {self.city_name!r}>"
