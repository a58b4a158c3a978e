from sqlalchemy.orm import Session

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.city_model import City
from app.models.district_model import District
from app.models.street_model import Street


class CityRepository(SQLAlchemyRepository[City, int]):
    def __init__(self, db: Session):
        super().__init__(City, db)

    def by_code(self, city_code: str) -> City | None:
        return self.db.query(City).filter(City.city_code == city_code).first()

    def by_name(self, city_name: str) -> City | None:
        return self.db.query(City).filter(City.city_name == city_name).first()


class DistrictRepository(SQLAlchemyRepository[District, int]):
    def __init__(self, db: Session):
        super().__init__(District, db)

    def _in_city(self, city_code: str):
        return self.db.query(District).join(District.city).filter(
            City.city_code == city_code
        )

    def by_code(self, district_code: str, city_code: str) -> District | None:
        return (
            self._in_city(city_code)
            .filter(District.district_code == district_code)
            .first()
        )

    def by_name(self, district_name: str, city_code: str) -> District | None:
        return (
            self._in_city(city_code)
            .filter(District.district_name == district_name)
            .first()
        )

    def in_city(self, city_code: str) -> list[District]:
        return self._in_city(city_code).order_by(District.district_id).all()

    def delete(self, obj: District) -> None:
        # keep an already loaded parent collection in sync
        obj.city.districts.remove(obj)
        super().delete(obj)


class StreetRepository(SQLAlchemyRepository[Street, int]):
    def __init__(self, db: Session):
        super().__init__(Street, db)

    def _in_district(self, district_code: str, city_code: str):
        return (
            self.db.query(Street)
            .join(Street.district)
            .join(District.city)
            .filter(
                District.district_code == district_code,
                City.city_code == city_code,
            )
        )

    def by_code(
        self, street_code: str, district_code: str, city_code: str
    ) -> Street | None:
        return (
            self._in_district(district_code, city_code)
            .filter(Street.street_code == street_code)
            .first()
        )

    def by_name(
        self, street_name: str, district_code: str, city_code: str
    ) -> Street | None:
        return (
            self._in_district(district_code, city_code)
            .filter(Street.street_name == street_name)
            .first()
        )

    def by_code_anywhere(self, street_code: str) -> Street | None:
        return self.db.query(Street).filter(Street.street_code == street_code).first()

    def in_district(self, district_code: str, city_code: str) -> list[Street]:
        return (
            self._in_district(district_code, city_code)
            .order_by(Street.street_id)
            .all()
        )

    def delete(self, obj: Street) -> None:
        obj.district.streets.remove(obj)
        super().delete(obj)
