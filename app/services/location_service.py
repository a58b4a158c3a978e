"""CRUD for the city > district > street hierarchy.

Every uniqueness rule is checked by looking the candidate up before the
write. The table constraints stay as the backstop: an ``IntegrityError`` at
commit time (two requests racing past the same check) is turned into the
same ``DuplicateGeoEntity`` the lookup would have raised.
"""

import datetime as dt
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.domain.exceptions import (
    CityNotFound,
    DistrictNotFound,
    DuplicateGeoEntity,
    StreetNotFound,
)
from app.domain.unit_of_work import UnitOfWork
from app.models.city_model import City, utcnow
from app.models.district_model import District
from app.models.street_model import Street
from app.schemas.geo_schema import CitySchema, DistrictSchema, StreetSchema
from app.utils.logger import get_logger


logger = get_logger("location_service")


def integrity_conflict(
    error: IntegrityError, entity_name: str, unique_fields: dict
) -> DuplicateGeoEntity:
    """Pick the violated column out of the driver message.

    ``unique_fields`` maps a column name to ``(label, attempted value)``.
    """
    msg = str(error.orig)
    for field, (label, value) in unique_fields.items():
        if field in msg:
            return DuplicateGeoEntity(entity_name, label, value)
    # fallback
    return DuplicateGeoEntity(entity_name, "name or code", "unique constraint failed")


class LocationService:
    def __init__(
        self,
        uow: UnitOfWork,
        clock: Optional[Callable[[], dt.datetime]] = None,
        street_code_scope: Optional[str] = None,
    ):
        self.uow = uow
        self._now = clock or utcnow
        self.street_code_scope = street_code_scope or settings.street_code_scope

    def _commit(self, entity_name: str, unique_fields: Optional[dict] = None) -> None:
        try:
            self.uow.commit()
        except IntegrityError as e:
            self.uow.rollback()
            logger.warning(f"{entity_name} write rejected by store: {e.orig}")
            raise integrity_conflict(e, entity_name, unique_fields or {}) from e

    # -------- City ----------------------------------------------------
    def create_city(self, payload: CitySchema.Create) -> CitySchema.Out:
        with self.uow:
            if self.uow.cities.by_name(payload.city_name):
                raise DuplicateGeoEntity("City", "name", payload.city_name)
            if self.uow.cities.by_code(payload.city_code):
                raise DuplicateGeoEntity("City", "code", payload.city_code)

            now = self._now()
            city = City(
                city_name=payload.city_name,
                city_code=payload.city_code,
                created_at=now,
                updated_at=now,
            )
            self.uow.cities.add(city)
            self._commit(
                "City",
                {
                    "city_name": ("name", payload.city_name),
                    "city_code": ("code", payload.city_code),
                },
            )
            logger.info(f"Created city {city.city_code}")
            return CitySchema.Out.model_validate(city)

    def city_exists(self, city_code: str) -> bool:
        return self.uow.cities.by_code(city_code) is not None

    def get_city_by_code(self, city_code: str) -> CitySchema.Out:
        city = self.uow.cities.by_code(city_code)
        if not city:
            raise CityNotFound(city_code)
        return CitySchema.Out.model_validate(city)

    def list_cities(self) -> list[CitySchema.Out]:
        return [CitySchema.Out.model_validate(c) for c in self.uow.cities.get_all()]

    def update_city_by_code(
        self, city_code: str, payload: CitySchema.Update
    ) -> CitySchema.Out:
        with self.uow:
            city = self.uow.cities.by_code(city_code)
            if not city:
                raise CityNotFound(city_code)
            if (
                payload.city_name != city.city_name
                and self.uow.cities.by_name(payload.city_name)
            ):
                raise DuplicateGeoEntity("City", "name", payload.city_name)
            if (
                payload.city_code != city.city_code
                and self.uow.cities.by_code(payload.city_code)
            ):
                raise DuplicateGeoEntity("City", "code", payload.city_code)

            city.city_name = payload.city_name
            city.city_code = payload.city_code
            city.updated_at = self._now()
            self._commit(
                "City",
                {
                    "city_name": ("name", payload.city_name),
                    "city_code": ("code", payload.city_code),
                },
            )
            logger.info(f"Updated city {city_code} -> {city.city_code}")
            return CitySchema.Out.model_validate(city)

    def delete_city_by_code(self, city_code: str) -> None:
        with self.uow:
            city = self.uow.cities.by_code(city_code)
            if not city:
                raise CityNotFound(city_code)
            # districts and their streets go with the city
            self.uow.cities.delete(city)
            self._commit("City")
            logger.info(f"Deleted city {city_code}")

    # -------- District ------------------------------------------------
    def create_district(self, payload: DistrictSchema.Create) -> DistrictSchema.Out:
        with self.uow:
            city = self.uow.cities.by_code(payload.city_code)
            if not city:
                raise CityNotFound(payload.city_code)
            scope = f"city {payload.city_code}"
            if self.uow.districts.by_name(payload.district_name, payload.city_code):
                raise DuplicateGeoEntity(
                    "District", "name", payload.district_name, scope
                )
            if self.uow.districts.by_code(payload.district_code, payload.city_code):
                raise DuplicateGeoEntity(
                    "District", "code", payload.district_code, scope
                )

            now = self._now()
            district = District(
                district_name=payload.district_name,
                district_code=payload.district_code,
                city=city,
                created_at=now,
                updated_at=now,
            )
            self.uow.districts.add(district)
            self._commit(
                "District",
                {
                    "district_code": ("code", payload.district_code),
                    "district_name": ("name", payload.district_name),
                },
            )
            logger.info(
                f"Created district {district.district_code} in city {city.city_code}"
            )
            return DistrictSchema.Out.model_validate(district)

    def district_exists(self, district_code: str, city_code: str) -> bool:
        return self.uow.districts.by_code(district_code, city_code) is not None

    def get_district_by_code(
        self, district_code: str, city_code: str
    ) -> DistrictSchema.Out:
        district = self.uow.districts.by_code(district_code, city_code)
        if not district:
            raise DistrictNotFound(district_code, city_code)
        return DistrictSchema.Out.model_validate(district)

    def list_districts_by_city(self, city_code: str) -> list[DistrictSchema.Out]:
        """Districts of one city; empty when the city has none or is unknown."""
        return [
            DistrictSchema.Out.model_validate(d)
            for d in self.uow.districts.in_city(city_code)
        ]

    def list_all_districts(self) -> list[DistrictSchema.Out]:
        return [
            DistrictSchema.Out.model_validate(d)
            for d in self.uow.districts.get_all()
        ]

    def update_district_by_code(
        self, district_code: str, city_code: str, payload: DistrictSchema.Update
    ) -> DistrictSchema.Out:
        with self.uow:
            district = self.uow.districts.by_code(district_code, city_code)
            if not district:
                raise DistrictNotFound(district_code, city_code)
            scope = f"city {city_code}"
            if (
                payload.district_name != district.district_name
                and self.uow.districts.by_name(payload.district_name, city_code)
            ):
                raise DuplicateGeoEntity(
                    "District", "name", payload.district_name, scope
                )
            if (
                payload.district_code != district.district_code
                and self.uow.districts.by_code(payload.district_code, city_code)
            ):
                raise DuplicateGeoEntity(
                    "District", "code", payload.district_code, scope
                )

            district.district_name = payload.district_name
            district.district_code = payload.district_code
            district.updated_at = self._now()
            self._commit(
                "District",
                {
                    "district_code": ("code", payload.district_code),
                    "district_name": ("name", payload.district_name),
                },
            )
            logger.info(
                f"Updated district {district_code} -> {district.district_code} "
                f"in city {city_code}"
            )
            return DistrictSchema.Out.model_validate(district)

    def delete_district_by_code(self, district_code: str, city_code: str) -> None:
        with self.uow:
            district = self.uow.districts.by_code(district_code, city_code)
            if not district:
                raise DistrictNotFound(district_code, city_code)
            self.uow.districts.delete(district)
            self._commit("District")
            logger.info(f"Deleted district {district_code} in city {city_code}")

    # -------- Street --------------------------------------------------
    def _street_code_taken(
        self, street_code: str, district_code: str, city_code: str
    ) -> bool:
        if self.street_code_scope == "global":
            return self.uow.streets.by_code_anywhere(street_code) is not None
        return (
            self.uow.streets.by_code(street_code, district_code, city_code)
            is not None
        )

    def _street_code_conflict(
        self, street_code: str, district_code: str, city_code: str
    ) -> DuplicateGeoEntity:
        if self.street_code_scope == "global":
            return DuplicateGeoEntity("Street", "code", street_code)
        return DuplicateGeoEntity(
            "Street", "code", street_code, f"district {district_code} of city {city_code}"
        )

    def create_street(self, payload: StreetSchema.Create) -> StreetSchema.Out:
        with self.uow:
            district = self.uow.districts.by_code(
                payload.district_code, payload.city_code
            )
            if not district:
                raise DistrictNotFound(payload.district_code, payload.city_code)
            if self.uow.streets.by_name(
                payload.street_name, payload.district_code, payload.city_code
            ):
                raise DuplicateGeoEntity(
                    "Street",
                    "name",
                    payload.street_name,
                    f"district {payload.district_code} of city {payload.city_code}",
                )
            if self._street_code_taken(
                payload.street_code, payload.district_code, payload.city_code
            ):
                raise self._street_code_conflict(
                    payload.street_code, payload.district_code, payload.city_code
                )

            now = self._now()
            street = Street(
                street_name=payload.street_name,
                street_code=payload.street_code,
                district=district,
                created_at=now,
                updated_at=now,
            )
            self.uow.streets.add(street)
            self._commit(
                "Street",
                {
                    "street_code": ("code", payload.street_code),
                    "street_name": ("name", payload.street_name),
                },
            )
            logger.info(
                f"Created street {street.street_code} in district "
                f"{payload.district_code} of city {payload.city_code}"
            )
            return StreetSchema.Out.model_validate(street)

    def get_street_by_code(
        self, street_code: str, district_code: str, city_code: str
    ) -> StreetSchema.Out:
        street = self.uow.streets.by_code(street_code, district_code, city_code)
        if not street:
            raise StreetNotFound(street_code, district_code, city_code)
        return StreetSchema.Out.model_validate(street)

    def list_streets_by_district(
        self, district_code: str, city_code: str
    ) -> list[StreetSchema.Out]:
        return [
            StreetSchema.Out.model_validate(s)
            for s in self.uow.streets.in_district(district_code, city_code)
        ]

    def list_all_streets(self) -> list[StreetSchema.Out]:
        return [
            StreetSchema.Out.model_validate(s) for s in self.uow.streets.get_all()
        ]

    def update_street_by_code(
        self,
        street_code: str,
        district_code: str,
        city_code: str,
        payload: StreetSchema.Update,
    ) -> StreetSchema.Out:
        with self.uow:
            street = self.uow.streets.by_code(street_code, district_code, city_code)
            if not street:
                raise StreetNotFound(street_code, district_code, city_code)
            if (
                payload.street_name != street.street_name
                and self.uow.streets.by_name(
                    payload.street_name, district_code, city_code
                )
            ):
                raise DuplicateGeoEntity(
                    "Street",
                    "name",
                    payload.street_name,
                    f"district {district_code} of city {city_code}",
                )
            if payload.street_code != street.street_code and self._street_code_taken(
                payload.street_code, district_code, city_code
            ):
                raise self._street_code_conflict(
                    payload.street_code, district_code, city_code
                )

            street.street_name = payload.street_name
            street.street_code = payload.street_code
            street.updated_at = self._now()
            self._commit(
                "Street",
                {
                    "street_code": ("code", payload.street_code),
                    "street_name": ("name", payload.street_name),
                },
            )
            logger.info(
                f"Updated street {street_code} -> {street.street_code} in district "
                f"{district_code} of city {city_code}"
            )
            return StreetSchema.Out.model_validate(street)

    def delete_street_by_code(
        self, street_code: str, district_code: str, city_code: str
    ) -> None:
        with self.uow:
            street = self.uow.streets.by_code(street_code, district_code, city_code)
            if not street:
                raise StreetNotFound(street_code, district_code, city_code)
            self.uow.streets.delete(street)
            self._commit("Street")
            logger.info(
                f"Deleted street {street_code} in district {district_code} "
                f"of city {city_code}"
            )
