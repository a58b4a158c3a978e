from fastapi import APIRouter, Depends, Response, status

from app.api.v1.dependencies import get_uow
from app.domain.exceptions import DistrictNotFound
from app.domain.unit_of_work import UnitOfWork
from app.schemas.geo_schema import StreetSchema
from app.services.location_service import LocationService
from app.utils.logger import get_logger


logger = get_logger("street_router")

STREET_PATH = "/{street_code}/district/{district_code}/city/{city_code}"


class StreetRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/streets", tags=["Streets"])
        self._register()

    def _register(self):
        self.router.get(
            "/all",
            response_model=list[StreetSchema.Out],
            responses={204: {"description": "No streets"}},
        )(self._list_all_streets)
        self.router.get(
            "/district/{district_code}/city/{city_code}",
            response_model=list[StreetSchema.Out],
            responses={204: {"description": "District has no streets"}},
        )(self._list_streets_by_district)
        self.router.get(STREET_PATH, response_model=StreetSchema.Out)(
            self._get_street
        )
        self.router.post(
            "",
            response_model=StreetSchema.Out,
            status_code=status.HTTP_201_CREATED,
        )(self._create_street)
        self.router.put(STREET_PATH, response_model=StreetSchema.Out)(
            self._update_street
        )
        self.router.delete(STREET_PATH, status_code=status.HTTP_204_NO_CONTENT)(
            self._delete_street
        )

    async def _list_all_streets(self, uow: UnitOfWork = Depends(get_uow)):
        logger.info("Listing all streets")
        streets = LocationService(uow).list_all_streets()
        if not streets:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return streets

    async def _list_streets_by_district(
        self, district_code: str, city_code: str, uow: UnitOfWork = Depends(get_uow)
    ):
        logger.info(f"Listing streets of district {district_code} in city {city_code}")
        service = LocationService(uow)
        if not service.district_exists(district_code, city_code):
            raise DistrictNotFound(district_code, city_code)
        streets = service.list_streets_by_district(district_code, city_code)
        if not streets:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return streets

    async def _get_street(
        self,
        street_code: str,
        district_code: str,
        city_code: str,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Getting street {street_code}")
        return LocationService(uow).get_street_by_code(
            street_code, district_code, city_code
        )

    async def _create_street(
        self,
        payload: StreetSchema.Create,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(
            f"Creating street {payload.street_code} in district "
            f"{payload.district_code} of city {payload.city_code}"
        )
        return LocationService(uow).create_street(payload)

    async def _update_street(
        self,
        street_code: str,
        district_code: str,
        city_code: str,
        payload: StreetSchema.Update,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Updating street {street_code}")
        return LocationService(uow).update_street_by_code(
            street_code, district_code, city_code, payload
        )

    async def _delete_street(
        self,
        street_code: str,
        district_code: str,
        city_code: str,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Deleting street {street_code}")
        LocationService(uow).delete_street_by_code(
            street_code, district_code, city_code
        )
        return None


street_router = StreetRouter().router
