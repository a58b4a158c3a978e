from fastapi import APIRouter, Depends, Response, status

from app.api.v1.dependencies import get_uow
from app.domain.unit_of_work import UnitOfWork
from app.schemas.geo_schema import CitySchema
from app.services.location_service import LocationService
from app.utils.logger import get_logger


logger = get_logger("city_router")


class CityRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/cities", tags=["Cities"])
        self._register()

    def _register(self):
        self.router.get(
            "",
            response_model=list[CitySchema.Out],
            responses={204: {"description": "No cities"}},
        )(self._list_cities)
        self.router.get("/{city_code}", response_model=CitySchema.Out)(
            self._get_city
        )
        self.router.post(
            "",
            response_model=CitySchema.Out,
            status_code=status.HTTP_201_CREATED,
        )(self._create_city)
        self.router.put("/{city_code}", response_model=CitySchema.Out)(
            self._update_city
        )
        self.router.delete(
            "/{city_code}", status_code=status.HTTP_204_NO_CONTENT
        )(self._delete_city)

    async def _list_cities(self, uow: UnitOfWork = Depends(get_uow)):
        logger.info("Listing cities")
        cities = LocationService(uow).list_cities()
        if not cities:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return cities

    async def _get_city(self, city_code: str, uow: UnitOfWork = Depends(get_uow)):
        logger.info(f"Getting city {city_code}")
        return LocationService(uow).get_city_by_code(city_code)

    async def _create_city(
        self,
        payload: CitySchema.Create,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Creating city {payload.city_code}")
        return LocationService(uow).create_city(payload)

    async def _update_city(
        self,
        city_code: str,
        payload: CitySchema.Update,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Updating city {city_code}")
        return LocationService(uow).update_city_by_code(city_code, payload)

    async def _delete_city(self, city_code: str, uow: UnitOfWork = Depends(get_uow)):
        logger.info(f"Deleting city {city_code}")
        LocationService(uow).delete_city_by_code(city_code)
        return None


city_router = CityRouter().router
