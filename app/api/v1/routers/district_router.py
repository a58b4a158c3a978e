from fastapi import APIRouter, Depends, Response, status

from app.api.v1.dependencies import get_uow
from app.domain.exceptions import CityNotFound
from app.domain.unit_of_work import UnitOfWork
from app.schemas.geo_schema import DistrictSchema
from app.services.location_service import LocationService
from app.utils.logger import get_logger


logger = get_logger("district_router")


class DistrictRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/districts", tags=["Districts"])
        self._register()

    def _register(self):
        self.router.get(
            "/all",
            response_model=list[DistrictSchema.Out],
            responses={204: {"description": "No districts"}},
        )(self._list_all_districts)
        self.router.get(
            "/city/{city_code}",
            response_model=list[DistrictSchema.Out],
            responses={204: {"description": "City has no districts"}},
        )(self._list_districts_by_city)
        self.router.get(
            "/{district_code}/city/{city_code}",
            response_model=DistrictSchema.Out,
        )(self._get_district)
        self.router.post(
            "",
            response_model=DistrictSchema.Out,
            status_code=status.HTTP_201_CREATED,
        )(self._create_district)
        self.router.put(
            "/{district_code}/city/{city_code}",
            response_model=DistrictSchema.Out,
        )(self._update_district)
        self.router.delete(
            "/{district_code}/city/{city_code}",
            status_code=status.HTTP_204_NO_CONTENT,
        )(self._delete_district)

    async def _list_all_districts(self, uow: UnitOfWork = Depends(get_uow)):
        logger.info("Listing all districts")
        districts = LocationService(uow).list_all_districts()
        if not districts:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return districts

    async def _list_districts_by_city(
        self, city_code: str, uow: UnitOfWork = Depends(get_uow)
    ):
        logger.info(f"Listing districts of city {city_code}")
        service = LocationService(uow)
        if not service.city_exists(city_code):
            raise CityNotFound(city_code)
        districts = service.list_districts_by_city(city_code)
        if not districts:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return districts

    async def _get_district(
        self, district_code: str, city_code: str, uow: UnitOfWork = Depends(get_uow)
    ):
        logger.info(f"Getting district {district_code} of city {city_code}")
        return LocationService(uow).get_district_by_code(district_code, city_code)

    async def _create_district(
        self,
        payload: DistrictSchema.Create,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(
            f"Creating district {payload.district_code} in city {payload.city_code}"
        )
        return LocationService(uow).create_district(payload)

    async def _update_district(
        self,
        district_code: str,
        city_code: str,
        payload: DistrictSchema.Update,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Updating district {district_code} of city {city_code}")
        return LocationService(uow).update_district_by_code(
            district_code, city_code, payload
        )

    async def _delete_district(
        self, district_code: str, city_code: str, uow: UnitOfWork = Depends(get_uow)
    ):
        logger.info(f"Deleting district {district_code} of city {city_code}")
        LocationService(uow).delete_district_by_code(district_code, city_code)
        return None


district_router = DistrictRouter().router
