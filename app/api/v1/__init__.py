from fastapi import APIRouter
from app.api.v1.routers.city_router import city_router
from app.api.v1.routers.district_router import district_router
from app.api.v1.routers.street_router import street_router

api_router = APIRouter()

api_router.include_router(city_router)
api_router.include_router(district_router)
api_router.include_router(street_router)
