"""Exception handlers to translate domain exceptions to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.domain.exceptions import (
    CityNotFound,
    DistrictNotFound,
    DomainException,
    DuplicateGeoEntity,
    GeoException,
    StreetNotFound,
)
from app.utils.logger import get_logger


logger = get_logger("exception_handlers")


class DomainExceptionHandler:
    """Centralized handler for domain exceptions."""

    # Mapping of domain exceptions to HTTP status codes
    EXCEPTION_STATUS_MAP = {
        CityNotFound: status.HTTP_404_NOT_FOUND,
        DistrictNotFound: status.HTTP_404_NOT_FOUND,
        StreetNotFound: status.HTTP_404_NOT_FOUND,
        DuplicateGeoEntity: status.HTTP_409_CONFLICT,
    }

    # Base exception type status codes
    BASE_EXCEPTION_STATUS_MAP = {
        GeoException: status.HTTP_400_BAD_REQUEST,
    }

    @classmethod
    def status_for(cls, exc: DomainException) -> int:
        status_code = cls.EXCEPTION_STATUS_MAP.get(type(exc))

        if status_code is None:
            for base_type, base_status in cls.BASE_EXCEPTION_STATUS_MAP.items():
                if isinstance(exc, base_type):
                    status_code = base_status
                    break

        if status_code is None:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return status_code

    @classmethod
    def handle_domain_exception(cls, exc: DomainException) -> JSONResponse:
        """Convert domain exception to a JSON error response."""
        return JSONResponse(
            status_code=cls.status_for(exc),
            content={
                "detail": exc.message,
                "error_code": exc.error_code,
                "type": exc.__class__.__name__,
            },
        )


async def domain_exception_handler(request: Request, exc: DomainException):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return DomainExceptionHandler.handle_domain_exception(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request",
            "error_code": "INVALID_REQUEST",
            "type": "RequestValidationError",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Constraint violations that slipped past the service checks
    logger.warning(f"{request.method} {request.url.path} integrity error: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": "Unique constraint failed",
            "error_code": "DUPLICATE_GEO_ENTITY",
            "type": "IntegrityError",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
